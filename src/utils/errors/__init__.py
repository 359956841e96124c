"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    InfrastructureError,
    InvalidMachineConfigError,
    RedisConnectionError,
)

__all__ = [
    "InfrastructureError",
    "InvalidMachineConfigError",
    "RedisConnectionError",
]
