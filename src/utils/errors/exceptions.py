"""Exceções compartilhadas entre core e infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class RedisConnectionError(InfrastructureError):
    """Falha de conexão/timeout ao acessar Redis."""


class InvalidMachineConfigError(ValueError):
    """Configuração da máquina de estados com formato inválido.

    Levantada na construção (chaves desconhecidas, tipos não suportados).
    Problemas de consistência (estados não declarados nas transições)
    não levantam: são reportados via logs no startup.
    """
