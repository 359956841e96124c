"""Factories de stores, notifiers e máquinas baseadas em configuração."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.bootstrap.clients import create_redis_client
from app.infra.notifiers import LoggingNotifier
from app.infra.stores import MemoryStateStore, RedisStateStore
from config.settings import (
    BaseSettings,
    StateStoreSettings,
    get_base_settings,
    get_state_store_settings,
)
from fsm import FSMStateMachine, create_fsm

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.notifier import NotifierProtocol
    from app.protocols.state_store import StateStoreProtocol
    from fsm import MachineConfig

logger = logging.getLogger(__name__)


def create_state_store(
    settings: StateStoreSettings | None = None,
    base: BaseSettings | None = None,
) -> StateStoreProtocol:
    """Cria state store baseado na configuração.

    Args:
        settings: StateStoreSettings (usa env se None)
        base: BaseSettings (usa env se None)

    Returns:
        StateStoreProtocol do backend configurado
    """
    settings = settings or get_state_store_settings()
    base = base or get_base_settings()

    if settings.backend == "redis":
        store = RedisStateStore(
            create_redis_client(),
            ttl_seconds=settings.ttl_seconds,
            key_prefix=settings.key_prefix,
        )
        logger.info("state_store_created", extra={"backend": "redis"})
        return store

    if not base.is_development:
        logger.warning(
            "state_store_memory_outside_development",
            extra={"environment": base.environment},
        )
    logger.info("state_store_created", extra={"backend": "memory"})
    return MemoryStateStore()


def create_notifier(component: str = "fsm") -> NotifierProtocol:
    """Cria notifier padrão (logs estruturados)."""
    return LoggingNotifier(component=component)


def create_machine(
    config: MachineConfig | Mapping[str, Any],
    store: StateStoreProtocol | None = None,
    notifier: NotifierProtocol | None = None,
) -> FSMStateMachine:
    """Cria FSMStateMachine com store e notifier padrão quando omitidos.

    Args:
        config: Opções da máquina (mapping ou MachineConfig)
        store: State store (usa create_state_store() se None)
        notifier: Notifier (usa create_notifier() se None)

    Returns:
        FSMStateMachine pronta para start()
    """
    return create_fsm(
        config,
        store=store if store is not None else create_state_store(),
        notifier=notifier if notifier is not None else create_notifier(),
    )
