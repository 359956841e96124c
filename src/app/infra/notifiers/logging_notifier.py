"""Notifier que emite as decisões da máquina como logs estruturados."""

from __future__ import annotations

import logging

from app.protocols.notifier import NotifierProtocol

logger = logging.getLogger(__name__)


class LoggingNotifier(NotifierProtocol):
    """Registra negações e redirecionamentos no logger.

    Args:
        component: Identificador do host, incluído em cada log
    """

    def __init__(self, component: str = "fsm") -> None:
        self._component = component

    def notify_denied(self, message: str) -> None:
        logger.info(
            "fsm_notify_denied",
            extra={"component": self._component, "user_message": message},
        )

    def redirect_to(self, action: str) -> None:
        logger.info(
            "fsm_redirect_requested",
            extra={"component": self._component, "action": action},
        )
