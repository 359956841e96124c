"""Notifier que apenas registra as decisões da máquina.

Útil em testes e em hosts que consultam a decisão depois da chamada
(por exemplo, para montar a resposta HTTP).
"""

from __future__ import annotations

from app.protocols.notifier import NotifierProtocol


class RecordingNotifier(NotifierProtocol):
    """Guarda mensagens de negação e redirecionamentos pedidos."""

    def __init__(self) -> None:
        self.messages: list[str] = []
        self.redirects: list[str] = []

    def notify_denied(self, message: str) -> None:
        self.messages.append(message)

    def redirect_to(self, action: str) -> None:
        self.redirects.append(action)

    @property
    def last_redirect(self) -> str | None:
        """Último redirecionamento pedido (None se nenhum)."""
        return self.redirects[-1] if self.redirects else None

    def clear(self) -> None:
        """Descarta o que foi registrado."""
        self.messages.clear()
        self.redirects.clear()
