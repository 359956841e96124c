"""Protocolo de domínio para avisos e redirecionamentos do host.

A máquina de estados só decide que um redirecionamento deve ocorrer e
para qual ação; executá-lo (HTTP redirect, mensagem na UI, etc.) é
responsabilidade de quem implementa este contrato.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class NotifierProtocol(ABC):
    """Contrato de notificação de acesso negado e redirecionamento."""

    @abstractmethod
    def notify_denied(self, message: str) -> None:
        """Avisa que a ação corrente não é acessível no estado atual.

        Args:
            message: Mensagem voltada ao usuário final
        """

    @abstractmethod
    def redirect_to(self, action: str) -> None:
        """Pede ao host que redirecione para a ação informada.

        Args:
            action: Identificador da ação externa de destino
        """
