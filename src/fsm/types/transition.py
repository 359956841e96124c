"""
Tipos e estruturas de dados para transições de estado.

Este módulo define os registros usados para auditar transições e
para reportar o resultado da validação de acesso no startup.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class StateTransition:
    """
    Representa uma transição de estado efetivada.

    Registro imutável emitido nos logs a cada transição bem-sucedida
    (transições reflexivas não geram registro).

    Attributes:
        from_state: Estado de origem da transição
        to_state: Estado de destino da transição
        trigger: O que causou a transição (nome do evento, "start" ou "transition")
        namespace: Namespace da máquina que transitou
        metadata: Dados adicionais para auditoria
        timestamp: Momento da transição (UTC)
    """

    from_state: str
    to_state: str
    trigger: str
    namespace: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(UTC)
    )

    def __post_init__(self) -> None:
        """Valida invariantes do objeto após inicialização."""
        if not self.trigger or not self.trigger.strip():
            raise ValueError("trigger não pode ser vazio")

    def to_log_dict(self) -> dict[str, Any]:
        """
        Retorna representação para logs estruturados.

        Returns:
            Dict serializável em JSON
        """
        return {
            "namespace": self.namespace,
            "from_state": self.from_state,
            "to_state": self.to_state,
            "trigger": self.trigger,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata,
        }


@dataclass(frozen=True, slots=True)
class AccessResult:
    """
    Resultado da validação de acesso feita no startup da máquina.

    Attributes:
        allowed: Se a ação corrente é acessível a partir do estado atual
        current_state: Estado atual lido do store (após a validação)
        resolved_state: Estado dono da ação corrente (None se não encontrado)
        redirect_action: Ação para onde o host deve redirecionar (se negado)
        reason: Motivo da negação (se allowed=False)
    """

    allowed: bool
    current_state: str | None = None
    resolved_state: str | None = None
    redirect_action: str | None = None
    reason: str | None = None

    def __post_init__(self) -> None:
        """Valida consistência do resultado."""
        if not self.allowed and self.reason is None:
            raise ValueError("Acesso negado deve incluir reason")
        if self.allowed and self.redirect_action is not None:
            raise ValueError("Acesso permitido não deve incluir redirect_action")
