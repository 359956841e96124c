"""
Guards avaliados antes de efetivar uma transição.

Cada guard recebe origem, destino e o contexto da tentativa, e pode
bloquear a transição com um motivo. Transições reflexivas são aceitas
pela máquina antes de qualquer guard.
"""

from dataclasses import dataclass

from fsm.transitions.rules import TransitionMap, is_transition_valid


@dataclass(frozen=True, slots=True)
class TransitionContext:
    """
    Contexto necessário para avaliar guards.

    Attributes:
        table: Mapa de alcançabilidade derivado da configuração
        current_state: Estado atual lido do store no momento da tentativa
    """

    table: TransitionMap
    current_state: str | None


class GuardResult:
    """
    Resultado da avaliação de um guard.

    Attributes:
        allowed: Se a transição é permitida
        reason: Motivo do bloqueio (se allowed=False)
    """

    __slots__ = ("allowed", "reason")

    def __init__(self, allowed: bool, reason: str | None = None) -> None:
        self.allowed = allowed
        self.reason = reason

    @classmethod
    def allow(cls) -> "GuardResult":
        """Cria resultado permitindo a transição."""
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "GuardResult":
        """Cria resultado negando a transição."""
        return cls(allowed=False, reason=reason)


def guard_declared_edge(
    from_state: str,
    to_state: str,
    context: TransitionContext,
) -> GuardResult:
    """
    Guard: o destino precisa ser alcançável a partir da origem.

    Qualquer evento que declare a aresta basta.
    """
    if not is_transition_valid(context.table, from_state, to_state):
        return GuardResult.deny(
            f"Transição não declarada: {from_state} → {to_state}"
        )
    return GuardResult.allow()


def guard_current_state(
    from_state: str,
    to_state: str,
    context: TransitionContext,
) -> GuardResult:
    """
    Guard: o estado atual no store precisa ser a origem pedida.

    Bloqueia tentativas feitas a partir de um estado desatualizado
    (o store foi alterado por outra operação desde a leitura).
    """
    if context.current_state != from_state:
        return GuardResult.deny(
            f"Estado atual {context.current_state} difere da origem {from_state}"
        )
    return GuardResult.allow()


# Guards aplicados em ordem
# Todos devem retornar allow() para a transição prosseguir
DEFAULT_GUARDS = [
    guard_declared_edge,
    guard_current_state,
]


def evaluate_guards(
    from_state: str,
    to_state: str,
    context: TransitionContext,
    guards: list | None = None,
) -> GuardResult:
    """
    Avalia todos os guards para uma transição.

    Args:
        from_state: Estado de origem
        to_state: Estado de destino
        context: Tabela derivada e estado atual
        guards: Lista de guards a aplicar (usa DEFAULT_GUARDS se None)

    Returns:
        GuardResult do primeiro guard que negar, ou allow() se todos passarem
    """
    guards_to_apply = guards if guards is not None else DEFAULT_GUARDS

    for guard in guards_to_apply:
        result = guard(from_state, to_state, context)
        if not result.allowed:
            return result

    return GuardResult.allow()
