"""
Exports públicos do módulo fsm/rules.

Guards avaliados antes de efetivar transições.
"""

from fsm.rules.guards import (
    DEFAULT_GUARDS,
    GuardResult,
    TransitionContext,
    evaluate_guards,
    guard_current_state,
    guard_declared_edge,
)

__all__ = [
    "DEFAULT_GUARDS",
    "GuardResult",
    "TransitionContext",
    "evaluate_guards",
    "guard_current_state",
    "guard_declared_edge",
]
