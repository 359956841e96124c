"""
Exports públicos do módulo fsm/manager.

Máquina de estados (FSMStateMachine) e constantes de persistência.
"""

from fsm.manager.machine import (
    CURRENT_STATE_SUFFIX,
    DENIED_MESSAGE,
    DESTINATION_STATE_SUFFIX,
    REASON_NO_STATES,
    REASON_NOT_REACHABLE,
    FSMStateMachine,
    create_fsm,
)

__all__ = [
    "CURRENT_STATE_SUFFIX",
    "DENIED_MESSAGE",
    "DESTINATION_STATE_SUFFIX",
    "REASON_NOT_REACHABLE",
    "REASON_NO_STATES",
    "FSMStateMachine",
    "create_fsm",
]
