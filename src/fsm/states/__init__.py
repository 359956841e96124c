"""
Exports públicos do módulo fsm/states.

Diretório de estados declarados e resolução de ações.
"""

from fsm.states.directory import StateDirectory

__all__ = [
    "StateDirectory",
]
