"""
Diretório de estados declarados e das ações que cada um possui.

Resolve uma ação externa de volta para o estado que a possui e
escolhe a ação padrão de um estado (alvo de redirecionamentos).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fsm.types.action_owner import ActionOwner, Nested, build_action_owner, first_leaf, owns_action


class StateDirectory:
    """
    Visão derivada da declaração de estados.

    Não guarda estado mutável: os donos de ação são reconstruídos a
    partir da configuração a cada consulta.
    """

    __slots__ = ("_states",)

    def __init__(self, states: Mapping[str, Any]) -> None:
        self._states = states

    def states(self) -> Mapping[str, Any]:
        """Declaração de estados, exatamente como configurada."""
        return self._states

    def owners(self) -> dict[str, ActionOwner]:
        """Estado -> ActionOwner, na ordem de declaração."""
        return {
            state: build_action_owner(actions, f"[{state!r}]")
            for state, actions in self._states.items()
        }

    def default_state(self) -> str | None:
        """Primeiro estado declarado (None se nenhum)."""
        return next(iter(self._states), None)

    def resolve_action(
        self,
        action: str,
        owners: Mapping[str, ActionOwner] | Nested | None = None,
    ) -> str | None:
        """
        Encontra o estado que possui a ação (busca em profundidade).

        Para sub-estados aninhados, retorna a chave do nível consultado,
        ou seja, o estado de topo do ramo onde a ação foi encontrada.

        Args:
            action: Identificador da ação externa
            owners: Donos a inspecionar (usa todos os estados se None)

        Returns:
            Chave do estado dono, ou None se nenhum estado possui a ação
        """
        if owners is None:
            owners = self.owners()
        items = owners.children if isinstance(owners, Nested) else owners.items()

        for key, owner in items:
            if owns_action(owner, action):
                return key
        return None

    def first_action(self, state: str) -> str | None:
        """
        Ação padrão do estado: a primeira declarada.

        Args:
            state: Estado declarado

        Returns:
            Ação padrão, ou None se o estado não existe ou não tem ações
        """
        if state not in self._states:
            return None
        return first_leaf(build_action_owner(self._states[state], f"[{state!r}]"))
