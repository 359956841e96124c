"""
Variante que descreve quais ações externas pertencem a um estado.

Um estado declara suas ações como:
    - string: uma única ação (caso comum)
    - lista/tupla: várias ações, todas pertencentes ao estado
    - mapping: sub-estados aninhados, cada um com suas próprias ações

A forma dinâmica da configuração é convertida uma única vez na variante
``Leaf | Nested``; a busca de ações opera apenas sobre a variante.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from utils.errors import InvalidMachineConfigError


@dataclass(frozen=True, slots=True)
class Leaf:
    """Ação terminal pertencente ao estado."""

    action: str


@dataclass(frozen=True, slots=True)
class Nested:
    """
    Conjunto ordenado de sub-donos de ação.

    Attributes:
        children: Pares (chave, dono) na ordem de declaração. Listas
            usam a posição como chave ("0", "1", ...).
    """

    children: tuple[tuple[str, ActionOwner], ...]

    def keys(self) -> list[str]:
        """Chaves na ordem de declaração."""
        return [key for key, _ in self.children]


ActionOwner = Leaf | Nested


def build_action_owner(value: Any, path: str = "") -> ActionOwner:
    """
    Converte um valor bruto de configuração em ActionOwner.

    Args:
        value: Valor declarado para o estado (str, lista ou mapping)
        path: Caminho do valor na configuração, usado nas mensagens de erro

    Returns:
        Leaf ou Nested equivalente

    Raises:
        InvalidMachineConfigError: Se o valor não tiver formato suportado
    """
    if isinstance(value, str):
        return Leaf(value)

    if isinstance(value, Mapping):
        return Nested(tuple(
            (str(key), build_action_owner(child, f"{path}.{key}"))
            for key, child in value.items()
        ))

    if isinstance(value, (list, tuple)):
        return Nested(tuple(
            (str(index), build_action_owner(child, f"{path}[{index}]"))
            for index, child in enumerate(value)
        ))

    raise InvalidMachineConfigError(
        f"Ação inválida em states{path}: esperado str, lista ou mapping, "
        f"recebido {type(value).__name__}"
    )


def owns_action(owner: ActionOwner, action: str) -> bool:
    """
    Verifica (em profundidade) se o dono contém a ação.

    Args:
        owner: Dono de ação a inspecionar
        action: Identificador da ação externa

    Returns:
        True se alguma folha do dono é a ação
    """
    if isinstance(owner, Leaf):
        return owner.action == action
    return any(owns_action(child, action) for _, child in owner.children)


def first_leaf(owner: ActionOwner) -> str | None:
    """Primeira ação encontrada em profundidade (None se não houver folhas)."""
    if isinstance(owner, Leaf):
        return owner.action
    for _, child in owner.children:
        found = first_leaf(child)
        if found is not None:
            return found
    return None
