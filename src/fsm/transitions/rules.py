"""
Tabela de transições derivada das declarações por evento.

As transições são declaradas agrupadas por evento
(evento -> {origem: destino}). Para validar uma transição, a declaração
é achatada em um grafo origem -> destinos alcançáveis, independente do
evento que autorizou cada aresta.
"""

from collections.abc import Mapping
from typing import Any

# Evento -> {estado de origem: estado de destino}
TransitionDeclarations = Mapping[str, Mapping[str, str]]

# Estado de origem -> destinos alcançáveis (ordem de declaração, com repetições)
TransitionMap = dict[str, list[str]]


def build_reachability(declarations: TransitionDeclarations) -> TransitionMap:
    """
    Achata as declarações por evento em um mapa de alcançabilidade.

    Percorre os eventos na ordem de declaração e, dentro de cada evento,
    as origens na ordem de declaração. Um destino compartilhado por
    vários eventos aparece repetido na lista da origem.

    Args:
        declarations: Evento -> {origem: destino}

    Returns:
        Origem -> lista de destinos (vazio se não há declarações)
    """
    table: TransitionMap = {}
    for transitions in declarations.values():
        for origin, destination in transitions.items():
            table.setdefault(origin, []).append(destination)
    return table


def list_events(declarations: TransitionDeclarations) -> list[str]:
    """Nomes dos eventos declarados, na ordem de declaração."""
    return list(declarations)


def get_valid_targets(table: TransitionMap, state: str) -> list[str]:
    """
    Retorna os destinos alcançáveis a partir de um estado.

    Args:
        table: Mapa derivado por build_reachability
        state: Estado de origem

    Returns:
        Lista de destinos (vazia se o estado não é origem de nenhuma aresta)
    """
    return table.get(state, [])


def is_transition_valid(table: TransitionMap, from_state: str, to_state: str) -> bool:
    """
    Verifica se existe aresta declarada de from_state para to_state.

    Não trata transição reflexiva: isso é decidido pela máquina.

    Args:
        table: Mapa derivado por build_reachability
        from_state: Estado de origem
        to_state: Estado de destino

    Returns:
        True se to_state está na lista de alcançáveis de from_state
    """
    return to_state in get_valid_targets(table, from_state)


def validate_transition_map(
    states: Mapping[str, Any],
    declarations: TransitionDeclarations,
    default: str | None = None,
) -> list[str]:
    """
    Valida a consistência entre estados declarados e transições.

    Verifica:
    - Origens e destinos de cada evento são estados declarados
    - O estado padrão explícito (se houver) é um estado declarado

    Args:
        states: Declaração de estados
        declarations: Evento -> {origem: destino}
        default: Estado padrão explícito

    Returns:
        Lista de problemas encontrados (vazia se consistente)
    """
    errors: list[str] = []

    for event, transitions in declarations.items():
        for origin, destination in transitions.items():
            if origin not in states:
                errors.append(f"Evento {event!r}: origem {origin!r} não é um estado declarado")
            if destination not in states:
                errors.append(
                    f"Evento {event!r}: destino {destination!r} não é um estado declarado"
                )

    if default is not None and default not in states:
        errors.append(f"Estado padrão {default!r} não é um estado declarado")

    return errors
