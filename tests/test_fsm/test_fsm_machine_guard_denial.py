"""Cobertura adicional para guard denial na FSMStateMachine."""

from __future__ import annotations

import fsm.manager.machine as machine_module
from app.infra.stores import MemoryStateStore
from fsm.manager.machine import FSMStateMachine
from fsm.rules.guards import (
    DEFAULT_GUARDS,
    GuardResult,
    TransitionContext,
    evaluate_guards,
    guard_current_state,
    guard_declared_edge,
)

CONFIG = {
    "states": {"draft": "edit", "review": "approve"},
    "transitions": {"submit": {"draft": "review"}},
}


def test_transition_returns_failure_when_guard_blocks_valid_transition(
    monkeypatch,
) -> None:
    def _deny_guard(from_state, to_state, context) -> GuardResult:
        del from_state, to_state, context
        return GuardResult.deny("blocked_by_guard")

    monkeypatch.setattr(machine_module, "evaluate_guards", _deny_guard)

    store = MemoryStateStore({"StateMachine.current_state": "draft"})
    machine = FSMStateMachine(CONFIG, store)

    assert machine.transition("draft", "review") is False
    assert machine.fire_event("submit") is False
    assert machine.current_state() == "draft"
    assert not store.exists("StateMachine.destination_state")


def test_self_transition_bypasses_guards(monkeypatch) -> None:
    def _explode(*args, **kwargs) -> GuardResult:
        raise AssertionError("guards não devem ser avaliados")

    monkeypatch.setattr(machine_module, "evaluate_guards", _explode)

    machine = FSMStateMachine(CONFIG, MemoryStateStore())

    assert machine.transition("review", "review") is True


def test_guard_result_creation_and_properties() -> None:
    allowed = GuardResult.allow()
    assert allowed.allowed is True
    assert allowed.reason is None

    denied = GuardResult.deny("motivo do bloqueio")
    assert denied.allowed is False
    assert denied.reason == "motivo do bloqueio"


def test_default_guards_order_and_first_denial_wins() -> None:
    assert DEFAULT_GUARDS == [guard_declared_edge, guard_current_state]

    context = TransitionContext(table={"draft": ["review"]}, current_state="review")

    # Aresta inexistente e estado desatualizado: o primeiro guard responde
    result = evaluate_guards("review", "draft", context)
    assert result.allowed is False
    assert "não declarada" in result.reason

    result = evaluate_guards("draft", "review", context)
    assert result.allowed is False
    assert "difere da origem" in result.reason

    fresh = TransitionContext(table={"draft": ["review"]}, current_state="draft")
    assert evaluate_guards("draft", "review", fresh).allowed is True


def test_evaluate_guards_with_custom_list() -> None:
    context = TransitionContext(table={}, current_state=None)

    assert evaluate_guards("a", "b", context, guards=[]).allowed is True
    assert evaluate_guards("a", "b", context, guards=[guard_current_state]).allowed is False
