"""
Máquina de estados (FSMStateMachine) para um único sujeito.

Este módulo implementa a FSM que valida o acesso à ação corrente no
startup, executa transições protegidas por guards e dispara eventos
nomeados. O estado atual vive fora da máquina, em um StateStoreProtocol;
a máquina nunca o mantém em cache entre chamadas.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from fsm.rules.guards import GuardResult, TransitionContext, evaluate_guards
from fsm.states.directory import StateDirectory
from fsm.transitions.rules import (
    TransitionMap,
    build_reachability,
    get_valid_targets,
    list_events,
    validate_transition_map,
)
from fsm.types.machine_config import MachineConfig, load_machine_config
from fsm.types.transition import AccessResult, StateTransition

if TYPE_CHECKING:
    from app.protocols.notifier import NotifierProtocol
    from app.protocols.state_store import StateStoreProtocol

logger = logging.getLogger(__name__)

# Sufixos das chaves no store: "<namespace>.<sufixo>"
CURRENT_STATE_SUFFIX = "current_state"
DESTINATION_STATE_SUFFIX = "destination_state"

DENIED_MESSAGE = "Você não pode acessar esta ação neste ponto do processo"

# Motivos de negação reportados em AccessResult.reason
REASON_NO_STATES = "no_states_declared"
REASON_NOT_REACHABLE = "action_not_reachable"


class FSMStateMachine:
    """
    Máquina de estados plana com estado persistido externamente.

    Ciclo de vida: configurada (construção) → validada (start) → em
    operação (transition/fire_event). Falha na validação não impede
    chamadas posteriores; apenas notifica e sugere redirecionamento.

    Attributes:
        config: Configuração declarativa da máquina
        namespace: Prefixo das chaves no store
    """

    __slots__ = ("_config", "_notifier", "_store")

    def __init__(
        self,
        config: MachineConfig | Mapping[str, Any],
        store: StateStoreProtocol,
        notifier: NotifierProtocol | None = None,
    ) -> None:
        """
        Inicializa a máquina de estados.

        Args:
            config: MachineConfig ou mapping de opções
                (states, transitions, default, namespace, auto)
            store: Store chave-valor onde o estado atual é persistido
            notifier: Destino de avisos e redirecionamentos (opcional)

        Raises:
            InvalidMachineConfigError: Se a configuração tiver chaves
                desconhecidas ou ações em formato não suportado
        """
        self._config = load_machine_config(config)
        self._store = store
        self._notifier = notifier

    @property
    def config(self) -> MachineConfig:
        """Configuração da máquina."""
        return self._config

    @property
    def namespace(self) -> str:
        """Prefixo das chaves no store."""
        return self._config.namespace

    @property
    def default_state(self) -> str | None:
        """Estado padrão: o configurado, ou o primeiro estado declarado."""
        if self._config.default is not None:
            return self._config.default
        return self._directory().default_state()

    def _key(self, suffix: str) -> str:
        return f"{self._config.namespace}.{suffix}"

    def _directory(self) -> StateDirectory:
        return StateDirectory(self._config.states)

    # ──────────────────────────────────────────────────────────────
    # Startup
    # ──────────────────────────────────────────────────────────────

    def start(self, current_action: str | None = None) -> AccessResult:
        """
        Valida se a ação corrente é acessível a partir do estado atual.

        Inicializa o estado atual no store com o estado padrão quando
        ausente. Se a ação pertence a um estado alcançável, a transição
        implícita é efetivada. Caso contrário, notifica a negação e pede
        redirecionamento para a ação padrão do estado atual.

        Args:
            current_action: Ação sendo executada pelo host (None pula a
                validação de acesso)

        Returns:
            AccessResult descrevendo a decisão
        """
        states = self._config.states
        if not states:
            logger.warning(
                "fsm_configuration_invalid",
                extra={
                    "namespace": self.namespace,
                    "reason": REASON_NO_STATES,
                    "detail": "Declare ao menos um estado na máquina de estados",
                },
            )
            return AccessResult(allowed=False, reason=REASON_NO_STATES)

        for issue in validate_transition_map(
            states, self._config.transitions, self._config.default
        ):
            logger.warning(
                "fsm_configuration_inconsistent",
                extra={"namespace": self.namespace, "issue": issue},
            )

        current_key = self._key(CURRENT_STATE_SUFFIX)
        if not self._store.exists(current_key):
            default = self.default_state
            self._store.write(current_key, default)
            logger.info(
                "fsm_state_initialized",
                extra={"namespace": self.namespace, "state": default},
            )

        current = self.current_state()
        if current_action is None:
            return AccessResult(allowed=True, current_state=current)

        resolved = self._directory().resolve_action(current_action)
        if self._transition(current, resolved, trigger="start"):
            return AccessResult(
                allowed=True,
                current_state=self.current_state(),
                resolved_state=resolved,
            )

        logger.info(
            "fsm_access_denied",
            extra={
                "namespace": self.namespace,
                "current_state": current,
                "action": current_action,
                "resolved_state": resolved,
            },
        )
        redirect_action = self._directory().first_action(current)
        if self._notifier is not None:
            self._notifier.notify_denied(DENIED_MESSAGE)
        self._redirect(redirect_action, state=current)

        return AccessResult(
            allowed=False,
            current_state=current,
            resolved_state=resolved,
            redirect_action=redirect_action,
            reason=REASON_NOT_REACHABLE,
        )

    # ──────────────────────────────────────────────────────────────
    # Transições e eventos
    # ──────────────────────────────────────────────────────────────

    def transition(self, from_state: str, to_state: str) -> bool:
        """
        Transita de from_state para to_state, se permitido.

        Transição reflexiva sempre é aceita, sem escrita no store.
        Caso contrário, to_state precisa ser alcançável a partir de
        from_state (qualquer evento) e o estado atual no store precisa
        ser from_state.

        Args:
            from_state: Estado de origem
            to_state: Estado de destino

        Returns:
            True se a transição foi efetivada (ou é reflexiva)
        """
        return self._transition(from_state, to_state, trigger="transition")

    def _transition(self, from_state: str | None, to_state: str | None, trigger: str) -> bool:
        if from_state == to_state:
            return True

        context = TransitionContext(
            table=self.transitions(),
            current_state=self.current_state(),
        )
        guard_result: GuardResult = evaluate_guards(from_state, to_state, context)
        if not guard_result.allowed:
            logger.debug(
                "fsm_transition_rejected",
                extra={
                    "namespace": self.namespace,
                    "from_state": from_state,
                    "to_state": to_state,
                    "trigger": trigger,
                    "reason": guard_result.reason,
                },
            )
            return False

        # Marcador de intenção gravado antes do commit do estado atual
        self._store.write(self._key(DESTINATION_STATE_SUFFIX), to_state)
        written = self._store.write(self._key(CURRENT_STATE_SUFFIX), to_state)

        if written:
            record = StateTransition(
                from_state=from_state,
                to_state=to_state,
                trigger=trigger,
                namespace=self.namespace,
            )
            logger.info("fsm_transition_applied", extra=record.to_log_dict())
        else:
            logger.warning(
                "fsm_state_write_failed",
                extra={"namespace": self.namespace, "to_state": to_state},
            )
        return written

    def fire_event(self, event: str) -> bool:
        """
        Dispara um evento nomeado a partir do estado atual.

        Com ``auto`` habilitado, uma transição bem-sucedida gera pedido
        de redirecionamento para a ação padrão do estado de destino.

        Args:
            event: Nome do evento declarado em transitions

        Returns:
            True se a transição do evento foi efetivada; False se o evento
            não se aplica ao estado atual ou a transição foi recusada
        """
        current = self.current_state()
        destination = self._config.transitions.get(event, {}).get(current)
        if destination is None:
            logger.debug(
                "fsm_event_not_applicable",
                extra={"namespace": self.namespace, "event": event, "current_state": current},
            )
            return False

        succeeded = self._transition(current, destination, trigger=event)

        if self._config.auto and succeeded:
            self._redirect(self._directory().first_action(destination), state=destination)

        return succeeded

    def _redirect(self, action: str | None, state: str | None) -> None:
        if action is None:
            logger.warning(
                "fsm_redirect_unavailable",
                extra={"namespace": self.namespace, "state": state},
            )
            return
        if self._notifier is not None:
            self._notifier.redirect_to(action)

    # ──────────────────────────────────────────────────────────────
    # Estado atual e introspecção
    # ──────────────────────────────────────────────────────────────

    def current_state(self) -> str | None:
        """Estado atual no store, ou o estado padrão se ainda não gravado."""
        key = self._key(CURRENT_STATE_SUFFIX)
        if self._store.exists(key):
            return self._store.read(key)
        return self.default_state

    def set_current_state(self, state: str) -> bool:
        """
        Grava o estado atual sem validação.

        Args:
            state: Novo estado atual (não precisa ser declarado)

        Returns:
            Resultado da escrita no store
        """
        return self._store.write(self._key(CURRENT_STATE_SUFFIX), state)

    def states(self) -> Mapping[str, Any]:
        """Declaração de estados, como configurada."""
        return self._directory().states()

    def transitions(self) -> TransitionMap:
        """Mapa origem -> destinos alcançáveis, derivado a cada chamada."""
        return build_reachability(self._config.transitions)

    def declared_events(self) -> list[str]:
        """Eventos declarados, na ordem de declaração."""
        return list_events(self._config.transitions)

    def resolve_action(self, action: str) -> str | None:
        """Estado dono da ação (None se nenhum)."""
        return self._directory().resolve_action(action)

    def get_valid_targets(self) -> list[str]:
        """Destinos alcançáveis a partir do estado atual, sem repetições."""
        targets = get_valid_targets(self.transitions(), self.current_state())
        return list(dict.fromkeys(targets))

    def can_transition_to(self, target: str) -> bool:
        """Verifica, sem escrever no store, se pode transitar para target."""
        current = self.current_state()
        if current == target:
            return True
        context = TransitionContext(table=self.transitions(), current_state=current)
        return evaluate_guards(current, target, context).allowed

    def get_state_summary(self) -> dict[str, Any]:
        """
        Retorna resumo do estado atual para observability.

        Returns:
            Dict com informações do estado (seguro para logs)
        """
        return {
            "namespace": self.namespace,
            "current_state": self.current_state(),
            "default_state": self.default_state,
            "valid_targets": self.get_valid_targets(),
            "event_count": len(self.declared_events()),
        }

    def reset(self) -> None:
        """
        Remove o estado persistido desta máquina.

        A próxima leitura volta ao estado padrão.
        """
        self._store.delete(self._key(CURRENT_STATE_SUFFIX))
        self._store.delete(self._key(DESTINATION_STATE_SUFFIX))
        logger.info("fsm_state_reset", extra={"namespace": self.namespace})


def create_fsm(
    settings: MachineConfig | Mapping[str, Any],
    store: StateStoreProtocol,
    notifier: NotifierProtocol | None = None,
) -> FSMStateMachine:
    """
    Factory function para criar uma FSM.

    Args:
        settings: Opções da máquina (mapping ou MachineConfig)
        store: Store do estado atual
        notifier: Destino de avisos e redirecionamentos (opcional)

    Returns:
        FSMStateMachine configurada
    """
    return FSMStateMachine(config=settings, store=store, notifier=notifier)
