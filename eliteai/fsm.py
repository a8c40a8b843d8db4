"""Finite state machines driven by conditions evaluated against a blackboard."""

from __future__ import annotations

from abc import ABC, abstractmethod

from eliteai.blackboard import Blackboard, DecisionMaking


class FSMState:
    """A state of a finite state machine; override the hooks that matter."""

    def on_enter(self, blackboard: Blackboard | None) -> None:
        """Called when the machine enters this state."""

    def on_exit(self, blackboard: Blackboard | None) -> None:
        """Called when the machine leaves this state."""

    def update(self, blackboard: Blackboard | None, delta_time: float) -> None:
        """Called on every update while this state is current."""


class FSMCondition(ABC):
    """A condition that decides whether a transition is taken."""

    @abstractmethod
    def evaluate(self, blackboard: Blackboard | None) -> bool:
        """Whether the transition guarded by this condition should fire."""


class FiniteStateMachine(DecisionMaking):
    """Moves between states along transitions whose conditions hold."""

    def __init__(self, start_state: FSMState | None, blackboard: Blackboard | None = None) -> None:
        self.blackboard = blackboard
        self._current_state: FSMState | None = None
        self._transitions: dict[FSMState, list[tuple[FSMCondition, FSMState]]] = {}
        self.change_state(start_state)

    @property
    def current_state(self) -> FSMState | None:
        return self._current_state

    def add_transition(
        self, start_state: FSMState, to_state: FSMState, condition: FSMCondition
    ) -> None:
        """Add a transition; transitions of a state are tried in insertion order."""
        self._transitions.setdefault(start_state, []).append((condition, to_state))

    def update(self, delta_time: float) -> None:
        """Take the first transition whose condition holds, then update the state."""
        for condition, to_state in self._transitions.get(self._current_state, ()):
            if condition.evaluate(self.blackboard):
                self.change_state(to_state)
                break
        if self._current_state is not None:
            self._current_state.update(self.blackboard, delta_time)

    def change_state(self, new_state: FSMState | None) -> None:
        """Leave the current state, if any, and enter ``new_state``."""
        if self._current_state is not None:
            self._current_state.on_exit(self.blackboard)
        self._current_state = new_state
        if new_state is not None:
            new_state.on_enter(self.blackboard)