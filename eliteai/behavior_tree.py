"""Behavior trees: composites, leaves, decorators and the tree that runs them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from enum import Enum

from eliteai.blackboard import Blackboard, DecisionMaking


class BehaviorState(Enum):
    FAILURE = 0
    SUCCESS = 1
    RUNNING = 2


class Behavior(ABC):
    """A node of a behavior tree."""

    def __init__(self) -> None:
        self.current_state = BehaviorState.FAILURE

    @abstractmethod
    def execute(self, blackboard: Blackboard | None) -> BehaviorState:
        """Run the behavior once and report its state."""


class BehaviorComposite(Behavior):
    """A behavior made of ordered child behaviors."""

    def __init__(self, children: Iterable[Behavior] = ()) -> None:
        super().__init__()
        self.children: list[Behavior] = list(children)


class BehaviorSelector(BehaviorComposite):
    """Succeeds or keeps running with the first child that does not fail."""

    def execute(self, blackboard: Blackboard | None) -> BehaviorState:
        for child in self.children:
            self.current_state = child.execute(blackboard)
            if self.current_state is not BehaviorState.FAILURE:
                return self.current_state
        self.current_state = BehaviorState.FAILURE
        return self.current_state


class BehaviorSequence(BehaviorComposite):
    """Stops at the first child that fails or keeps running."""

    def execute(self, blackboard: Blackboard | None) -> BehaviorState:
        for child in self.children:
            self.current_state = child.execute(blackboard)
            if self.current_state is not BehaviorState.SUCCESS:
                return self.current_state
        self.current_state = BehaviorState.SUCCESS
        return self.current_state


class BehaviorPartialSequence(BehaviorSequence):
    """A sequence that advances by at most one succeeding child per execution."""

    def __init__(self, children: Iterable[Behavior] = ()) -> None:
        super().__init__(children)
        self._current_index = 0

    def execute(self, blackboard: Blackboard | None) -> BehaviorState:
        if self._current_index < len(self.children):
            state = self.children[self._current_index].execute(blackboard)
            if state is BehaviorState.FAILURE:
                self._current_index = 0
            elif state is BehaviorState.SUCCESS:
                self._current_index += 1
                state = BehaviorState.RUNNING
            self.current_state = state
            return state

        self._current_index = 0
        self.current_state = BehaviorState.SUCCESS
        return self.current_state


class BehaviorConditional(Behavior):
    """Succeeds when the predicate holds for the blackboard."""

    def __init__(self, predicate: Callable[[Blackboard | None], bool] | None) -> None:
        super().__init__()
        self.predicate = predicate

    def execute(self, blackboard: Blackboard | None) -> BehaviorState:
        if self.predicate is None:
            return BehaviorState.FAILURE
        self.current_state = (
            BehaviorState.SUCCESS if self.predicate(blackboard) else BehaviorState.FAILURE
        )
        return self.current_state


class BehaviorAction(Behavior):
    """Runs an action that reports its own state."""

    def __init__(
        self, action: Callable[[Blackboard | None], BehaviorState] | None
    ) -> None:
        super().__init__()
        self.action = action

    def execute(self, blackboard: Blackboard | None) -> BehaviorState:
        if self.action is None:
            return BehaviorState.FAILURE
        self.current_state = self.action(blackboard)
        return self.current_state


class BehaviorInverter(Behavior):
    """Swaps success and failure of its child; running passes through."""

    def __init__(self, child: Behavior) -> None:
        super().__init__()
        self.child = child

    def execute(self, blackboard: Blackboard | None) -> BehaviorState:
        state = self.child.execute(blackboard)
        if state is BehaviorState.FAILURE:
            state = BehaviorState.SUCCESS
        elif state is BehaviorState.SUCCESS:
            state = BehaviorState.FAILURE
        self.current_state = state
        return state


class BehaviorTree(DecisionMaking):
    """Executes its root behavior against a blackboard on every update."""

    def __init__(self, blackboard: Blackboard | None, root: Behavior | None) -> None:
        self.blackboard = blackboard
        self.root = root
        self.current_state = BehaviorState.FAILURE

    def update(self, delta_time: float) -> None:
        if self.root is None:
            self.current_state = BehaviorState.FAILURE
            return
        self.current_state = self.root.execute(self.blackboard)