"""Game states and the stack that runs them with deferred changes."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from dangame.identifiers import StateID

log = logging.getLogger(__name__)


@dataclass
class Context:
    """Shared objects handed to every state."""

    window: Any = None
    textures: Any = None
    fonts: Any = None


class State(ABC):
    """A screen on the state stack."""

    def __init__(self, stack: StateStack, context: Context) -> None:
        self._stack = stack
        self._context = context

    @abstractmethod
    def draw(self) -> None:
        """Render the state."""

    @abstractmethod
    def update(self, dt: float) -> bool:
        """Advance by ``dt`` seconds; return False to stop lower states updating."""

    @abstractmethod
    def handle_event(self, event: Any) -> bool:
        """Handle an event; return False to stop it reaching lower states."""

    def request_stack_push(self, state_id: StateID) -> None:
        self._stack.push_state(state_id)

    def request_stack_pop(self) -> None:
        self._stack.pop_state()

    def request_state_clear(self) -> None:
        self._stack.clear_states()

    def context(self) -> Context:
        return self._context


class StackAction(Enum):
    PUSH = "push"
    POP = "pop"
    CLEAR = "clear"


@dataclass(frozen=True)
class PendingChange:
    action: StackAction
    state_id: StateID = StateID.NONE


class StateStack:
    """Stack of states; pushes, pops and clears are applied after each pass."""

    def __init__(self, context: Context) -> None:
        self._context = context
        self._stack: List[State] = []
        self._pending: List[PendingChange] = []
        self._factories: Dict[StateID, Callable[[], State]] = {}

    def register_state(self, state_id: StateID, state_type: Callable[..., State]) -> None:
        self._factories[state_id] = lambda: state_type(self, self._context)

    def update(self, dt: float) -> None:
        for state in reversed(self._stack):
            if not state.update(dt):
                break
        self._apply_pending_changes()

    def draw(self) -> None:
        for state in self._stack:
            state.draw()

    def handle_event(self, event: Any) -> None:
        for state in reversed(self._stack):
            if not state.handle_event(event):
                break
        self._apply_pending_changes()

    def push_state(self, state_id: StateID) -> None:
        log.debug("Loading state %s", state_id)
        self._pending.append(PendingChange(StackAction.PUSH, state_id))

    def pop_state(self) -> None:
        log.debug("Popping state, stack size %d", len(self._stack))
        self._pending.append(PendingChange(StackAction.POP))

    def clear_states(self) -> None:
        self._pending.append(PendingChange(StackAction.CLEAR))

    def is_empty(self) -> bool:
        return not self._stack

    def __len__(self) -> int:
        return len(self._stack)

    def _create_state(self, state_id: StateID) -> State:
        factory: Optional[Callable[[], State]] = self._factories.get(state_id)
        if factory is None:
            raise KeyError(f"no state registered for {state_id!r}")
        return factory()

    def _apply_pending_changes(self) -> None:
        changes, self._pending = self._pending, []
        for change in changes:
            if change.action is StackAction.PUSH:
                self._stack.append(self._create_state(change.state_id))
            elif change.action is StackAction.POP:
                if not self._stack:
                    raise IndexError("pop from an empty state stack")
                self._stack.pop()
            else:
                self._stack.clear()