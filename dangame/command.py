"""Commands addressed to scene nodes by category, and a FIFO queue of them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Optional

from dangame.identifiers import Category

Action = Callable[[Any, float], None]


@dataclass
class Command:
    """An action applied to every scene node whose category matches."""

    action: Optional[Action] = None
    category: int = Category.NONE


def derived_action(node_type: type, fn: Callable[[Any, float], None]) -> Action:
    """Wrap ``fn`` so it only accepts nodes of ``node_type``."""

    def action(node: Any, dt: float) -> None:
        if not isinstance(node, node_type):
            raise TypeError(
                f"command expects {node_type.__name__}, got {type(node).__name__}"
            )
        fn(node, dt)

    return action


class CommandQueue:
    """First-in first-out queue of commands."""

    def __init__(self) -> None:
        self._queue: deque[Command] = deque()

    def push(self, command: Command) -> None:
        self._queue.append(command)

    def pop(self) -> Command:
        """Remove and return the oldest command; IndexError when empty."""
        if not self._queue:
            raise IndexError("pop from an empty command queue")
        return self._queue.popleft()

    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)