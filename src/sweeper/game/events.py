"""
Change events emitted by a game after each action settles.
"""
from dataclasses import dataclass
from typing import Callable, List, Tuple, Union


@dataclass(frozen=True)
class CellRevealed:
    """A cell was opened."""

    x: int
    y: int


@dataclass(frozen=True)
class FlagToggled:
    """A cell's flag was placed, removed, or cleared as wrong on a loss."""

    x: int
    y: int


@dataclass(frozen=True)
class GameWon:
    """Every safe cell has been revealed."""


@dataclass(frozen=True)
class GameLost:
    """A mine was revealed."""


GameEvent = Union[CellRevealed, FlagToggled, GameWon, GameLost]
Listener = Callable[[Tuple[GameEvent, ...]], None]


# ============================================================================
# Subscription Registry
# ============================================================================

class EventBus:
    """
    Ordered list of listeners, each called with one batch per action.
    """

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a listener. Unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def publish(self, events: List[GameEvent]) -> None:
        """Deliver a batch to every listener. Empty batches are dropped."""
        if not events:
            return
        batch = tuple(events)
        for listener in list(self._listeners):
            listener(batch)
