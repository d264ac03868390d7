"""Events passed through the backtesting engine and a thread-safe queue for them."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Generic, TypeVar, Union

from .kline import KLine, Tick


class EventType(Enum):
    """What an event carries."""

    BAR = "bar"
    TICK = "tick"
    TIMER = "timer"


_PAYLOAD_TYPES = {
    EventType.BAR: KLine,
    EventType.TICK: Tick,
    EventType.TIMER: int,
}


@dataclass(frozen=True)
class Event:
    """An engine event: a bar, a tick, or a timer period."""

    type: EventType
    data: Union[KLine, Tick, int]

    def __post_init__(self) -> None:
        expected = _PAYLOAD_TYPES[self.type]
        if expected is int and isinstance(self.data, bool):
            raise TypeError("timer event needs an int period")
        if not isinstance(self.data, expected):
            raise TypeError(
                f"{self.type.name} event needs {expected.__name__}, "
                f"got {type(self.data).__name__}"
            )


T = TypeVar("T")


class BlockingQueue(Generic[T]):
    """FIFO queue whose take() waits until an item is available."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()
        self._cond = threading.Condition()

    def put(self, item: T) -> None:
        """Append an item and wake one waiting taker."""
        with self._cond:
            self._items.append(item)
            self._cond.notify()

    def take(self) -> T:
        """Remove and return the oldest item, blocking while the queue is empty."""
        with self._cond:
            self._cond.wait_for(lambda: bool(self._items))
            return self._items.popleft()

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)