"""Vertical pane container that relays input events from its child panes."""

from __future__ import annotations

from typing import Any, Callable, List

Handler = Callable[..., Any]

VERTICAL = "vertical"


class Signal:
    """A list of handlers that are called in connection order on emit."""

    def __init__(self) -> None:
        self._handlers: List[Handler] = []

    def connect(self, handler: Handler) -> None:
        """Register a handler to be called on every emit."""
        if not callable(handler):
            raise TypeError("handler must be callable")
        self._handlers.append(handler)

    def disconnect(self, handler: Handler) -> None:
        """Remove a handler that was connected earlier."""
        try:
            self._handlers.remove(handler)
        except ValueError:
            raise ValueError("handler is not connected") from None

    def emit(self, *args: Any) -> None:
        """Call every connected handler with the given arguments."""
        for handler in list(self._handlers):
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)


class MarketDataSplitter:
    """Stacks chart panes vertically and forwards their key and mouse events.

    Child panes report their input here; listeners connect to the signals
    to react to input from any pane in the stack.
    """

    orientation = VERTICAL

    def __init__(self, parent: Any = None) -> None:
        self.parent = parent
        self.child_key_pressed = Signal()
        self.child_mouse_moved = Signal()
        self.child_mouse_pressed = Signal()
        self.child_mouse_released = Signal()

    def child_key_press(self, event: Any) -> None:
        """Relay a key press from a child pane."""
        self.child_key_pressed.emit(event)

    def child_mouse_move(self, event: Any) -> None:
        """Relay a mouse move from a child pane."""
        self.child_mouse_moved.emit(event)

    def child_mouse_press(self, event: Any) -> None:
        """Relay a mouse press from a child pane."""
        self.child_mouse_pressed.emit(event)

    def child_mouse_release(self, event: Any) -> None:
        """Relay a mouse release from a child pane."""
        self.child_mouse_released.emit(event)