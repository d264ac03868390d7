import pytest

from klinechart.splitter import VERTICAL, MarketDataSplitter, Signal


def test_signal_calls_handlers_in_order():
    signal = Signal()
    calls = []
    signal.connect(lambda *a: calls.append(("first", a)))
    signal.connect(lambda *a: calls.append(("second", a)))
    signal.emit(1, "x")
    assert calls == [("first", (1, "x")), ("second", (1, "x"))]


def test_signal_disconnect_stops_calls():
    signal = Signal()
    calls = []
    handler = calls.append
    signal.connect(handler)
    signal.emit("a")
    signal.disconnect(handler)
    signal.emit("b")
    assert calls == ["a"]
    assert len(signal) == 0


def test_signal_disconnect_unknown_raises():
    signal = Signal()
    with pytest.raises(ValueError):
        signal.disconnect(print)


def test_signal_connect_requires_callable():
    signal = Signal()
    with pytest.raises(TypeError):
        signal.connect(42)


def test_splitter_is_vertical():
    splitter = MarketDataSplitter()
    assert splitter.orientation == VERTICAL
    assert splitter.parent is None


@pytest.mark.parametrize(
    "method, signal_name",
    [
        ("child_key_press", "child_key_pressed"),
        ("child_mouse_move", "child_mouse_moved"),
        ("child_mouse_press", "child_mouse_pressed"),
        ("child_mouse_release", "child_mouse_released"),
    ],
)
def test_each_child_event_goes_to_its_own_signal(method, signal_name):
    splitter = MarketDataSplitter()
    received = {}
    names = [
        "child_key_pressed",
        "child_mouse_moved",
        "child_mouse_pressed",
        "child_mouse_released",
    ]
    for name in names:
        getattr(splitter, name).connect(
            lambda event, name=name: received.setdefault(name, []).append(event)
        )
    assert [len(getattr(splitter, name)) for name in names] == [1, 1, 1, 1]
    event = object()
    getattr(splitter, method)(event)
    assert received == {signal_name: [event]}