import pytest

from klinechart.kline import KLine, Tick
from klinechart.trading import BacktestingDriver, Strategy, TradeGateway, split


class RecordingGateway(TradeGateway):
    def __init__(self):
        self.calls = []

    def send_order(self, instrument_id, price, volume, buy_sell, open_close, price_type):
        self.calls.append(("send", instrument_id, price, volume, buy_sell, open_close, price_type))
        return f"order-{len(self.calls)}"

    def cancel_order(self, order_id):
        self.calls.append(("cancel", order_id))

    def open_long(self, instrument_id, volume):
        self.calls.append(("open_long", instrument_id, volume))

    def open_short(self, instrument_id, volume):
        self.calls.append(("open_short", instrument_id, volume))

    def close_long(self, instrument_id, volume):
        self.calls.append(("close_long", instrument_id, volume))

    def close_short(self, instrument_id, volume):
        self.calls.append(("close_short", instrument_id, volume))

    def close_short_and_open_long(self, instrument_id, volume):
        self.close_short(instrument_id, volume)
        self.open_long(instrument_id, volume)

    def close_long_and_open_short(self, instrument_id, volume):
        self.close_long(instrument_id, volume)
        self.open_short(instrument_id, volume)


class BuyRisingBars(Strategy):
    def init(self, gateway):
        self.gateway = gateway
        self.ticks = []

    def on_tick(self, tick):
        self.ticks.append(tick)

    def on_bar(self, bar):
        if bar.close_price > bar.open_price:
            self.gateway.open_long(bar.instrument_id, 1)

    def on_trade(self, trade):
        pass

    def on_order(self, order):
        pass

    def name(self):
        return "rising"

    def instrument_type(self):
        return "i"


def _driver_init(self, strategy, bars):
    self.strategy = strategy
    self.bars = bars


def _driver_run(self):
    for bar in self.bars:
        self.strategy.on_bar(bar)


def _driver_load_kline(self, instrument_id, path):
    return [bar for bar in self.bars if bar.instrument_id == instrument_id]


ListDriver = type(
    "ListDriver",
    (BacktestingDriver,),
    {
        "__init__": _driver_init,
        "test": _driver_run,
        "load_kline": _driver_load_kline,
    },
)


@pytest.mark.parametrize("cls", [TradeGateway, Strategy, BacktestingDriver])
def test_interfaces_cannot_be_instantiated(cls):
    with pytest.raises(TypeError):
        cls()


def test_driver_runs_strategy_over_bars():
    gateway = RecordingGateway()
    strategy = BuyRisingBars()
    strategy.init(gateway)
    bars = [
        KLine(open_price=1.0, close_price=2.0, instrument_id="i1709"),
        KLine(open_price=2.0, close_price=1.0, instrument_id="i1709"),
        KLine(open_price=1.0, close_price=3.0, instrument_id="rb1710"),
    ]
    driver = ListDriver(strategy, bars)
    driver.test()
    assert gateway.calls == [("open_long", "i1709", 1), ("open_long", "rb1710", 1)]
    assert len(driver.load_kline("i1709", "unused.csv")) == 2


def test_strategy_receives_ticks():
    strategy = BuyRisingBars()
    strategy.init(RecordingGateway())
    tick = Tick(last_price=3.5)
    strategy.on_tick(tick)
    assert strategy.ticks == [tick]
    assert strategy.name() == "rising"


def test_split_csv_line():
    assert split("2017-05-22,1.5,2.0", ",") == ["2017-05-22", "1.5", "2.0"]


def test_split_keeps_empty_fields():
    assert split("a,,b,", ",") == ["a", "", "b", ""]


def test_split_without_separator_gives_whole_text():
    assert split("abc", ",") == ["abc"]


@pytest.mark.parametrize("sep", ["", ",;"])
def test_split_rejects_bad_separator(sep):
    with pytest.raises(ValueError):
        split("a,b", sep)