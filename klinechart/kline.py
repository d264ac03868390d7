"""Market data records: candlestick bars and ticks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MarketDataType(Enum):
    """Kind of market data a feed delivers."""

    TICK_DATA = 0
    BAR_DATA = 1


def _check_length(name: str, value: str, limit: int) -> None:
    if len(value) > limit:
        raise ValueError(f"{name} is longer than {limit} characters: {value!r}")


@dataclass
class KLine:
    """One candlestick bar of an instrument."""

    update_time: str = ""
    open_price: float = 0.0
    high_price: float = 0.0
    low_price: float = 0.0
    close_price: float = 0.0
    volume: int = 0
    instrument_id: str = ""

    UPDATE_TIME_LIMIT = 19
    INSTRUMENT_ID_LIMIT = 30

    def __post_init__(self) -> None:
        _check_length("update_time", self.update_time, self.UPDATE_TIME_LIMIT)
        _check_length("instrument_id", self.instrument_id, self.INSTRUMENT_ID_LIMIT)


@dataclass
class Tick:
    """One trade tick of an instrument."""

    trading_date: str = ""
    update_time: str = ""
    update_millisec: str = ""
    last_price: float = 0.0
    volume: float = 0.0
    open_interest: float = 0.0
    action_date: str = ""
    instrument_id: str = ""

    FIELD_LIMIT = 8
    INSTRUMENT_ID_LIMIT = 30

    def __post_init__(self) -> None:
        for name in ("trading_date", "update_time", "update_millisec", "action_date"):
            _check_length(name, getattr(self, name), self.FIELD_LIMIT)
        _check_length("instrument_id", self.instrument_id, self.INSTRUMENT_ID_LIMIT)