"""Interfaces for trade gateways, strategies and backtesting drivers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List

from .kline import KLine, Tick


class TradeGateway(ABC):
    """Places and cancels orders on behalf of a strategy."""

    @abstractmethod
    def send_order(
        self,
        instrument_id: str,
        price: float,
        volume: int,
        buy_sell: str,
        open_close: str,
        price_type: str,
    ) -> str:
        """Submit an order and return its identifier."""

    @abstractmethod
    def cancel_order(self, order_id: str) -> None:
        """Cancel a previously sent order."""

    @abstractmethod
    def open_long(self, instrument_id: str, volume: int) -> None:
        """Buy to open."""

    @abstractmethod
    def open_short(self, instrument_id: str, volume: int) -> None:
        """Sell to open."""

    @abstractmethod
    def close_long(self, instrument_id: str, volume: int) -> None:
        """Sell to close a long position."""

    @abstractmethod
    def close_short(self, instrument_id: str, volume: int) -> None:
        """Buy to close a short position."""

    @abstractmethod
    def close_short_and_open_long(self, instrument_id: str, volume: int) -> None:
        """Reverse to long: buy to close, then buy to open."""

    @abstractmethod
    def close_long_and_open_short(self, instrument_id: str, volume: int) -> None:
        """Reverse to short: sell to close, then sell to open."""


class Strategy(ABC):
    """A trading strategy driven by market data and order callbacks."""

    @abstractmethod
    def init(self, gateway: TradeGateway) -> None:
        """Attach the gateway the strategy trades through."""

    @abstractmethod
    def on_tick(self, tick: Tick) -> None:
        """Handle a new tick."""

    @abstractmethod
    def on_bar(self, bar: KLine) -> None:
        """Handle a new bar."""

    @abstractmethod
    def on_trade(self, trade: Any) -> None:
        """Handle a fill report."""

    @abstractmethod
    def on_order(self, order: Any) -> None:
        """Handle an order status report."""

    @abstractmethod
    def name(self) -> str:
        """Name of the strategy."""

    @abstractmethod
    def instrument_type(self) -> str:
        """Instrument type the strategy trades."""


class BacktestingDriver(ABC):
    """Loads historical bars and runs a strategy over them."""

    @abstractmethod
    def test(self) -> None:
        """Run the backtest."""

    @abstractmethod
    def load_kline(self, instrument_id: str, path: str) -> List[KLine]:
        """Read the bars of an instrument from a file."""


def split(text: str, sep: str) -> List[str]:
    """Split text at every occurrence of a single separator character."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return text.split(sep)