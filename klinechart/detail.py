"""Contents of the bar detail box shown next to the crosshair."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

BOX_WIDTH = 75
BOX_HEIGHT = 220
DATA_MARGIN_LEFT = 4
DATA_HEIGHT = 12
DATA_SPACING = 4
TOP = 4
LABEL_COLOR = "#FFFFFF"
BACKGROUND_COLOR = "#000000"
NO_SIGNAL = "无"


@dataclass
class Detail:
    """Values and colours of the bar under the crosshair."""

    time: str = ""
    time_color: Optional[str] = None
    current_price: float = 0.0
    current_price_color: Optional[str] = None
    opening_price: float = 0.0
    opening_price_color: Optional[str] = None
    highest_bid: float = 0.0
    highest_bid_color: Optional[str] = None
    lowest_bid: float = 0.0
    lowest_bid_color: Optional[str] = None
    closing_price: float = 0.0
    closing_price_color: Optional[str] = None
    amount_of_increase: float = 0.0
    amount_of_increase_color: Optional[str] = None
    amount_of_amplitude: float = 0.0
    amount_of_amplitude_color: Optional[str] = None
    total_volume: str = ""
    total_volume_color: Optional[str] = None
    total_amount: str = ""
    total_amount_color: Optional[str] = None
    turnover_rate: float = 0.0
    turnover_rate_color: Optional[str] = None
    trading_signal: str = ""
    trading_signal_color: Optional[str] = None


@dataclass(frozen=True)
class DetailLine:
    """One line of text in the box and the rectangle it is drawn in."""

    text: str
    color: Optional[str]
    rect: Tuple[int, int, int, int]


def format_date(time: str) -> str:
    """Date part of a timestamp with the dashes removed."""
    return time[:10].replace("-", "")


def detail_lines(detail: Detail) -> List[DetailLine]:
    """Lines of the box from top to bottom: date, then label and value pairs."""
    entries = [
        (format_date(detail.time), detail.time_color),
        ("开盘", LABEL_COLOR),
        (f"{detail.opening_price:.2f}", detail.opening_price_color),
        ("最高", LABEL_COLOR),
        (f"{detail.highest_bid:.2f}", detail.highest_bid_color),
        ("最低", LABEL_COLOR),
        (f"{detail.lowest_bid:.2f}", detail.lowest_bid_color),
        ("收盘", LABEL_COLOR),
        (f"{detail.closing_price:.2f}", detail.closing_price_color),
        ("总手", LABEL_COLOR),
        (detail.total_volume, detail.amount_of_increase_color),
        ("交易信号", LABEL_COLOR),
        (detail.trading_signal or NO_SIGNAL, detail.trading_signal_color),
    ]
    return [
        DetailLine(
            text,
            color,
            (DATA_MARGIN_LEFT, TOP + (DATA_HEIGHT + DATA_SPACING) * row, BOX_WIDTH, DATA_HEIGHT),
        )
        for row, (text, color) in enumerate(entries)
    ]