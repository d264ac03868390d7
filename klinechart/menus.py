"""Top bars of the chart tabs: the backtesting parameter menus and the summary bar."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

BAR_HEIGHT = 20
CONTENT_MARGIN_LEFT = 50
BOTTOM_LINE_COLOR = "#FF0000"
TEXT_COLOR = "#FFFFFF"
PRODUCT_LABEL = "产品: "
RUN_BUTTON_LABEL = "运行回测"
DEFAULT_AVG_INTERVAL = 250
PRODUCTS = ("铁矿石", "焦炭", "螺纹钢")

Value = Union[str, bool]


class FieldKind(Enum):
    """What sort of input a menu field is."""

    EDIT = "edit"
    CHECK = "check"
    CHOICE = "choice"


@dataclass
class MenuField:
    """One input of a menu with the label shown before it."""

    key: str
    label: Optional[str]
    kind: FieldKind
    value: Value
    max_width: Optional[int] = None
    choices: Tuple[str, ...] = ()


@dataclass
class Menu:
    """A one-line bar of labelled inputs with a red line along its bottom."""

    title: str
    fields: List[MenuField] = field(default_factory=list)
    button: Optional[str] = None
    bar_height: int = BAR_HEIGHT
    title_rect: Optional[Tuple[int, int, int, int]] = None
    margin_left: int = 0
    margin_right: int = 0

    def _field(self, key: str) -> MenuField:
        for item in self.fields:
            if item.key == key:
                return item
        raise KeyError(key)

    def values(self) -> Dict[str, Value]:
        """Current value of every input by key."""
        return {item.key: item.value for item in self.fields}

    def set_value(self, key: str, text: Value) -> None:
        """Change the value of one input."""
        item = self._field(key)
        if item.kind is FieldKind.CHECK:
            if not isinstance(text, bool):
                raise TypeError(f"{key} takes a bool")
            item.value = text
        elif item.kind is FieldKind.CHOICE:
            if text not in item.choices:
                raise ValueError(f"{text!r} is not one of {item.choices}")
            item.value = text
        else:
            if not isinstance(text, str):
                raise TypeError(f"{key} takes text")
            item.value = text

    def bottom_line(self, grid_width: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """End points of the line drawn along the bottom of the bar."""
        y = self.bar_height - 1
        return (0, y), (grid_width + self.margin_left + self.margin_right, y)


def _number(value: Any) -> str:
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    return format(float(value), ".6g")


def _get(config: Any, name: str) -> Any:
    if isinstance(config, Mapping):
        return config[name]
    return getattr(config, name)


def _edit(key: str, label: Optional[str], value: Any, width: int) -> MenuField:
    return MenuField(key, label, FieldKind.EDIT, _number(value), width)


def backtesting_menu(config: Any) -> Menu:
    """Parameter bar of the threshold backtest, filled from the configuration."""
    width = 30
    fields = [
        MenuField(
            "enable_capital_adjustment",
            "调整: ",
            FieldKind.CHECK,
            bool(_get(config, "enable_capital_adjustment")),
        ),
        _edit("avg_interval", "   图中均线: ", DEFAULT_AVG_INTERVAL, 50),
        _edit("capital_period", "回测均线: ", _get(config, "capital_period"), width),
        _edit("base_lot", "基础单: ", _get(config, "base_lot"), width),
    ]
    for sign, label, level in (
        ("neg", "负值", 3),
        ("neg", "负值", 2),
        ("neg", "负值", 1),
        ("pos", "正值", 1),
        ("pos", "正值", 2),
        ("pos", "正值", 3),
        ("pos", "正值", 4),
        ("pos", "正值", 5),
    ):
        key = f"{sign}_threshold{level}"
        fields.append(_edit(key, f"{label}{level}(%%): ", _get(config, key), width))
        if level == 5:
            continue
        lot_key = f"{sign}_lot_threshold{level}"
        fields.append(_edit(lot_key, None, _get(config, lot_key), width))
    return Menu(PRODUCT_LABEL, fields, RUN_BUTTON_LABEL)


def simple_ex_menu(config: Any) -> Menu:
    """Parameter bar of the add/reduce backtest, filled from the configuration."""
    width = 50
    fields = [
        MenuField("product", None, FieldKind.CHOICE, PRODUCTS[0], None, PRODUCTS),
        _edit("avg_interval", "   图中均线: ", DEFAULT_AVG_INTERVAL, width),
    ]
    for key, label in (
        ("capital_period", "回测均线: "),
        ("base_lot", "基础单: "),
        ("tie_kuang_shi_n", "N: "),
        ("add_lot_diff_threshold1", "加仓偏离值: "),
        ("add_lot_backtrack_threshold1", "加仓回撤值: "),
        ("dec_lot_diff_threshold1", "中位减仓偏离值: "),
        ("dec_lot_diff_threshold2", "高位清仓偏离值: "),
    ):
        fields.append(_edit(key, label, _get(config, key), width))
    return Menu(PRODUCT_LABEL, fields, RUN_BUTTON_LABEL)


def instrument_summary() -> Menu:
    """Bar above the market data chart naming the product."""
    return Menu("产品", title_rect=(30, 2, 100, BAR_HEIGHT - 3))