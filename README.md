# klinechart

This package provides data models and chart geometry for candlestick (K-line) market data. It also defines the interfaces that a bar-by-bar backtest is built on.

The package has no runtime dependencies and draws nothing itself. It works out *what* a chart should show: bar shapes, axis ticks, crosshair lines, detail box text and parameter bar fields. Any toolkit can then render the result.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `klinechart.kline`

- `KLine` is one bar: `update_time`, `open_price`, `high_price`, `low_price`, `close_price`, `volume` and `instrument_id`.
- `Tick` is one tick: `trading_date`, `update_time`, `update_millisec`, `last_price`, `volume`, `open_interest`, `action_date` and `instrument_id`.
- `MarketDataType` enumerates `TICK_DATA` and `BAR_DATA`.

Text fields have length limits, and an over-long value raises `ValueError`:

- `KLine.update_time`: 19 characters.
- The four date and time fields of `Tick`: 8 characters each.
- `instrument_id` on either record: 30 characters.

### `klinechart.events`

- `EventType` has three members: `BAR`, `TICK` and `TIMER`.
- `Event(type, data)` is a frozen record. The `data` must match the type:
  - a `KLine` for `BAR`;
  - a `Tick` for `TICK`;
  - an `int` period for `TIMER`.

  Any other `data` raises `TypeError`.
- `BlockingQueue` is a thread-safe FIFO.
  - `put(item)` appends an item and wakes one waiting taker.
  - `take()` blocks until an item is available, then returns the oldest one.
  - `len()` gives the number of queued items.

### `klinechart.trading`

This module holds abstract base classes to subclass.

- `TradeGateway` declares the order methods:
  - `send_order(instrument_id, price, volume, buy_sell, open_close, price_type)`, which returns an order id;
  - `cancel_order(order_id)`;
  - `open_long`, `open_short`, `close_long` and `close_short`;
  - `close_short_and_open_long` and `close_long_and_open_short`.
- `Strategy` declares the callbacks and descriptors:
  - `init(gateway)`;
  - `on_tick`, `on_bar`, `on_trade` and `on_order`;
  - `name()` and `instrument_type()`.
- `BacktestingDriver` declares `test()` and `load_kline(instrument_id, path)`.
- `split(text, sep)` splits a line at a single separator character. Any other separator raises `ValueError`.

### `klinechart.volume`

`VolumeChart` lays out the volume pane over a sequence of `VolumeBar` values. A `VolumeBar` holds the open price, close price, total volume and optional 5- and 10-bar volume averages.

The chart covers the bars from `begin_day` up to, but not including, `end_day`. It has settable widget size, margins and number of horizontal grid lines. It offers these methods:

- `max_volume()`: the largest visible volume, in units of one hundred.
- `y_ticks()`: `(x, y, label)` positions of the volume axis.
- `line_width()`: the bar width. It is 80 % of the per-bar step and never less than 3.
- `bar_shapes()`: one `BarShape` per visible bar.
  - A falling bar (open above close) is a single thick line.
  - A rising bar is a one-pixel rectangle outline.
- `average_line(day)`: the polyline of the 5- or 10-bar average. Bars without a value are skipped. Any other `day` raises `ValueError`.
- `cross_lines(mouse_x, mouse_y, key_down, under_mouse)`: the crosshair lines.
  - With `key_down`, the vertical line snaps to the bar under the mouse.
  - Otherwise it follows the mouse and is hidden outside the grid.

### `klinechart.detail`

`Detail` holds the values and colours of the bar under the crosshair. `detail_lines(detail)` returns the box content as a list of `DetailLine(text, color, rect)` entries:

- the date first;
- then label and value pairs for the opening, highest, lowest and closing prices, each formatted to two decimals;
- then the total volume;
- then the trading signal, shown as "无" when it is empty.

`format_date(time)` keeps the first ten characters of a timestamp and removes the dashes, so `"2017-05-22 09:00"` becomes `"20170522"`.

### `klinechart.splitter`

`Signal` calls its handlers in the order they were connected. It offers `connect`, `disconnect` and `emit`. Disconnecting a handler that was never connected raises `ValueError`.

`MarketDataSplitter` relays input from child panes through four signals:

| Method | Signal it emits on |
| --- | --- |
| `child_key_press(event)` | `child_key_pressed` |
| `child_mouse_move(event)` | `child_mouse_moved` |
| `child_mouse_press(event)` | `child_mouse_pressed` |
| `child_mouse_release(event)` | `child_mouse_released` |

### `klinechart.menus`

`Menu` describes a one-line parameter bar made of `MenuField` inputs. Each field has a `FieldKind`: `EDIT`, `CHECK` or `CHOICE`.

- `values()` returns the current values by key.
- `set_value(key, text)` changes one value.
  - A check field takes a bool.
  - A choice field takes one of its choices.
  - An edit field takes text.
  - An unknown key raises `KeyError`.
- `bottom_line(grid_width)` gives the end points of the red line along the bottom of the bar.

Three builders create menus:

- `backtesting_menu(config)` builds the threshold backtest bar.
- `simple_ex_menu(config)` builds the add/reduce position bar, with a product choice.
- `instrument_summary()` builds the product summary bar.

The two backtest bars read their defaults from `config`, which may be a mapping or an object with attributes.

## Examples

```python
from klinechart.volume import VolumeBar, VolumeChart

chart = VolumeChart(bars=[VolumeBar(10, 9, 5000), VolumeBar(9, 11, 2500)])
assert chart.max_volume() == 50.0
assert [shape.falling for shape in chart.bar_shapes()] == [True, False]
```

```python
from klinechart.splitter import MarketDataSplitter

splitter = MarketDataSplitter()
seen = []
splitter.child_mouse_moved.connect(seen.append)
splitter.child_mouse_move((120, 40))
assert seen == [(120, 40)]
```

## What this package does not do

- **No drawing:** there is no window or drawing code and no command to start an application. Callers render the geometry and text themselves.
- **No backtest:** there is no concrete trade gateway, strategy or backtesting driver. `trading` defines only the interfaces.
- **No file reading:** no market data or backtest result files are read.