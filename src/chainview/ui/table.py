"""
Column layout and cell text of the option table.

Pure functions: nothing here touches curses, so the table can be checked
without a terminal. The renderer only places the returned cells.
"""

from dataclasses import dataclass
from typing import List, Tuple

from chainview import labels
from chainview.chain import Expiration, Moneyness, OptionPair, Quote
from chainview.constants import (
    COLUMN_SPACING,
    GREEK_FORMAT,
    PRICE_FORMAT,
    STRIKE_COLUMN_WIDTH,
    SYMBOL_COLUMN_WIDTH,
    VALUE_COLUMN_WIDTH,
)

from . import theme as THEME


@dataclass(frozen=True)
class Column:
    title: str
    width: int
    color_pair: int
    bold: bool = False


@dataclass(frozen=True)
class Cell:
    text: str
    color_pair: int = THEME.REGULAR_ROW
    bold: bool = False


STRIKE_COLORS = {
    Moneyness.BELOW: THEME.STRIKE_BELOW,
    Moneyness.ABOVE: THEME.STRIKE_ABOVE,
    Moneyness.AT: THEME.STRIKE_AT,
}


def _quote_columns(symbol_title: str, show_greeks: bool) -> List[Column]:
    columns = [
        Column(symbol_title, SYMBOL_COLUMN_WIDTH, THEME.SYMBOL),
        Column(labels.HEADER_BID, VALUE_COLUMN_WIDTH, THEME.BID),
        Column(labels.HEADER_ASK, VALUE_COLUMN_WIDTH, THEME.ASK),
        Column(labels.HEADER_BID_SIZE, VALUE_COLUMN_WIDTH, THEME.BID),
        Column(labels.HEADER_ASK_SIZE, VALUE_COLUMN_WIDTH, THEME.ASK),
        Column(labels.HEADER_VOLUME, VALUE_COLUMN_WIDTH, THEME.VOLUME),
    ]
    if show_greeks:
        columns += [
            Column(labels.HEADER_DELTA, VALUE_COLUMN_WIDTH, THEME.GREEK),
            Column(labels.HEADER_GAMMA, VALUE_COLUMN_WIDTH, THEME.GREEK),
            Column(labels.HEADER_VEGA, VALUE_COLUMN_WIDTH, THEME.GREEK),
        ]
    return columns


def _quote_cells(quote: Quote, show_greeks: bool) -> List[Cell]:
    cells = [
        Cell(quote.symbol),
        Cell(PRICE_FORMAT.format(quote.bid)),
        Cell(PRICE_FORMAT.format(quote.ask)),
        Cell(str(quote.bid_size)),
        Cell(str(quote.ask_size)),
        Cell(str(quote.volume)),
    ]
    if show_greeks:
        cells += [
            Cell(GREEK_FORMAT.format(quote.greeks.delta)),
            Cell(GREEK_FORMAT.format(quote.greeks.gamma)),
            Cell(GREEK_FORMAT.format(quote.greeks.vega)),
        ]
    return cells


def build_columns(show_greeks: bool) -> List[Column]:
    """Call side, strike, put side."""
    return (
        _quote_columns(labels.HEADER_CALL_SYMBOL, show_greeks)
        + [Column(labels.HEADER_STRIKE, STRIKE_COLUMN_WIDTH, THEME.REGULAR_ROW, bold=True)]
        + _quote_columns(labels.HEADER_PUT_SYMBOL, show_greeks)
    )


def build_row(pair: OptionPair, last_price: float, show_greeks: bool) -> List[Cell]:
    strike = Cell(PRICE_FORMAT.format(pair.strike), STRIKE_COLORS[pair.moneyness(last_price)], bold=True)
    return _quote_cells(pair.call, show_greeks) + [strike] + _quote_cells(pair.put, show_greeks)


def build_table(expiration: Expiration, last_price: float, show_greeks: bool) -> Tuple[List[Column], List[List[Cell]]]:
    columns = build_columns(show_greeks)
    rows = [build_row(pair, last_price, show_greeks) for pair in expiration.options]
    return columns, rows


def column_offsets(columns: List[Column], spacing: int = COLUMN_SPACING) -> List[int]:
    """x offset of every column relative to the table's left edge."""
    offsets = []
    x = 0
    for column in columns:
        offsets.append(x)
        x += column.width + spacing
    return offsets
