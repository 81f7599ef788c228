"""
Immutable in-memory representation of an options chain snapshot.

Entities are frozen pydantic models. Field names on the wire are camelCase;
unknown keys are ignored and every listed key is required. ``from_dict`` turns
a ``ValidationError`` into a ``ChainFormatError`` carrying the dotted path of the
first offending field.
"""

from enum import Enum
from typing import Annotated, Any, Tuple

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, ValidationError

from chainview.chain._errors import ChainFormatError


class Moneyness(Enum):
    BELOW = 'below'  # strike under the last trade price
    AT = 'at'
    ABOVE = 'above'


def _int_to_float(value: Any) -> Any:
    # JSON integers are valid prices; bools are left for StrictFloat to reject
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return float(value)
        except OverflowError as e:
            raise ValueError('number is too large') from e
    return value


Decimal = Annotated[StrictFloat, BeforeValidator(_int_to_float)]


class ChainModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, allow_inf_nan=False)


def error_path(loc: Tuple[Any, ...]) -> str:
    """``('expirations', 1, 'date')`` -> ``'expirations[1].date'``."""
    path = ''
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


class Greeks(ChainModel):
    delta: Decimal
    gamma: Decimal
    theta: Decimal  # carried, never displayed
    vega: Decimal
    rho: Decimal  # carried, never displayed


class Quote(ChainModel):
    """One side (call or put) of an option pair."""

    symbol: StrictStr
    bid: Decimal
    ask: Decimal
    bid_size: StrictInt = Field(alias='bidSize')
    ask_size: StrictInt = Field(alias='askSize')
    volume: StrictInt
    open_interest: StrictInt = Field(alias='openInterest')
    greeks: Greeks


class OptionPair(ChainModel):
    strike: Decimal
    call: Quote
    put: Quote

    def moneyness(self, last_price: float) -> Moneyness:
        if self.strike < last_price:
            return Moneyness.BELOW
        if self.strike > last_price:
            return Moneyness.ABOVE
        return Moneyness.AT


class Expiration(ChainModel):
    date: StrictStr
    options: Tuple[OptionPair, ...]

    @property
    def row_count(self) -> int:
        return len(self.options)


class OptionsChain(ChainModel):
    """
    A loaded snapshot. Expirations keep file order, which is also display order.
    """

    symbol: StrictStr
    last_price: Decimal = Field(alias='lastPrice')
    last_update: StrictStr = Field(alias='lastUpdate')
    expirations: Tuple[Expiration, ...]

    @classmethod
    def from_dict(cls, data: Any) -> 'OptionsChain':
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            first = e.errors()[0]
            raise ChainFormatError(error_path(first['loc']), first['msg']) from e

    @property
    def expiration_count(self) -> int:
        return len(self.expirations)
