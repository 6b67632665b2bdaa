# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Union

from scalecore.catalog.store import Unit

Number = Union[Decimal, int, float, str]

GRAMS_PER_KG = Decimal("1000")

# last cent digit -> cents added to the decile floor
SNAP_OFFSET_CENTS = {
    0: 0,
    1: 0,
    2: 0,
    3: 5,
    4: 5,
    5: 5,
    6: 5,
    7: 5,
    8: 10,
    9: 10,
}


def _dec(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def normalize_weight(value: Number, unit: Union[Unit, str]) -> Decimal:
    """Express a weight in kilograms."""
    qty = _dec(value)
    if Unit(unit) is Unit.G:
        return qty / GRAMS_PER_KG
    return qty


def normalize_price(price: Number, unit: Union[Unit, str]) -> Decimal:
    """Express a per-unit price as a per-kilogram price.

    Scales the opposite way to normalize_weight: a price per gram is
    multiplied by 1000, a weight in grams is divided by 1000.
    """
    amount = _dec(price)
    if Unit(unit) is Unit.G:
        return amount * GRAMS_PER_KG
    return amount


def precise_round(value: Number) -> Decimal:
    """Snap a currency amount onto the 5-cent grid.

    The amount is first rounded half-up to whole cents, then the last cent
    digit decides the snap:

    - 1, 2 drop to the decile below
    - 3, 4, 6, 7 go to the mid-decile (x5)
    - 8, 9 go up to the next decile
    - 0, 5 are left as they are

    Negative amounts use floor division: -1.23 sits on decile -1.30 with
    last digit 7, so it snaps to -1.25.
    """
    amount = _dec(value)
    with localcontext() as ctx:
        # whole cents plus two decimals must fit without rounding
        ctx.prec = max(ctx.prec, amount.adjusted() + 6)
        cents = int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
        decile, last_digit = divmod(cents, 10)
        snapped = decile * 10 + SNAP_OFFSET_CENTS[last_digit]
        return (Decimal(snapped) / 100).quantize(Decimal("0.01"))


def to_wire_number(value: Decimal) -> Union[int, float]:
    """JSON number for an amount: integral values stay integers (2350, not 2350.0)."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)
