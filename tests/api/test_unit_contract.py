# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

from decimal import Decimal

import pytest

from scalecore.api.unit_contract import (
    SNAP_OFFSET_CENTS,
    normalize_price,
    normalize_weight,
    precise_round,
    to_wire_number,
)
from scalecore.catalog.store import Unit

pytestmark = pytest.mark.api


def test_normalize_weight_kg_unchanged_and_grams_divided():
    assert normalize_weight(Decimal("0.15"), Unit.KG) == Decimal("0.15")
    assert normalize_weight("400", "g") == Decimal("0.4")
    assert normalize_weight(1, Unit.G) == Decimal("0.001")


def test_normalize_price_kg_unchanged_and_grams_multiplied():
    assert normalize_price("1.45", "kg") == Decimal("1.45")
    assert normalize_price("2.35", Unit.G) == Decimal("2350")
    # float input goes through str, so no binary noise
    assert normalize_price(1.78, "g") == Decimal("1780")


def test_normalizers_reject_unknown_unit():
    with pytest.raises(ValueError):
        normalize_weight("1", "lb")
    with pytest.raises(ValueError):
        normalize_price("1", "KG")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1.00", "1.00"),
        ("1.01", "1.00"),
        ("1.02", "1.00"),
        ("1.03", "1.05"),
        ("1.04", "1.05"),
        ("1.05", "1.05"),
        ("1.06", "1.05"),
        ("1.07", "1.05"),
        ("1.08", "1.10"),
        ("1.09", "1.10"),
    ],
)
def test_precise_round_last_digit_table(value, expected):
    assert precise_round(value) == Decimal(expected)


def test_snap_table_matches_decile_rule_for_every_digit():
    assert sorted(SNAP_OFFSET_CENTS) == list(range(10))
    for cents in range(1230, 1240):
        decile, digit = divmod(cents, 10)
        if digit in (1, 2):
            expected = decile * 10
        elif digit in (3, 4, 6, 7):
            expected = decile * 10 + 5
        elif digit in (8, 9):
            expected = (decile + 1) * 10
        else:
            expected = cents
        assert precise_round(Decimal(cents) / 100) == Decimal(expected) / 100


def test_precise_round_half_up_on_sub_cent_values():
    # 100.5 cents -> 101 -> last digit 1 -> 100
    assert precise_round("1.005") == Decimal("1.00")
    # 12.5 cents -> 13 -> last digit 3 -> 15
    assert precise_round(0.125) == Decimal("0.15")
    assert precise_round("805.64") == Decimal("805.65")


def test_precise_round_carries_into_next_whole_unit():
    assert precise_round("9.99") == Decimal("10.00")
    assert precise_round("0.08") == Decimal("0.10")


def test_precise_round_is_idempotent_and_on_five_cent_grid():
    step = Decimal("0.0037")
    value = Decimal("0")
    for _ in range(3000):
        once = precise_round(value)
        assert precise_round(once) == once
        assert once % Decimal("0.05") == 0
        value += step


def test_precise_round_amounts_beyond_default_decimal_precision():
    assert precise_round(Decimal("1.45E+29")) == Decimal("1.45E+29")
    assert precise_round("1" + "0" * 30 + ".03") == Decimal("1" + "0" * 30 + ".05")


@pytest.mark.parametrize(
    "value, expected",
    [
        # floor decile: -1.23 -> decile -1.30, last digit 7
        ("-1.23", "-1.25"),
        ("-1.45", "-1.45"),
        ("-1.01", "-1.00"),
        ("-1.08", "-1.10"),
    ],
)
def test_precise_round_negative_amounts_snap_from_floor_decile(value, expected):
    assert precise_round(value) == Decimal(expected)


def test_to_wire_number_keeps_integral_amounts_integer():
    assert to_wire_number(Decimal("2350.00")) == 2350
    assert isinstance(to_wire_number(Decimal("2350.00")), int)
    assert isinstance(to_wire_number(Decimal("1.45")), float)
