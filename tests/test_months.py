from datetime import datetime

import pytest

from product_transactions.core.errors import InvalidInput
from product_transactions.services.months import MONTH_NAMES, DateRange, resolve_month


@pytest.mark.parametrize("name", MONTH_NAMES)
def test_every_month_spans_exactly_one_calendar_month(name):
    window = resolve_month(name)

    assert window.start < window.end
    assert window.start.day == 1 and window.end.day == 1
    assert window.start.year == 2022
    assert (window.end.year * 12 + window.end.month) - (window.start.year * 12 + window.start.month) == 1


def test_month_name_is_case_insensitive_and_trimmed():
    assert resolve_month("  mArCh ") == resolve_month("March")


def test_december_rolls_into_next_year():
    window = resolve_month("December")

    assert window.start == datetime(2022, 12, 1)
    assert window.end == datetime(2023, 1, 1)


def test_explicit_year_overrides_reference_year():
    window = resolve_month("February", year=2024)

    assert window == DateRange(start=datetime(2024, 2, 1), end=datetime(2024, 3, 1))


@pytest.mark.parametrize("name", ["Jan", "Janvier", "", "13", "Sept"])
def test_unknown_month_is_invalid_input(name):
    with pytest.raises(InvalidInput):
        resolve_month(name)


def test_window_is_half_open():
    window = resolve_month("January")

    assert window.start <= datetime(2022, 1, 1) < window.end
    assert window.start <= datetime(2022, 1, 31, 23, 59, 59) < window.end
    assert not datetime(2022, 2, 1) < window.end
    assert not window.start <= datetime(2021, 1, 15)
