import calendar
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from product_transactions.core.config import REFERENCE_YEAR
from product_transactions.core.errors import InvalidInput

MONTH_NAMES = [name.lower() for name in calendar.month_name[1:]]


@dataclass(frozen=True)
class DateRange:
    """Half-open window: ``start <= dateOfSale < end``."""

    start: datetime
    end: datetime


def resolve_month(month: str, year: Optional[int] = None) -> DateRange:
    """
    Map a full English month name (any case) to its window in the reference year.
    December ends on January 1st of the following year.
    """
    if year is None:
        year = REFERENCE_YEAR

    key = (month or "").strip().lower()
    if key not in MONTH_NAMES:
        raise InvalidInput("Invalid month name", details=month)

    index = MONTH_NAMES.index(key)
    start = datetime(year, index + 1, 1)
    if index == 11:
        end = datetime(year + 1, 1, 1)
    else:
        end = datetime(year, index + 2, 1)
    return DateRange(start=start, end=end)
