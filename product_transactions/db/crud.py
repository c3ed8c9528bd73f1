# product_transactions/db/crud.py

import math
import re
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import or_, true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from product_transactions.core.errors import StoreUnavailable
from product_transactions.services.months import DateRange
from .models import Transaction


@dataclass(frozen=True)
class SearchFilter:
    text: str
    # None when the search text is not a number
    price: Optional[float] = None


@dataclass(frozen=True)
class TransactionFilter:
    date_range: DateRange
    search: Optional[SearchFilter] = None


# plain decimals with an optional exponent; float() alone also takes "1_000" and "inf"
_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_price(text: str) -> Optional[float]:
    if not _NUMBER.fullmatch(text.strip()):
        return None
    value = float(text)
    # "1e999" overflows to inf
    if not math.isfinite(value):
        return None
    return value


def build_filter(date_range: DateRange, search: Optional[str] = None) -> TransactionFilter:
    text = (search or "").strip()
    if not text:
        return TransactionFilter(date_range=date_range)
    return TransactionFilter(
        date_range=date_range,
        search=SearchFilter(text=text, price=parse_price(text)),
    )


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _criteria(filt: TransactionFilter) -> list:
    clauses = [
        Transaction.date_of_sale >= filt.date_range.start,
        Transaction.date_of_sale < filt.date_range.end,
    ]

    if filt.search is not None:
        pattern = f"%{_escape_like(filt.search.text)}%"
        if filt.search.price is not None:
            price_clause = Transaction.price == filt.search.price
        else:
            # non-numeric search: the price branch matches every row, so the
            # whole OR is satisfied and the search does not narrow anything
            price_clause = true()

        clauses.append(
            or_(
                Transaction.title.ilike(pattern, escape="\\"),
                Transaction.description.ilike(pattern, escape="\\"),
                price_clause,
            )
        )

    return clauses


@contextmanager
def store_errors(action: str):
    try:
        yield
    except SQLAlchemyError as e:
        raise StoreUnavailable(f"Failed to {action}", details=str(e)) from e


def find_transactions(db: Session, filt: TransactionFilter, skip: int = 0, limit: Optional[int] = None):
    q = (
        db.query(Transaction)
        .filter(*_criteria(filt))
        .order_by(Transaction.id.asc())
    )
    if skip:
        q = q.offset(skip)
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def count_transactions(db: Session, filt: TransactionFilter) -> int:
    return db.query(Transaction).filter(*_criteria(filt)).count()


def transactions_in_range(db: Session, date_range: DateRange):
    return find_transactions(db, TransactionFilter(date_range=date_range))


def replace_transactions(db: Session, records: list) -> int:
    """
    Delete every stored transaction and insert `records` (dicts of column
    attributes) in one transaction. Rolls back on failure.
    """
    try:
        db.query(Transaction).delete()
        db.add_all(Transaction(**r) for r in records)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    return len(records)
