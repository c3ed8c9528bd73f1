from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session

from product_transactions.db.crud import store_errors, transactions_in_range
from product_transactions.services.months import resolve_month
from product_transactions.services.transactions import require_month

# (label, inclusive upper bound); the last band is open-ended
PRICE_BUCKETS: List[Tuple[str, Optional[float]]] = [
    ("0-100", 100),
    ("101-200", 200),
    ("201-300", 300),
    ("301-400", 400),
    ("401-500", 500),
    ("501-600", 600),
    ("601-700", 700),
    ("701-800", 800),
    ("801-900", 900),
    ("901-above", None),
]


def price_bucket(price: float) -> str:
    for label, upper in PRICE_BUCKETS:
        if upper is None or price <= upper:
            return label
    raise AssertionError("unreachable: last bucket is open-ended")


def compute_statistics(rows: Iterable) -> dict:
    total_sale_amount = 0.0
    sold = 0
    not_sold = 0
    for row in rows:
        if row.sold:
            total_sale_amount += row.price
            sold += 1
        else:
            not_sold += 1

    return {
        "totalSaleAmount": round(total_sale_amount, 2),
        "totalSoldItems": sold,
        "totalNotSoldItems": not_sold,
    }


def compute_price_buckets(rows: Iterable) -> Dict[str, int]:
    counts = {label: 0 for label, _ in PRICE_BUCKETS}
    for row in rows:
        counts[price_bucket(row.price)] += 1
    return counts


def compute_category_counts(rows: Iterable) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for row in rows:
        counts[row.category] = counts.get(row.category, 0) + 1
    return counts


def _month_rows(db: Session, month: Optional[str]) -> list:
    date_range = resolve_month(require_month(month))
    with store_errors("load transactions for month"):
        return transactions_in_range(db, date_range)


def statistics(db: Session, month: Optional[str]) -> dict:
    return compute_statistics(_month_rows(db, month))


def bar_chart(db: Session, month: Optional[str]) -> Dict[str, int]:
    return compute_price_buckets(_month_rows(db, month))


def pie_chart(db: Session, month: Optional[str]) -> Dict[str, int]:
    return compute_category_counts(_month_rows(db, month))


def combined(db: Session, month: Optional[str]) -> dict:
    """Statistics, price buckets and category counts from a single read."""
    rows = _month_rows(db, month)
    return {
        "statistics": compute_statistics(rows),
        "barChart": compute_price_buckets(rows),
        "pieChart": compute_category_counts(rows),
    }
