from typing import Dict, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from product_transactions.core.config import DEFAULT_PER_PAGE, MAX_PAGE, MAX_PER_PAGE
from product_transactions.db.database import get_db
from product_transactions.schemas.transaction import (
    CombinedResponse,
    InitializeResponse,
    StatisticsResponse,
    TransactionListResponse,
)
from product_transactions.services import aggregations
from product_transactions.services.seeding import initialize_database
from product_transactions.services.transactions import list_transactions


router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/initialize", response_model=InitializeResponse)
def initialize(db: Session = Depends(get_db)):
    return initialize_database(db)


@router.get("/transactions", response_model=TransactionListResponse)
def transactions(
    month: Optional[str] = Query(None),
    search: str = Query(""),
    page: int = Query(1, ge=1, le=MAX_PAGE),
    per_page: int = Query(DEFAULT_PER_PAGE, ge=1, le=MAX_PER_PAGE, alias="perPage"),
    db: Session = Depends(get_db),
):
    return list_transactions(db, month=month, search=search, page=page, per_page=per_page)


@router.get("/statistics", response_model=StatisticsResponse)
def statistics(month: Optional[str] = Query(None), db: Session = Depends(get_db)):
    return aggregations.statistics(db, month)


# chart payloads are plain label -> count objects, key order preserved
@router.get("/bar-chart", response_model=Dict[str, int])
def bar_chart(month: Optional[str] = Query(None), db: Session = Depends(get_db)):
    return aggregations.bar_chart(db, month)


@router.get("/pie-chart", response_model=Dict[str, int])
def pie_chart(month: Optional[str] = Query(None), db: Session = Depends(get_db)):
    return aggregations.pie_chart(db, month)


@router.get("/combined", response_model=CombinedResponse)
def combined(month: Optional[str] = Query(None), db: Session = Depends(get_db)):
    return aggregations.combined(db, month)
