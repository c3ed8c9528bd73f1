import itertools
import os

os.environ.setdefault("POSTGRES_DSN", "sqlite://")

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from product_transactions.db.database import Base, get_db
from product_transactions.db.models import Transaction
from product_transactions.main import app


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def add_transactions(db_session):
    """Insert rows with sensible defaults; ids increase in call order."""
    ids = itertools.count(1)

    def _add(*overrides):
        rows = []
        for override in overrides:
            values = {
                "id": next(ids),
                "title": "Item",
                "description": "",
                "price": 10.0,
                "category": "misc",
                "image": None,
                "sold": False,
                "date_of_sale": datetime(2022, 1, 15, 12, 0),
            }
            values.update(override)
            rows.append(Transaction(**values))
        db_session.add_all(rows)
        db_session.commit()
        return rows

    return _add
