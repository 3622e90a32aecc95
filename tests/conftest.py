"""Pytest fixtures for testing"""

import os

# Keep the module-level engine off PostgreSQL during tests
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_ledger.db")

import pytest
from datetime import datetime, timedelta, timezone
from typing import Callable, Generator
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from ledger_gateway.api.main import create_app
from ledger_gateway.infrastructure.database.models import Base
from ledger_gateway.infrastructure.database.seed import seed_customers
from ledger_gateway.infrastructure.database.session import build_engine, get_db


@pytest.fixture
def engine(tmp_path) -> Generator[Engine, None, None]:
    """Fresh SQLite file database per test"""
    engine = build_engine(f"sqlite:///{tmp_path / 'ledger.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """Create test session with the five seeded customers"""
    db = session_factory()
    seed_customers(db, customers=[
        (1, "o barato sai caro", 1000),
        (2, "zan corp ltda", 80000),
        (3, "les cruders", 1000000),
        (4, "padaria joia de cocaia", 10000000),
        (5, "kid mais", 500000),
    ])
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def ticking_clock() -> Callable[[], datetime]:
    """Clock advancing one second per call, so created_at ordering is deterministic"""
    current = [datetime(2024, 2, 1, 12, 0, tzinfo=timezone.utc)]

    def now() -> datetime:
        current[0] += timedelta(seconds=1)
        return current[0]

    return now
