import os

# Keep the module-level engine off PostgreSQL; every test binds its own SQLite session.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.models import Base
from app.models.provider import Provider

SAMPLE_PROVIDERS = [
    ("1000000001", "John", "Doe", "Cardiology", "Chicago", "IL", "60601"),
    ("1000000002", "Jane", "Roe", "Cardiology", "Chicago", "IL", "60602"),
    ("1000000003", "Amir", "Khan", "Cardiology", "Houston", "TX", "77001"),
    ("1000000004", "Lena", "Park", "Dermatology", "Chicago", "IL", "60603"),
    ("1000000005", "Omar", "Ali", "Pediatrics", "Boston", "MA", "02108"),
    ("1000000006", "Sara", "Lin", "Ophthalmology", "Seattle", "WA", "98101"),
    ("1000000007", "Raj", "Patel", "Orthopedic Surgery", "Austin", "TX", "73301"),
    ("1000000008", "Mia", "Chen", "Neurology", "Denver", "CO", "80201"),
    ("1000000009", "Eli", "Stone", "Dermatology", "North Chicago", "IL", "60064"),
    ("1000000010", "Ava", "Cruz", "Pediatrics", "Chicago", "IL", "60604"),
]


@pytest.fixture
def sample_providers():
    keys = ("npi", "first_name", "last_name", "specialty", "city", "state", "zip")
    return [dict(zip(keys, row)) for row in SAMPLE_PROVIDERS]


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine, sample_providers):
    TestingSession = sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)
    session = TestingSession()
    session.add_all([Provider(**row) for row in sample_providers])
    session.commit()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    from fastapi.testclient import TestClient

    from app.db.session import get_db
    from app.main import app

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
