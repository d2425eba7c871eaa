"""
Shared test fixtures: SQLite test database, test client, calculation inputs.
"""

import os
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Point settings at the test database before importing app modules
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["DEFAULT_LENGTH_UNIT"] = "cm"
os.environ["DEFAULT_CURRENCY"] = "GBP"

from backend.database import Base, get_db
from backend.main import app
from backend.schemas import FabricSpec, MeasurementInput, TemplateSpec


TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def db():
    """Direct database session for test setup/assertions."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def measurements():
    """200cm rail, 250cm drop, no pooling."""
    return MeasurementInput(rail_width=200, drop=250, pooling_amount=0)


@pytest.fixture
def template():
    """Double fullness pair, 8cm header and bottom hems, nothing else."""
    return TemplateSpec(
        fullness_ratio=2.0,
        header_allowance=8,
        bottom_hem=8,
        side_hems=0,
        seam_hems=0,
        return_left=0,
        return_right=0,
        waste_percent=0,
        curtain_type="pair",
    )


@pytest.fixture
def fabric():
    """Standard 137cm roll at 20/m."""
    return FabricSpec(fabric_width_cm=137, price_per_meter=20)
