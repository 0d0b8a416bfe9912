import pytest
from sqlalchemy.pool import StaticPool

from gardens.db import make_engine
from gardens.repository import GardenRepository


@pytest.fixture(scope="function")
def repo():
    """Fresh in-memory SQLite repository per test, schema already created."""
    engine = make_engine("sqlite:///:memory:", poolclass=StaticPool)
    repository = GardenRepository(engine)
    repository.init_schema()
    try:
        yield repository
    finally:
        repository.dispose()
