import pytest

from chubflix import registry


@pytest.fixture(autouse=True)
def clean_registry():
    """Start every test with no registered stages."""
    registry.clear()
    yield
    registry.clear()
