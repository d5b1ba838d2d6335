import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """CLI tests reconfigure structlog globally; undo that after each test."""
    yield
    structlog.reset_defaults()
