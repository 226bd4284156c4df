import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    # the CLI callback reconfigures structlog globally
    yield
    structlog.reset_defaults()
