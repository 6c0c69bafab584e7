import pytest

from pagewise import disable_tracing


@pytest.fixture(autouse=True)
def reset_tracing():
    """Reset observability state between tests."""
    yield
    disable_tracing()
