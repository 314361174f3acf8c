import pytest

from scopeval.builtins import register
from scopeval.contextual import core_environment, reset_core_environment
from scopeval.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded and no prelude."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def scope():
    """A per-call style frame over the shared, frozen core environment."""
    return Environment(outer=core_environment())


@pytest.fixture
def fresh_core():
    """Rebuild the core environment around a test that changes configuration."""
    reset_core_environment()
    yield
    reset_core_environment()
