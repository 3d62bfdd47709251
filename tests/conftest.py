import pytest

from drift.builtins import standard_environment
from drift.interpreter import Interpreter


@pytest.fixture
def interp():
    """Fresh interpreter with the standard environment and language keywords."""
    return Interpreter()


@pytest.fixture
def env():
    """Fresh standard environment."""
    return standard_environment()
