import pytest

from tests.fakes import FakeLogger
from tests.settings import get_test_settings


@pytest.fixture
def logger() -> FakeLogger:
    return FakeLogger()


@pytest.fixture
def test_settings():
    return get_test_settings()
