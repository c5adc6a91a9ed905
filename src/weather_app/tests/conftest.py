import pytest

from weather_app.history.storage import MemoryStorage
from weather_app.history.store import SearchHistory
from weather_app.search.view import MemoryView
from weather_app.tests.test_data import dummy_forecast_payload


@pytest.fixture
def forecast_payload():
    return dummy_forecast_payload()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def history(storage):
    return SearchHistory(storage)


@pytest.fixture
def view():
    return MemoryView()
