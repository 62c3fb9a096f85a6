import pytest

from hexlabel.model.models import Bounds, Location


@pytest.fixture
def paris():
    return Location(id="paris", name="Paris", lat=48.8566, lng=2.3522)


@pytest.fixture
def barcelona():
    return Location(id="bcn", name="Barcelona", lat=41.3874, lng=2.1686)


@pytest.fixture
def france_spain_bounds():
    return Bounds(north=50.0, south=40.5, east=4.0, west=0.5)


@pytest.fixture
def two_colors():
    return ["#3B82F6", "#8B5CF6"]
