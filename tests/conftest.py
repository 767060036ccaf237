from datetime import datetime

import pytest

from skydome.models import CelestialBody, Location

NEW_YORK = Location(latitude=40.7128, longitude=-74.006, name="New York, USA")
SCENARIO_TIME = datetime(2024, 6, 21, 22, 0, 0)


def make_body(
    id: str, altitude: float, azimuth: float = 0.0, magnitude: float = 3.0, name: str | None = None
) -> CelestialBody:
    return CelestialBody(id=id, magnitude=magnitude, altitude=altitude, azimuth=azimuth, name=name)


@pytest.fixture
def new_york() -> Location:
    return NEW_YORK


@pytest.fixture
def scenario_time() -> datetime:
    return SCENARIO_TIME
