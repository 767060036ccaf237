from datetime import datetime, timedelta, timezone

import pytest

from conftest import NEW_YORK, SCENARIO_TIME
from skydome.compute import build_frame, frame_for, run, sky_scene
from skydome.constellations import DEFAULT_CONSTELLATIONS
from skydome.models import QueryInput
from skydome.observer import InvalidInputError, LocationNotFoundError
from skydome.projection import SurfaceConfigError
from skydome.settings import Settings


def test_build_frame_is_memoized():
    first = build_frame(SCENARIO_TIME, NEW_YORK, 200)
    assert build_frame(SCENARIO_TIME, NEW_YORK, 200) is first
    assert len(first.bodies) == 210
    assert len(first.constellations) == len(DEFAULT_CONSTELLATIONS)
    assert first.time == SCENARIO_TIME
    assert first.location == NEW_YORK


def test_frame_is_internally_consistent():
    frame = build_frame(SCENARIO_TIME, NEW_YORK, 200)
    bodies = set(frame.bodies)
    for constellation in frame.constellations:
        assert set(constellation.members) <= bodies
        if constellation.lines:
            assert constellation.center.altitude > 0
        else:
            assert constellation.center.altitude < 0


def test_frame_for_uses_settings():
    settings = Settings(body_count=20, night_start=3, night_end=3)
    frame = frame_for(SCENARIO_TIME, NEW_YORK, settings)
    assert len(frame.bodies) == 30
    assert all(b.altitude <= 90 * 0.7 - 20.0 for b in frame.bodies[:20])


def test_sky_scene_is_memoized():
    scene = sky_scene(SCENARIO_TIME, NEW_YORK, 800.0, 500.0, 30.0)
    assert sky_scene(SCENARIO_TIME, NEW_YORK, 800.0, 500.0, 30.0) is scene
    assert (scene.width, scene.height, scene.radius) == (800.0, 500.0, 220.0)


def test_run():
    settings = Settings(surface_width=600.0, surface_height=600.0, padding=20.0)
    scene = run(QueryInput(place="New York", when="2024-06-21 22:00"), settings)
    assert scene.radius == 280.0
    assert scene == sky_scene(SCENARIO_TIME, NEW_YORK, 600.0, 600.0, 20.0, settings)


def test_run_errors():
    with pytest.raises(LocationNotFoundError):
        run(QueryInput(place="Atlantis", when="2024-06-21 22:00"))
    with pytest.raises(InvalidInputError):
        run(QueryInput(place="New York", when="not a date"))
    with pytest.raises(SurfaceConfigError):
        run(
            QueryInput(place="New York", when="2024-06-21 22:00"),
            Settings(surface_width=40.0, surface_height=40.0, padding=30.0),
        )


def test_build_frame_echoes_caller_zone():
    new_york_evening = datetime(2024, 6, 21, 22, 0, tzinfo=timezone(timedelta(hours=-4)))
    same_instant_utc = datetime(2024, 6, 22, 2, 0, tzinfo=timezone.utc)
    evening = build_frame(new_york_evening, NEW_YORK, 50)
    utc = build_frame(same_instant_utc, NEW_YORK, 50)
    assert evening.time.utcoffset() == timedelta(hours=-4)
    assert utc.time.tzinfo is timezone.utc
    assert evening.bodies == utc.bodies
