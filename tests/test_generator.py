from datetime import datetime, timezone

import pytest

from skydome.constellations import assemble
from skydome.generator import (
    REFERENCE_STARS,
    NightWindow,
    epoch_ms,
    frame_seed,
    generate,
)
from skydome.models import ConstellationDef, Location
from skydome.visibility import visible_bodies


def test_generate_is_deterministic(new_york, scenario_time):
    first = generate(scenario_time, new_york, 200)
    second = generate(scenario_time, new_york, 200)
    assert first == second


def test_generate_changes_with_inputs(new_york, scenario_time):
    base = generate(scenario_time, new_york, 50)
    later = generate(datetime(2024, 6, 21, 22, 0, 1), new_york, 50)
    elsewhere = generate(scenario_time, Location(40.7128, -74.0, "Elsewhere"), 50)
    assert base[:50] != later[:50]
    assert base[:50] != elsewhere[:50]


def test_ordering_and_ids(new_york, scenario_time):
    bodies = generate(scenario_time, new_york, 25)
    assert len(bodies) == 25 + len(REFERENCE_STARS)
    assert [b.id for b in bodies[:25]] == [f"star-{i}" for i in range(25)]
    assert [b.id for b in bodies[25:]] == [f"named-star-{i}" for i in range(len(REFERENCE_STARS))]
    assert all(b.name is None for b in bodies[:25])


def test_body_draws_depend_only_on_index(new_york, scenario_time):
    short = generate(scenario_time, new_york, 50)
    long = generate(scenario_time, new_york, 200)
    assert short[:50] == long[:50]


def test_reference_stars(new_york, scenario_time):
    named = generate(scenario_time, new_york, 0)
    assert [(b.name, b.magnitude) for b in named] == list(REFERENCE_STARS)
    for i, body in enumerate(named):
        assert body.azimuth == pytest.approx(i * 36.0)
        assert 30.0 <= body.altitude < 80.0


def test_night_ranges(new_york, scenario_time):
    bodies = generate(scenario_time, new_york, 200)[:200]
    for body in bodies:
        assert 0.0 <= body.altitude <= 90.0
        assert 0.0 <= body.azimuth < 360.0
        assert 1.0 <= body.magnitude < 6.0


def test_daytime_compression(new_york):
    noon = datetime(2024, 6, 21, 12, 0)
    bodies = generate(noon, new_york, 200)[:200]
    for body in bodies:
        assert -20.0 <= body.altitude <= 90 * 0.7 - 20.0
    assert len(visible_bodies(bodies)) < 200


def test_aware_and_naive_times_agree(new_york, scenario_time):
    # 22:00 EDT is 02:00 UTC the next day
    aware = datetime(2024, 6, 22, 2, 0, tzinfo=timezone.utc)
    assert epoch_ms(aware, new_york) == epoch_ms(scenario_time, new_york)
    assert generate(aware, new_york, 30) == generate(scenario_time, new_york, 30)


def test_frame_seed_combines_time_and_location(new_york, scenario_time):
    expected = epoch_ms(scenario_time, new_york) + 40.7128 * 100 - 74.006
    assert frame_seed(scenario_time, new_york) == pytest.approx(expected)


@pytest.mark.parametrize("hour", [18, 21, 23, 0, 3, 6])
def test_night_window_wraps_midnight(hour):
    assert NightWindow().contains(hour)


@pytest.mark.parametrize("hour", [7, 12, 17])
def test_night_window_excludes_day(hour):
    assert not NightWindow().contains(hour)


def test_night_window_without_wrap():
    window = NightWindow(start_hour=1, end_hour=4)
    assert window.contains(1)
    assert window.contains(4)
    assert not window.contains(0)
    assert not window.contains(5)


def test_custom_night_window_compresses(new_york, scenario_time):
    never_night = NightWindow(start_hour=3, end_hour=3)
    bodies = generate(scenario_time, new_york, 100, never_night)[:100]
    assert max(b.altitude for b in bodies) <= 90 * 0.7 - 20.0


def test_negative_count_rejected(new_york, scenario_time):
    with pytest.raises(ValueError):
        generate(scenario_time, new_york, -1)


def test_non_finite_location_rejected(scenario_time):
    with pytest.raises(ValueError):
        generate(scenario_time, Location(float("nan"), 0.0), 10)


def test_new_york_scenario(new_york, scenario_time):
    bodies = generate(scenario_time, new_york, 200)

    named = {b.name: b.magnitude for b in bodies if b.name}
    assert named == dict(REFERENCE_STARS)

    procedural = bodies[:200]
    uncompressed = [b for b in procedural if b.altitude >= 0.0]
    assert len(uncompressed) >= 150

    (orion,) = assemble(bodies, [ConstellationDef(name="Orion", star_count=7, start_index=10)])
    if len(visible_bodies(bodies)) >= 17:
        assert len(orion.lines) == 6
    else:
        assert orion.lines == ()
        assert orion.center.altitude < 0


def test_generate_localizes_once(monkeypatch, new_york, scenario_time):
    import skydome.generator as generator

    original = generator.local_time
    calls = []

    def counting_local_time(time, location):
        calls.append(time)
        return original(time, location)

    baseline = generate(scenario_time, new_york, 10)
    monkeypatch.setattr(generator, "local_time", counting_local_time)
    assert generate(scenario_time, new_york, 10) == baseline
    assert len(calls) == 1
