import pytest

from core import demo
from core.demo import (
    CORAL_TYPES,
    FISH_SPECIES,
    HISTORY_MONTHS,
    INVERTEBRATES,
    analyze_reef_media_demo,
    demo_seed,
    generate_demo_analysis,
    generate_historical_data,
)
from core.models import TRENDS
from core.reef_data import REEF_LOCATIONS, get_reef


def test_seed_is_stable_for_same_upload():
    assert demo_seed(b"reef-bytes", "dive.mp4") == demo_seed(b"reef-bytes", "dive.mp4")


def test_seed_depends_on_name_and_content():
    base = demo_seed(b"reef-bytes", "dive.mp4")
    assert demo_seed(b"reef-bytes", "other.mp4") != base
    assert demo_seed(b"other-bytes", "dive.mp4") != base


def test_seed_fits_in_32_bits():
    assert 0 <= demo_seed(b"x" * 1000, "a.jpg") < 2 ** 32


def test_same_seed_gives_identical_analysis():
    first = generate_demo_analysis(1234, now="2026-01-01T00:00:00Z")
    second = generate_demo_analysis(1234, now="2026-01-01T00:00:00Z")
    assert first.to_dict() == second.to_dict()


@pytest.mark.parametrize("seed", [0, 1, 42, 987654321, 2 ** 32 - 1])
def test_demo_analysis_ranges(seed):
    result = generate_demo_analysis(seed)

    assert 45 <= result.health_score <= 94
    assert 50 <= result.biodiversity_score <= 94
    assert result.trend in TRENDS
    assert result.source == "demo"
    assert result.is_demo

    fish = [s for s in result.species if s.category == "fish"]
    coral = [s for s in result.species if s.category == "coral"]
    inverts = [s for s in result.species if s.category == "invertebrate"]

    assert 4 <= len(fish) <= 6
    assert 2 <= len(coral) <= 3
    assert 1 <= len(inverts) <= 2
    assert all(10 <= s.count < 160 and s.name in FISH_SPECIES for s in fish)
    assert all(20 <= s.count < 220 and s.name in CORAL_TYPES for s in coral)
    assert all(5 <= s.count < 85 and s.name in INVERTEBRATES for s in inverts)

    # No duplicate names within a result
    names = [s.name for s in result.species]
    assert len(names) == len(set(names))

    assert result.total_fish_count == sum(s.count for s in fish)
    assert result.summary


def test_demo_uses_supplied_timestamp():
    assert generate_demo_analysis(7, now="2026-01-31T08:00:00Z").timestamp == "2026-01-31T08:00:00Z"


def test_media_demo_matches_seeded_generator():
    data = b"\x00\x01underwater"
    result = analyze_reef_media_demo(data, "reef.jpg", delay=0)
    expected = generate_demo_analysis(demo_seed(data, "reef.jpg"), now=result.timestamp)
    assert result.to_dict() == expected.to_dict()


def test_media_demo_skips_sleep_without_delay(monkeypatch):
    def fail(_seconds):
        raise AssertionError("sleep should not be called")

    monkeypatch.setattr(demo.time, "sleep", fail)
    analyze_reef_media_demo(b"data", "a.png", delay=0)


def test_media_demo_sleeps_for_delay(monkeypatch):
    calls = []
    monkeypatch.setattr(demo.time, "sleep", calls.append)
    analyze_reef_media_demo(b"data", "a.png", delay=1.5)
    assert calls == [1.5]


def test_historical_series_shape_and_bounds():
    for reef in REEF_LOCATIONS:
        points = generate_historical_data(reef)
        assert [p.month for p in points] == HISTORY_MONTHS
        for index, point in enumerate(points):
            assert 20 <= point.health_score <= 100
            assert 30 <= point.biodiversity <= 100
            assert 24 + index * 0.3 <= point.temperature <= 28 + index * 0.3


def test_historical_series_is_stable_per_reef():
    reef = get_reef("palau")
    first = [p.to_dict() for p in generate_historical_data(reef)]
    second = [p.to_dict() for p in generate_historical_data(reef)]
    assert first == second


def test_historical_series_differs_between_reefs():
    a = [p.health_score for p in generate_historical_data(get_reef("raja-ampat"))]
    b = [p.health_score for p in generate_historical_data(get_reef("florida-keys"))]
    assert a != b
