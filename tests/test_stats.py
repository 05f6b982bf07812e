import pytest

from core.models import HistoricalPoint, ReefLocation, SpeciesCount
from core.reef_data import ALERT_DETAILS, REEF_LOCATIONS
from core.stats import (
    alert_counts,
    average_health,
    filter_alerts,
    health_distribution,
    historical_frame,
    historical_insights,
    historical_summary,
    species_summary,
    total_species,
)


def make_reef(score, species=(), reef_id="r"):
    return ReefLocation(
        id=reef_id, name=f"Reef {reef_id}", region="Test Sea", lat=0.0, lng=0.0,
        health_score=score, trend="stable", last_updated="2026-01-01T00:00:00Z",
        species=[SpeciesCount(name, 1) for name in species], biodiversity_score=60,
    )


def points(*scores, temperatures=None):
    temperatures = temperatures or [25.0] * len(scores)
    return [
        HistoricalPoint(month=f"M{i}", health_score=s, biodiversity=60.0, temperature=t)
        for i, (s, t) in enumerate(zip(scores, temperatures))
    ]


# --- Reef aggregates ---

def test_health_distribution_band_edges():
    reefs = [make_reef(s) for s in (100, 75, 74, 50, 49, 0)]
    assert health_distribution(reefs) == {"healthy": 2, "at_risk": 2, "critical": 2}


def test_builtin_reef_distribution():
    assert health_distribution(REEF_LOCATIONS) == {"healthy": 4, "at_risk": 4, "critical": 2}
    assert average_health(REEF_LOCATIONS) == 68


def test_average_health_empty():
    assert average_health([]) == 0


def test_average_health_rounds():
    assert average_health([make_reef(70), make_reef(71), make_reef(71)]) == 71


def test_total_species_counts_unique_names():
    reefs = [make_reef(80, ["Clownfish", "Brain Coral"]), make_reef(60, ["Clownfish", "Grouper"])]
    assert total_species(reefs) == 3


# --- Species summary ---

def test_species_summary():
    summary = species_summary([
        SpeciesCount("Brain Coral", 20, "coral"),
        SpeciesCount("Parrotfish", 40, "fish"),
        SpeciesCount("Blue Tang", 10, "fish"),
        SpeciesCount("Starfish", 5, "invertebrate"),
    ])

    assert summary["species"] == 4
    assert summary["individuals"] == 75
    assert summary["fish_types"] == 2
    assert summary["coral_types"] == 1

    rows = summary["rows"]
    assert list(rows["species"]) == ["Parrotfish", "Brain Coral", "Blue Tang", "Starfish"]
    assert list(rows["distribution"]) == pytest.approx([1.0, 0.5, 0.25, 0.125])


def test_species_summary_empty():
    summary = species_summary([])
    assert summary["species"] == 0
    assert summary["individuals"] == 0
    assert summary["fish_types"] == 0
    assert summary["rows"].empty


def test_species_summary_all_zero_counts():
    summary = species_summary([SpeciesCount("Goby", 0, "fish")])
    assert list(summary["rows"]["distribution"]) == [0.0]


# --- Alerts ---

def test_filter_alerts_all_is_wildcard():
    assert filter_alerts(ALERT_DETAILS) == ALERT_DETAILS


def test_filter_alerts_by_type_and_status():
    assert [a.id for a in filter_alerts(ALERT_DETAILS, alert_type="critical")] == ["a1", "a2"]
    assert [a.id for a in filter_alerts(ALERT_DETAILS, status="resolved")] == ["a5", "a6"]
    assert [a.id for a in filter_alerts(ALERT_DETAILS, alert_type="warning", status="monitoring")] == ["a4"]
    assert filter_alerts(ALERT_DETAILS, alert_type="info", status="active") == []


def test_alert_counts():
    assert alert_counts(ALERT_DETAILS) == {"critical": 1, "warning": 2, "active": 2, "total": 6}


# --- Historical ---

def test_historical_summary():
    summary = historical_summary(points(60, 70.4, 50.6, 65))
    assert summary == {"average": 62, "peak": 70, "low": 51, "trend": 5}


def test_historical_summary_empty():
    assert historical_summary([]) == {"average": 0, "peak": 0, "low": 0, "trend": 0.0}


def test_historical_insights_declining_and_warming():
    reef = make_reef(45, ["Goby", "Grouper"])
    insights = historical_insights(reef, points(50, 45, 40, temperatures=[25.0, 26.0, 27.5]))

    assert [i["title"] for i in insights] == ["Health Score Analysis", "Temperature Impact", "Biodiversity Status"]
    assert "negative trend" in insights[0]["text"]
    assert "declining by approximately 10 points" in insights[0]["text"]
    assert "increased" in insights[1]["text"]
    assert "concerning with 2 species" in insights[2]["text"]


def test_historical_insights_improving_and_stable_temperature():
    reef = make_reef(85, ["Goby"])
    insights = historical_insights(reef, points(72, 80, 90, temperatures=[26.0, 25.0, 25.5]))

    assert "positive trend" in insights[0]["text"]
    assert "remained stable" in insights[1]["text"]
    assert "strong" in insights[2]["text"]


def test_historical_frame_columns():
    frame = historical_frame(points(60, 70))
    assert list(frame.columns) == ["month", "health_score", "biodiversity", "temperature"]
    assert len(frame) == 2
