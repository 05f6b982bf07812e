"""
models.py — ReefWatch Display Records
-------------------------------------

Plain records passed between the analysis layer and the Streamlit views:

- SpeciesCount: a species (fish, coral, invertebrate) and its estimated count
- AnalysisResult: health/biodiversity scores, trend, summary and species list
- ReefLocation: a monitored reef shown on the global map
- UploadRecord: one analysed upload in the dashboard history
- Alert / AlertDetail: dashboard alerts and the long-form alert cards
- HistoricalPoint: one month of the historical health series

Results travel between pages as dicts in st.session_state, so every record
serialises with to_dict().
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import List, Optional


TRENDS = ("improving", "stable", "declining")
CATEGORIES = ("fish", "coral", "invertebrate")
ALERT_TYPES = ("critical", "warning", "info")
ALERT_STATUSES = ("active", "monitoring", "resolved")
UPLOAD_STATUSES = ("processing", "completed", "failed")


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with a trailing Z."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass
class SpeciesCount:
    name: str
    count: int
    category: str = "fish"

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class AnalysisResult:
    health_score: int
    biodiversity_score: int
    trend: str
    summary: str
    species: List[SpeciesCount]
    timestamp: str = field(default_factory=utc_now_iso)
    total_fish_count: Optional[int] = None
    confidence: Optional[int] = None
    analyzed_frame: Optional[str] = None
    source: str = "gemini"

    @property
    def is_demo(self) -> bool:
        return self.source == "demo"

    def to_dict(self) -> dict:
        data = asdict(self)
        data["species"] = [s.to_dict() for s in self.species]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "AnalysisResult":
        species = [SpeciesCount(**s) for s in data.get("species", [])]
        return cls(
            health_score=data["health_score"],
            biodiversity_score=data["biodiversity_score"],
            trend=data["trend"],
            summary=data["summary"],
            species=species,
            timestamp=data.get("timestamp") or utc_now_iso(),
            total_fish_count=data.get("total_fish_count"),
            confidence=data.get("confidence"),
            analyzed_frame=data.get("analyzed_frame"),
            source=data.get("source", "gemini"),
        )


@dataclass
class ReefLocation:
    id: str
    name: str
    region: str
    lat: float
    lng: float
    health_score: int
    trend: str
    last_updated: str
    species: List[SpeciesCount]
    biodiversity_score: int

    def to_dict(self) -> dict:
        data = asdict(self)
        data["species"] = [s.to_dict() for s in self.species]
        return data


@dataclass
class UploadRecord:
    id: str
    filename: str
    location: str
    timestamp: str
    health_score: int
    status: str = "completed"

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Alert:
    id: str
    type: str
    message: str
    location: str
    timestamp: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class AlertDetail:
    id: str
    type: str
    title: str
    message: str
    location: str
    coordinates: str
    timestamp: str
    status: str
    details: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class HistoricalPoint:
    month: str
    health_score: float
    biodiversity: float
    temperature: float

    def to_dict(self) -> dict:
        return asdict(self)
