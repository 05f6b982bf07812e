"""
reef_data.py — Built-in Reef Monitoring Reference Data
------------------------------------------------------

Static records that seed the map, dashboard, alerts and live-feed views:

- REEF_LOCATIONS: monitored reefs with coordinates, scores and survey species
- DEMO_ALERTS: short alerts shown on the dashboard
- ALERT_DETAILS: long-form alerts shown on the alert system page
- DEMO_UPLOADS: upload history shown before any real upload has been recorded
- LIVE_CAMERAS: underwater camera stations embedded on the home page
"""

from core.models import (
    Alert,
    AlertDetail,
    ReefLocation,
    SpeciesCount,
    UploadRecord,
)


def _species(*entries):
    return [SpeciesCount(name=name, count=count, category=category) for name, count, category in entries]


REEF_LOCATIONS = [
    ReefLocation(
        id="gbr-outer",
        name="Great Barrier Reef",
        region="Queensland, Australia",
        lat=-18.2871, lng=147.6992,
        health_score=68, trend="declining",
        last_updated="2026-01-30T14:15:00Z",
        biodiversity_score=82,
        species=_species(
            ("Blue Tang", 142, "fish"),
            ("Parrotfish", 96, "fish"),
            ("Clownfish", 64, "fish"),
            ("Staghorn Coral", 210, "coral"),
            ("Table Coral", 120, "coral"),
            ("Giant Clam", 18, "invertebrate"),
        ),
    ),
    ReefLocation(
        id="belize-barrier",
        name="Belize Barrier Reef",
        region="Caribbean Sea, Belize",
        lat=17.5000, lng=-87.5000,
        health_score=62, trend="stable",
        last_updated="2026-01-28T16:45:00Z",
        biodiversity_score=71,
        species=_species(
            ("Queen Angelfish", 38, "fish"),
            ("Grouper", 22, "fish"),
            ("Brain Coral", 150, "coral"),
            ("Elkhorn Coral", 44, "coral"),
            ("Sea Urchin", 60, "invertebrate"),
        ),
    ),
    ReefLocation(
        id="red-sea-ras-mohammed",
        name="Ras Mohammed",
        region="Red Sea, Egypt",
        lat=27.7333, lng=34.2500,
        health_score=84, trend="improving",
        last_updated="2026-01-25T10:05:00Z",
        biodiversity_score=88,
        species=_species(
            ("Anthias", 310, "fish"),
            ("Butterflyfish", 74, "fish"),
            ("Napoleon Wrasse", 6, "fish"),
            ("Fire Coral", 130, "coral"),
            ("Soft Coral", 175, "coral"),
            ("Nudibranch", 12, "invertebrate"),
        ),
    ),
    ReefLocation(
        id="raja-ampat",
        name="Raja Ampat",
        region="West Papua, Indonesia",
        lat=-0.2346, lng=130.5079,
        health_score=91, trend="improving",
        last_updated="2026-01-22T03:40:00Z",
        biodiversity_score=95,
        species=_species(
            ("Wobbegong", 4, "fish"),
            ("Moorish Idol", 58, "fish"),
            ("Damselfish", 260, "fish"),
            ("Surgeonfish", 88, "fish"),
            ("Table Coral", 240, "coral"),
            ("Mushroom Coral", 66, "coral"),
            ("Octopus", 3, "invertebrate"),
        ),
    ),
    ReefLocation(
        id="maldives-north-male",
        name="North Malé Atoll",
        region="Maldives",
        lat=3.2028, lng=73.2207,
        health_score=73, trend="improving",
        last_updated="2026-01-26T13:00:00Z",
        biodiversity_score=77,
        species=_species(
            ("Triggerfish", 28, "fish"),
            ("Blue Tang", 81, "fish"),
            ("Staghorn Coral", 96, "coral"),
            ("Sea Anemone", 34, "invertebrate"),
        ),
    ),
    ReefLocation(
        id="florida-keys",
        name="Florida Keys Reef Tract",
        region="Florida, USA",
        lat=24.5551, lng=-81.7800,
        health_score=38, trend="declining",
        last_updated="2026-01-31T08:32:00Z",
        biodiversity_score=52,
        species=_species(
            ("Lionfish", 41, "fish"),
            ("Grouper", 9, "fish"),
            ("Elkhorn Coral", 21, "coral"),
            ("Brain Coral", 48, "coral"),
            ("Sea Cucumber", 15, "invertebrate"),
        ),
    ),
    ReefLocation(
        id="tubbataha",
        name="Tubbataha Reef",
        region="Sulu Sea, Philippines",
        lat=8.8500, lng=119.9167,
        health_score=57, trend="declining",
        last_updated="2026-01-29T11:20:00Z",
        biodiversity_score=79,
        species=_species(
            ("Parrotfish", 54, "fish"),
            ("Pufferfish", 17, "fish"),
            ("Table Coral", 88, "coral"),
            ("Starfish", 140, "invertebrate"),
        ),
    ),
    ReefLocation(
        id="new-caledonia",
        name="New Caledonia Barrier Reef",
        region="New Caledonia, France",
        lat=-22.2758, lng=166.4580,
        health_score=80, trend="stable",
        last_updated="2026-01-19T21:10:00Z",
        biodiversity_score=84,
        species=_species(
            ("Wrasse", 72, "fish"),
            ("Goby", 45, "fish"),
            ("Brain Coral", 118, "coral"),
            ("Soft Coral", 90, "coral"),
            ("Giant Clam", 11, "invertebrate"),
        ),
    ),
    ReefLocation(
        id="seychelles-aldabra",
        name="Aldabra Atoll",
        region="Seychelles",
        lat=-9.4167, lng=46.4167,
        health_score=76, trend="stable",
        last_updated="2026-01-27T09:30:00Z",
        biodiversity_score=80,
        species=_species(
            ("Angelfish", 33, "fish"),
            ("Blenny", 27, "fish"),
            ("Mushroom Coral", 52, "coral"),
            ("Sea Urchin", 39, "invertebrate"),
        ),
    ),
    ReefLocation(
        id="palau",
        name="Palau Rock Islands",
        region="Palau",
        lat=7.3000, lng=134.4667,
        health_score=46, trend="declining",
        last_updated="2026-01-24T05:55:00Z",
        biodiversity_score=63,
        species=_species(
            ("Butterflyfish", 19, "fish"),
            ("Damselfish", 85, "fish"),
            ("Staghorn Coral", 37, "coral"),
            ("Sea Anemone", 14, "invertebrate"),
        ),
    ),
]


def get_reef(reef_id: str):
    """Return the ReefLocation with this id, or None."""
    return next((reef for reef in REEF_LOCATIONS if reef.id == reef_id), None)


DEMO_ALERTS = [
    Alert(
        id="d1", type="critical",
        message="Mass bleaching detected across 40% of the outer reef section",
        location="Great Barrier Reef",
        timestamp="2026-01-30T14:15:00Z",
    ),
    Alert(
        id="d2", type="warning",
        message="Crown-of-thorns starfish density above safe threshold",
        location="Tubbataha Reef",
        timestamp="2026-01-29T11:20:00Z",
    ),
    Alert(
        id="d3", type="warning",
        message="Sediment levels elevated after storm runoff",
        location="Belize Barrier Reef",
        timestamp="2026-01-28T16:45:00Z",
    ),
    Alert(
        id="d4", type="info",
        message="Coral transplantation survival rate reached 85%",
        location="North Malé Atoll",
        timestamp="2026-01-26T13:00:00Z",
    ),
]


ALERT_DETAILS = [
    AlertDetail(
        id="a1", type="critical",
        title="Illegal Fishing Activity Detected",
        message="Unauthorized vessel detected in protected marine zone with fishing equipment deployed.",
        location="Florida Keys Marine Sanctuary",
        coordinates="24.5551°N, 81.7800°W",
        timestamp="2026-01-31T08:32:00Z",
        status="active",
        details=[
            "Vessel ID: Unknown (no AIS signal)",
            "Equipment: Long-line fishing gear detected",
            "Duration: Active for 2+ hours",
            "Local authorities notified at 08:45 UTC",
        ],
    ),
    AlertDetail(
        id="a2", type="critical",
        title="Coral Bleaching Event",
        message="Significant coral bleaching observed across 40% of monitored reef section.",
        location="Great Barrier Reef - Outer Reef",
        coordinates="18.2871°S, 147.6992°E",
        timestamp="2026-01-30T14:15:00Z",
        status="monitoring",
        details=[
            "Water temperature: 29.2°C (2.1°C above average)",
            "Affected species: Acropora, Pocillopora",
            "Bleaching severity: Moderate to severe",
            "Marine biologists dispatched for assessment",
        ],
    ),
    AlertDetail(
        id="a3", type="warning",
        title="Crown-of-Thorns Starfish Outbreak",
        message="Population density exceeds safe threshold. Reef degradation risk elevated.",
        location="Tubbataha Reef Natural Park",
        coordinates="8.8500°N, 119.9167°E",
        timestamp="2026-01-29T11:20:00Z",
        status="active",
        details=[
            "Population density: 1,200 per hectare",
            "Safe threshold: 300 per hectare",
            "Coral consumption rate: High",
            "Control measures being evaluated",
        ],
    ),
    AlertDetail(
        id="a4", type="warning",
        title="Water Quality Degradation",
        message="Elevated sediment levels detected following recent storm activity.",
        location="Belize Barrier Reef",
        coordinates="17.5000°N, 87.5000°W",
        timestamp="2026-01-28T16:45:00Z",
        status="monitoring",
        details=[
            "Turbidity: 15 NTU (normal: <5 NTU)",
            "Visibility reduced to 8 meters",
            "Cause: Storm runoff and coastal erosion",
            "Expected to normalize within 72 hours",
        ],
    ),
    AlertDetail(
        id="a5", type="info",
        title="Rare Species Sighting",
        message="Confirmed sighting of endangered hawksbill sea turtle nesting behavior.",
        location="Seychelles Reef - Aldabra Atoll",
        coordinates="4.6796°S, 55.4920°E",
        timestamp="2026-01-27T09:30:00Z",
        status="resolved",
        details=[
            "Species: Eretmochelys imbricata (Hawksbill)",
            "Behavior: Nesting preparation observed",
            "Nest protection measures activated",
            "Data shared with IUCN conservation team",
        ],
    ),
    AlertDetail(
        id="a6", type="info",
        title="Reef Recovery Progress",
        message="Coral transplantation site showing 85% survival rate after 6 months.",
        location="Maldives - North Malé Atoll",
        coordinates="3.2028°N, 73.2207°E",
        timestamp="2026-01-26T13:00:00Z",
        status="resolved",
        details=[
            "Transplanted fragments: 2,400",
            "Survival rate: 85% (target: 70%)",
            "New growth observed on 60% of fragments",
            "Project expanded to additional sites",
        ],
    ),
]


DEMO_UPLOADS = [
    UploadRecord(
        id="u1", filename="gbr_outer_transect_04.mp4",
        location="Great Barrier Reef",
        timestamp="2026-01-30T12:05:00Z", health_score=68,
    ),
    UploadRecord(
        id="u2", filename="ras_mohammed_wall.jpg",
        location="Ras Mohammed",
        timestamp="2026-01-25T09:48:00Z", health_score=84,
    ),
    UploadRecord(
        id="u3", filename="keys_looe_key_survey.mov",
        location="Florida Keys Reef Tract",
        timestamp="2026-01-24T17:20:00Z", health_score=38,
    ),
    UploadRecord(
        id="u4", filename="raja_ampat_cape_kri.mp4",
        location="Raja Ampat",
        timestamp="2026-01-22T03:15:00Z", health_score=91,
    ),
]


LIVE_CAMERAS = [
    {
        "camera_id": "CAM-01",
        "station": "STAGHORN CORAL STATION",
        "video_id": "THnF0IQ8JJM",
        "depth": "12m",
        "temperature": "26.2°C",
        "location": "Great Barrier Reef, Australia",
        "species": "Staghorn Coral (Acropora)",
        "health_score": 78,
        "population": "2,450",
        "growth_rate": "+3.2%",
        "fish_activity": "High",
        "trend_note": "↑ Stable conditions",
    },
    {
        "camera_id": "CAM-02",
        "station": "BRAIN CORAL STATION",
        "video_id": "be6Xumfge1M",
        "depth": "8m",
        "temperature": "27.1°C",
        "location": "Caribbean Sea, Belize",
        "species": "Brain Coral (Diploria)",
        "health_score": 62,
        "population": "890",
        "growth_rate": "-0.8%",
        "fish_activity": "Medium",
        "trend_note": "→ Elevated water temp",
    },
    {
        "camera_id": "CAM-03",
        "station": "ELKHORN CORAL STATION",
        "video_id": "lVlmfKf4y-0",
        "depth": "5m",
        "temperature": "25.8°C",
        "location": "Florida Keys, USA",
        "species": "Elkhorn Coral (Acropora palmata)",
        "health_score": 38,
        "population": "320",
        "growth_rate": "-2.4%",
        "fish_activity": "Low",
        "trend_note": "↓ Bleaching detected",
    },
]
