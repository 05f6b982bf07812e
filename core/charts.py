"""
charts.py — Plotly Figures for Reef Health Views
------------------------------------------------

Figure builders shared by the results, dashboard and historical pages:

- health_gauge: 0-100 gauge colored by health band
- distribution_chart: healthy / at-risk / critical reef counts
- historical_health_chart: monthly health scores colored by band
- biodiversity_chart / temperature_chart: monthly secondary metrics
- species_chart: individuals per species, colored by category
"""

import plotly.graph_objects as go

from core.display import (
    AT_RISK_COLOR,
    CRITICAL_COLOR,
    HEALTHY_COLOR,
    INFO_COLOR,
    category_color,
    health_color,
    health_label,
)

# Water warmer than this stresses coral
TEMPERATURE_STRESS_C = 27


def _compact(fig, height):
    fig.update_layout(height=height, margin=dict(l=20, r=20, t=40, b=20))
    return fig


def health_gauge(score: int, title: str = "Reef Health", height: int = 260):
    color = health_color(score)
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=score,
        title={"text": f"{title}<br><span style='font-size:0.8em;color:{color}'>{health_label(score)}</span>"},
        number={"font": {"color": color}},
        gauge={
            "axis": {"range": [0, 100]},
            "bar": {"color": color},
            "steps": [
                {"range": [0, 50], "color": "rgba(239,68,68,0.12)"},
                {"range": [50, 75], "color": "rgba(234,179,8,0.12)"},
                {"range": [75, 100], "color": "rgba(34,197,94,0.12)"},
            ],
        },
    ))
    return _compact(fig, height)


def distribution_chart(distribution: dict, height: int = 220):
    labels = ["Healthy", "At Risk", "Critical"]
    values = [distribution["healthy"], distribution["at_risk"], distribution["critical"]]
    fig = go.Figure(go.Bar(
        x=values,
        y=labels,
        orientation="h",
        marker_color=[HEALTHY_COLOR, AT_RISK_COLOR, CRITICAL_COLOR],
        text=[f"{v} reefs" for v in values],
        textposition="auto",
    ))
    fig.update_yaxes(autorange="reversed")
    return _compact(fig, height)


def historical_health_chart(frame, height: int = 360):
    fig = go.Figure(go.Bar(
        x=frame["month"],
        y=frame["health_score"],
        marker_color=[health_color(v) for v in frame["health_score"]],
        text=[round(v) for v in frame["health_score"]],
        textposition="outside",
    ))
    fig.update_yaxes(range=[0, 100], title="Health Score")
    fig.update_layout(title="Health Score Trend")
    return _compact(fig, height)


def biodiversity_chart(frame, height: int = 280):
    fig = go.Figure(go.Bar(
        x=frame["biodiversity"],
        y=frame["month"],
        orientation="h",
        marker_color=INFO_COLOR,
    ))
    fig.update_xaxes(range=[0, 100])
    fig.update_layout(title="Biodiversity Index")
    return _compact(fig, height)


def temperature_chart(frame, height: int = 280):
    fig = go.Figure(go.Scatter(
        x=frame["month"],
        y=frame["temperature"],
        mode="lines+markers",
        line=dict(color=INFO_COLOR),
        marker=dict(
            size=10,
            color=[CRITICAL_COLOR if t > TEMPERATURE_STRESS_C else HEALTHY_COLOR for t in frame["temperature"]],
        ),
    ))
    fig.add_hline(y=TEMPERATURE_STRESS_C, line_dash="dash", line_color=CRITICAL_COLOR,
                  annotation_text="Coral stress threshold")
    fig.update_layout(title="Water Temperature (°C)")
    return _compact(fig, height)


def species_chart(rows, height: int = 320):
    """Horizontal bar of species counts, colored by category."""
    fig = go.Figure(go.Bar(
        x=rows["count"],
        y=rows["species"],
        orientation="h",
        marker_color=[category_color(c) for c in rows["category"]],
        text=rows["count"],
        textposition="auto",
    ))
    fig.update_yaxes(autorange="reversed")
    fig.update_layout(title="Individuals per Species")
    return _compact(fig, height)
