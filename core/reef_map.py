"""
reef_map.py — Global Reef Health Map with Folium
------------------------------------------------

Builds the interactive world map of monitored reefs. Each reef is a circle
marker colored by its health band, with a popup showing score, status,
trend, species count and last survey date. Selecting a reef recenters and
zooms the map on it; clicking a marker selects its reef (see reef_at).
"""

import folium

from core.display import format_date, health_color, health_label, trend_color, trend_icon

TILES_URL = "https://{s}.basemaps.cartocdn.com/light_all/{z}/{x}/{y}{r}.png"
TILES_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors '
    '&copy; <a href="https://carto.com/attributions">CARTO</a>'
)

WORLD_CENTER = [20, 0]
WORLD_ZOOM = 2
SELECTED_ZOOM = 6

# Degrees; marker clicks report the marker's own coordinates
CLICK_TOLERANCE = 0.01


def reef_popup_html(reef) -> str:
    color = health_color(reef.health_score)
    return (
        f"<div style='min-width:190px'>"
        f"<h4 style='margin:0'>{reef.name}</h4>"
        f"<p style='margin:0 0 6px;color:#6b7280'>{reef.region}</p>"
        f"<b>Health Score:</b> <span style='color:{color}'>{reef.health_score}</span><br>"
        f"<b>Status:</b> <span style='background:{color};color:white;padding:0 6px;border-radius:8px'>"
        f"{health_label(reef.health_score)}</span><br>"
        f"<b>Trend:</b> <span style='color:{trend_color(reef.trend)}'>{trend_icon(reef.trend)} {reef.trend}</span><br>"
        f"<b>Species Identified:</b> {len(reef.species)}<br>"
        f"<small>Last updated: {format_date(reef.last_updated)}</small>"
        f"</div>"
    )


def build_reef_map(reefs, selected=None) -> folium.Map:
    """
    Args:
        reefs (list[ReefLocation]): Reefs to plot
        selected (ReefLocation): Reef to center on, or None for the world view

    Returns:
        folium.Map
    """
    if selected is not None:
        center, zoom = [selected.lat, selected.lng], SELECTED_ZOOM
    else:
        center, zoom = WORLD_CENTER, WORLD_ZOOM

    m = folium.Map(
        location=center,
        zoom_start=zoom,
        min_zoom=2,
        max_zoom=12,
        tiles=TILES_URL,
        attr=TILES_ATTRIBUTION,
        scrollWheelZoom=True,
    )

    for reef in reefs:
        color = health_color(reef.health_score)
        is_selected = selected is not None and reef.id == selected.id
        folium.CircleMarker(
            location=[reef.lat, reef.lng],
            radius=16 if is_selected else 12,
            color=color,
            weight=4 if is_selected else 2,
            fill=True,
            fill_color=color,
            fill_opacity=0.7,
            tooltip=reef.name,
            popup=folium.Popup(reef_popup_html(reef), max_width=260),
        ).add_to(m)

    return m


def reef_at(reefs, clicked, tolerance=CLICK_TOLERANCE):
    """
    Map a streamlit-folium click ({"lat": ..., "lng": ...}) back to the reef whose marker was clicked.

    Returns:
        ReefLocation or None: Nearest reef within the tolerance, None for clicks away from any marker
    """
    if not clicked or clicked.get("lat") is None or clicked.get("lng") is None:
        return None

    lat, lng = float(clicked["lat"]), float(clicked["lng"])
    nearest, best = None, tolerance
    for reef in reefs:
        distance = max(abs(reef.lat - lat), abs(reef.lng - lng))
        if distance <= best:
            nearest, best = reef, distance
    return nearest
