"""
display.py — Health Bands, Icons, Colors and Time Formatting
------------------------------------------------------------

Shared presentation helpers used by the map, dashboard, results and alert views.

Health bands:
- Healthy   75-100  (#22c55e)
- At Risk   50-74   (#eab308)
- Critical  0-49    (#ef4444)
"""

from datetime import datetime, timezone
from typing import Optional

HEALTHY_COLOR = "#22c55e"
AT_RISK_COLOR = "#eab308"
CRITICAL_COLOR = "#ef4444"
NEUTRAL_COLOR = "#6b7280"
INFO_COLOR = "#3b82f6"


def health_color(score: float) -> str:
    if score >= 75:
        return HEALTHY_COLOR
    if score >= 50:
        return AT_RISK_COLOR
    return CRITICAL_COLOR


def health_label(score: float) -> str:
    if score >= 75:
        return "Healthy"
    if score >= 50:
        return "At Risk"
    return "Critical"


def trend_icon(trend: str) -> str:
    return {"improving": "↑", "declining": "↓"}.get(trend, "→")


def trend_color(trend: str) -> str:
    return {"improving": HEALTHY_COLOR, "declining": CRITICAL_COLOR}.get(trend, NEUTRAL_COLOR)


def category_icon(category: str) -> str:
    return {"fish": "🐠", "coral": "🪸", "invertebrate": "🦑"}.get(category, "🌊")


def category_color(category: str) -> str:
    return {"fish": INFO_COLOR, "coral": "#f97316", "invertebrate": "#8b5cf6"}.get(category, NEUTRAL_COLOR)


def alert_icon(alert_type: str) -> str:
    return {"critical": "🚨", "warning": "⚠️", "info": "ℹ️"}.get(alert_type, "📢")


def alert_color(alert_type: str) -> str:
    return {"critical": CRITICAL_COLOR, "warning": AT_RISK_COLOR, "info": INFO_COLOR}.get(alert_type, NEUTRAL_COLOR)


def status_label(status: str) -> str:
    return status.capitalize()


def parse_timestamp(timestamp: str) -> datetime:
    """
    Parse an ISO-8601 timestamp (with or without a trailing Z) into an aware UTC datetime.
    """
    parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_time_ago(timestamp: str, now: Optional[datetime] = None, verbose: bool = False) -> str:
    """
    Render a timestamp relative to now.

    Args:
        timestamp (str): ISO-8601 timestamp
        now (datetime): Reference time, defaults to the current UTC time
        verbose (bool): "3 days ago" instead of "3d ago"

    Returns:
        str: "Nd ago", "Nh ago" or "Just now" (future timestamps are "Just now")
    """
    now = now or datetime.now(timezone.utc)
    diff_hours = int((now - parse_timestamp(timestamp)).total_seconds() // 3600)
    diff_days = diff_hours // 24

    if diff_days > 0:
        if verbose:
            return f"{diff_days} day{'s' if diff_days > 1 else ''} ago"
        return f"{diff_days}d ago"
    if diff_hours > 0:
        if verbose:
            return f"{diff_hours} hour{'s' if diff_hours > 1 else ''} ago"
        return f"{diff_hours}h ago"
    return "Just now"


def format_date(timestamp: str) -> str:
    return parse_timestamp(timestamp).strftime("%b %d, %Y")


def recommendations(score: float) -> list[dict]:
    """
    Recommendation cards for an analysed reef: one card for the health band,
    followed by the standing "Track Changes" and "Share Data" cards.
    """
    if score < 50:
        cards = [{
            "level": "critical",
            "icon": "⚠️",
            "title": "Critical Attention Needed",
            "text": "This reef shows signs of significant stress. Consider implementing "
                    "protective measures and increasing monitoring frequency.",
        }]
    elif score < 75:
        cards = [{
            "level": "warning",
            "icon": "👁️",
            "title": "Monitor Closely",
            "text": "This reef is at risk. Regular monitoring and proactive conservation "
                    "efforts are recommended.",
        }]
    else:
        cards = [{
            "level": "healthy",
            "icon": "✅",
            "title": "Healthy Ecosystem",
            "text": "This reef is in good condition. Continue current conservation practices "
                    "and periodic monitoring.",
        }]

    cards.append({
        "level": "info",
        "icon": "📊",
        "title": "Track Changes",
        "text": "Upload periodic footage to track ecosystem changes over time and identify trends.",
    })
    cards.append({
        "level": "info",
        "icon": "🌍",
        "title": "Share Data",
        "text": "Consider sharing your findings with local conservation organizations and "
                "research institutions.",
    })
    return cards
