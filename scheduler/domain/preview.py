from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from ..config import DEFAULT_FSRS_WEIGHTS, FsrsWeights
from .card import Card
from .enums import Rating
from .logic import round_half_up, schedule

MINUTE_LABEL = "{}分钟"
HOUR_LABEL = "{}小时"
DAY_LABEL = "{}天"


def format_interval(delta: timedelta) -> str:
    """Render a scheduling interval as a short label: minutes, hours or days."""
    seconds = delta.total_seconds()
    minutes = round_half_up(seconds / 60)
    hours = round_half_up(seconds / 3600)
    days = round_half_up(seconds / 86400)

    if minutes < 60:
        return MINUTE_LABEL.format(minutes)
    if hours < 24:
        return HOUR_LABEL.format(hours)
    return DAY_LABEL.format(days)


def preview_schedule(
    card: Card,
    now: Optional[datetime] = None,
    weights: FsrsWeights = DEFAULT_FSRS_WEIGHTS,
) -> Dict[int, str]:
    """Interval label for each of the four ratings, keyed 1-4."""
    if now is None:
        now = datetime.now(timezone.utc)
    preview = {}
    for rating in Rating:
        result = schedule(card, rating, now, weights)
        preview[int(rating)] = format_interval(result.next_review - now)
    return preview
