from datetime import datetime, timedelta, timezone

from scheduler.domain.card import Card
from scheduler.domain.enums import CardState

# Fixed reference instant to keep tests deterministic
NOW = datetime(2026, 2, 23, 12, 0, tzinfo=timezone.utc)
ONE_MINUTE = timedelta(minutes=1)
ONE_DAY = timedelta(days=1)


def new_card(**overrides):
    """A fresh, never-reviewed card."""
    return Card(**overrides)


def review_card(**overrides):
    """A graduated card last seen five days before NOW."""
    fields = dict(
        stability=10.0,
        difficulty=5.0,
        elapsed_days=5.0,
        scheduled_days=10,
        reps=3,
        lapses=0,
        state=CardState.REVIEW,
        last_review=NOW - 5 * ONE_DAY,
    )
    fields.update(overrides)
    return Card(**fields)


def learning_card(**overrides):
    fields = dict(
        stability=0.4,
        difficulty=6.81,
        reps=1,
        state=CardState.LEARNING,
        last_review=NOW,
    )
    fields.update(overrides)
    return Card(**fields)
