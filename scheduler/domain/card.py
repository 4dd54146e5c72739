from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .enums import CardState


@dataclass(frozen=True)
class Card:
    """Scheduling state of one reviewable item."""

    stability: float = 0.0
    difficulty: float = 0.0
    elapsed_days: float = 0.0
    scheduled_days: int = 0
    reps: int = 0
    lapses: int = 0
    state: CardState = CardState.NEW
    last_review: Optional[datetime] = field(default=None)


@dataclass(frozen=True)
class ScheduleResult:
    card: Card
    next_review: datetime
