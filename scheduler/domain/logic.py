"""
Minimal FSRS v4 scheduling core.

Pure functions over immutable ``Card`` values: nothing here touches the
database or the clock unless ``now`` is omitted.
"""
import math
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Optional

from ..config import (
    DEFAULT_FSRS_WEIGHTS,
    LAPSE_FACTOR,
    LEARNING_AGAIN_FACTOR,
    LEARNING_STEP,
    MAX_DIFFICULTY,
    MIN_DIFFICULTY,
    MIN_STABILITY,
    FsrsWeights,
)
from .card import Card, ScheduleResult
from .enums import CardState, Rating

SECONDS_PER_DAY = 24 * 60 * 60


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def init_stability(rating: Rating, w: FsrsWeights = DEFAULT_FSRS_WEIGHTS) -> float:
    return max(w[int(rating) - 1], MIN_STABILITY)


def init_difficulty(rating: Rating, w: FsrsWeights = DEFAULT_FSRS_WEIGHTS) -> float:
    return clamp(w[4] - (int(rating) - 3) * w[5], MIN_DIFFICULTY, MAX_DIFFICULTY)


def next_difficulty(d: float, rating: Rating, w: FsrsWeights = DEFAULT_FSRS_WEIGHTS) -> float:
    proposed = d - w[6] * (int(rating) - 3)
    # mean reversion towards the Good starting difficulty
    reverted = w[7] * init_difficulty(Rating.GOOD, w) + (1 - w[7]) * proposed
    return clamp(reverted, MIN_DIFFICULTY, MAX_DIFFICULTY)


def retrievability(elapsed_days: float, stability: float) -> float:
    if stability <= 0:
        return 0.0
    return 1.0 / (1 + elapsed_days / (9 * stability))


def next_recall_stability(
    d: float, s: float, r: float, rating: Rating, w: FsrsWeights = DEFAULT_FSRS_WEIGHTS
) -> float:
    """Stability after a successful recall.

    Hard is scaled by ``w[11]`` and Easy by ``w[12]``. With the default
    weights (2.18 and 0.05) Hard grows stability more than Good and Easy
    grows it less. That ordering is kept for compatibility with existing
    review histories and needs product sign-off before it changes.
    """
    hard_penalty = w[11] if rating == Rating.HARD else 1.0
    easy_bonus = w[12] if rating == Rating.EASY else 1.0
    growth = (
        math.exp(w[8])
        * (11 - d)
        * math.pow(s, -w[9])
        * (math.exp((1 - r) * w[10]) - 1)
        * hard_penalty
        * easy_bonus
    )
    return max(s * (1 + growth), MIN_STABILITY)


def interval_days(stability: float) -> int:
    return max(1, round_half_up(stability))


def elapsed_days_since(last_review: Optional[datetime], now: datetime) -> float:
    if last_review is None:
        return 0.0
    # a clock behind last_review counts as no time passed
    return max(0.0, (now - last_review).total_seconds() / SECONDS_PER_DAY)


# Transitions, one function per source state. Each returns the new card
# without reps/last_review bookkeeping, which schedule() applies uniformly.


def _from_new(card: Card, rating: Rating, elapsed: float, w: FsrsWeights) -> Card:
    s = init_stability(rating, w)
    d = init_difficulty(rating, w)
    if rating == Rating.AGAIN:
        return replace(
            card,
            stability=s,
            difficulty=d,
            state=CardState.LEARNING,
            elapsed_days=0.0,
            scheduled_days=0,
        )
    return replace(
        card,
        stability=s,
        difficulty=d,
        state=CardState.REVIEW,
        elapsed_days=0.0,
        scheduled_days=interval_days(s),
    )


def _from_learning(card: Card, rating: Rating, elapsed: float, w: FsrsWeights) -> Card:
    # shared by Learning and Relearning: Again stays put, anything else graduates
    if rating == Rating.AGAIN:
        return replace(
            card,
            stability=max(card.stability * LEARNING_AGAIN_FACTOR, MIN_STABILITY),
            elapsed_days=elapsed,
            scheduled_days=0,
        )
    d = next_difficulty(card.difficulty, rating, w)
    r = retrievability(elapsed, card.stability)
    s = next_recall_stability(d, card.stability, r, rating, w)
    return replace(
        card,
        stability=s,
        difficulty=d,
        state=CardState.REVIEW,
        elapsed_days=elapsed,
        scheduled_days=interval_days(s),
    )


def _from_review(card: Card, rating: Rating, elapsed: float, w: FsrsWeights) -> Card:
    d = next_difficulty(card.difficulty, rating, w)
    if rating == Rating.AGAIN:
        return replace(
            card,
            stability=max(card.stability * LAPSE_FACTOR, MIN_STABILITY),
            difficulty=d,
            lapses=card.lapses + 1,
            state=CardState.RELEARNING,
            elapsed_days=elapsed,
            scheduled_days=0,
        )
    r = retrievability(elapsed, card.stability)
    s = next_recall_stability(d, card.stability, r, rating, w)
    return replace(
        card,
        stability=s,
        difficulty=d,
        state=CardState.REVIEW,
        elapsed_days=elapsed,
        scheduled_days=interval_days(s),
    )


TRANSITIONS = {
    CardState.NEW: _from_new,
    CardState.LEARNING: _from_learning,
    CardState.REVIEW: _from_review,
    CardState.RELEARNING: _from_learning,
}


def schedule(
    card: Card,
    rating: int,
    now: Optional[datetime] = None,
    weights: FsrsWeights = DEFAULT_FSRS_WEIGHTS,
) -> ScheduleResult:
    """Apply one review to ``card`` and return the new card plus its due time.

    ``rating`` must be 1-4; callers validate it before reaching here.
    The input card is never modified.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    rating = Rating(rating)
    state = CardState(card.state)
    if card.state is not state:
        card = replace(card, state=state)

    elapsed = elapsed_days_since(card.last_review, now)
    moved = TRANSITIONS[state](card, rating, elapsed, weights)
    new_card = replace(moved, reps=card.reps + 1, last_review=now)

    if new_card.state in (CardState.LEARNING, CardState.RELEARNING):
        next_review = now + LEARNING_STEP
    else:
        next_review = now + timedelta(days=new_card.scheduled_days)

    return ScheduleResult(card=new_card, next_review=next_review)
