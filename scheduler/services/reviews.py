from django.db import OperationalError, transaction
from django.utils import timezone
import structlog

from ..config import get_due_limit, get_weights
from ..data import repos
from ..data.models import ReviewItem
from ..domain.enums import Rating
from ..domain.logic import schedule
from ..domain.preview import preview_schedule
from ..errors import InvalidRating, ItemNotFound, ReviewConflict
from ..utils.time import to_cst_iso

logger = structlog.get_logger()


def get_due_items(speaker_id, limit=None, now=None):
    """
    Items whose next_review has passed, oldest first, each carrying a
    ``schedule_preview`` attribute with the label for every rating.
    """
    now = now or timezone.now()
    limit = get_due_limit() if limit is None else limit
    weights = get_weights()

    items = repos.due_items(speaker_id, now, limit)
    for item in items:
        item.schedule_preview = preview_schedule(item.as_card(), now, weights)

    logger.info("due_items_loaded",
        speaker_id=str(speaker_id),
        limit=limit,
        item_count=len(items),
    )
    return items


def record_review(item_id, rating: int, now=None):
    # bool is an int subclass; True must not pass as Again
    if isinstance(rating, bool):
        raise InvalidRating(rating)
    try:
        rating = Rating(rating)
    except (TypeError, ValueError):
        raise InvalidRating(rating) from None

    now = now or timezone.now()
    logger.info("review_received", item_id=str(item_id), rating=int(rating))

    # Lock, compute and write back as one transaction per item
    with transaction.atomic():
        try:
            item = repos.get_item_for_update(item_id)
        except ReviewItem.DoesNotExist:
            logger.warning("review_item_missing", item_id=str(item_id))
            raise ItemNotFound(item_id) from None
        except OperationalError as exc:
            if not repos.is_lock_unavailable(exc):
                raise
            logger.warning("review_conflict", item_id=str(item_id), reason="row_locked")
            raise ReviewConflict(item_id) from None

        result = schedule(item.as_card(), rating, now, get_weights())

        if repos.save_schedule(item, result) == 0:
            logger.warning("review_conflict", item_id=str(item_id), reason="stale_version")
            raise ReviewConflict(item_id)

    logger.info("review_scheduled",
        item_id=str(item_id),
        rating=int(rating),
        state=item.state,
        stability=item.stability,
        difficulty=item.difficulty,
        scheduled_days=item.scheduled_days,
        next_review_utc=item.next_review.isoformat(),
        next_review_cst=to_cst_iso(item.next_review),
    )
    return item


def get_review_stats(speaker_id, now=None):
    now = now or timezone.now()

    due_count = repos.count_due(speaker_id, now)
    total_items = repos.count_items(speaker_id)
    if due_count > 0:
        next_review_at = now
    else:
        next_review_at = repos.next_upcoming_review(speaker_id, now)

    logger.info("review_stats_computed",
        speaker_id=str(speaker_id),
        due_count=due_count,
        total_items=total_items,
        next_review_utc=next_review_at.isoformat() if next_review_at else None,
    )
    return {
        "due_count": due_count,
        "total_items": total_items,
        "next_review_at": next_review_at,
    }
