from django.db import transaction
from django.db.models import Count, F
from django.utils import timezone

from learners.models import GrammarError, VocabularyUsage

from .models import ReviewItem

CARD_FIELDS = (
    "stability",
    "difficulty",
    "elapsed_days",
    "scheduled_days",
    "reps",
    "lapses",
    "state",
    "last_review",
)

# The only columns an upsert may touch on an existing row.
DISPLAY_FIELDS = ["display_data", "updated_at"]


def due_items(speaker_id, now, limit):
    return list(
        ReviewItem.objects.filter(speaker_id=speaker_id, next_review__lte=now)
        .order_by("next_review", "id")[:limit]
    )


def count_due(speaker_id, now):
    return ReviewItem.objects.filter(speaker_id=speaker_id, next_review__lte=now).count()


def count_items(speaker_id):
    return ReviewItem.objects.filter(speaker_id=speaker_id).count()


def next_upcoming_review(speaker_id, now):
    return (
        ReviewItem.objects.filter(speaker_id=speaker_id, next_review__gt=now)
        .order_by("next_review")
        .values_list("next_review", flat=True)
        .first()
    )


def get_item_for_update(item_id):
    """
    Load and lock a review item inside the caller's transaction.
    NOWAIT makes a competing writer fail fast instead of queueing
    (ignored on backends without row locks, e.g. SQLite).
    """
    return ReviewItem.objects.select_for_update(nowait=True).get(pk=item_id)


def save_schedule(item, result):
    """
    Write the scheduled card back if nobody else has since the item was read.
    Returns the number of rows updated (0 means a concurrent review won).
    """
    card = result.card
    values = {name: getattr(card, name) for name in CARD_FIELDS}
    values["state"] = card.state.value
    values["next_review"] = result.next_review
    values["updated_at"] = timezone.now()
    updated = ReviewItem.objects.filter(pk=item.pk, version=item.version).update(
        **values,
        version=F("version") + 1,
    )
    if updated:
        # mirror the write so callers see this review, not a later one
        for name, value in values.items():
            setattr(item, name, value)
        item.version += 1
    return updated


# NOWAIT lock failures: PostgreSQL SQLSTATE 55P03, MySQL error 3572
LOCK_NOT_AVAILABLE_SQLSTATE = "55P03"
MYSQL_LOCK_NOWAIT_ERRNO = 3572


def is_lock_unavailable(exc):
    """True when ``exc`` is a row-lock refusal rather than any other DB failure."""
    cause = exc.__cause__
    sqlstate = getattr(cause, "sqlstate", None) or getattr(cause, "pgcode", None)
    if sqlstate == LOCK_NOT_AVAILABLE_SQLSTATE:
        return True
    args = getattr(cause, "args", None) or exc.args
    return bool(args) and args[0] == MYSQL_LOCK_NOWAIT_ERRNO


def recurring_grammar_patterns(speaker_id, min_occurrences):
    return list(
        GrammarError.objects.filter(speaker_id=speaker_id)
        .values("error_pattern")
        .annotate(occurrences=Count("id"))
        .filter(occurrences__gte=min_occurrences)
        .order_by("error_pattern")
    )


def latest_grammar_example(speaker_id, error_pattern):
    return (
        GrammarError.objects.filter(speaker_id=speaker_id, error_pattern=error_pattern)
        .order_by("-created_at")
        .values("original_text", "corrected_text")
        .first()
    )


def recurring_words(speaker_id, min_occurrences):
    return list(
        VocabularyUsage.objects.filter(speaker_id=speaker_id)
        .values("word")
        .annotate(occurrences=Count("id"))
        .filter(occurrences__gte=min_occurrences)
        .order_by("word")
    )


def latest_word_usage(speaker_id, word):
    return (
        VocabularyUsage.objects.filter(speaker_id=speaker_id, word=word)
        .order_by("-created_at")
        .values("cefr_level")
        .first()
    )


def existing_keys(speaker_id):
    return set(
        ReviewItem.objects.filter(speaker_id=speaker_id).values_list("item_type", "item_key")
    )


def upsert_display_data(speaker_id, entries):
    """
    Insert new review items or refresh display_data on existing ones, in a
    single INSERT ... ON CONFLICT statement. Scheduling columns of existing
    rows are never part of the UPDATE clause.

    ``entries`` is an iterable of (item_type, item_key, display_data).
    """
    rows = [
        ReviewItem(
            speaker_id=speaker_id,
            item_type=item_type,
            item_key=item_key,
            display_data=display_data,
        )
        for item_type, item_key, display_data in entries
    ]
    if not rows:
        return 0
    with transaction.atomic():
        ReviewItem.objects.bulk_create(
            rows,
            update_conflicts=True,
            unique_fields=["speaker", "item_type", "item_key"],
            update_fields=DISPLAY_FIELDS,
        )
    return len(rows)
