import structlog

from ..config import get_min_occurrences
from ..data import repos
from ..domain.enums import ItemType

logger = structlog.get_logger()


def grammar_display_data(pattern, example):
    example = example or {}
    return {
        "pattern": pattern,
        "example": example.get("original_text") or "",
        "correction": example.get("corrected_text") or "",
    }


def vocabulary_display_data(word, usage):
    usage = usage or {}
    return {
        "word": word,
        "cefr_level": usage.get("cefr_level") or None,
    }


def collect_entries(speaker_id, min_occurrences):
    """(item_type, item_key, display_data) for every recurring pattern and word."""
    entries = []
    for row in repos.recurring_grammar_patterns(speaker_id, min_occurrences):
        pattern = row["error_pattern"]
        example = repos.latest_grammar_example(speaker_id, pattern)
        entries.append(
            (ItemType.GRAMMAR.value, pattern, grammar_display_data(pattern, example))
        )
    for row in repos.recurring_words(speaker_id, min_occurrences):
        word = row["word"]
        usage = repos.latest_word_usage(speaker_id, word)
        entries.append(
            (ItemType.VOCABULARY.value, word, vocabulary_display_data(word, usage))
        )
    return entries


def sync_review_items(speaker_id):
    """
    Make sure every grammar pattern and word the speaker has used at least
    ``MIN_OCCURRENCES`` times has a review item.

    Safe to run any number of times: new items start as fresh cards, and
    existing ones only get their display_data refreshed.
    """
    min_occurrences = get_min_occurrences()
    logger.info("sync_started", speaker_id=str(speaker_id), min_occurrences=min_occurrences)

    # All reads happen before the single write, so a failed aggregation leaves no trace
    entries = collect_entries(speaker_id, min_occurrences)
    known = repos.existing_keys(speaker_id)
    created = sum(1 for item_type, key, _ in entries if (item_type, key) not in known)

    repos.upsert_display_data(speaker_id, entries)

    summary = {"created": created, "updated": len(entries) - created}
    logger.info("sync_completed", speaker_id=str(speaker_id), **summary)
    return summary
