import pytest

from learners.models import GrammarError, Speaker, VocabularyUsage
from scheduler.data.models import ReviewItem

from .helpers import NOW


@pytest.fixture
def speaker(db):
    return Speaker.objects.create(label="test")


@pytest.fixture
def other_speaker(db):
    return Speaker.objects.create(label="other")


@pytest.fixture
def make_item(speaker):
    def _make(item_key="past_tense", item_type="grammar", **fields):
        return ReviewItem.objects.create(
            speaker=speaker,
            item_type=item_type,
            item_key=item_key,
            display_data={"pattern": item_key},
            **fields,
        )

    return _make


@pytest.fixture
def add_grammar_error(speaker):
    def _add(pattern, original="", corrected="", created_at=None, owner=None):
        return GrammarError.objects.create(
            speaker=owner or speaker,
            error_pattern=pattern,
            original_text=original,
            corrected_text=corrected,
            created_at=created_at or NOW,
        )

    return _add


@pytest.fixture
def add_word_usage(speaker):
    def _add(word, cefr_level=None, created_at=None, owner=None):
        return VocabularyUsage.objects.create(
            speaker=owner or speaker,
            word=word,
            cefr_level=cefr_level,
            created_at=created_at or NOW,
        )

    return _add
