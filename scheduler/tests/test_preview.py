from datetime import timedelta

import pytest

from scheduler.domain.card import Card
from scheduler.domain.enums import CardState
from scheduler.domain.preview import format_interval, preview_schedule

from .helpers import NOW, ONE_DAY, learning_card, new_card, review_card


def test_preview_is_keyed_by_all_four_ratings():
    assert set(preview_schedule(new_card(), NOW)) == {1, 2, 3, 4}


def test_new_card_preview_labels():
    assert preview_schedule(new_card(), NOW) == {
        1: "1分钟",
        2: "1天",
        3: "2天",
        4: "6天",
    }


def test_learning_card_again_shows_minutes():
    assert preview_schedule(learning_card(), NOW)[1] == "1分钟"


def test_review_card_preview_uses_days_for_success():
    card = review_card(stability=30.0, last_review=NOW - 15 * ONE_DAY)
    preview = preview_schedule(card, NOW)

    assert preview[1] == "1分钟"
    for rating in (2, 3, 4):
        assert preview[rating].endswith("天")
        assert int(preview[rating][:-1]) >= 1


def test_preview_does_not_mutate_card():
    card = review_card()
    before = Card(**{f: getattr(card, f) for f in card.__dataclass_fields__})

    preview_schedule(card, NOW)

    assert card == before
    assert card.state == CardState.REVIEW


@pytest.mark.parametrize(
    "delta, label",
    [
        (timedelta(minutes=1), "1分钟"),
        (timedelta(minutes=59), "59分钟"),
        (timedelta(minutes=60), "1小时"),
        (timedelta(hours=5), "5小时"),
        (timedelta(hours=23), "23小时"),
        (timedelta(hours=24), "1天"),
        (timedelta(days=12), "12天"),
    ],
)
def test_format_interval_buckets(delta, label):
    assert format_interval(delta) == label
