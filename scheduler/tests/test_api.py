import pytest
import logging
from django.urls import reverse
from django.utils import timezone
from datetime import timedelta
import uuid

from scheduler.data.models import ReviewItem

logger = logging.getLogger(__name__)

# Helpers

def post_review(client, item_id, rating):
    url = reverse("review")
    payload = {"item_id": str(item_id), "rating": rating}
    resp = client.post(url, data=payload, content_type="application/json")
    logger.info(
        "POST /api/review rating=%s → status=%s body=%s",
        rating,
        resp.status_code,
        resp.json(),
    )
    return resp


def get_due(client, speaker_id, **params):
    url = reverse("due-items", kwargs={"speaker_id": str(speaker_id)})
    resp = client.get(url, params)
    logger.info("GET due items → status=%s", resp.status_code)
    return resp


# Tests

@pytest.mark.django_db
def test_post_review_schedules_item(client, make_item):
    item = make_item()

    resp = post_review(client, item.pk, 3)
    data = resp.json()

    assert resp.status_code == 201
    assert data["id"] == str(item.pk)
    assert data["state"] == "Review"
    assert data["reps"] == 1
    assert data["scheduled_days"] == 2
    assert data["rating_label"] == "良好"
    logger.info("✓ Passed: Good on a new item → Review in 2 days")


@pytest.mark.django_db
def test_post_review_unknown_item_is_404(client):
    resp = post_review(client, uuid.uuid4(), 3)

    assert resp.status_code == 404
    assert resp.json()["retryable"] is False
    assert "not found" in resp.json()["error"]


@pytest.mark.django_db
@pytest.mark.parametrize("rating", [0, 5])
def test_post_review_rejects_out_of_range_rating(client, make_item, rating):
    item = make_item()

    resp = post_review(client, item.pk, rating)

    assert resp.status_code == 400
    assert ReviewItem.objects.get(pk=item.pk).reps == 0


@pytest.mark.django_db
def test_post_review_conflict_is_409(client, make_item, monkeypatch):
    from scheduler.errors import ReviewConflict
    from scheduler.api import views

    item = make_item()

    def conflicting(item_id, rating):
        raise ReviewConflict(item_id)

    monkeypatch.setattr(views, "record_review", conflicting)

    resp = post_review(client, item.pk, 3)

    assert resp.status_code == 409
    assert resp.json()["retryable"] is True


@pytest.mark.django_db
def test_due_items_endpoint_includes_and_excludes(client, make_item):
    now = timezone.now()
    due = make_item("due", next_review=now - timedelta(minutes=5))
    make_item("future", next_review=now + timedelta(days=1))

    resp = get_due(client, due.speaker_id)
    data = resp.json()

    assert resp.status_code == 200
    assert [i["id"] for i in data["items"]] == [str(due.pk)]
    assert data["items"][0]["schedule_preview"] == {
        "1": "1分钟",
        "2": "1天",
        "3": "2天",
        "4": "6天",
    }
    logger.info("✓ Passed: due items include only due entries")


@pytest.mark.django_db
def test_due_items_endpoint_limit_validation(client, speaker):
    assert get_due(client, speaker.id, limit=0).status_code == 400
    assert get_due(client, speaker.id, limit=5).status_code == 200


@pytest.mark.django_db
def test_reviewed_item_leaves_due_list(client, make_item):
    item = make_item(next_review=timezone.now() - timedelta(minutes=1))

    post_review(client, item.pk, 4)

    assert get_due(client, item.speaker_id).json()["items"] == []


@pytest.mark.django_db
def test_stats_endpoint(client, make_item):
    item = make_item("due", next_review=timezone.now() - timedelta(minutes=1))
    make_item("later", next_review=timezone.now() + timedelta(days=2))

    url = reverse("review-stats", kwargs={"speaker_id": str(item.speaker_id)})
    data = client.get(url).json()

    assert data["due_count"] == 1
    assert data["total_items"] == 2
    assert data["next_review_at"] is not None
    assert data["next_review_local"].endswith("+08:00")


@pytest.mark.django_db
def test_stats_endpoint_without_items(client, speaker):
    url = reverse("review-stats", kwargs={"speaker_id": str(speaker.id)})
    data = client.get(url).json()

    assert data == {
        "due_count": 0,
        "total_items": 0,
        "next_review_at": None,
        "next_review_local": None,
    }


@pytest.mark.django_db
def test_sync_endpoint(client, speaker, add_grammar_error):
    add_grammar_error("past_tense", "I go", "I went")
    add_grammar_error("past_tense", "I eat", "I ate")
    url = reverse("review-sync", kwargs={"speaker_id": str(speaker.id)})

    first = client.post(url)
    second = client.post(url)

    assert first.status_code == 200
    assert first.json() == {"created": 1, "updated": 0}
    assert second.json() == {"created": 0, "updated": 1}
    assert ReviewItem.objects.filter(speaker=speaker).count() == 1
