import uuid

from django.db import models
from django.utils import timezone

from ..domain.card import Card
from ..domain.enums import CardState, ItemType


class ReviewItem(models.Model):
    """Persisted FSRS card for one grammar pattern or word of one speaker."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    speaker = models.ForeignKey(
        "learners.Speaker", on_delete=models.CASCADE, related_name="review_items"
    )
    item_type = models.CharField(
        max_length=16, choices=[(t.value, t.value) for t in ItemType]
    )
    item_key = models.CharField(max_length=255)
    display_data = models.JSONField(default=dict)

    stability = models.FloatField(default=0)
    difficulty = models.FloatField(default=0)
    elapsed_days = models.FloatField(default=0)
    scheduled_days = models.PositiveIntegerField(default=0)
    reps = models.PositiveIntegerField(default=0)
    lapses = models.PositiveIntegerField(default=0)
    state = models.CharField(
        max_length=16,
        choices=[(s.value, s.value) for s in CardState],
        default=CardState.NEW.value,
    )
    last_review = models.DateTimeField(null=True, blank=True)
    next_review = models.DateTimeField(default=timezone.now)  # UTC

    # Bumped on every recorded review; guards against lost updates
    version = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        unique_together = (("speaker", "item_type", "item_key"),)
        indexes = [
            models.Index(fields=["speaker", "next_review"], name="review_item_due_idx"),
        ]

    def __str__(self):
        return f"{self.item_type}:{self.item_key}"

    def as_card(self) -> Card:
        return Card(
            stability=self.stability,
            difficulty=self.difficulty,
            elapsed_days=self.elapsed_days,
            scheduled_days=self.scheduled_days,
            reps=self.reps,
            lapses=self.lapses,
            state=CardState(self.state),
            last_review=self.last_review,
        )
