import uuid

from django.db import models
from django.utils import timezone


class Speaker(models.Model):
    """
    A learner voice profile. Grammar errors and vocabulary usage are recorded
    per speaker by the evaluation pipeline and feed the review scheduler.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    label = models.CharField(max_length=64, default="Default")
    created_at = models.DateTimeField(default=timezone.now)
    last_active_at = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return f"{self.label} ({self.id})"


class GrammarError(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    speaker = models.ForeignKey(
        Speaker, null=True, on_delete=models.SET_NULL, related_name="grammar_errors"
    )
    error_pattern = models.CharField(max_length=255)
    original_text = models.TextField(null=True, blank=True)
    corrected_text = models.TextField(null=True, blank=True)
    severity = models.CharField(max_length=16, null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        indexes = [
            models.Index(fields=["speaker", "error_pattern"], name="grammar_error_speaker_idx"),
        ]


class VocabularyUsage(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    speaker = models.ForeignKey(
        Speaker, null=True, on_delete=models.SET_NULL, related_name="vocabulary_usages"
    )
    word = models.CharField(max_length=128)
    was_from_hint = models.BooleanField(default=False)
    used_correctly = models.BooleanField(default=True)
    cefr_level = models.CharField(max_length=2, null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        indexes = [
            models.Index(fields=["speaker", "word"], name="vocab_usage_speaker_idx"),
        ]
