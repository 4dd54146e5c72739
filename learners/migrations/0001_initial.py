import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Speaker",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("label", models.CharField(default="Default", max_length=64)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("last_active_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
        ),
        migrations.CreateModel(
            name="GrammarError",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("error_pattern", models.CharField(max_length=255)),
                ("original_text", models.TextField(blank=True, null=True)),
                ("corrected_text", models.TextField(blank=True, null=True)),
                ("severity", models.CharField(blank=True, max_length=16, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "speaker",
                    models.ForeignKey(
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="grammar_errors",
                        to="learners.speaker",
                    ),
                ),
            ],
            options={
                "indexes": [models.Index(fields=["speaker", "error_pattern"], name="grammar_error_speaker_idx")],
            },
        ),
        migrations.CreateModel(
            name="VocabularyUsage",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("word", models.CharField(max_length=128)),
                ("was_from_hint", models.BooleanField(default=False)),
                ("used_correctly", models.BooleanField(default=True)),
                ("cefr_level", models.CharField(blank=True, max_length=2, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "speaker",
                    models.ForeignKey(
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="vocabulary_usages",
                        to="learners.speaker",
                    ),
                ),
            ],
            options={
                "indexes": [models.Index(fields=["speaker", "word"], name="vocab_usage_speaker_idx")],
            },
        ),
    ]
