import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("learners", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ReviewItem",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "item_type",
                    models.CharField(choices=[("grammar", "grammar"), ("vocabulary", "vocabulary")], max_length=16),
                ),
                ("item_key", models.CharField(max_length=255)),
                ("display_data", models.JSONField(default=dict)),
                ("stability", models.FloatField(default=0)),
                ("difficulty", models.FloatField(default=0)),
                ("elapsed_days", models.FloatField(default=0)),
                ("scheduled_days", models.PositiveIntegerField(default=0)),
                ("reps", models.PositiveIntegerField(default=0)),
                ("lapses", models.PositiveIntegerField(default=0)),
                (
                    "state",
                    models.CharField(
                        choices=[
                            ("New", "New"),
                            ("Learning", "Learning"),
                            ("Review", "Review"),
                            ("Relearning", "Relearning"),
                        ],
                        default="New",
                        max_length=16,
                    ),
                ),
                ("last_review", models.DateTimeField(blank=True, null=True)),
                ("next_review", models.DateTimeField(default=django.utils.timezone.now)),
                ("version", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "speaker",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="review_items",
                        to="learners.speaker",
                    ),
                ),
            ],
            options={
                "unique_together": {("speaker", "item_type", "item_key")},
                "indexes": [models.Index(fields=["speaker", "next_review"], name="review_item_due_idx")],
            },
        ),
    ]
