import json
import os

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils.dateparse import parse_datetime

from learners.models import GrammarError, Speaker, VocabularyUsage
from scheduler.services.sync import sync_review_items


class Command(BaseCommand):
    help = "Load speakers with grammar errors and vocabulary usage from JSON, then sync review items"

    def add_arguments(self, parser):
        parser.add_argument(
            "--file", default="MOCK_DATA.json", help="JSON file name to load data from"
        )
        parser.add_argument(
            "--reset", action="store_true", help="Delete all speakers and usage rows first"
        )

    def handle(self, *args, **options):
        file_name = options["file"]
        json_file_path = file_name
        if not os.path.isabs(file_name):
            json_file_path = os.path.join(os.path.dirname(__file__), file_name)

        try:
            with open(json_file_path, encoding="utf-8") as json_file:
                data = json.load(json_file)
        except (OSError, json.JSONDecodeError) as e:
            raise CommandError(f"Error loading data: {e}") from e

        with transaction.atomic():
            if options["reset"]:
                Speaker.objects.all().delete()
                self.stdout.write(self.style.SUCCESS("All existing speaker data has been deleted"))

            speaker_ids = [self._load_speaker(entry) for entry in data.get("speakers", [])]

        for speaker_id in speaker_ids:
            summary = sync_review_items(speaker_id)
            self.stdout.write(
                f"{speaker_id}: {summary['created']} review items created, "
                f"{summary['updated']} refreshed"
            )

        self.stdout.write(
            self.style.SUCCESS(f"Usage data loaded successfully from {file_name}")
        )

    def _load_speaker(self, entry):
        speaker, _ = Speaker.objects.get_or_create(
            id=entry["id"], defaults={"label": entry.get("label", "Default")}
        )
        for row in entry.get("grammar_errors", []):
            GrammarError.objects.create(
                speaker=speaker,
                error_pattern=row["error_pattern"],
                original_text=row.get("original_text"),
                corrected_text=row.get("corrected_text"),
                severity=row.get("severity"),
                **_timestamp(row),
            )
        for row in entry.get("vocabulary", []):
            VocabularyUsage.objects.create(
                speaker=speaker,
                word=row["word"],
                cefr_level=row.get("cefr_level"),
                was_from_hint=row.get("was_from_hint", False),
                used_correctly=row.get("used_correctly", True),
                **_timestamp(row),
            )
        return speaker.id


def _timestamp(row):
    created_at = row.get("created_at")
    return {"created_at": parse_datetime(created_at)} if created_at else {}
