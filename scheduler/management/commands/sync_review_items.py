from django.core.management.base import BaseCommand

from learners.models import Speaker
from scheduler.services.sync import sync_review_items


class Command(BaseCommand):
    help = "Create or refresh review items from recurring grammar errors and vocabulary"

    def add_arguments(self, parser):
        parser.add_argument(
            "--speaker", action="append", default=[], help="Speaker id (repeatable); all speakers if omitted"
        )

    def handle(self, *args, **options):
        speaker_ids = options["speaker"] or list(
            Speaker.objects.order_by("created_at").values_list("id", flat=True)
        )
        for speaker_id in speaker_ids:
            summary = sync_review_items(speaker_id)
            self.stdout.write(
                self.style.SUCCESS(
                    f"{speaker_id}: {summary['created']} created, {summary['updated']} refreshed"
                )
            )
