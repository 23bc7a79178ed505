"""Management command to flush cached Site Counts fragments."""

from django.apps import apps
from django.core.management.base import BaseCommand

from content.models import ContentMeta


class Command(BaseCommand):
    """Delete every cached Site Counts fragment."""

    help = "Delete cached Site Counts fragments from all content items"

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show what would be deleted without actually deleting",
        )

    def handle(self, *args, **options):
        dry_run = options["dry_run"]
        cache = apps.get_app_config("site_counts").block.cache

        cached = ContentMeta.objects.filter(key=cache.key)
        count = cached.count()

        if count == 0:
            self.stdout.write("No cached fragments found.")
            return

        if dry_run:
            self.stdout.write(f"Would delete {count} cached fragment(s)")
            # Show some examples
            for meta in cached.select_related("item")[:5]:
                self.stdout.write(f"  - {meta.item}")
            if count > 5:
                self.stdout.write(f"  ... and {count - 5} more")
            self.stdout.write(self.style.WARNING("\nDry run - nothing deleted"))
            return

        deleted = cache.clear_all()
        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted} cached fragment(s)"))
