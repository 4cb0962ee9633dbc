from django.core.management.base import BaseCommand

from apps.storage.database import DatabaseStorage


class Command(BaseCommand):
    help = "Insert the default menu into the database if no menu items exist yet."

    def handle(self, *args, **options):
        written = DatabaseStorage().seed_defaults()
        if written:
            self.stdout.write(self.style.SUCCESS(f"Inserted {written} menu items."))
        else:
            self.stdout.write("Menu items already exist, nothing to do.")
