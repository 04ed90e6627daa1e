import csv

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from apps.players.coercion import NAME_FIELDS
from apps.players.services import create_player


class Command(BaseCommand):
    help = "Bulk import players from CSV (header row uses the players column names)"

    def add_arguments(self, parser):
        parser.add_argument("--file", type=str, required=True)

    def handle(self, *args, **options):
        file_path = options["file"]
        created = 0
        skipped = 0

        with open(file_path, newline="", encoding="utf-8") as handle:
            reader = csv.DictReader(handle)
            if not set(NAME_FIELDS).issubset(reader.fieldnames or []):
                raise CommandError("CSV must include first_name and last_name columns")

            for line_no, row in enumerate(reader, start=2):
                try:
                    player = create_player(row)
                except ValidationError as exc:
                    skipped += 1
                    self.stderr.write(f"line {line_no}: {' '.join(exc.messages)}")
                    continue
                created += 1
                if options["verbosity"] >= 2:
                    self.stdout.write(f"Created #{player['id']} {player['first_name']} {player['last_name']}")

        self.stdout.write(self.style.SUCCESS(f"Created={created} skipped={skipped}"))
