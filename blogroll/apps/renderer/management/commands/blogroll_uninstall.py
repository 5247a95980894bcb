"""Remove every setting the blogroll renderer owns."""

from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from blogroll.apps.renderer.lifecycle import uninstall
from blogroll.apps.renderer.services import get_settings_store


class Command(BaseCommand):
    help = "Delete all blogroll renderer settings."

    def add_arguments(self, parser):
        parser.add_argument(
            "--yes",
            action="store_true",
            help="Confirm deletion without prompting.",
        )
        parser.add_argument(
            "--noinput",
            "--no-input",
            action="store_false",
            dest="interactive",
            help="Fail instead of prompting when --yes is not given.",
        )

    def handle(self, *args: object, **options: object) -> None:
        if not options["yes"]:
            if not options["interactive"]:
                raise CommandError("Refusing to delete settings without --yes")
            answer = input("Delete all blogroll settings? [y/N] ")
            if answer.strip().lower() not in {"y", "yes"}:
                raise CommandError("Aborted")

        deleted = uninstall(get_settings_store())
        self.stdout.write(self.style.SUCCESS(f"Deleted: {', '.join(deleted)}"))
