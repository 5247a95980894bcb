"""Seed the blogroll renderer's default settings."""

from __future__ import annotations

from django.core.management.base import BaseCommand

from blogroll.apps.renderer.lifecycle import install
from blogroll.apps.renderer.services import build_links_manager_toggle, get_settings_store


class Command(BaseCommand):
    help = (
        "Seed default blogroll settings (existing values are kept) "
        "and apply the Links Manager state."
    )

    def handle(self, *args: object, **options: object) -> None:
        seeded = install(get_settings_store())
        state = build_links_manager_toggle().reconcile()

        if seeded:
            self.stdout.write(f"Seeded: {', '.join(seeded)}")
        else:
            self.stdout.write("All settings already present.")
        self.stdout.write(self.style.SUCCESS(f"Links Manager {state.value}."))
