"""Give a slug to every listing that was saved without one."""

from __future__ import annotations

from django.core.management.base import BaseCommand  # type: ignore

from apps.listings.registry import FAMILIES
from apps.listings.services import backfill_slugs


class Command(BaseCommand):
    help = "Generate missing slugs for all listing families"

    def add_arguments(self, parser):  # type: ignore
        parser.add_argument(
            "--family",
            choices=[family.key for family in FAMILIES],
            help="Only backfill one family",
        )

    def handle(self, *args, **options):  # type: ignore
        families = [f for f in FAMILIES if options.get("family") in (None, f.key)]
        total = 0
        for family in families:
            updated = backfill_slugs(family)
            total += updated
            self.stdout.write(f"{family.key}: {updated}")
        self.stdout.write(self.style.SUCCESS(f"Generated {total} slugs"))
