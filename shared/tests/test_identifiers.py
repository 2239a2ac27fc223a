"""Tests for Horoo ID and slug generation."""

from __future__ import annotations

from django.test import TestCase

from apps.listings.models import Mess, Room
from apps.listings.tests.fixtures import create_locations, create_room
from shared.domain.identifiers import format_horoo_id, next_horoo_id


class HorooIdTests(TestCase):
    def setUp(self) -> None:
        self.locations = create_locations()

    def test_format_pads_to_four_digits(self) -> None:
        self.assertEqual(format_horoo_id("MES", 12), "MES0012")
        self.assertEqual(format_horoo_id("HRM", 10000), "HRM10000")

    def test_empty_family_starts_at_one(self) -> None:
        self.assertEqual(next_horoo_id(Room, "HRM"), "HRM0001")
        self.assertEqual(next_horoo_id(Mess, "MES"), "MES0001")

    def test_counter_follows_latest_record(self) -> None:
        create_room(*self.locations)
        create_room(*self.locations)

        self.assertEqual(next_horoo_id(Room, "HRM"), "HRM0003")

    def test_counter_skips_identifiers_already_taken(self) -> None:
        first = create_room(*self.locations)
        create_room(*self.locations)
        Room.objects.filter(pk=first.pk).update(horoo_id="HRM0003")

        self.assertEqual(next_horoo_id(Room, "HRM"), "HRM0004")

    def test_families_count_independently(self) -> None:
        room = create_room(*self.locations)
        mess = Mess.objects.create(
            owner_name="Ravi",
            owner_mobile="9123456780",
            state=room.state,
            city=room.city,
            area=room.area,
            pincode="411038",
            owner_price=room.owner_price,
            horoo_name="Annapurna Mess",
        )

        self.assertEqual(room.horoo_id, "HRM0001")
        self.assertEqual(mess.horoo_id, "MES0001")


class SlugTests(TestCase):
    def setUp(self) -> None:
        self.locations = create_locations()

    def test_slug_comes_from_display_name(self) -> None:
        room = create_room(*self.locations, horoo_name="Cozy Room @ Kothrud!")

        self.assertEqual(room.slug, "cozy-room-kothrud")

    def test_property_name_is_used_without_horoo_name(self) -> None:
        room = create_room(*self.locations, horoo_name="", property_name="Ravi Residency")

        self.assertEqual(room.slug, "ravi-residency")

    def test_collisions_get_numeric_suffixes(self) -> None:
        slugs = [create_room(*self.locations, horoo_name="Cozy Room").slug for _ in range(3)]

        self.assertEqual(slugs, ["cozy-room", "cozy-room-1", "cozy-room-2"])

    def test_unsluggable_name_falls_back_to_horoo_id(self) -> None:
        room = create_room(*self.locations, horoo_name="!!!")

        self.assertEqual(room.slug, room.horoo_id.lower())
