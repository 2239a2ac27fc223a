"""Integration tests for the admin listing catalogue."""

from __future__ import annotations

from io import StringIO
from unittest import mock

from django.core.management import call_command
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.accounts.models import CustomUser
from apps.listings.models import Commercial, Flat, Room
from apps.locations.models import Location
from shared.infrastructure.media import MediaUploadError

from .fixtures import create_locations, create_room

IMAGE = "data:image/png;base64,iVBORw0KGgo="
STORED = "https://media.test/horoo-test/horoo-properties/rooms/HRM0001/photo.png"


class ListingCreateTests(APITestCase):
    def setUp(self) -> None:
        self.admin = CustomUser.objects.create_superuser(email="admin@horoo.in", password="secret1", name="Admin")
        self.state, self.city, self.area = create_locations()
        self.client.force_authenticate(self.admin)

    def _room_payload(self, **overrides) -> dict:
        payload = {
            "owner_name": "Ravi Kumar",
            "owner_mobile": "9123456780",
            "state": self.state.pk,
            "city": self.city.pk,
            "area": self.area.pk,
            "pincode": "411038",
            "owner_price": "4500.00",
            "room_type": ["Single", "Double"],
            "available_for": ["Boys"],
            "facilities": ["WiFi", "Parking"],
            "nearby_areas": ["Karve Nagar"],
        }
        payload.update(overrides)
        return payload

    def test_room_gets_identifier_and_defaults(self) -> None:
        response = self.client.post(reverse("listings:admin-rooms-list"), self._room_payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["message"], "Room added successfully")
        data = response.data["data"]
        self.assertEqual(data["horoo_id"], "HRM0001")
        self.assertEqual(data["property_name"], "Room HRM0001")
        self.assertEqual(data["horoo_name"], "Room HRM0001")
        self.assertEqual(data["horoo_price"], "4500.00")
        self.assertEqual(data["slug"], "room-hrm0001")
        self.assertEqual(data["average_rating"], 3.5)
        self.assertEqual(data["total_ratings"], 0)
        self.assertEqual(data["property_type"], "Room")
        self.assertEqual(data["state_name"], "Maharashtra")
        self.assertEqual(data["room_type"], ["Single", "Double"])

    def test_identifiers_continue_from_latest(self) -> None:
        url = reverse("listings:admin-rooms-list")

        self.client.post(url, self._room_payload(), format="json")
        second = self.client.post(url, self._room_payload(), format="json")

        self.assertEqual(second.status_code, status.HTTP_201_CREATED, second.data)
        self.assertEqual(second.data["data"]["horoo_id"], "HRM0002")
        self.assertEqual(second.data["data"]["slug"], "room-hrm0002")

    def test_missing_required_fields(self) -> None:
        response = self.client.post(reverse("listings:admin-rooms-list"), {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["message"], "Required fields are missing")
        for field in ("owner_name", "owner_mobile", "state", "city", "area", "pincode", "owner_price"):
            self.assertIn(field, response.data["errors"]["missing_fields"])
        self.assertNotIn("property_name", response.data["errors"]["missing_fields"])

    def test_flat_requires_names_and_horoo_price(self) -> None:
        response = self.client.post(reverse("listings:admin-flats-list"), self._room_payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        missing = response.data["errors"]["missing_fields"]
        self.assertIn("property_name", missing)
        self.assertIn("horoo_name", missing)
        self.assertIn("horoo_price", missing)
        self.assertEqual(Flat.objects.count(), 0)

    def test_flat_is_created_with_its_type_lists(self) -> None:
        payload = self._room_payload(
            property_name="Green Heights",
            horoo_name="Green Heights 2BHK",
            horoo_price="15000.00",
            flat_type=["2BHK"],
        )

        response = self.client.post(reverse("listings:admin-flats-list"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["message"], "Flat added successfully")
        self.assertEqual(response.data["data"]["horoo_id"], "HFT0001")
        self.assertEqual(response.data["data"]["slug"], "green-heights-2bhk")
        self.assertEqual(response.data["data"]["flat_type"], ["2BHK"])

    def test_commercial_accepts_free_form_tags(self) -> None:
        payload = self._room_payload(
            property_name="Market Yard Shop",
            horoo_name="Shop near Market Yard",
            horoo_price="25000.00",
            commercial_type=["Shop", "Godown"],
            available_for=["Retail"],
        )
        payload.pop("room_type")

        response = self.client.post(reverse("listings:admin-commercials-list"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        commercial = Commercial.objects.get()
        self.assertEqual(commercial.horoo_id, "HCL0001")
        self.assertEqual(commercial.available_for, ["Retail"])

    def test_unknown_room_type_is_rejected(self) -> None:
        response = self.client.post(
            reverse("listings:admin-rooms-list"), self._room_payload(room_type=["Quad"]), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("room_type", response.data["errors"])

    def test_unknown_state_is_not_found(self) -> None:
        response = self.client.post(
            reverse("listings:admin-rooms-list"), self._room_payload(state=9999), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)
        self.assertEqual(response.data["message"], "State not found")

    def test_area_passed_as_city_is_not_found(self) -> None:
        response = self.client.post(
            reverse("listings:admin-rooms-list"), self._room_payload(city=self.area.pk), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)
        self.assertEqual(response.data["message"], "City not found")

    def test_city_must_belong_to_state(self) -> None:
        other_state = Location.objects.create(kind=Location.Kind.STATE, name="Karnataka")

        response = self.client.post(
            reverse("listings:admin-rooms-list"), self._room_payload(state=other_state.pk), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["message"], "City does not belong to the selected state.")

    @mock.patch("apps.listings.services.get_uploader")
    def test_inline_images_are_uploaded(self, get_uploader) -> None:
        get_uploader.return_value.upload_base64.return_value = STORED

        response = self.client.post(
            reverse("listings:admin-rooms-list"),
            self._room_payload(main_image=IMAGE, other_images=[IMAGE, "https://cdn.example.com/a.jpg"]),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        uploader = get_uploader.return_value
        uploader.upload_base64.assert_any_call(IMAGE, "horoo-properties/rooms/HRM0001")
        uploader.upload_base64.assert_any_call(IMAGE, "horoo-properties/rooms/HRM0001/gallery")
        room = Room.objects.get()
        self.assertEqual(room.main_image, STORED)
        self.assertEqual(room.other_images, [STORED, "https://cdn.example.com/a.jpg"])

    @mock.patch("apps.listings.services.get_uploader")
    def test_remote_urls_are_stored_as_given(self, get_uploader) -> None:
        response = self.client.post(
            reverse("listings:admin-rooms-list"),
            self._room_payload(main_image="https://cdn.example.com/main.jpg"),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        get_uploader.assert_not_called()
        self.assertEqual(Room.objects.get().main_image, "https://cdn.example.com/main.jpg")

    @mock.patch("apps.listings.services.get_uploader")
    def test_upload_failure_is_bad_gateway(self, get_uploader) -> None:
        get_uploader.return_value.upload_base64.side_effect = MediaUploadError("bucket unavailable")

        response = self.client.post(
            reverse("listings:admin-rooms-list"), self._room_payload(main_image=IMAGE), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY, response.data)
        self.assertEqual(response.data["message"], "Failed to upload main image")
        self.assertEqual(Room.objects.count(), 0)

    @mock.patch("apps.listings.services.get_uploader")
    def test_gallery_upload_failure_is_bad_gateway(self, get_uploader) -> None:
        get_uploader.return_value.upload_base64.side_effect = MediaUploadError("bucket unavailable")

        response = self.client.post(
            reverse("listings:admin-rooms-list"), self._room_payload(other_images=[IMAGE]), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY, response.data)
        self.assertEqual(response.data["message"], "Failed to upload other images")

    def test_only_admins_create(self) -> None:
        user = CustomUser.objects.create_user(email="asha@example.com", password="secret1", name="Asha")
        self.client.force_authenticate(user)

        response = self.client.post(reverse("listings:admin-rooms-list"), self._room_payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN, response.data)


class ListingAdminCatalogueTests(APITestCase):
    def setUp(self) -> None:
        self.admin = CustomUser.objects.create_superuser(email="admin@horoo.in", password="secret1", name="Admin")
        self.state, self.city, self.area = create_locations()
        self.single = create_room(self.state, self.city, self.area, horoo_name="Single Room", is_show=False)
        self.double = create_room(
            self.state,
            self.city,
            self.area,
            horoo_name="Double Room",
            room_type=["Single", "Double"],
            owner_mobile="9000011111",
            nearby_areas=["Karve Nagar"],
        )
        self.client.force_authenticate(self.admin)
        self.list_url = reverse("listings:admin-rooms-list")

    def test_list_is_newest_first_with_total(self) -> None:
        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["total"], 2)
        self.assertEqual([item["horoo_id"] for item in response.data["data"]], ["HRM0002", "HRM0001"])
        self.assertIn("owner_mobile", response.data["data"][0])

    def test_type_list_filter(self) -> None:
        response = self.client.get(self.list_url, {"room_type": "Double"})

        self.assertEqual(response.data["total"], 1)
        self.assertEqual(response.data["data"][0]["horoo_id"], self.double.horoo_id)

    def test_visibility_filter(self) -> None:
        response = self.client.get(self.list_url, {"is_show": "false"})

        self.assertEqual(response.data["total"], 1)
        self.assertEqual(response.data["data"][0]["horoo_id"], self.single.horoo_id)

    def test_search_covers_owner_contacts(self) -> None:
        by_mobile = self.client.get(self.list_url, {"search": "900001"})
        by_nearby = self.client.get(self.list_url, {"search": "karve"})

        self.assertEqual(by_mobile.data["total"], 1)
        self.assertEqual(by_nearby.data["total"], 1)
        self.assertEqual(by_nearby.data["data"][0]["horoo_id"], self.double.horoo_id)

    def test_location_filters(self) -> None:
        response = self.client.get(self.list_url, {"area": self.area.pk})
        empty = self.client.get(self.list_url, {"city": self.state.pk})

        self.assertEqual(response.data["total"], 2)
        self.assertEqual(empty.data["total"], 0)

    def test_retrieve_by_id_and_horoo_id(self) -> None:
        by_id = self.client.get(reverse("listings:admin-rooms-detail", args=[self.single.pk]))
        by_horoo = self.client.get(
            reverse("listings:admin-rooms-by-horoo-id", kwargs={"horoo_id": self.single.horoo_id.lower()})
        )

        self.assertEqual(by_id.status_code, status.HTTP_200_OK, by_id.data)
        self.assertEqual(by_horoo.status_code, status.HTTP_200_OK, by_horoo.data)
        self.assertEqual(by_horoo.data["data"]["id"], self.single.pk)

    def test_missing_listing_is_not_found(self) -> None:
        by_id = self.client.get(reverse("listings:admin-rooms-detail", args=[9999]))
        by_horoo = self.client.get(reverse("listings:admin-rooms-by-horoo-id", kwargs={"horoo_id": "HRM9999"}))

        self.assertEqual(by_id.status_code, status.HTTP_404_NOT_FOUND, by_id.data)
        self.assertEqual(by_id.data["message"], "Room not found")
        self.assertEqual(by_horoo.status_code, status.HTTP_404_NOT_FOUND, by_horoo.data)

    def test_non_numeric_id_is_not_found(self) -> None:
        response = self.client.get(reverse("listings:admin-rooms-detail", args=["abc"]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)
        self.assertEqual(response.data["message"], "Room not found")

    def test_update_keeps_identifier_and_slug(self) -> None:
        url = reverse("listings:admin-rooms-detail", args=[self.single.pk])

        response = self.client.patch(url, {"horoo_name": "Sunny Room", "horoo_id": "HRM9999"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.single.refresh_from_db()
        self.assertEqual(self.single.horoo_name, "Sunny Room")
        self.assertEqual(self.single.horoo_id, "HRM0001")
        self.assertEqual(self.single.slug, "single-room")

    def test_cleared_slug_is_regenerated(self) -> None:
        url = reverse("listings:admin-rooms-detail", args=[self.single.pk])
        self.client.patch(url, {"horoo_name": "Sunny Room"}, format="json")

        response = self.client.patch(url, {"slug": ""}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["data"]["slug"], "sunny-room")

    def test_update_revalidates_locations(self) -> None:
        other_state, other_city, other_area = create_locations("Karnataka", "Bengaluru", "Indiranagar")
        url = reverse("listings:admin-rooms-detail", args=[self.single.pk])

        mismatched = self.client.patch(url, {"city": other_city.pk}, format="json")
        moved = self.client.patch(
            url, {"state": other_state.pk, "city": other_city.pk, "area": other_area.pk}, format="json"
        )

        self.assertEqual(mismatched.status_code, status.HTTP_400_BAD_REQUEST, mismatched.data)
        self.assertEqual(moved.status_code, status.HTTP_200_OK, moved.data)
        self.assertEqual(moved.data["data"]["city_name"], "Bengaluru")

    def test_duplicate_names_get_numbered_slugs(self) -> None:
        third = create_room(self.state, self.city, self.area, horoo_name="Single Room")

        self.assertEqual(self.single.slug, "single-room")
        self.assertEqual(third.slug, "single-room-1")

    def test_generate_slugs(self) -> None:
        Room.objects.filter(pk=self.single.pk).update(slug=None)
        Room.objects.filter(pk=self.double.pk).update(slug="")

        response = self.client.post(reverse("listings:admin-rooms-generate-slugs"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["data"], {"updated": 2})
        self.single.refresh_from_db()
        self.assertEqual(self.single.slug, "single-room")

    def test_backfill_command(self) -> None:
        Room.objects.filter(pk=self.single.pk).update(slug=None)
        out = StringIO()

        call_command("backfill_listing_slugs", stdout=out)

        self.single.refresh_from_db()
        self.assertEqual(self.single.slug, "single-room")
        self.assertIn("Generated 1 slugs", out.getvalue())

    def test_non_admin_cannot_list(self) -> None:
        user = CustomUser.objects.create_user(email="asha@example.com", password="secret1", name="Asha")
        self.client.force_authenticate(user)

        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN, response.data)

    def test_owner_profile_groups_listings(self) -> None:
        owner = CustomUser.objects.create_owner(
            email="ravi@example.com", password="secret1", name="Ravi", mobile="9123456780"
        )
        Room.objects.filter(pk=self.single.pk).update(owner=owner)

        response = self.client.get(reverse("owner:profile", args=[owner.pk]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        listings = response.data["data"]["listings"]
        self.assertEqual([item["horoo_id"] for item in listings["rooms"]], ["HRM0001"])
        self.assertEqual(listings["flats"], [])
