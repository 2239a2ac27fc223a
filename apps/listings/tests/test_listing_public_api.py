"""Integration tests for the public listing catalogue."""

from __future__ import annotations

from django.contrib.contenttypes.models import ContentType
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.accounts.models import CustomUser
from apps.listings.models import Room
from apps.listings.serializers import PUBLIC_HIDDEN_FIELDS
from apps.reviews.models import Review

from .fixtures import create_locations, create_room


class PublicCatalogueTests(APITestCase):
    def setUp(self) -> None:
        self.state, self.city, self.area = create_locations()
        self.visible = create_room(
            self.state,
            self.city,
            self.area,
            horoo_name="Cozy Room",
            room_type=["Single", "Double"],
            available_for=["Girls"],
            real_address="Flat 4, Lane 7",
        )
        self.hidden = create_room(self.state, self.city, self.area, horoo_name="Hidden Room", is_show=False)

    def test_list_shows_only_visible_listings(self) -> None:
        response = self.client.get(reverse("listings:rooms-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["total"], 1)
        self.assertEqual(response.data["data"][0]["horoo_id"], self.visible.horoo_id)

    def test_public_fields_hide_owner_details(self) -> None:
        response = self.client.get(reverse("listings:rooms-list"))

        item = response.data["data"][0]
        for field in PUBLIC_HIDDEN_FIELDS:
            self.assertNotIn(field, item)
        self.assertEqual(item["horoo_name"], "Cozy Room")
        self.assertEqual(item["area_name"], "Kothrud")

    def test_public_filters(self) -> None:
        url = reverse("listings:rooms-list")

        girls = self.client.get(url, {"available_for": "Girls"})
        boys = self.client.get(url, {"available_for": "Boys"})
        double = self.client.get(url, {"room_type": "Double", "city": self.city.pk})

        self.assertEqual(girls.data["total"], 1)
        self.assertEqual(boys.data["total"], 0)
        self.assertEqual(double.data["total"], 1)

    def test_public_search_does_not_match_owner_contacts(self) -> None:
        url = reverse("listings:rooms-list")

        by_mobile = self.client.get(url, {"search": "9123456780"})
        by_name = self.client.get(url, {"search": "cozy"})

        self.assertEqual(by_mobile.data["total"], 0)
        self.assertEqual(by_name.data["total"], 1)

    def test_detail_by_slug_embeds_visible_reviews(self) -> None:
        content_type = ContentType.objects.get_for_model(Room)
        author = CustomUser.objects.create_user(email="asha@example.com", password="secret1", name="Asha")
        other = CustomUser.objects.create_user(email="meera@example.com", password="secret1", name="Meera")
        Review.objects.create(user=author, content_type=content_type, object_id=self.visible.pk, rating=5, message="Clean")
        Review.objects.create(
            user=other,
            content_type=content_type,
            object_id=self.visible.pk,
            rating=1,
            message="Spam",
            is_approved=False,
        )

        response = self.client.get(reverse("listings:rooms-detail", kwargs={"slug": "cozy-room"}))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        reviews = response.data["data"]["reviews"]
        self.assertEqual(len(reviews), 1)
        self.assertEqual(reviews[0]["user_name"], "Asha")
        self.assertEqual(reviews[0]["property_type"], "Room")
        self.assertNotIn("owner_mobile", response.data["data"])

    def test_detail_falls_back_to_horoo_id(self) -> None:
        response = self.client.get(
            reverse("listings:rooms-detail", kwargs={"slug": self.visible.horoo_id.lower()})
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["data"]["slug"], "cozy-room")

    def test_hidden_listing_is_not_found(self) -> None:
        response = self.client.get(reverse("listings:rooms-detail", kwargs={"slug": self.hidden.slug}))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)
        self.assertEqual(response.data["message"], "Room not found")

    def test_other_families_have_their_own_catalogue(self) -> None:
        response = self.client.get(reverse("listings:hotel-rooms-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["total"], 0)
