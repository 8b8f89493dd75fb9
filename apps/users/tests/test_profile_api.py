"""API tests for the own-profile endpoint."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import Profile


class ProfileAPITests(APITestCase):
    def setUp(self) -> None:
        self.laborer = Profile.objects.create_user(
            email="laborer@example.com",
            password="LaborPass123",
            full_name="Ravi Kumar",
            role=Profile.Role.LABORER,
        )
        self.url = reverse("profile-me")

    def test_requires_authentication(self) -> None:
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_returns_capability_flags(self) -> None:
        self.client.force_authenticate(self.laborer)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["listing_kind"], "labor")
        self.assertTrue(response.data["can_create_listing"])

    def test_patch_updates_profile_but_not_role(self) -> None:
        self.client.force_authenticate(self.laborer)

        response = self.client.patch(
            self.url,
            {"location": "Ludhiana", "bio": "Ten years of harvesting", "role": "farmer"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.laborer.refresh_from_db()
        self.assertEqual(self.laborer.location, "Ludhiana")
        self.assertEqual(self.laborer.bio, "Ten years of harvesting")
        self.assertEqual(self.laborer.role, Profile.Role.LABORER)

    def test_invalid_phone_rejected(self) -> None:
        self.client.force_authenticate(self.laborer)

        response = self.client.patch(self.url, {"phone": "call me"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("phone", response.data)


class ProfileModelTests(APITestCase):
    def test_listing_kind_follows_role(self) -> None:
        farmer = Profile(email="f@example.com", role=Profile.Role.FARMER)
        laborer = Profile(email="l@example.com", role=Profile.Role.LABORER)
        owner = Profile(email="o@example.com", role=Profile.Role.TRACTOR_OWNER, rc_number="  ")

        self.assertIsNone(farmer.listing_kind)
        self.assertFalse(farmer.can_create_listing)
        self.assertEqual(laborer.listing_kind, "labor")
        self.assertEqual(owner.listing_kind, "tractor")
        self.assertFalse(owner.has_registration_number)
