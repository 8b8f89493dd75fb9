"""Integration tests for listing API endpoints."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.listings.models import LaborListing, TractorListing
from apps.users.models import Profile


class ListingAPITests(APITestCase):
    """Covers browsing, publishing and owner-only management of listings."""

    def setUp(self) -> None:
        self.laborer = Profile.objects.create_user(
            email="laborer@example.com",
            password="LaborPass123",
            full_name="Ravi Kumar",
            role=Profile.Role.LABORER,
        )
        self.tractor_owner = Profile.objects.create_user(
            email="owner@example.com",
            password="OwnerPass123",
            full_name="Sunita Devi",
            role=Profile.Role.TRACTOR_OWNER,
            rc_number="MH12AB1234",
        )
        self.farmer = Profile.objects.create_user(
            email="farmer@example.com",
            password="FarmerPass123",
            full_name="Arjun Patel",
        )
        self.tractor = TractorListing.objects.create(
            owner=self.tractor_owner,
            title="Tractor Rental",
            description="Reliable 45 HP tractor",
            location="Nashik",
            tractor_model="Mahindra 575",
            hourly_rate="60.00",
            daily_rate="400.00",
        )
        self.labor = LaborListing.objects.create(
            owner=self.laborer,
            title="Harvest help",
            description="Wheat and paddy harvesting",
            location="Ludhiana",
            skills=["harvesting"],
            daily_rate="100.00",
        )

    def test_anonymous_search_by_text(self) -> None:
        response = self.client.get(reverse("tractor-listing-list"), {"q": "trac"})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["title"], "Tractor Rental")
        self.assertEqual(response.data[0]["kind"], "tractor")
        self.assertFalse(response.data[0]["is_owner"])
        self.assertFalse(response.data[0]["can_book"])

    def test_search_without_match_returns_empty_list(self) -> None:
        response = self.client.get(reverse("labor-listing-list"), {"q": "welding", "location": "Ludhiana"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [])

    def test_rate_filter_narrows_search(self) -> None:
        url = reverse("labor-listing-list")

        self.assertEqual(len(self.client.get(url, {"max_daily_rate": "150"}).data), 1)
        self.assertEqual(len(self.client.get(url, {"max_daily_rate": "50"}).data), 0)

    def test_farmer_sees_can_book_flag(self) -> None:
        self.client.force_authenticate(self.farmer)

        response = self.client.get(reverse("labor-listing-detail", args=[self.labor.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["can_book"])
        self.assertEqual(response.data["owner"]["full_name"], "Ravi Kumar")

    def test_unknown_listing_returns_404(self) -> None:
        response = self.client.get(reverse("labor-listing-detail", args=["missing"]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["code"], "not_found")

    def test_laborer_creates_listing(self) -> None:
        self.client.force_authenticate(self.laborer)
        payload = {
            "title": "Sowing crew",
            "description": "Team of three",
            "location": "Ludhiana",
            "skills": ["sowing", "weeding"],
            "daily_rate": "300",
            "experience_years": 4,
        }

        response = self.client.post(reverse("labor-listing-list"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["skills"], ["sowing", "weeding"])
        self.assertTrue(response.data["is_owner"])
        self.assertEqual(LaborListing.objects.filter(owner=self.laborer).count(), 2)

    def test_farmer_cannot_create_listing(self) -> None:
        self.client.force_authenticate(self.farmer)

        response = self.client.post(
            reverse("labor-listing-list"),
            {"title": "x", "description": "y", "location": "z", "daily_rate": "10"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["code"], "authorization_error")

    def test_laborer_cannot_publish_tractor(self) -> None:
        self.client.force_authenticate(self.laborer)

        response = self.client.post(reverse("tractor-listing-list"), {"title": "x"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_tractor_without_registration_number_rejected(self) -> None:
        self.tractor_owner.rc_number = ""
        self.tractor_owner.save()
        self.client.force_authenticate(self.tractor_owner)
        payload = {
            "title": "Second tractor",
            "description": "Compact",
            "location": "Nashik",
            "tractor_model": "Sonalika DI 35",
            "hourly_rate": "50",
            "daily_rate": "350",
        }

        response = self.client.post(reverse("tractor-listing-list"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["field"], "rc_number")
        self.assertEqual(TractorListing.objects.count(), 1)

    def test_anonymous_cannot_create(self) -> None:
        response = self.client.post(reverse("labor-listing-list"), {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_owner_toggles_availability(self) -> None:
        self.client.force_authenticate(self.tractor_owner)
        url = reverse("tractor-listing-availability", args=[self.tractor.id])

        response = self.client.post(url, {"availability_status": "rented"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["availability_status"], "rented")
        search = self.client.get(reverse("tractor-listing-list"))
        self.assertEqual(search.data, [])

    def test_non_owner_cannot_toggle_availability(self) -> None:
        self.client.force_authenticate(self.farmer)
        url = reverse("tractor-listing-availability", args=[self.tractor.id])

        response = self.client.post(url, {"availability_status": "rented"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.tractor.refresh_from_db()
        self.assertEqual(self.tractor.availability_status, "available")

    def test_owner_deletes_listing(self) -> None:
        self.client.force_authenticate(self.laborer)

        response = self.client.delete(reverse("labor-listing-detail", args=[self.labor.id]))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(LaborListing.objects.exists())

    def test_non_owner_cannot_delete(self) -> None:
        self.client.force_authenticate(self.tractor_owner)

        response = self.client.delete(reverse("labor-listing-detail", args=[self.labor.id]))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(LaborListing.objects.exists())

    def test_my_listings_include_unavailable(self) -> None:
        self.tractor.availability_status = TractorListing.Availability.MAINTENANCE
        self.tractor.save()
        self.client.force_authenticate(self.tractor_owner)

        response = self.client.get(reverse("my-listings"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item["id"] for item in response.data], [str(self.tractor.id)])
        self.assertEqual(response.data[0]["availability_status"], "maintenance")
