"""Integration tests for booking API endpoints."""

from __future__ import annotations

from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import LaborBooking, TractorBooking
from apps.listings.models import LaborListing, TractorListing
from apps.users.models import Profile


class BookingAPITests(APITestCase):
    """Covers requesting bookings, the status flow and party-only access."""

    def setUp(self) -> None:
        self.farmer = Profile.objects.create_user(
            email="farmer@example.com",
            password="FarmerPass123",
            full_name="Arjun Patel",
        )
        self.laborer = Profile.objects.create_user(
            email="laborer@example.com",
            password="LaborPass123",
            full_name="Ravi Kumar",
            role=Profile.Role.LABORER,
        )
        self.owner = Profile.objects.create_user(
            email="owner@example.com",
            password="OwnerPass123",
            full_name="Sunita Devi",
            role=Profile.Role.TRACTOR_OWNER,
            rc_number="MH12AB1234",
        )
        self.labor_listing = LaborListing.objects.create(
            owner=self.laborer,
            title="Harvest help",
            description="Wheat harvesting",
            location="Ludhiana",
            daily_rate=Decimal("100.00"),
        )
        self.tractor_listing = TractorListing.objects.create(
            owner=self.owner,
            title="Tractor Rental",
            description="45 HP",
            location="Nashik",
            tractor_model="Mahindra 575",
            hourly_rate=Decimal("50.00"),
            daily_rate=Decimal("400.00"),
        )
        self.labor_url = reverse("labor-booking-list")
        self.tractor_url = reverse("tractor-booking-list")

    def _request_labor(self) -> dict:
        self.client.force_authenticate(self.farmer)
        response = self.client.post(
            self.labor_url,
            {
                "listing": str(self.labor_listing.id),
                "start_date": "2024-03-01",
                "end_date": "2024-03-03",
                "notes": "Bring a sickle",
            },
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        return response.data

    def test_farmer_requests_labor(self) -> None:
        data = self._request_labor()

        self.assertEqual(data["status"], "pending")
        self.assertEqual(data["total_days"], 3)
        self.assertEqual(Decimal(data["total_amount"]), Decimal("300.00"))
        self.assertEqual(data["role"], "requester")
        self.assertEqual(data["allowed_transitions"], [])
        self.assertEqual(data["listing_title"], "Harvest help")
        self.assertEqual(LaborBooking.objects.count(), 1)

    def test_farmer_rents_tractor(self) -> None:
        self.client.force_authenticate(self.farmer)

        response = self.client.post(
            self.tractor_url,
            {
                "listing": str(self.tractor_listing.id),
                "start_at": "2024-03-01T08:00:00Z",
                "end_at": "2024-03-01T10:30:00Z",
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["total_hours"], 3)
        self.assertEqual(Decimal(response.data["total_amount"]), Decimal("150.00"))
        self.assertEqual(response.data["owner"]["full_name"], "Sunita Devi")

    def test_end_before_start_is_bad_request(self) -> None:
        self.client.force_authenticate(self.farmer)

        response = self.client.post(
            self.labor_url,
            {"listing": str(self.labor_listing.id), "start_date": "2024-03-03", "end_date": "2024-03-01"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "end before start")
        self.assertEqual(response.data["code"], "validation_error")
        self.assertFalse(LaborBooking.objects.exists())

    def test_oversized_total_is_bad_request(self) -> None:
        self.labor_listing.daily_rate = Decimal("99999999.00")
        self.labor_listing.save()
        self.client.force_authenticate(self.farmer)

        response = self.client.post(
            self.labor_url,
            {"listing": str(self.labor_listing.id), "start_date": "2024-01-01", "end_date": "2024-12-31"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "validation_error")
        self.assertFalse(LaborBooking.objects.exists())

    def test_provider_cannot_book(self) -> None:
        self.client.force_authenticate(self.laborer)

        response = self.client.post(
            self.labor_url,
            {"listing": str(self.labor_listing.id), "start_date": "2024-03-01", "end_date": "2024-03-01"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_unknown_listing_is_not_found(self) -> None:
        self.client.force_authenticate(self.farmer)

        response = self.client.post(
            self.tractor_url,
            {
                "listing": "00000000-0000-0000-0000-000000000000",
                "start_at": "2024-03-01T08:00:00Z",
                "end_at": "2024-03-01T09:00:00Z",
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(TractorBooking.objects.exists())

    def test_provider_sees_allowed_transitions_and_confirms(self) -> None:
        booking_id = self._request_labor()["id"]
        self.client.force_authenticate(self.laborer)

        detail = self.client.get(reverse("labor-booking-detail", args=[booking_id]))
        self.assertEqual(detail.status_code, status.HTTP_200_OK)
        self.assertEqual(detail.data["role"], "provider")
        self.assertEqual(detail.data["allowed_transitions"], ["confirmed", "cancelled"])

        response = self.client.post(
            reverse("labor-booking-transition", args=[booking_id]),
            {"status": "confirmed"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], "confirmed")
        self.assertEqual(response.data["allowed_transitions"], [])

    def test_requester_completes_confirmed_booking(self) -> None:
        booking_id = self._request_labor()["id"]
        LaborBooking.objects.filter(pk=booking_id).update(status=LaborBooking.Status.CONFIRMED)

        response = self.client.post(
            reverse("labor-booking-transition", args=[booking_id]),
            {"status": "completed"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], "completed")

    def test_requester_cannot_confirm(self) -> None:
        booking_id = self._request_labor()["id"]

        response = self.client.post(
            reverse("labor-booking-transition", args=[booking_id]),
            {"status": "confirmed"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["code"], "authorization_error")

    def test_invalid_transition_is_conflict(self) -> None:
        booking_id = self._request_labor()["id"]
        LaborBooking.objects.filter(pk=booking_id).update(status=LaborBooking.Status.CANCELLED)
        self.client.force_authenticate(self.laborer)

        response = self.client.post(
            reverse("labor-booking-transition", args=[booking_id]),
            {"status": "confirmed"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["current"], "cancelled")
        self.assertEqual(response.data["requested"], "confirmed")

    def test_outsider_cannot_view_booking(self) -> None:
        booking_id = self._request_labor()["id"]
        self.client.force_authenticate(self.owner)

        detail = self.client.get(reverse("labor-booking-detail", args=[booking_id]))
        listing = self.client.get(self.labor_url)

        self.assertEqual(detail.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(listing.data, [])

    def test_list_shows_bookings_involving_caller(self) -> None:
        booking_id = self._request_labor()["id"]
        self.client.force_authenticate(self.laborer)

        response = self.client.get(self.labor_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item["id"] for item in response.data], [booking_id])

    def test_my_bookings_filter_by_status(self) -> None:
        booking_id = self._request_labor()["id"]
        url = reverse("my-bookings")

        pending = self.client.get(url, {"status": "pending"})
        confirmed = self.client.get(url, {"status": "confirmed"})
        unknown = self.client.get(url, {"status": "archived"})

        self.assertEqual([item["id"] for item in pending.data], [booking_id])
        self.assertEqual(pending.data[0]["kind"], "labor")
        self.assertEqual(confirmed.data, [])
        self.assertEqual(unknown.status_code, status.HTTP_400_BAD_REQUEST)

    def test_anonymous_is_rejected(self) -> None:
        response = self.client.get(self.labor_url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
