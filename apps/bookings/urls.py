"""URL routing for the booking domain."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import LaborBookingViewSet, MyBookingsView, TractorBookingViewSet

router = DefaultRouter()
router.register(r"labor", LaborBookingViewSet, basename="labor-booking")
router.register(r"tractor", TractorBookingViewSet, basename="tractor-booking")

urlpatterns = [
    path("mine/", MyBookingsView.as_view(), name="my-bookings"),
    path("", include(router.urls)),
]
