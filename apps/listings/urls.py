"""URL routing for listings."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import LaborListingViewSet, MyListingsView, TractorListingViewSet

router = DefaultRouter()
router.register(r"labor", LaborListingViewSet, basename="labor-listing")
router.register(r"tractors", TractorListingViewSet, basename="tractor-listing")

urlpatterns = [
    path("mine/", MyListingsView.as_view(), name="my-listings"),
    path("", include(router.urls)),
]
