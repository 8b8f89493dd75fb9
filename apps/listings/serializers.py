"""Serializers for listing endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.serializers import PublicProfileSerializer

from .models import LaborListing, TractorListing


class ListingFlagsMixin(serializers.Serializer):
    """Action flags for the requesting profile."""

    kind = serializers.CharField(read_only=True)
    is_owner = serializers.SerializerMethodField()
    can_book = serializers.SerializerMethodField()

    def _viewer(self):
        request = self.context.get("request")
        user = getattr(request, "user", None)
        if user is None or not user.is_authenticated:
            return None
        return user

    def get_is_owner(self, obj) -> bool:
        return obj.is_owned_by(self._viewer())

    def get_can_book(self, obj) -> bool:
        viewer = self._viewer()
        return bool(viewer and viewer.is_farmer() and obj.is_available)


class LaborListingSerializer(ListingFlagsMixin, serializers.ModelSerializer):
    owner = PublicProfileSerializer(read_only=True)

    class Meta:
        model = LaborListing
        fields = [
            "id",
            "kind",
            "owner",
            "title",
            "description",
            "skills",
            "daily_rate",
            "experience_years",
            "location",
            "availability_status",
            "is_owner",
            "can_book",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class TractorListingSerializer(ListingFlagsMixin, serializers.ModelSerializer):
    owner = PublicProfileSerializer(read_only=True)

    class Meta:
        model = TractorListing
        fields = [
            "id",
            "kind",
            "owner",
            "title",
            "description",
            "tractor_model",
            "horsepower",
            "year",
            "hourly_rate",
            "daily_rate",
            "location",
            "image_url",
            "availability_status",
            "is_owner",
            "can_book",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class AvailabilitySerializer(serializers.Serializer):
    availability_status = serializers.CharField()


SERIALIZERS_BY_KIND = {
    "labor": LaborListingSerializer,
    "tractor": TractorListingSerializer,
}


def serialize_listing(listing, context) -> dict:
    return SERIALIZERS_BY_KIND[listing.kind](listing, context=context).data
