"""Serializers for booking endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.serializers import PublicProfileSerializer

from .models import LaborBooking, TractorBooking


class BookingViewerMixin(serializers.Serializer):
    """The viewer's side of the booking and the moves open to them."""

    kind = serializers.CharField(read_only=True)
    role = serializers.SerializerMethodField()
    allowed_transitions = serializers.SerializerMethodField()
    listing_title = serializers.SerializerMethodField()

    def _viewer(self):
        request = self.context.get("request")
        return getattr(request, "user", None)

    def get_role(self, obj) -> str | None:
        party = obj.party_of(self._viewer())
        return party.value if party else None

    def get_allowed_transitions(self, obj) -> list[str]:
        return obj.allowed_transitions_for(self._viewer())

    def get_listing_title(self, obj) -> str | None:
        return obj.listing.title if obj.listing else None


class LaborBookingSerializer(BookingViewerMixin, serializers.ModelSerializer):
    farmer = PublicProfileSerializer(read_only=True)
    laborer = PublicProfileSerializer(read_only=True)

    class Meta:
        model = LaborBooking
        fields = [
            "id",
            "kind",
            "listing",
            "listing_title",
            "farmer",
            "laborer",
            "start_date",
            "end_date",
            "total_days",
            "total_amount",
            "status",
            "notes",
            "role",
            "allowed_transitions",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class TractorBookingSerializer(BookingViewerMixin, serializers.ModelSerializer):
    farmer = PublicProfileSerializer(read_only=True)
    owner = PublicProfileSerializer(read_only=True)

    class Meta:
        model = TractorBooking
        fields = [
            "id",
            "kind",
            "listing",
            "listing_title",
            "farmer",
            "owner",
            "start_at",
            "end_at",
            "total_hours",
            "total_amount",
            "status",
            "notes",
            "role",
            "allowed_transitions",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class LaborBookingCreateSerializer(serializers.Serializer):
    listing = serializers.UUIDField()
    start_date = serializers.CharField()
    end_date = serializers.CharField()
    notes = serializers.CharField(required=False, allow_blank=True, default="")


class TractorBookingCreateSerializer(serializers.Serializer):
    listing = serializers.UUIDField()
    start_at = serializers.CharField()
    end_at = serializers.CharField()
    notes = serializers.CharField(required=False, allow_blank=True, default="")


class TransitionSerializer(serializers.Serializer):
    status = serializers.CharField()


SERIALIZERS_BY_KIND = {
    "labor": LaborBookingSerializer,
    "tractor": TractorBookingSerializer,
}


def serialize_booking(booking, context) -> dict:
    return SERIALIZERS_BY_KIND[booking.kind](booking, context=context).data
