"""API views for the booking domain."""

from __future__ import annotations

from rest_framework import generics, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .models import BookingKind
from .serializers import (
    LaborBookingCreateSerializer,
    LaborBookingSerializer,
    TractorBookingCreateSerializer,
    TractorBookingSerializer,
    TransitionSerializer,
    serialize_booking,
)
from .services import (
    bookings_for,
    bookings_involving,
    create_booking,
    get_booking_for,
    transition_booking,
)


class BookingViewSet(viewsets.GenericViewSet):
    """Request bookings of one kind and move them through their lifecycle.

    Only the two parties of a booking (the farmer and the provider) can see
    or change it.
    """

    booking_kind: str = ""
    create_serializer_class = None
    start_field: str = ""
    end_field: str = ""
    permission_classes = [permissions.IsAuthenticated]
    lookup_value_regex = "[^/]+"

    def get_queryset(self):  # type: ignore
        return bookings_involving(self.booking_kind, self.request.user)

    def list(self, request):  # type: ignore
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response(serializer.data)

    def retrieve(self, request, pk=None):  # type: ignore
        booking = get_booking_for(self.booking_kind, pk, request.user)
        return Response(self.get_serializer(booking).data)

    def create(self, request):  # type: ignore
        payload = self.create_serializer_class(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data
        booking = create_booking(
            self.booking_kind,
            data["listing"],
            request.user,
            data[self.start_field],
            data[self.end_field],
            notes=data.get("notes", ""),
        )
        return Response(self.get_serializer(booking).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["post"], serializer_class=TransitionSerializer)
    def transition(self, request, pk=None):  # type: ignore
        payload = TransitionSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        booking = transition_booking(self.booking_kind, pk, request.user, payload.validated_data["status"])
        return Response(serialize_booking(booking, self.get_serializer_context()))


class LaborBookingViewSet(BookingViewSet):
    booking_kind = BookingKind.LABOR.value
    serializer_class = LaborBookingSerializer
    create_serializer_class = LaborBookingCreateSerializer
    start_field = "start_date"
    end_field = "end_date"


class TractorBookingViewSet(BookingViewSet):
    booking_kind = BookingKind.TRACTOR.value
    serializer_class = TractorBookingSerializer
    create_serializer_class = TractorBookingCreateSerializer
    start_field = "start_at"
    end_field = "end_at"


class MyBookingsView(generics.GenericAPIView):
    """Bookings of both kinds where the caller is farmer or provider, newest first."""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):  # type: ignore
        context = self.get_serializer_context()
        bookings = bookings_for(request.user, request.query_params.get("status") or None)
        return Response([serialize_booking(booking, context) for booking in bookings])
