"""Listing API views."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import generics, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.domain.exceptions import AuthorizationError

from .filters import LaborListingFilterSet, TractorListingFilterSet
from .models import ListingKind
from .serializers import (
    AvailabilitySerializer,
    LaborListingSerializer,
    TractorListingSerializer,
    serialize_listing,
)
from .services import (
    create_listing,
    delete_listing,
    get_listing,
    get_listing_model,
    listings_owned_by,
    search_listings,
    set_availability,
)


class ListingViewSet(viewsets.GenericViewSet):
    """Browse and manage listings of a single kind.

    ``?q=`` matches title, description and the kind's own text fields;
    ``?location=`` matches the listing location. Both are
    case-insensitive substring matches and only available listings are
    returned.
    """

    listing_kind: str = ""
    filter_backends = [DjangoFilterBackend]
    permission_classes = [permissions.IsAuthenticated]
    lookup_value_regex = "[^/]+"

    def get_permissions(self):  # type: ignore
        if self.action in {"list", "retrieve"}:
            return [permissions.AllowAny()]
        return super().get_permissions()

    def get_queryset(self):  # type: ignore
        if self.action == "list":
            params = self.request.query_params
            return search_listings(self.listing_kind, params.get("q"), params.get("location"))
        return get_listing_model(self.listing_kind).objects.select_related("owner")

    def list(self, request):  # type: ignore
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return Response(serializer.data)

    def retrieve(self, request, pk=None):  # type: ignore
        listing = get_listing(self.listing_kind, pk)
        return Response(self.get_serializer(listing).data)

    def create(self, request):  # type: ignore
        own_kind = request.user.listing_kind
        if own_kind is not None and own_kind != self.listing_kind:
            raise AuthorizationError(f"Your role publishes {own_kind} listings only.")
        listing = create_listing(request.user, request.data)
        return Response(self.get_serializer(listing).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, pk=None):  # type: ignore
        delete_listing(self.listing_kind, pk, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["post"], serializer_class=AvailabilitySerializer)
    def availability(self, request, pk=None):  # type: ignore
        payload = AvailabilitySerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        listing = set_availability(
            self.listing_kind,
            pk,
            request.user,
            payload.validated_data["availability_status"],
        )
        return Response(serialize_listing(listing, self.get_serializer_context()))


class LaborListingViewSet(ListingViewSet):
    listing_kind = ListingKind.LABOR.value
    serializer_class = LaborListingSerializer
    filterset_class = LaborListingFilterSet


class TractorListingViewSet(ListingViewSet):
    listing_kind = ListingKind.TRACTOR.value
    serializer_class = TractorListingSerializer
    filterset_class = TractorListingFilterSet


class MyListingsView(generics.GenericAPIView):
    """Every listing the caller owns, whatever its availability."""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):  # type: ignore
        context = self.get_serializer_context()
        data = [serialize_listing(listing, context) for listing in listings_owned_by(request.user)]
        return Response(data)
