"""FilterSets applied on top of listing search (rate and experience bounds)."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import LaborListing, TractorListing


class LaborListingFilterSet(django_filters.FilterSet):
    max_daily_rate = django_filters.NumberFilter(field_name="daily_rate", lookup_expr="lte")
    min_experience = django_filters.NumberFilter(field_name="experience_years", lookup_expr="gte")

    class Meta:
        model = LaborListing
        fields = ["max_daily_rate", "min_experience"]


class TractorListingFilterSet(django_filters.FilterSet):
    max_hourly_rate = django_filters.NumberFilter(field_name="hourly_rate", lookup_expr="lte")
    max_daily_rate = django_filters.NumberFilter(field_name="daily_rate", lookup_expr="lte")
    min_horsepower = django_filters.NumberFilter(field_name="horsepower", lookup_expr="gte")

    class Meta:
        model = TractorListing
        fields = ["max_hourly_rate", "max_daily_rate", "min_horsepower"]
