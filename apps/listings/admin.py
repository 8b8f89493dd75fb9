"""Admin registrations for listings."""

from __future__ import annotations

from django.contrib import admin

from .models import LaborListing, TractorListing


@admin.register(LaborListing)
class LaborListingAdmin(admin.ModelAdmin):
    list_display = ("title", "owner", "location", "daily_rate", "experience_years", "availability_status", "created_at")
    list_filter = ("availability_status",)
    search_fields = ("title", "description", "location", "owner__email")
    raw_id_fields = ("owner",)
    readonly_fields = ("created_at", "updated_at")


@admin.register(TractorListing)
class TractorListingAdmin(admin.ModelAdmin):
    list_display = ("title", "tractor_model", "owner", "location", "hourly_rate", "daily_rate", "availability_status")
    list_filter = ("availability_status",)
    search_fields = ("title", "tractor_model", "location", "owner__email")
    raw_id_fields = ("owner",)
    readonly_fields = ("created_at", "updated_at")
