"""Admin registrations for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import LaborBooking, TractorBooking


@admin.register(LaborBooking)
class LaborBookingAdmin(admin.ModelAdmin):
    list_display = ("id", "listing", "farmer", "laborer", "start_date", "end_date", "total_amount", "status")
    list_filter = ("status",)
    search_fields = ("farmer__email", "laborer__email", "listing__title")
    raw_id_fields = ("listing", "farmer", "laborer")
    readonly_fields = ("total_days", "total_amount", "created_at", "updated_at")


@admin.register(TractorBooking)
class TractorBookingAdmin(admin.ModelAdmin):
    list_display = ("id", "listing", "farmer", "owner", "start_at", "end_at", "total_amount", "status")
    list_filter = ("status",)
    search_fields = ("farmer__email", "owner__email", "listing__title")
    raw_id_fields = ("listing", "farmer", "owner")
    readonly_fields = ("total_hours", "total_amount", "created_at", "updated_at")
