"""Serializers for profile endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

Profile = get_user_model()


class ProfileSerializer(serializers.ModelSerializer):
    """Own profile, including what the profile is allowed to do."""

    can_create_listing = serializers.BooleanField(read_only=True)
    listing_kind = serializers.CharField(read_only=True, allow_null=True)

    class Meta:
        model = Profile
        fields = [
            "id",
            "email",
            "full_name",
            "phone",
            "role",
            "location",
            "bio",
            "avatar_url",
            "rc_number",
            "can_create_listing",
            "listing_kind",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "email",
            "role",
            "created_at",
            "updated_at",
        ]


class PublicProfileSerializer(serializers.ModelSerializer):
    """What other participants see about a profile."""

    class Meta:
        model = Profile
        fields = ["id", "full_name", "role", "location", "avatar_url"]
        read_only_fields = fields
