"""Views for authentication flows (register, login)."""

from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken  # type: ignore

from .auth_serializers import LoginSerializer, RegisterSerializer
from .serializers import ProfileSerializer

logger = logging.getLogger(__name__)


def _tokens_for_profile(profile) -> dict[str, str]:
    refresh = RefreshToken.for_user(profile)
    return {"refresh": str(refresh), "access": str(refresh.access_token)}


class RegisterView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        profile = serializer.save()
        logger.info("Registered %s profile %s", profile.role, profile.pk)
        data = {
            "profile": ProfileSerializer(profile).data,
            "tokens": _tokens_for_profile(profile),
        }
        return Response(data, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        profile = serializer.validated_data["profile"]
        data = {
            "profile": ProfileSerializer(profile).data,
            "tokens": _tokens_for_profile(profile),
        }
        return Response(data, status=status.HTTP_200_OK)
