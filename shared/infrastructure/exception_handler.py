"""DRF exception handler that turns domain errors into API responses."""

from __future__ import annotations

import logging

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.domain.exceptions import (
    AuthorizationError,
    DomainError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    InvalidTransitionError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


def domain_exception_handler(exc, context):  # type: ignore
    """Map DomainError subclasses to status codes, defer everything else to DRF."""

    if not isinstance(exc, DomainError):
        return exception_handler(exc, context)

    http_status = STATUS_BY_ERROR.get(type(exc), status.HTTP_400_BAD_REQUEST)
    view = context.get("view")
    logger.warning(
        "Domain error in %s: %s (%s)",
        view.__class__.__name__ if view else "unknown view",
        exc.message,
        exc.code,
    )
    return Response(exc.to_dict(), status=http_status)
