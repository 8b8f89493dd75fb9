"""
Domain Errors

Every failed marketplace operation raises one of these. None of them is
fatal: the operation leaves prior state untouched and the API layer turns
the error into a user-visible message.
"""


class DomainError(Exception):
    """Base class for errors raised by domain services."""

    code = 'domain_error'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {'detail': self.message, 'code': self.code}


class ValidationError(DomainError):
    """Malformed or logically invalid input (bad dates, missing field, bad number)."""

    code = 'validation_error'

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict:
        data = super().to_dict()
        if self.field:
            data['field'] = self.field
        return data


class AuthorizationError(DomainError):
    """Actor lacks the role or the relationship the action requires."""

    code = 'authorization_error'


class InvalidTransitionError(DomainError):
    """Status change not permitted from the current state."""

    code = 'invalid_transition'

    def __init__(self, current: str, requested: str):
        super().__init__(
            f"Cannot move booking from '{current}' to '{requested}'"
        )
        self.current = current
        self.requested = requested

    def to_dict(self) -> dict:
        data = super().to_dict()
        data['current'] = self.current
        data['requested'] = self.requested
        return data


class NotFoundError(DomainError):
    """Referenced listing, booking or profile does not exist."""

    code = 'not_found'
