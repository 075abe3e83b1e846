"""
Domain errors raised by the identity and measurement services.

Each error carries the HTTP status the API layer answers with; the handler in
``app.main`` turns them into ``{"error": ..., "detail": ...}`` responses.
"""
from fastapi import status


class BMITrackerError(Exception):
    """Base class for all errors surfaced by the core services"""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "error"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(BMITrackerError):
    """Malformed numeric, date or enum input. Nothing was written."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    code = "validation_error"


class ProfileIncompleteError(BMITrackerError):
    """Measurement ingestion attempted before the user's height is set"""

    status_code = status.HTTP_409_CONFLICT
    code = "profile_incomplete"


class NotFoundError(BMITrackerError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"


class ConflictError(BMITrackerError):
    """Identity or email uniqueness violation the resolver could not reconcile"""

    status_code = status.HTTP_409_CONFLICT
    code = "conflict"


class IdentityProviderError(BMITrackerError):
    """External identity exchange failed or returned an incomplete profile"""

    status_code = status.HTTP_502_BAD_GATEWAY
    code = "identity_provider_error"
