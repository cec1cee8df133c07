"""
Error taxonomy for the relay.
Each variant maps to an HTTP status and an {error, details} envelope.
"""
from fastapi import status

from utils.constants import GENERATION_FAILED, INVALID_REQUEST


class RelayError(Exception):
    """Base class for errors rendered as an ErrorResponse."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = GENERATION_FAILED

    def __init__(self, details: str):
        super().__init__(details)
        self.details = details


class ValidationError(RelayError):
    """Malformed or missing client input."""
    status_code = status.HTTP_400_BAD_REQUEST
    error = INVALID_REQUEST


class ConfigurationError(RelayError):
    """A required secret is missing from the deployment."""


class SearchFailure(RelayError):
    """Search provider failed. Absorbed inside the search service."""


class UpstreamError(RelayError):
    """Completion provider failed or returned an unusable body."""


class InternalError(RelayError):
    """Unexpected failure while assembling the response."""
