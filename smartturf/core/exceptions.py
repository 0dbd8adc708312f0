"""Domain errors raised by the booking core and mapped to HTTP responses."""

from fastapi import status


class SmartTurfError(Exception):
    """Base class for errors that carry an HTTP status and a client-safe message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class InvalidInputError(SmartTurfError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"


class UnauthorizedError(SmartTurfError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "A token is required for authentication"


class ForbiddenError(SmartTurfError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Token is not valid"


class NotFoundError(SmartTurfError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found"


class ConflictError(SmartTurfError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource conflict"


class SlotAlreadyBookedError(ConflictError):
    default_detail = "This time slot has already been booked."


class KitUnavailableError(ConflictError):
    default_detail = "The selected kit is not available."


class AlreadyJoinedError(ConflictError):
    default_detail = "You have already joined this match."


class MatchFullError(ConflictError):
    default_detail = "This match is already full."


class InternalError(SmartTurfError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"


__all__ = [
    "SmartTurfError",
    "InvalidInputError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "SlotAlreadyBookedError",
    "KitUnavailableError",
    "AlreadyJoinedError",
    "MatchFullError",
    "InternalError",
]
