"""
Custom Exceptions for the MBDF-IT Portal
========================================

Route handlers raise these instead of building error responses by hand.
The application registers a single handler (see app.main) that maps each
family to its HTTP status and renders {"detail": ..., "code": ...}.

Usage:
    from app.core.exceptions import RoomAccessDeniedError, DataAccessError

    if not await forum.is_member(room_id, user.id):
        raise RoomAccessDeniedError(room_id)

    try:
        rows = await forum.get_topic_tags(room_id)
    except SQLAlchemyError as e:
        raise DataAccessError("Failed to fetch topics") from e
"""

from typing import Optional, Any, Dict


class PortalError(Exception):
    """Base exception for all portal errors"""

    status_code = 500

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


# ============================================
# Authentication & Authorization Errors
# ============================================

class AuthenticationError(PortalError):
    """Caller could not be authenticated"""

    status_code = 401

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, code="AUTH_FAILED")


class TokenExpiredError(AuthenticationError):
    """JWT token has expired"""

    def __init__(self):
        super().__init__("Token has expired")
        self.code = "TOKEN_EXPIRED"


class InvalidTokenError(AuthenticationError):
    """JWT token is invalid"""

    def __init__(self, message: str = "Could not validate credentials"):
        super().__init__(message)
        self.code = "INVALID_TOKEN"


class AuthorizationError(PortalError):
    """Caller not authorized for this action"""

    status_code = 403

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, code="NOT_AUTHORIZED")


class RoomAccessDeniedError(AuthorizationError):
    """Caller is not a member of the room"""

    def __init__(self, room_id: str):
        super().__init__("Access denied")
        self.code = "ACCESS_DENIED"
        self.details = {"room_id": room_id}


class MessageOwnershipError(AuthorizationError):
    """Caller tried to modify someone else's message"""

    def __init__(self, message_id: str):
        super().__init__("You can only delete your own messages")
        self.code = "NOT_MESSAGE_OWNER"
        self.details = {"message_id": message_id}


# ============================================
# Resource Errors (404-type)
# ============================================

class ResourceNotFoundError(PortalError):
    """Base class for not found errors"""

    status_code = 404

    def __init__(self, resource_type: str, resource_id: str, message: Optional[str] = None):
        super().__init__(
            message or f"{resource_type} not found",
            code=f"{resource_type.upper()}_NOT_FOUND",
            details={"resource_type": resource_type, "resource_id": resource_id}
        )


class MessageNotFoundError(ResourceNotFoundError):
    """Forum message not found"""

    def __init__(self, message_id: str):
        super().__init__("Message", message_id)


# ============================================
# Data Access Errors
# ============================================

class DataAccessError(PortalError):
    """
    A database call failed.

    The message is what the caller sees, so it must stay generic; the
    underlying exception is chained via ``raise ... from``.
    """

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, code="DATA_ACCESS_ERROR")


# ============================================
# Helper function for API responses
# ============================================

def error_response(error: PortalError) -> Dict[str, Any]:
    """Convert exception to API error response body"""
    return {
        "detail": error.message,
        "code": error.code,
    }
