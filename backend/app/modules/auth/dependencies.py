from fastapi import Depends, Path
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional

from app.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DataAccessError,
    RoomAccessDeniedError,
)
from app.core.logging_config import logger, set_user_id
from app.core.security import get_token_subject
from app.models.profile import Profile
from app.services.forum_service import ForumService, get_forum_service

# auto_error=False so a missing header is a 401 from our own handler
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    forum: ForumService = Depends(get_forum_service),
) -> Profile:
    """Get current authenticated user"""

    if credentials is None or not credentials.credentials:
        raise AuthenticationError()

    try:
        user_id = get_token_subject(credentials.credentials)
    except AuthenticationError as e:
        logger.log_auth_event("token_verify", success=False, reason=e.code)
        raise

    try:
        profile = await forum.get_profile(user_id)
    except SQLAlchemyError as e:
        logger.log_error_with_context(e, context="get_current_user")
        raise DataAccessError() from e

    if not profile:
        logger.log_auth_event("profile_lookup", success=False, user_id=user_id, reason="no profile")
        raise AuthenticationError("User not found")

    if not profile.is_active:
        raise AuthorizationError("User account is inactive")

    set_user_id(str(profile.id))
    return profile


# ==================== Room Membership Dependencies ====================

async def require_room_member(
    room_id: str = Path(..., description="Room ID"),
    current_user: Profile = Depends(get_current_user),
    forum: ForumService = Depends(get_forum_service),
) -> Profile:
    """
    Authenticated caller who is a member of the room in the path.
    Raises 403 (ACCESS_DENIED) for non-members.

    Usage:
        @router.get("/rooms/{room_id}/forum")
        async def list_forum(user: Profile = Depends(require_room_member)):
            ...
    """
    try:
        is_member = await forum.is_member(room_id, str(current_user.id))
    except SQLAlchemyError as e:
        logger.log_error_with_context(e, context="require_room_member", forum_room=room_id)
        raise DataAccessError() from e

    if not is_member:
        logger.warning(f"User {current_user.id} denied access to room {room_id}")
        raise RoomAccessDeniedError(room_id)

    return current_user
