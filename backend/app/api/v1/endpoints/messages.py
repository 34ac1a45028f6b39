"""
Message API endpoints (not tied to a room path)
"""
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import DataAccessError, MessageNotFoundError, RoomAccessDeniedError
from app.core.logging_config import logger
from app.models.profile import Profile
from app.modules.auth.dependencies import get_current_user
from app.schemas.forum import PinMessageRequest, PinMessageResponse, ForumMessageResponse
from app.services.forum_service import ForumService, get_forum_service

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("/{message_id}/pin", response_model=PinMessageResponse)
async def pin_message(
    message_id: str,
    payload: PinMessageRequest,
    current_user: Profile = Depends(get_current_user),
    forum: ForumService = Depends(get_forum_service),
):
    """
    Pin or unpin a message.

    Only members of the message's room may change its pin status.
    """
    try:
        message = await forum.get_message(message_id)
        if message is None:
            raise MessageNotFoundError(message_id)

        if not await forum.is_member(str(message.room_id), str(current_user.id)):
            raise RoomAccessDeniedError(str(message.room_id))

        message = await forum.set_pinned(message, payload.is_pinned)
    except SQLAlchemyError as e:
        logger.log_error_with_context(e, context="pin_message", message_id=message_id)
        raise DataAccessError("Failed to update message") from e

    return PinMessageResponse(message=ForumMessageResponse.model_validate(message), success=True)
