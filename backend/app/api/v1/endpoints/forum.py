"""
Room Forum API endpoints

Routes (all under /rooms/{room_id}/forum):
- GET    /topics              - ordered topic list for the sidebar
- GET    ""                   - forum messages with sender profiles
- POST   ""                   - post a forum message
- DELETE /{message_id}        - delete one of your own messages
- GET    /unread              - unread counters per topic
- POST   /unread              - mark the forum as visited
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional

from app.core.config import settings
from app.core.exceptions import (
    DataAccessError,
    MessageNotFoundError,
    MessageOwnershipError,
)
from app.core.logging_config import logger
from app.models.message import Message
from app.models.profile import Profile
from app.modules.auth.dependencies import require_room_member
from app.modules.forum.topics import summarize
from app.schemas.forum import (
    DeleteMessageResponse,
    ForumMessageCreate,
    ForumMessageEnvelope,
    ForumMessageListResponse,
    ForumMessageResponse,
    SenderProfile,
    SuccessResponse,
    TopicListResponse,
    TopicSummaryResponse,
    UnreadCountsResponse,
)
from app.services.forum_service import EPOCH, ForumService, get_forum_service

router = APIRouter(prefix="/rooms/{room_id}/forum", tags=["forum"])

UNKNOWN_SENDER_NAME = "Unknown User"


def to_message_response(message: Message, profile: Optional[Profile]) -> ForumMessageResponse:
    """Attach the sender profile, falling back to a placeholder when it is gone"""
    if profile is not None:
        sender = SenderProfile.model_validate(profile)
    else:
        sender = SenderProfile(id=message.sender_id, full_name=UNKNOWN_SENDER_NAME, avatar_url=None)

    response = ForumMessageResponse.model_validate(message)
    response.profiles = sender
    return response


@router.get("/topics", response_model=TopicListResponse)
async def get_forum_topics(
    room_id: str,
    current_user: Profile = Depends(require_room_member),
    forum: ForumService = Depends(get_forum_service),
):
    """
    Distinct forum topics of a room.

    Pinned topics first, then alphabetical (Turkish collation); the default
    topic is always first when any message uses it.
    """
    try:
        tags = await forum.get_topic_tags(room_id)
    except SQLAlchemyError as e:
        logger.log_error_with_context(e, context="get_forum_topics", forum_room=room_id)
        raise DataAccessError("Failed to fetch topics") from e

    summaries = summarize(tags, default_topic=settings.FORUM_DEFAULT_TOPIC)

    return TopicListResponse(
        topics=[TopicSummaryResponse(topic=s.topic, is_pinned=s.is_pinned) for s in summaries]
    )


@router.get("", response_model=ForumMessageListResponse)
async def list_forum_messages(
    room_id: str,
    topic: Optional[str] = Query(None, description="Only messages with this topic"),
    current_user: Profile = Depends(require_room_member),
    forum: ForumService = Depends(get_forum_service),
):
    """Forum messages of a room, newest first"""
    try:
        rows = await forum.list_messages(room_id, topic=topic)
    except SQLAlchemyError as e:
        logger.log_error_with_context(e, context="list_forum_messages", forum_room=room_id)
        raise DataAccessError("Failed to fetch messages") from e

    return ForumMessageListResponse(
        messages=[to_message_response(message, profile) for message, profile in rows]
    )


@router.post("", response_model=ForumMessageEnvelope, status_code=status.HTTP_201_CREATED)
async def create_forum_message(
    room_id: str,
    payload: ForumMessageCreate,
    current_user: Profile = Depends(require_room_member),
    forum: ForumService = Depends(get_forum_service),
):
    """Post a message to the room forum"""
    try:
        message = await forum.create_message(
            room_id=room_id,
            sender_id=str(current_user.id),
            content=payload.content,
            message_type=payload.message_type,
            topic=payload.topic,
        )
    except SQLAlchemyError as e:
        logger.log_error_with_context(e, context="create_forum_message", forum_room=room_id)
        raise DataAccessError("Failed to create message") from e

    return ForumMessageEnvelope(message=to_message_response(message, current_user))


@router.delete("/{message_id}", response_model=DeleteMessageResponse)
async def delete_forum_message(
    room_id: str,
    message_id: str,
    current_user: Profile = Depends(require_room_member),
    forum: ForumService = Depends(get_forum_service),
):
    """Delete one of the caller's own forum messages"""
    try:
        message = await forum.get_message(message_id, room_id=room_id)
    except SQLAlchemyError as e:
        logger.log_error_with_context(e, context="delete_forum_message", forum_room=room_id)
        raise DataAccessError("Failed to delete message") from e

    if message is None:
        raise MessageNotFoundError(message_id)

    if message.sender_id != str(current_user.id):
        raise MessageOwnershipError(message_id)

    try:
        deleted = await forum.delete_message(message_id, str(current_user.id))
    except SQLAlchemyError as e:
        logger.log_error_with_context(e, context="delete_forum_message", forum_room=room_id)
        raise DataAccessError("Failed to delete message") from e

    if deleted == 0:
        raise MessageNotFoundError(message_id)

    return DeleteMessageResponse(success=True, deleted_count=deleted)


@router.get("/unread", response_model=UnreadCountsResponse)
async def get_unread_counts(
    room_id: str,
    current_user: Profile = Depends(require_room_member),
    forum: ForumService = Depends(get_forum_service),
):
    """
    Unread forum messages per topic since the caller's last forum visit.
    The caller's own messages never count as unread.
    """
    last_visit = current_user.last_forum_visit or EPOCH

    try:
        counts = await forum.get_unread_counts(room_id, str(current_user.id), since=last_visit)
    except SQLAlchemyError as e:
        logger.log_error_with_context(e, context="get_unread_counts", forum_room=room_id)
        raise DataAccessError("Failed to fetch topics") from e

    return UnreadCountsResponse(
        unread_counts=counts,
        total_unread=sum(counts.values()),
        last_forum_visit=last_visit,
    )


@router.post("/unread", response_model=SuccessResponse)
async def mark_forum_visited(
    room_id: str,
    current_user: Profile = Depends(require_room_member),
    forum: ForumService = Depends(get_forum_service),
):
    """Record that the caller has just looked at the forum"""
    try:
        await forum.mark_forum_visited(current_user)
    except SQLAlchemyError as e:
        logger.log_error_with_context(e, context="mark_forum_visited", forum_room=room_id)
        raise DataAccessError("Failed to update visit time") from e

    return SuccessResponse(success=True)
