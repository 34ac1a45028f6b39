"""
Forum Service - Data access for room forums (messages table)
Runs on the service's own database session, so row-level visibility rules
of the client-facing database role do not apply; callers must check room
membership themselves before exposing anything.
"""

from typing import Dict, List, Optional, Tuple
from datetime import datetime
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func

from app.core.database import get_db
from app.core.logging_config import logger
from app.core.types import utcnow
from app.models.message import Message, MessageType
from app.models.profile import Profile
from app.models.room import RoomMember
from app.modules.forum.topics import MessageTopicTag, is_blank

# Unread counting starts here when a profile has never opened the forum
EPOCH = datetime(1970, 1, 1)


class ForumService:
    """
    Service for room forum reads and writes.

    Use cases:
    - Membership checks for room-scoped routes
    - Topic facts for the topic sidebar
    - Listing, posting, deleting and pinning forum messages
    - Per-topic unread counters
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    # ==================== Membership & Profiles ====================

    async def is_member(self, room_id: str, user_id: str) -> bool:
        """True when the profile belongs to the room"""
        result = await self.db.execute(
            select(RoomMember.id).where(
                RoomMember.room_id == room_id,
                RoomMember.user_id == user_id,
            )
        )
        return result.first() is not None

    async def get_profile(self, user_id: str) -> Optional[Profile]:
        result = await self.db.execute(select(Profile).where(Profile.id == user_id))
        return result.scalar_one_or_none()

    # ==================== Topics ====================

    async def get_topic_tags(self, room_id: str) -> List[MessageTopicTag]:
        """
        (topic, pinned) facts of every forum message in a room that has a topic.

        Returned in storage order; the summarizer does the de-duplication.
        """
        result = await self.db.execute(
            select(Message.topic, Message.is_pinned).where(
                Message.room_id == room_id,
                Message.message_type == MessageType.FORUM.value,
                Message.topic.is_not(None),
            )
        )
        tags = [MessageTopicTag(topic=topic, is_pinned=bool(is_pinned)) for topic, is_pinned in result.all()]
        logger.debug(f"Loaded {len(tags)} topic tags for room {room_id}")
        return tags

    # ==================== Messages ====================

    async def list_messages(
        self,
        room_id: str,
        topic: Optional[str] = None,
    ) -> List[Tuple[Message, Optional[Profile]]]:
        """Non-deleted forum messages of a room with their senders, newest first"""
        query = (
            select(Message, Profile)
            .outerjoin(Profile, Profile.id == Message.sender_id)
            .where(
                Message.room_id == room_id,
                Message.message_type == MessageType.FORUM.value,
                Message.is_deleted.is_(False),
            )
            .order_by(Message.created_at.desc())
        )

        if topic is not None:
            query = query.where(Message.topic == topic)

        result = await self.db.execute(query)
        return [(message, profile) for message, profile in result.all()]

    async def get_message(self, message_id: str, room_id: Optional[str] = None) -> Optional[Message]:
        query = select(Message).where(Message.id == message_id)
        if room_id is not None:
            query = query.where(
                Message.room_id == room_id,
                Message.message_type == MessageType.FORUM.value,
            )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def create_message(
        self,
        room_id: str,
        sender_id: str,
        content: str,
        message_type: str = MessageType.FORUM.value,
        topic: Optional[str] = None,
    ) -> Message:
        """Store a new message; blank topics are stored as NULL"""
        now = utcnow()
        message = Message(
            room_id=room_id,
            sender_id=sender_id,
            content=content,
            message_type=message_type or MessageType.FORUM.value,
            topic=None if is_blank(topic) else topic,
            created_at=now,
            updated_at=now,
        )

        self.db.add(message)
        await self.db.commit()
        await self.db.refresh(message)

        logger.info(f"Created {message.message_type} message {message.id} in room {room_id}")
        return message

    async def delete_message(self, message_id: str, sender_id: str) -> int:
        """Delete a message owned by sender_id; returns the number of rows removed"""
        result = await self.db.execute(
            delete(Message).where(
                Message.id == message_id,
                Message.sender_id == sender_id,
            )
        )
        await self.db.commit()

        logger.info(f"Deleted message {message_id} ({result.rowcount} rows)")
        return result.rowcount

    async def set_pinned(self, message: Message, is_pinned: bool) -> Message:
        message.is_pinned = is_pinned
        message.updated_at = utcnow()
        await self.db.commit()
        await self.db.refresh(message)

        logger.info(f"Message {message.id} {'pinned' if is_pinned else 'unpinned'}")
        return message

    # ==================== Unread Tracking ====================

    async def get_unread_counts(self, room_id: str, user_id: str, since: datetime) -> Dict[str, int]:
        """
        Unread forum messages per topic.

        Counts non-deleted forum messages from other senders created after
        ``since``. Every non-blank topic of the room is present, with 0 when
        nothing is unread.
        """
        counts: Dict[str, int] = {}
        for tag in await self.get_topic_tags(room_id):
            if not is_blank(tag.topic):
                counts.setdefault(tag.topic, 0)

        result = await self.db.execute(
            select(Message.topic, func.count(Message.id))
            .where(
                Message.room_id == room_id,
                Message.message_type == MessageType.FORUM.value,
                Message.topic.is_not(None),
                Message.is_deleted.is_(False),
                Message.sender_id != user_id,
                Message.created_at > since,
            )
            .group_by(Message.topic)
        )
        for topic, count in result.all():
            if topic in counts:
                counts[topic] = count

        return counts

    async def mark_forum_visited(self, profile: Profile) -> datetime:
        now = utcnow()
        profile.last_forum_visit = now
        profile.updated_at = now
        await self.db.commit()
        return now


async def get_forum_service(db: AsyncSession = Depends(get_db)) -> ForumService:
    """FastAPI dependency for ForumService"""
    return ForumService(db)
