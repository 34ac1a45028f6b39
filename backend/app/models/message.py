"""
Room Messages Model - forum posts and other room-scoped messages
Used for: forum thread listing, topic sidebar, unread counters
"""

from sqlalchemy import Column, String, Boolean, DateTime, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
import enum

from app.core.database import Base
from app.core.types import GUID, generate_uuid, utcnow


class MessageType(str, enum.Enum):
    """Kind of room message"""
    FORUM = "forum"
    ANNOUNCEMENT = "announcement"
    SYSTEM = "system"


class Message(Base):
    """
    A message posted in a room.

    Forum messages may carry a free-text topic; the topic list shown in the
    forum sidebar is derived from these on every request.
    """
    __tablename__ = "messages"

    __table_args__ = (
        Index('ix_messages_room_type', 'room_id', 'message_type'),
        Index('ix_messages_created_at', 'created_at'),
    )

    id = Column(GUID, primary_key=True, default=generate_uuid)
    room_id = Column(GUID, ForeignKey("mbdf_rooms.id", ondelete="CASCADE"), nullable=False)
    sender_id = Column(GUID, ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True)

    content = Column(Text, nullable=False)
    # String rather than SQLEnum so new message kinds need no migration
    message_type = Column(String(50), default=MessageType.FORUM.value, nullable=False)
    topic = Column(String(255), nullable=True)

    is_pinned = Column(Boolean, default=False, nullable=False)
    is_deleted = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    room = relationship("Room", back_populates="messages")

    def __repr__(self):
        return f"<Message {self.message_type}/{self.topic}: {self.content[:50]}...>"
