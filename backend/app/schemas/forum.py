"""Pydantic schemas for the room forum"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List, Dict
from datetime import datetime

from app.models.message import MessageType


# ==================== Topic Schemas ====================

class TopicSummaryResponse(BaseModel):
    """A distinct forum topic and whether any of its messages is pinned"""
    model_config = ConfigDict(populate_by_name=True)

    topic: str
    is_pinned: bool = Field(..., alias="isPinned")


class TopicListResponse(BaseModel):
    """Ordered topic list for the forum sidebar"""
    topics: List[TopicSummaryResponse]


class UnreadCountsResponse(BaseModel):
    """Per-topic unread counters since the caller's last forum visit"""
    model_config = ConfigDict(populate_by_name=True)

    unread_counts: Dict[str, int] = Field(..., alias="unreadCounts")
    total_unread: int = Field(..., alias="totalUnread")
    last_forum_visit: datetime = Field(..., alias="lastForumVisit")


# ==================== Message Schemas ====================

class SenderProfile(BaseModel):
    """Public part of a sender's profile"""
    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None


class ForumMessageCreate(BaseModel):
    """Create a new forum message"""
    content: str = Field(..., description="Message body")
    message_type: str = Field(default=MessageType.FORUM.value, max_length=50)
    topic: Optional[str] = Field(None, max_length=255)

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Mesaj içeriği boş olamaz")
        return v

    @field_validator("topic")
    @classmethod
    def blank_topic_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()


class ForumMessageResponse(BaseModel):
    """Forum message as returned to clients"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    room_id: str
    sender_id: Optional[str] = None
    content: str
    message_type: str
    topic: Optional[str] = None
    is_pinned: bool = False
    created_at: datetime
    updated_at: Optional[datetime] = None
    profiles: Optional[SenderProfile] = None


class ForumMessageListResponse(BaseModel):
    messages: List[ForumMessageResponse]


class ForumMessageEnvelope(BaseModel):
    message: ForumMessageResponse


class DeleteMessageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    deleted_count: int = Field(..., alias="deletedCount")


class PinMessageRequest(BaseModel):
    """Pin or unpin a message"""
    is_pinned: bool


class PinMessageResponse(BaseModel):
    message: ForumMessageResponse
    success: bool = True


class SuccessResponse(BaseModel):
    success: bool = True
