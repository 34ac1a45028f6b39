# Pydantic schemas
from app.schemas.forum import (
    TopicSummaryResponse,
    TopicListResponse,
    UnreadCountsResponse,
    SenderProfile,
    ForumMessageCreate,
    ForumMessageResponse,
    ForumMessageListResponse,
    ForumMessageEnvelope,
    DeleteMessageResponse,
    PinMessageRequest,
    PinMessageResponse,
    SuccessResponse,
)

__all__ = [
    "TopicSummaryResponse",
    "TopicListResponse",
    "UnreadCountsResponse",
    "SenderProfile",
    "ForumMessageCreate",
    "ForumMessageResponse",
    "ForumMessageListResponse",
    "ForumMessageEnvelope",
    "DeleteMessageResponse",
    "PinMessageRequest",
    "PinMessageResponse",
    "SuccessResponse",
]
