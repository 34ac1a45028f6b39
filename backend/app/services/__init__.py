from app.services.forum_service import ForumService, get_forum_service

__all__ = [
    "ForumService",
    "get_forum_service",
]
