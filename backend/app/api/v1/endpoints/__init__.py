# API endpoints
from . import forum, messages, health

__all__ = ["forum", "messages", "health"]
