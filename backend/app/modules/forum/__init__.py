# Forum module

from app.modules.forum.topics import (
    DEFAULT_TOPIC,
    MessageTopicTag,
    TopicSummary,
    summarize,
)
from app.modules.forum.collation import collation_key, turkish_lower

__all__ = [
    "DEFAULT_TOPIC",
    "MessageTopicTag",
    "TopicSummary",
    "summarize",
    "collation_key",
    "turkish_lower",
]
