"""
Forum Topic Summarizer
======================

Reduces the per-message (topic, pinned) facts of a room's forum into the
ordered topic list the forum sidebar shows:

1. Tags with a missing or blank topic are dropped
2. Duplicate topics are merged; a topic is pinned if ANY of its messages is
3. Pinned topics come first, then Turkish alphabetical order
4. The default topic ("Genel") is moved to the front when it exists

Usage:
    from app.modules.forum.topics import MessageTopicTag, summarize

    summaries = summarize([
        MessageTopicTag("Genel", False),
        MessageTopicTag("Güvenlik", True),
    ])
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from app.modules.forum.collation import collation_key

DEFAULT_TOPIC = "Genel"


@dataclass(frozen=True)
class MessageTopicTag:
    """Topic fact carried by a single forum message"""
    topic: Optional[str]
    is_pinned: bool = False


@dataclass(frozen=True)
class TopicSummary:
    """One distinct topic in a summarized topic list"""
    topic: str
    is_pinned: bool


def is_blank(topic: Optional[str]) -> bool:
    return topic is None or topic.strip() == ""


def _sort_key(summary: TopicSummary):
    return (not summary.is_pinned, collation_key(summary.topic))


def summarize(
    tags: Iterable[MessageTopicTag],
    default_topic: Optional[str] = DEFAULT_TOPIC,
) -> List[TopicSummary]:
    """
    Build the ordered, de-duplicated topic list for a set of message tags.

    Args:
        tags: Topic facts in the order the message store returned them
        default_topic: Label always promoted to the front when present.
            None or blank disables promotion.

    Returns:
        One TopicSummary per distinct non-blank topic
    """
    pinned_by_topic: Dict[str, bool] = {}
    for tag in tags:
        if is_blank(tag.topic):
            continue
        # Pin status only ever goes from False to True
        pinned_by_topic[tag.topic] = pinned_by_topic.get(tag.topic, False) or bool(tag.is_pinned)

    summaries = [
        TopicSummary(topic=topic, is_pinned=is_pinned)
        for topic, is_pinned in pinned_by_topic.items()
    ]
    summaries.sort(key=_sort_key)

    if is_blank(default_topic) or default_topic not in pinned_by_topic:
        return summaries

    default = next(s for s in summaries if s.topic == default_topic)
    return [default] + [s for s in summaries if s.topic != default_topic]
