"""
Unit Tests for forum request/response schemas
"""
from datetime import datetime

import pytest
from pydantic import ValidationError

from app.schemas.forum import (
    DeleteMessageResponse,
    ForumMessageCreate,
    TopicSummaryResponse,
    UnreadCountsResponse,
)


class TestForumMessageCreate:

    def test_defaults(self):
        payload = ForumMessageCreate(content='Merhaba')

        assert payload.message_type == 'forum'
        assert payload.topic is None

    @pytest.mark.parametrize('content', ['', '  ', '\n'])
    def test_blank_content(self, content):
        with pytest.raises(ValidationError) as exc:
            ForumMessageCreate(content=content)

        assert 'Mesaj içeriği boş olamaz' in str(exc.value)

    def test_topic_trimmed(self):
        assert ForumMessageCreate(content='x', topic='  Rapor ').topic == 'Rapor'

    def test_blank_topic(self):
        assert ForumMessageCreate(content='x', topic='   ').topic is None


class TestWireNames:

    def test_topic_summary(self):
        summary = TopicSummaryResponse(topic='Genel', is_pinned=True)

        assert summary.model_dump(by_alias=True) == {'topic': 'Genel', 'isPinned': True}

    def test_unread_counts(self):
        body = UnreadCountsResponse(
            unread_counts={'Genel': 2},
            total_unread=2,
            last_forum_visit=datetime(1970, 1, 1),
        ).model_dump(by_alias=True)

        assert set(body) == {'unreadCounts', 'totalUnread', 'lastForumVisit'}

    def test_delete_response(self):
        assert DeleteMessageResponse(deleted_count=1).model_dump(by_alias=True) == {
            'success': True,
            'deletedCount': 1,
        }
