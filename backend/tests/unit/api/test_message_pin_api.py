"""
Unit Tests for pinning messages
POST /api/v1/messages/{message_id}/pin
"""
import uuid

import pytest
from httpx import AsyncClient


class TestPinMessage:

    @pytest.mark.asyncio
    async def test_pin_and_unpin(self, client: AsyncClient, room, member, auth_headers, add_message):
        message = await add_message(room, member, topic='Rapor')

        pinned = await client.post(f'/api/v1/messages/{message.id}/pin', json={'is_pinned': True}, headers=auth_headers)
        unpinned = await client.post(f'/api/v1/messages/{message.id}/pin', json={'is_pinned': False}, headers=auth_headers)

        assert pinned.status_code == 200
        assert pinned.json()['success'] is True
        assert pinned.json()['message']['is_pinned'] is True
        assert unpinned.json()['message']['is_pinned'] is False

    @pytest.mark.asyncio
    async def test_pinned_message_pins_its_topic(
        self, client: AsyncClient, room, member, other_member, auth_headers, add_message
    ):
        await add_message(room, member, topic='Anket')
        zemin = await add_message(room, other_member, topic='Zemin')

        await client.post(f'/api/v1/messages/{zemin.id}/pin', json={'is_pinned': True}, headers=auth_headers)
        response = await client.get(f'/api/v1/rooms/{room.id}/forum/topics', headers=auth_headers)

        assert response.json()['topics'] == [
            {'topic': 'Zemin', 'isPinned': True},
            {'topic': 'Anket', 'isPinned': False},
        ]

    @pytest.mark.asyncio
    async def test_unknown_message(self, client: AsyncClient, room, auth_headers):
        response = await client.post(f'/api/v1/messages/{uuid.uuid4()}/pin', json={'is_pinned': True}, headers=auth_headers)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_non_member(self, client: AsyncClient, room, member, outsider, headers_for, add_message):
        message = await add_message(room, member)

        response = await client.post(
            f'/api/v1/messages/{message.id}/pin',
            json={'is_pinned': True},
            headers=headers_for(outsider.id),
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_body_required(self, client: AsyncClient, room, member, auth_headers, add_message):
        message = await add_message(room, member)

        response = await client.post(f'/api/v1/messages/{message.id}/pin', json={}, headers=auth_headers)

        assert response.status_code == 422
