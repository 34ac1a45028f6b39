"""
MBDF-IT Portal - Test Configuration and Fixtures
"""
import os
from datetime import datetime, timedelta
from typing import AsyncGenerator, Optional

import pytest
from httpx import AsyncClient, ASGITransport
from jose import jwt
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool
from faker import Faker

# Set testing environment
os.environ['ENVIRONMENT'] = 'testing'
os.environ['DATABASE_URL'] = 'sqlite+aiosqlite:///./test_portal.db'
os.environ['JWT_SECRET_KEY'] = 'test-jwt-secret-key-for-testing'

from app.main import app
from app.core.config import settings
from app.core.database import Base, get_db
from app.models import Message, MessageType, Profile, Room, RoomMember, MemberRole

fake = Faker()

# Test database setup
TEST_DATABASE_URL = 'sqlite+aiosqlite:///./test_portal.db'
test_engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=NullPool)
TestSessionLocal = async_sessionmaker(
    bind=test_engine,
    class_=AsyncSession,
    expire_on_commit=False
)


def make_token(user_id: str, expires_delta: timedelta = timedelta(hours=1), **claims) -> str:
    """Sign an access token the way the identity provider does"""
    payload = {
        'sub': user_id,
        'exp': datetime.utcnow() + expires_delta,
        'role': 'authenticated',
        **claims,
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def bearer(user_id: str) -> dict:
    return {'Authorization': f'Bearer {make_token(user_id)}'}


@pytest.fixture(scope='function')
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database for each test"""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session
        await session.rollback()

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database override"""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac

    app.dependency_overrides.clear()


async def create_profile(db_session: AsyncSession, **overrides) -> Profile:
    profile = Profile(
        email=fake.unique.email(),
        full_name=fake.name(),
        is_active=True,
        **overrides,
    )
    db_session.add(profile)
    await db_session.commit()
    await db_session.refresh(profile)
    return profile


@pytest.fixture
async def member(db_session: AsyncSession) -> Profile:
    """Profile that belongs to the test room"""
    return await create_profile(db_session)


@pytest.fixture
async def other_member(db_session: AsyncSession) -> Profile:
    """Second member of the test room"""
    return await create_profile(db_session)


@pytest.fixture
async def outsider(db_session: AsyncSession) -> Profile:
    """Profile that is NOT a member of the test room"""
    return await create_profile(db_session)


@pytest.fixture
async def room(db_session: AsyncSession, member: Profile, other_member: Profile) -> Room:
    """Room with two members"""
    room = Room(name=f"MBDF {fake.word()}", substance_name=fake.word())
    db_session.add(room)
    await db_session.flush()

    db_session.add_all([
        RoomMember(room_id=room.id, user_id=member.id, role=MemberRole.LR),
        RoomMember(room_id=room.id, user_id=other_member.id, role=MemberRole.MEMBER),
    ])
    await db_session.commit()
    await db_session.refresh(room)
    return room


@pytest.fixture
def auth_headers(member: Profile) -> dict:
    """Authentication headers for the room member"""
    return bearer(member.id)


@pytest.fixture
def add_message(db_session: AsyncSession):
    """Factory that stores a message directly"""
    async def _add(
        room: Room,
        sender: Optional[Profile],
        topic: Optional[str] = None,
        is_pinned: bool = False,
        content: Optional[str] = None,
        message_type: str = MessageType.FORUM.value,
        is_deleted: bool = False,
        created_at: Optional[datetime] = None,
        sender_id: Optional[str] = None,
    ) -> Message:
        message = Message(
            room_id=room.id,
            sender_id=sender.id if sender is not None else sender_id,
            content=content or fake.sentence(),
            message_type=message_type,
            topic=topic,
            is_pinned=is_pinned,
            is_deleted=is_deleted,
            created_at=created_at or datetime.utcnow(),
        )
        db_session.add(message)
        await db_session.commit()
        await db_session.refresh(message)
        return message

    return _add


@pytest.fixture
def token_factory():
    """Sign arbitrary access tokens: token_factory(user_id, expires_delta=..., **claims)"""
    return make_token


@pytest.fixture
def headers_for():
    """Authentication headers for any profile id"""
    return bearer
