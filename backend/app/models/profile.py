from sqlalchemy import Column, String, Boolean, DateTime, Text
from sqlalchemy.orm import relationship

from app.core.database import Base
from app.core.types import GUID, generate_uuid, utcnow


class Profile(Base):
    """
    Portal user profile.

    The id is the identity provider's user id (the token ``sub`` claim);
    rows are created by the provider's sign-up hook, not by this service.
    """
    __tablename__ = "profiles"

    id = Column(GUID, primary_key=True, default=generate_uuid)
    email = Column(String(255), unique=True, index=True, nullable=True)
    full_name = Column(String(255), nullable=True)
    avatar_url = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    # Forum unread tracking
    last_forum_visit = Column(DateTime, nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    memberships = relationship("RoomMember", back_populates="profile", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Profile {self.email or self.id}>"
