from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint, Enum as SQLEnum
from sqlalchemy.orm import relationship
import enum

from app.core.database import Base
from app.core.types import GUID, generate_uuid, utcnow


class RoomStatus(str, enum.Enum):
    """Room lifecycle status"""
    ACTIVE = "active"
    ARCHIVED = "archived"


class MemberRole(str, enum.Enum):
    """Role of a company inside a substance room"""
    ADMIN = "admin"
    LR = "lr"  # Lead registrant
    MEMBER = "member"


class Room(Base):
    """Dossier-sharing room for one substance"""
    __tablename__ = "mbdf_rooms"

    id = Column(GUID, primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False)
    substance_name = Column(String(255), nullable=True)
    status = Column(SQLEnum(RoomStatus), default=RoomStatus.ACTIVE, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    members = relationship("RoomMember", back_populates="room", cascade="all, delete-orphan")
    messages = relationship("Message", back_populates="room", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Room {self.name}>"


class RoomMember(Base):
    """Membership of a profile in a room"""
    __tablename__ = "mbdf_members"

    __table_args__ = (
        UniqueConstraint("room_id", "user_id", name="uq_mbdf_members_room_user"),
    )

    id = Column(GUID, primary_key=True, default=generate_uuid)
    room_id = Column(GUID, ForeignKey("mbdf_rooms.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(GUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    role = Column(SQLEnum(MemberRole), default=MemberRole.MEMBER, nullable=False)
    joined_at = Column(DateTime, default=utcnow, nullable=False)

    room = relationship("Room", back_populates="members")
    profile = relationship("Profile", back_populates="memberships")

    def __repr__(self):
        return f"<RoomMember {self.user_id} in {self.room_id} ({self.role})>"
