# Re-export all models for convenient imports
from app.models.profile import Profile
from app.models.room import Room, RoomMember, RoomStatus, MemberRole
from app.models.message import Message, MessageType

__all__ = [
    # Profiles
    "Profile",
    # Rooms
    "Room",
    "RoomMember",
    "RoomStatus",
    "MemberRole",
    # Messages
    "Message",
    "MessageType",
]
