# Authentication module

from app.modules.auth.dependencies import (
    get_current_user,
    require_room_member,
)

__all__ = [
    "get_current_user",
    "require_room_member",
]
