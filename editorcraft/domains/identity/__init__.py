from editorcraft.domains.identity.entities import User
from editorcraft.domains.identity.schemas import (
    UserCreate, UserLogin, UserResponse, AuthResponse, CurrentUserResponse
)

__all__ = [
    "User",
    "UserCreate", "UserLogin", "UserResponse", "AuthResponse", "CurrentUserResponse",
]
