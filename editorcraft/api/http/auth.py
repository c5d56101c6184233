from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from editorcraft.core.auth import get_current_user
from editorcraft.core.db import get_db
from editorcraft.domains.identity.entities import User
from editorcraft.domains.identity.schemas import (
    UserCreate, UserLogin, UserResponse, AuthResponse, CurrentUserResponse
)
from editorcraft.domains.identity.services import IdentityService

router = APIRouter(prefix="/api/auth", tags=["authentication"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db)
):
    """Регистрация нового пользователя"""
    token, user = await IdentityService(db).register_user(user_data)
    return AuthResponse(token=token, user=UserResponse.model_validate(user))


@router.post("/login", response_model=AuthResponse)
async def login(
    login_data: UserLogin,
    db: AsyncSession = Depends(get_db)
):
    """Вход пользователя"""
    token, user = await IdentityService(db).login_user(login_data)
    return AuthResponse(token=token, user=UserResponse.model_validate(user))


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Информация о текущем пользователе"""
    return CurrentUserResponse(user=UserResponse.model_validate(current_user))
