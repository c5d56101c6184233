from typing import Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
import logging
import uuid

from editorcraft.core.errors import Conflict, Unauthorized
from editorcraft.core.security import create_access_token, verify_token
from editorcraft.db.repositories.user_repository import UserRepository
from editorcraft.domains.identity.entities import User
from editorcraft.domains.identity.schemas import UserCreate, UserLogin

logger = logging.getLogger(__name__)


class IdentityService:
    """Сервис регистрации, входа и проверки токенов"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repository = UserRepository(session)

    async def register_user(self, user_data: UserCreate) -> Tuple[str, User]:
        """Регистрация нового пользователя; возвращает токен и пользователя"""
        if await self.user_repository.email_exists(user_data.email):
            raise Conflict("User already exists")

        user = User.create_user(
            email=user_data.email,
            name=user_data.name,
            password=user_data.password
        )
        user = await self.user_repository.create(user)
        logger.info(f"Registered user {user.uuid}")

        return self.issue_token(user), user

    async def login_user(self, login_data: UserLogin) -> Tuple[str, User]:
        """Вход пользователя и создание JWT токена"""
        user = await self.user_repository.get_by_email(login_data.email)

        if not user or not user.authenticate(login_data.password):
            logger.info("Rejected login attempt")
            raise Unauthorized("Invalid credentials")

        logger.info(f"User {user.uuid} logged in")
        return self.issue_token(user), user

    @staticmethod
    def issue_token(user: User) -> str:
        return create_access_token(data={"sub": str(user.uuid), "email": user.email})

    async def get_current_user_from_token(self, token: Optional[str]) -> User:
        """Получение текущего пользователя из JWT токена"""
        payload = verify_token(token)

        try:
            user_uuid = uuid.UUID(payload["sub"])
        except (ValueError, TypeError):
            raise Unauthorized("Invalid token")

        user = await self.user_repository.get_by_uuid(user_uuid)
        if user is None:
            raise Unauthorized("Invalid token")

        return user

    async def delete_user(self, user_uuid: uuid.UUID) -> bool:
        """Удаление пользователя вместе со всеми его конфигурациями"""
        return await self.user_repository.delete(user_uuid)
