from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from editorcraft.core.db import get_db
from editorcraft.domains.identity.entities import User
from editorcraft.domains.identity.services import IdentityService

# auto_error=False: отсутствие заголовка отдаем как 401 в общем формате ошибок
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> User:
    """Зависимость для получения текущего пользователя по Bearer токену"""
    token = credentials.credentials if credentials else None
    return await IdentityService(db).get_current_user_from_token(token)
