from typing import Any, Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
import logging
import uuid

from editorcraft.core.config import settings
from editorcraft.core.errors import InvalidInput, NotFound
from editorcraft.db.repositories.editor_repository import EditorConfigRepository, EditorContentRepository
from editorcraft.domains.editors.entities import EditorConfig, EditorContent

logger = logging.getLogger(__name__)

CONFIG_NOT_FOUND = "Configuration not found"


def _validate_definition(name: Optional[str], config_data: Optional[Dict[str, Any]]) -> str:
    if not name or not name.strip() or not isinstance(config_data, dict):
        raise InvalidInput("Name and configuration data are required")
    return name.strip()


class EditorConfigService:
    """Жизненный цикл конфигураций редактора"""

    def __init__(self, session: AsyncSession, script_url: Optional[str] = None):
        self.session = session
        self.script_url = script_url or settings.embed_script_url
        self.config_repository = EditorConfigRepository(session)

    async def list_configs(self, user_id: uuid.UUID) -> List[EditorConfig]:
        """Конфигурации пользователя, новые первыми"""
        return await self.config_repository.get_by_owner(user_id)

    async def create_config(
        self,
        user_id: uuid.UUID,
        name: Optional[str],
        config_data: Optional[Dict[str, Any]]
    ) -> EditorConfig:
        """Создание конфигурации со сгенерированным сниппетом"""
        name = _validate_definition(name, config_data)

        config = EditorConfig.create_config(
            user_id=user_id,
            name=name,
            config_data=config_data,
            script_url=self.script_url
        )
        config = await self.config_repository.create(config)
        logger.info(f"User {user_id} created editor config {config.uuid}")
        return config

    async def get_owned_config(self, user_id: uuid.UUID, config_id: uuid.UUID) -> EditorConfig:
        """Конфигурация владельца; чужая и несуществующая неотличимы"""
        config = await self.config_repository.get_owned(config_id, user_id)
        if config is None:
            raise NotFound(CONFIG_NOT_FOUND)
        return config

    async def update_config(
        self,
        user_id: uuid.UUID,
        config_id: uuid.UUID,
        name: Optional[str],
        config_data: Optional[Dict[str, Any]]
    ) -> EditorConfig:
        """Обновление имени и конфигурации, сниппет пересчитывается"""
        name = _validate_definition(name, config_data)
        config = await self.get_owned_config(user_id, config_id)

        config.apply_changes(name, config_data, self.script_url)

        updated = await self.config_repository.update_definition(config)
        if updated is None:
            raise NotFound(CONFIG_NOT_FOUND)

        logger.info(f"User {user_id} updated editor config {config_id}")
        return updated

    async def set_active(self, user_id: uuid.UUID, config_id: uuid.UUID, is_active: bool) -> EditorConfig:
        """Включение или скрытие конфигурации для публичного доступа"""
        config = await self.config_repository.set_active(config_id, user_id, is_active)
        if config is None:
            raise NotFound(CONFIG_NOT_FOUND)

        logger.info(f"User {user_id} set editor config {config_id} active={is_active}")
        return config

    async def delete_config(self, user_id: uuid.UUID, config_id: uuid.UUID) -> None:
        """Удаление конфигурации вместе со всеми версиями контента"""
        if not await self.config_repository.delete(config_id, user_id):
            raise NotFound(CONFIG_NOT_FOUND)

        logger.info(f"User {user_id} deleted editor config {config_id}")

    async def get_public_config(self, config_id: uuid.UUID) -> EditorConfig:
        """Публичное чтение: только активные конфигурации, без проверки владельца"""
        config = await self.config_repository.get_active(config_id)
        if config is None:
            raise NotFound(CONFIG_NOT_FOUND)
        return config

    async def get_embed_code(self, config_id: uuid.UUID) -> str:
        config = await self.get_public_config(config_id)
        return config.embed_code


class EditorContentService:
    """Версионированные снимки содержимого конфигурации"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.content_repository = EditorContentRepository(session)

    async def get_latest(self, config_id: uuid.UUID) -> Optional[EditorContent]:
        """Последняя версия или None, если сохранений еще не было"""
        return await self.content_repository.get_latest(config_id)

    async def list_versions(self, config_id: uuid.UUID) -> List[int]:
        return await self.content_repository.get_versions(config_id)

    async def save(self, config_id: uuid.UUID, content_data: Any) -> int:
        """Сохранение новой версии; возвращает ее номер"""
        if content_data is None:
            raise InvalidInput("Content data is required")

        content = await self.content_repository.append(config_id, content_data)
        if content is None:
            raise NotFound(CONFIG_NOT_FOUND)

        logger.info(f"Saved content version {content.version} for editor config {config_id}")
        return content.version
