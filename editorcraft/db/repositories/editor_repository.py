from typing import Any, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, insert, func
import uuid

from editorcraft.db.base import utcnow
from editorcraft.db.models.editor import (
    EditorConfig as EditorConfigModel, EditorContent as EditorContentModel
)
from editorcraft.domains.editors.entities import EditorConfig, EditorContent


class EditorConfigRepository:
    """Репозиторий для работы с конфигурациями редактора"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, config: EditorConfig) -> EditorConfig:
        """Создание новой конфигурации"""
        db_config = EditorConfigModel(
            uuid=config.uuid,
            user_id=config.user_id,
            name=config.name,
            config_data=config.config_data,
            embed_code=config.embed_code,
            is_active=config.is_active,
            created_at=config.created_at,
            updated_at=config.updated_at
        )

        self.session.add(db_config)
        await self.session.commit()
        await self.session.refresh(db_config)
        return self._to_domain(db_config)

    async def get_by_uuid(self, config_uuid: uuid.UUID) -> Optional[EditorConfig]:
        """Получение конфигурации по UUID (без проверки владельца)"""
        result = await self.session.execute(
            select(EditorConfigModel).where(EditorConfigModel.uuid == config_uuid)
        )
        db_config = result.scalar_one_or_none()
        return self._to_domain(db_config) if db_config else None

    async def get_owned(self, config_uuid: uuid.UUID, owner_id: uuid.UUID) -> Optional[EditorConfig]:
        """Получение конфигурации, только если она принадлежит owner_id"""
        db_config = await self._get_model_owned(config_uuid, owner_id)
        return self._to_domain(db_config) if db_config else None

    async def get_active(self, config_uuid: uuid.UUID) -> Optional[EditorConfig]:
        """Получение активной конфигурации для публичного доступа"""
        result = await self.session.execute(
            select(EditorConfigModel).where(
                EditorConfigModel.uuid == config_uuid,
                EditorConfigModel.is_active.is_(True)
            )
        )
        db_config = result.scalar_one_or_none()
        return self._to_domain(db_config) if db_config else None

    async def get_by_owner(self, owner_id: uuid.UUID) -> List[EditorConfig]:
        """Конфигурации владельца, новые первыми"""
        result = await self.session.execute(
            select(EditorConfigModel)
            .where(EditorConfigModel.user_id == owner_id)
            .order_by(EditorConfigModel.created_at.desc())
        )
        return [self._to_domain(db_config) for db_config in result.scalars().all()]

    async def update_definition(self, config: EditorConfig) -> Optional[EditorConfig]:
        """Запись имени, config_data и embed_code одним UPDATE с фильтром по владельцу"""
        result = await self.session.execute(
            update(EditorConfigModel)
            .where(
                EditorConfigModel.uuid == config.uuid,
                EditorConfigModel.user_id == config.user_id
            )
            .values(
                name=config.name,
                config_data=config.config_data,
                embed_code=config.embed_code,
                updated_at=config.updated_at
            )
        )
        await self.session.commit()

        if result.rowcount == 0:
            return None
        return await self.get_by_uuid(config.uuid)

    async def set_active(
        self,
        config_uuid: uuid.UUID,
        owner_id: uuid.UUID,
        is_active: bool
    ) -> Optional[EditorConfig]:
        """Смена флага активности без изменения config_data и embed_code"""
        result = await self.session.execute(
            update(EditorConfigModel)
            .where(
                EditorConfigModel.uuid == config_uuid,
                EditorConfigModel.user_id == owner_id
            )
            .values(is_active=is_active, updated_at=utcnow())
        )
        await self.session.commit()

        if result.rowcount == 0:
            return None
        return await self.get_by_uuid(config_uuid)

    async def delete(self, config_uuid: uuid.UUID, owner_id: uuid.UUID) -> bool:
        """Удаление конфигурации владельца (контент удаляется каскадно)"""
        db_config = await self._get_model_owned(config_uuid, owner_id)
        if db_config is None:
            return False

        await self.session.delete(db_config)
        await self.session.commit()
        return True

    async def _get_model_owned(self, config_uuid: uuid.UUID, owner_id: uuid.UUID) -> Optional[EditorConfigModel]:
        result = await self.session.execute(
            select(EditorConfigModel).where(
                EditorConfigModel.uuid == config_uuid,
                EditorConfigModel.user_id == owner_id
            )
        )
        return result.scalar_one_or_none()

    def _to_domain(self, db_config: EditorConfigModel) -> EditorConfig:
        """Преобразование модели БД в доменную сущность"""
        return EditorConfig(
            uuid=db_config.uuid,
            user_id=db_config.user_id,
            name=db_config.name,
            config_data=db_config.config_data,
            embed_code=db_config.embed_code,
            is_active=db_config.is_active,
            created_at=db_config.created_at,
            updated_at=db_config.updated_at
        )


class EditorContentRepository:
    """Репозиторий снимков содержимого (только добавление)"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_latest(self, config_uuid: uuid.UUID) -> Optional[EditorContent]:
        """Снимок с максимальной версией"""
        result = await self.session.execute(
            select(EditorContentModel)
            .where(EditorContentModel.config_id == config_uuid)
            .order_by(EditorContentModel.version.desc())
            .limit(1)
        )
        db_content = result.scalar_one_or_none()
        return self._to_domain(db_content) if db_content else None

    async def get_versions(self, config_uuid: uuid.UUID) -> List[int]:
        result = await self.session.execute(
            select(EditorContentModel.version)
            .where(EditorContentModel.config_id == config_uuid)
            .order_by(EditorContentModel.version)
        )
        return list(result.scalars().all())

    async def append(self, config_uuid: uuid.UUID, content_data: Any) -> Optional[EditorContent]:
        """Добавление следующей версии.

        Строка конфигурации блокируется (SELECT ... FOR UPDATE), а номер версии
        вычисляется подзапросом внутри того же INSERT, поэтому два параллельных
        сохранения не получат одинаковый номер. Возвращает None, если
        конфигурации нет.
        """
        locked = await self.session.execute(
            select(EditorConfigModel.uuid)
            .where(EditorConfigModel.uuid == config_uuid)
            .with_for_update()
        )
        if locked.scalar_one_or_none() is None:
            await self.session.rollback()
            return None

        next_version = (
            select(func.coalesce(func.max(EditorContentModel.version), 0) + 1)
            .where(EditorContentModel.config_id == config_uuid)
            .scalar_subquery()
        )
        content_uuid = uuid.uuid4()
        created_at = utcnow()

        result = await self.session.execute(
            insert(EditorContentModel)
            .values(
                uuid=content_uuid,
                config_id=config_uuid,
                content_data=content_data,
                version=next_version,
                created_at=created_at
            )
            .returning(EditorContentModel.version)
        )
        version = result.scalar_one()
        await self.session.commit()

        return EditorContent(
            uuid=content_uuid,
            config_id=config_uuid,
            content_data=content_data,
            version=version,
            created_at=created_at
        )

    def _to_domain(self, db_content: EditorContentModel) -> EditorContent:
        """Преобразование модели БД в доменную сущность"""
        return EditorContent(
            uuid=db_content.uuid,
            config_id=db_content.config_id,
            content_data=db_content.content_data,
            version=db_content.version,
            created_at=db_content.created_at
        )
