from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
import uuid

from editorcraft.core.auth import get_current_user
from editorcraft.core.db import get_db
from editorcraft.domains.editors.schemas import (
    EditorConfigCreate, EditorConfigUpdate, EditorConfigStatusUpdate,
    EditorConfigResponse, EditorConfigEnvelope, EditorConfigListResponse,
    ContentCreate, ContentResponse, ContentEnvelope, ContentSavedResponse,
    MessageResponse
)
from editorcraft.domains.editors.services import EditorConfigService, EditorContentService
from editorcraft.domains.identity.entities import User

router = APIRouter(prefix="/api/editors", tags=["editors"])


@router.get("", response_model=EditorConfigListResponse)
async def list_configs(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Конфигурации текущего пользователя"""
    configs = await EditorConfigService(db).list_configs(current_user.uuid)
    return EditorConfigListResponse(
        configs=[EditorConfigResponse.model_validate(config) for config in configs]
    )


@router.post("", response_model=EditorConfigEnvelope, status_code=status.HTTP_201_CREATED)
async def create_config(
    config_data: EditorConfigCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Создание конфигурации"""
    config = await EditorConfigService(db).create_config(
        current_user.uuid,
        config_data.name,
        config_data.config_data.to_document()
    )
    return EditorConfigEnvelope(config=EditorConfigResponse.model_validate(config))


@router.put("/{config_id}", response_model=EditorConfigEnvelope)
async def update_config(
    config_id: uuid.UUID,
    config_data: EditorConfigUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Обновление имени и параметров конфигурации"""
    config = await EditorConfigService(db).update_config(
        current_user.uuid,
        config_id,
        config_data.name,
        config_data.config_data.to_document()
    )
    return EditorConfigEnvelope(config=EditorConfigResponse.model_validate(config))


@router.patch("/{config_id}", response_model=EditorConfigEnvelope)
async def set_config_status(
    config_id: uuid.UUID,
    status_data: EditorConfigStatusUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Включение/выключение публичного доступа"""
    config = await EditorConfigService(db).set_active(current_user.uuid, config_id, status_data.is_active)
    return EditorConfigEnvelope(config=EditorConfigResponse.model_validate(config))


@router.delete("/{config_id}", response_model=MessageResponse)
async def delete_config(
    config_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Удаление конфигурации и ее контента"""
    await EditorConfigService(db).delete_config(current_user.uuid, config_id)
    return MessageResponse(message="Configuration deleted successfully")


@router.get("/{config_id}/content", response_model=ContentEnvelope)
async def get_content(
    config_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Последняя версия контента (или null)"""
    await EditorConfigService(db).get_owned_config(current_user.uuid, config_id)

    content = await EditorContentService(db).get_latest(config_id)
    if content is None:
        return ContentEnvelope(content=None)
    return ContentEnvelope(content=ContentResponse.model_validate(content))


@router.post("/{config_id}/content", response_model=ContentSavedResponse, status_code=status.HTTP_201_CREATED)
async def save_content(
    config_id: uuid.UUID,
    content_data: ContentCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Сохранение новой версии контента"""
    await EditorConfigService(db).get_owned_config(current_user.uuid, config_id)

    version = await EditorContentService(db).save(config_id, content_data.content_data)
    return ContentSavedResponse(message="Content saved successfully", version=version)
