from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
import uuid

from editorcraft.core.db import get_db
from editorcraft.domains.editors.schemas import (
    PublicConfigResponse, PublicConfigEnvelope, EmbedCodeResponse
)
from editorcraft.domains.editors.services import EditorConfigService

router = APIRouter(prefix="/api/configs", tags=["public configs"])


@router.get("/{config_id}", response_model=PublicConfigEnvelope)
async def get_public_config(config_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    """Публичная конфигурация для встраивания (только активные)"""
    config = await EditorConfigService(db).get_public_config(config_id)
    return PublicConfigEnvelope(config=PublicConfigResponse.model_validate(config))


@router.get("/{config_id}/embed", response_model=EmbedCodeResponse)
async def get_embed_code(config_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    embed_code = await EditorConfigService(db).get_embed_code(config_id)
    return EmbedCodeResponse(embedCode=embed_code)
