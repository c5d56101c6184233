from fastapi import APIRouter, Depends, File, UploadFile
from typing import List, Optional
import httpx

from editorcraft.core.auth import get_current_user
from editorcraft.core.config import settings
from editorcraft.domains.identity.entities import User
from editorcraft.domains.uploads.entities import ImageFile
from editorcraft.domains.uploads.schemas import (
    ImageUploadResponse, ImagesUploadResponse, StoredImageResponse, ImageDeleteResponse
)
from editorcraft.domains.uploads.services import UploadService
from editorcraft.infrastructure.storage.blob_client import BlobStorageClient

router = APIRouter(prefix="/api/upload", tags=["upload"])


async def get_blob_client():
    async with httpx.AsyncClient(timeout=30.0) as http:
        yield BlobStorageClient(http, settings.blob_read_write_token, settings.blob_api_url)


def get_upload_service(storage: BlobStorageClient = Depends(get_blob_client)) -> UploadService:
    return UploadService(storage)


async def _read_upload(upload: UploadFile, max_bytes: int) -> ImageFile:
    # читаем на байт больше лимита, чтобы распознать слишком большой файл
    data = await upload.read(max_bytes + 1)
    return ImageFile(
        filename=upload.filename or "",
        content_type=upload.content_type or "",
        data=data
    )


@router.post("/image", response_model=ImageUploadResponse)
async def upload_image(
    image: Optional[UploadFile] = File(None),
    current_user: User = Depends(get_current_user),
    upload_service: UploadService = Depends(get_upload_service)
):
    """Загрузка одного изображения (поле image)"""
    image_file = await _read_upload(image, upload_service.max_bytes) if image else None
    stored = await upload_service.upload_image(current_user.uuid, image_file)
    return ImageUploadResponse(url=stored.url, filename=stored.key)


@router.post("/images", response_model=ImagesUploadResponse)
async def upload_images(
    images: Optional[List[UploadFile]] = File(None),
    current_user: User = Depends(get_current_user),
    upload_service: UploadService = Depends(get_upload_service)
):
    """Пакетная загрузка изображений (поле images)"""
    image_files = [await _read_upload(image, upload_service.max_bytes) for image in images or []]
    stored = await upload_service.upload_images(current_user.uuid, image_files)
    return ImagesUploadResponse(files=[StoredImageResponse.model_validate(item) for item in stored])


@router.delete("/image/{key:path}", response_model=ImageDeleteResponse)
async def delete_image(
    key: str,
    current_user: User = Depends(get_current_user),
    upload_service: UploadService = Depends(get_upload_service)
):
    """Удаление ранее загруженного изображения"""
    await upload_service.delete_image(current_user.uuid, key)
    return ImageDeleteResponse(message="File deleted")
