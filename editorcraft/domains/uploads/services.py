from typing import List, Optional
import asyncio
import logging
import mimetypes
import re
import secrets
import time
import uuid

from editorcraft.core.config import settings
from editorcraft.core.errors import Forbidden, InvalidInput, UpstreamFailure
from editorcraft.domains.uploads.entities import ImageFile, StoredImage
from editorcraft.infrastructure.storage.blob_client import BlobStorageClient

logger = logging.getLogger(__name__)

_EXTENSION_RE = re.compile(r"^[a-z0-9]{1,10}$")

# SVG может содержать скрипты, а объекты в хранилище публичные
_BLOCKED_TYPES = {"image/svg+xml"}
_BLOCKED_EXTENSIONS = {"svg", "svgz"}


class UploadService:
    """Проверка изображений и передача их во внешнее хранилище.

    Сервис ничего не хранит сам: запись о файле есть только в хранилище.
    """

    def __init__(
        self,
        storage: BlobStorageClient,
        prefix: Optional[str] = None,
        max_bytes: Optional[int] = None,
        max_files: Optional[int] = None
    ):
        self.storage = storage
        self.prefix = prefix or settings.upload_prefix
        self.max_bytes = max_bytes or settings.max_upload_bytes
        self.max_files = max_files or settings.max_batch_files

    def validate(self, image: ImageFile) -> None:
        """Только image/* (кроме SVG) и не больше max_bytes"""
        content_type = image.content_type.split(";")[0].strip().lower()
        if not content_type.startswith("image/"):
            raise InvalidInput("Only image files are allowed")
        extension = image.filename.rsplit(".", 1)[1].lower() if "." in image.filename else ""
        if content_type in _BLOCKED_TYPES or extension in _BLOCKED_EXTENSIONS:
            raise InvalidInput("SVG images are not allowed")
        if image.size == 0:
            raise InvalidInput("No image file provided")
        if image.size > self.max_bytes:
            raise InvalidInput(f"File too large (max {self.max_bytes} bytes)")

    def user_namespace(self, user_id: uuid.UUID) -> str:
        return f"{self.prefix}/{user_id}/"

    @staticmethod
    def _extension(image: ImageFile) -> str:
        if "." in image.filename:
            extension = image.filename.rsplit(".", 1)[1].lower()
            if _EXTENSION_RE.match(extension):
                return extension

        guessed = mimetypes.guess_extension(image.content_type.split(";")[0].strip())
        return guessed.lstrip(".") if guessed else "bin"

    def build_key(self, user_id: uuid.UUID, image: ImageFile) -> str:
        """Ключ вида prefix/user/<epoch ms>-<random>.<ext>"""
        timestamp = int(time.time() * 1000)
        token = secrets.token_hex(8)
        return f"{self.user_namespace(user_id)}{timestamp}-{token}.{self._extension(image)}"

    async def _store(self, user_id: uuid.UUID, image: ImageFile) -> StoredImage:
        key = self.build_key(user_id, image)
        url = await self.storage.put(key, image.data, image.content_type)
        logger.info(f"Uploaded {image.size} bytes for user {user_id} as {key}")
        return StoredImage(original_name=image.filename, url=url, key=key)

    async def upload_image(self, user_id: uuid.UUID, image: Optional[ImageFile]) -> StoredImage:
        if image is None:
            raise InvalidInput("No image file provided")

        self.validate(image)
        return await self._store(user_id, image)

    async def upload_images(self, user_id: uuid.UUID, images: List[ImageFile]) -> List[StoredImage]:
        """Пакетная загрузка: любой невалидный файл отклоняет весь пакет"""
        if not images:
            raise InvalidInput("No image files provided")
        if len(images) > self.max_files:
            raise InvalidInput(f"Too many files (max {self.max_files})")

        for image in images:
            self.validate(image)

        # gather сохраняет порядок входа; ждем все загрузки, прежде чем сообщить об ошибке
        results = await asyncio.gather(
            *(self._store(user_id, image) for image in images),
            return_exceptions=True
        )
        failures = [result for result in results if isinstance(result, Exception)]
        if failures:
            await self._discard([result for result in results if isinstance(result, StoredImage)])
            raise failures[0]

        return list(results)

    async def _discard(self, stored: List[StoredImage]) -> None:
        """Удаление уже загруженной части неудавшегося пакета"""
        if not stored:
            return
        try:
            await self.storage.delete([item.key for item in stored])
        except UpstreamFailure:
            logger.error(f"Orphaned blobs after failed batch: {[item.key for item in stored]}")

    async def delete_image(self, user_id: uuid.UUID, key: str) -> None:
        """Удаление объекта; ключ должен лежать в пространстве пользователя"""
        namespace = self.user_namespace(user_id)
        if not key.startswith(namespace) or ".." in key:
            raise Forbidden("Access denied")

        await self.storage.delete([key])
        logger.info(f"Deleted {key} for user {user_id}")
