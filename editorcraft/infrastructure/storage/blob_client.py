"""HTTP-клиент объектного хранилища Vercel Blob."""
from typing import List
import logging

import httpx

from editorcraft.core.errors import UpstreamFailure

logger = logging.getLogger(__name__)


class BlobStorageClient:
    """Загрузка и удаление публичных объектов по ключу"""

    API_VERSION = "7"

    def __init__(self, http: httpx.AsyncClient, token: str, base_url: str):
        self._http = http
        self._token = token
        self._base_url = base_url.rstrip("/")

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self._token}",
            "x-api-version": self.API_VERSION,
        }

    async def put(self, pathname: str, data: bytes, content_type: str) -> str:
        """Загрузка объекта; возвращает его публичный URL"""
        headers = self._headers()
        headers.update({
            "x-content-type": content_type,
            "x-add-random-suffix": "0",
        })

        try:
            response = await self._http.put(f"{self._base_url}/{pathname}", content=data, headers=headers)
            response.raise_for_status()
            url = response.json()["url"]
        except (httpx.HTTPError, KeyError, ValueError) as e:
            logger.error(f"Blob upload of {pathname} failed: {e!r}")
            raise UpstreamFailure("Failed to upload image")

        return url

    async def delete(self, pathnames: List[str]) -> None:
        try:
            response = await self._http.post(
                f"{self._base_url}/delete",
                json={"urls": pathnames},
                headers=self._headers()
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Blob delete of {pathnames} failed: {e!r}")
            raise UpstreamFailure("Failed to delete image")
