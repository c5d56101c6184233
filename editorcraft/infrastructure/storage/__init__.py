from editorcraft.infrastructure.storage.blob_client import BlobStorageClient

__all__ = ["BlobStorageClient"]
