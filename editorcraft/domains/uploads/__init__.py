from editorcraft.domains.uploads.entities import ImageFile, StoredImage

__all__ = ["ImageFile", "StoredImage"]
