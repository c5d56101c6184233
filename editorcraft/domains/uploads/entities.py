from dataclasses import dataclass


@dataclass
class ImageFile:
    """Загруженный клиентом файл до передачи в хранилище"""
    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass
class StoredImage:
    original_name: str
    url: str
    key: str
