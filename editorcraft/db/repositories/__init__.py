from editorcraft.db.repositories.user_repository import UserRepository
from editorcraft.db.repositories.editor_repository import EditorConfigRepository, EditorContentRepository

__all__ = [
    "UserRepository",
    "EditorConfigRepository",
    "EditorContentRepository"
]
