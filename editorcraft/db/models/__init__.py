from editorcraft.db.base import Base
from editorcraft.db.models.user import User
from editorcraft.db.models.editor import EditorConfig, EditorContent

__all__ = [
    "Base",
    "User",
    "EditorConfig",
    "EditorContent",
]
