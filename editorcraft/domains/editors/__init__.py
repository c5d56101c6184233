from editorcraft.domains.editors.embed import generate_embed_code, serialize_config
from editorcraft.domains.editors.entities import EditorConfig, EditorContent

__all__ = [
    "generate_embed_code", "serialize_config",
    "EditorConfig", "EditorContent",
]
