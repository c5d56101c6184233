import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from editorcraft.domains.editors.embed import generate_embed_code


class EditorConfig:
    """Именованная конфигурация редактора и ее embed-сниппет.

    embed_code никогда не присваивается напрямую: он пересчитывается
    при каждой смене config_data, чтобы они не расходились.
    """

    def __init__(
        self,
        uuid: uuid.UUID,
        user_id: uuid.UUID,
        name: str,
        config_data: Dict[str, Any],
        embed_code: str,
        is_active: bool = True,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.user_id = user_id
        self.name = name
        self.config_data = config_data
        self.embed_code = embed_code
        self.is_active = is_active
        self.created_at = created_at or datetime.now(timezone.utc)
        self.updated_at = updated_at or self.created_at

    def apply_changes(self, name: str, config_data: Dict[str, Any], script_url: str) -> None:
        """Смена имени и конфигурации с пересчетом сниппета"""
        self.name = name
        self.config_data = config_data
        self.embed_code = generate_embed_code(config_data, script_url)
        self.updated_at = datetime.now(timezone.utc)

    @classmethod
    def create_config(
        cls,
        user_id: uuid.UUID,
        name: str,
        config_data: Dict[str, Any],
        script_url: str
    ) -> "EditorConfig":
        """Создание новой (активной) конфигурации"""
        return cls(
            uuid=uuid.uuid4(),
            user_id=user_id,
            name=name,
            config_data=config_data,
            embed_code=generate_embed_code(config_data, script_url)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, EditorConfig):
            return False
        return self.uuid == other.uuid

    def __repr__(self) -> str:
        return f"EditorConfig(uuid={self.uuid}, name={self.name}, is_active={self.is_active})"


class EditorContent:
    """Снимок содержимого редактора; версии идут подряд с 1 для каждой конфигурации"""

    def __init__(
        self,
        uuid: uuid.UUID,
        config_id: uuid.UUID,
        content_data: Any,
        version: int,
        created_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.config_id = config_id
        self.content_data = content_data
        self.version = version
        self.created_at = created_at or datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return f"EditorContent(uuid={self.uuid}, config_id={self.config_id}, version={self.version})"
