from sqlalchemy import (
    Column, String, Text, Integer, Boolean, DateTime, ForeignKey, JSON, Uuid, UniqueConstraint
)
from sqlalchemy.orm import relationship

from editorcraft.db.base import BaseModel, utcnow


class EditorConfig(BaseModel):
    __tablename__ = "editor_configs"

    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.uuid", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    config_data = Column(JSON, nullable=False)
    embed_code = Column(Text, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    owner = relationship("User", back_populates="editor_configs")
    contents = relationship(
        "EditorContent", back_populates="config", cascade="all, delete-orphan", passive_deletes=True
    )


class EditorContent(BaseModel):
    __tablename__ = "editor_content"
    __table_args__ = (
        UniqueConstraint("config_id", "version", name="uq_editor_content_config_version"),
    )

    config_id = Column(Uuid(as_uuid=True), ForeignKey("editor_configs.uuid", ondelete="CASCADE"), nullable=False, index=True)
    content_data = Column(JSON, nullable=False)
    version = Column(Integer, nullable=False)

    # Relationships
    config = relationship("EditorConfig", back_populates="contents")
