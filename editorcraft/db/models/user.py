from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from editorcraft.db.base import BaseModel, utcnow


class User(BaseModel):
    __tablename__ = "users"

    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    editor_configs = relationship(
        "EditorConfig", back_populates="owner", cascade="all, delete-orphan", passive_deletes=True
    )
