from pydantic import (
    AliasChoices, BaseModel, Field, StrictBool, StrictInt, StrictStr, field_validator, ConfigDict
)
from typing import Annotated, Any, Dict, List, Optional, Union
from datetime import datetime
import uuid

# строгие типы: значения известных ключей не приводятся
StrictPositiveInt = Annotated[StrictInt, Field(gt=0)]


class EditorConfigData(BaseModel):
    """Параметры отрисовки редактора.

    Известные ключи проверяются по типу, неизвестные сохраняются как есть.
    """
    theme: Optional[StrictStr] = Field(None, min_length=1, max_length=50)
    fontSize: Optional[StrictPositiveInt] = None
    height: Optional[Union[StrictPositiveInt, StrictStr]] = None
    width: Optional[Union[StrictPositiveInt, StrictStr]] = None
    features: Optional[Dict[str, StrictBool]] = None

    model_config = ConfigDict(extra="allow")

    def to_document(self) -> Dict[str, Any]:
        """Только переданные ключи: значения по умолчанию не подмешиваются"""
        return self.model_dump(exclude_unset=True)


class EditorConfigCreate(BaseModel):
    """Схема для создания и полного обновления конфигурации"""
    name: str = Field(..., min_length=1, max_length=255)
    config_data: EditorConfigData = Field(..., alias="configData")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip()


class EditorConfigUpdate(EditorConfigCreate):
    pass


class EditorConfigStatusUpdate(BaseModel):
    is_active: bool


class EditorConfigResponse(BaseModel):
    """Конфигурация в ответах API владельцу"""
    id: uuid.UUID = Field(validation_alias=AliasChoices("uuid", "id"))
    user_id: uuid.UUID
    name: str
    config_data: Dict[str, Any]
    embed_code: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class EditorConfigEnvelope(BaseModel):
    config: EditorConfigResponse


class EditorConfigListResponse(BaseModel):
    configs: List[EditorConfigResponse]


class PublicConfigResponse(BaseModel):
    """Публичное представление: без владельца и служебных полей"""
    id: uuid.UUID = Field(validation_alias=AliasChoices("uuid", "id"))
    name: str
    config_data: Dict[str, Any]
    embed_code: str

    model_config = ConfigDict(from_attributes=True)


class PublicConfigEnvelope(BaseModel):
    config: PublicConfigResponse


class EmbedCodeResponse(BaseModel):
    embedCode: str


class ContentCreate(BaseModel):
    """Схема для сохранения снимка содержимого"""
    content_data: Any = Field(..., alias="contentData")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('content_data')
    @classmethod
    def validate_content_data(cls, v):
        if v is None:
            raise ValueError('Content data is required')
        return v


class ContentResponse(BaseModel):
    id: uuid.UUID = Field(validation_alias=AliasChoices("uuid", "id"))
    config_id: uuid.UUID
    content_data: Any
    version: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ContentEnvelope(BaseModel):
    content: Optional[ContentResponse] = None


class ContentSavedResponse(BaseModel):
    message: str
    version: int


class MessageResponse(BaseModel):
    message: str
