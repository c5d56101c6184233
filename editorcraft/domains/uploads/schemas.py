from pydantic import AliasChoices, BaseModel, Field, ConfigDict
from typing import List


class ImageUploadResponse(BaseModel):
    success: bool = True
    url: str
    filename: str


class StoredImageResponse(BaseModel):
    originalName: str = Field(validation_alias=AliasChoices("original_name", "originalName"))
    url: str
    filename: str = Field(validation_alias=AliasChoices("key", "filename"))

    model_config = ConfigDict(from_attributes=True)


class ImagesUploadResponse(BaseModel):
    success: bool = True
    files: List[StoredImageResponse]


class ImageDeleteResponse(BaseModel):
    success: bool = True
    message: str
