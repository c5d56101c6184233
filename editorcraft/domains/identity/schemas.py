from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator, ConfigDict
from datetime import datetime
import uuid


class UserCreate(BaseModel):
    """Схема для регистрации пользователя"""
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip()

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        return v.lower()


class UserLogin(BaseModel):
    """Схема для входа пользователя"""
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        return v.lower()


class UserResponse(BaseModel):
    """Схема для ответа с данными пользователя"""
    id: uuid.UUID = Field(validation_alias=AliasChoices("uuid", "id"))
    email: str
    name: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    """Ответ регистрации и входа: токен и пользователь"""
    token: str
    user: UserResponse


class CurrentUserResponse(BaseModel):
    user: UserResponse
