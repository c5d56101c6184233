from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7

    cors_origins: str = "http://localhost:3000"

    # Встраиваемый скрипт редактора
    embed_script_url: str = "/js/editorcraft-embed.js"

    # Хранилище изображений (Vercel Blob)
    blob_read_write_token: str = ""
    blob_api_url: str = "https://blob.vercel-storage.com"
    upload_prefix: str = "editorcraft"
    max_upload_bytes: int = 10 * 1024 * 1024
    max_batch_files: int = 5

    auto_create_tables: bool = False
    log_level: str = "INFO"
    sql_echo: bool = False

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
