from contextlib import asynccontextmanager
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from editorcraft.api.exception_handlers import setup_exception_handlers
from editorcraft.api.http import (
    health_router, auth_router, editors_router, configs_router, upload_router
)
from editorcraft.core.config import settings
from editorcraft.core.db import engine, init_models

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

STATIC_DIR = os.path.join(os.path.dirname(__file__), "static")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_create_tables:
        await init_models(engine)
        logger.info("Database tables initialized")
    logger.info("EditorCraft API started")
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="EditorCraft",
        description="Конструктор встраиваемого WYSIWYG-редактора",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(editors_router)
    app.include_router(configs_router)
    app.include_router(upload_router)

    # Скрипт редактора для сторонних страниц
    app.mount("/js", StaticFiles(directory=os.path.join(STATIC_DIR, "js")), name="embed-js")

    return app


app = create_app()
