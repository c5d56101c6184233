from editorcraft.api.http.health import router as health_router
from editorcraft.api.http.auth import router as auth_router
from editorcraft.api.http.editors import router as editors_router
from editorcraft.api.http.configs import router as configs_router
from editorcraft.api.http.upload import router as upload_router

__all__ = [
    "health_router",
    "auth_router",
    "editors_router",
    "configs_router",
    "upload_router"
]
