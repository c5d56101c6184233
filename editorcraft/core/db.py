from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from editorcraft.core.config import settings
from editorcraft.db.base import Base


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite не проверяет внешние ключи без PRAGMA, а на них держится каскадное удаление"""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_engine(database_url: str, **kwargs) -> AsyncEngine:
    engine = create_async_engine(database_url, future=True, **kwargs)
    enable_sqlite_foreign_keys(engine)
    return engine


engine = create_engine(settings.database_url, echo=settings.sql_echo)

SessionLocal = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def init_models(bind: AsyncEngine) -> None:
    """Создание таблиц по метаданным моделей (для разработки и тестов)"""
    import editorcraft.db.models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# Функция для dependency injection в FastAPI
async def get_db():
    async with SessionLocal() as session:
        yield session
