from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from notesync.core.config import Settings, settings

# Базовый класс для моделей
Base = declarative_base()


def create_engine(config: Settings = settings, **kwargs) -> AsyncEngine:
    """Создание асинхронного движка по настройкам"""
    return create_async_engine(config.database_url, future=True, echo=config.database_echo, **kwargs)


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    """Фабрика сессий; объекты не истекают после commit"""
    return async_sessionmaker(bind=bind, class_=AsyncSession, expire_on_commit=False)


async def init_models(bind: AsyncEngine) -> None:
    """Создание таблиц без миграций (dev/тесты)"""
    # импорт регистрирует модели в Base.metadata
    import notesync.db.models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
