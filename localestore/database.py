from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
import logging

logger = logging.getLogger(__name__)

# Engine инициализируется в init_db()
engine = None


class Base(DeclarativeBase):
    """Базовая модель"""
    pass


def create_engine(database_url: str):
    """Создать async engine"""
    if database_url.startswith('sqlite'):
        return create_async_engine(database_url, echo=False)
    
    return create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20
    )


async def init_db(database_url: str = None) -> async_sessionmaker:
    """Инициализация базы данных"""
    global engine
    
    # Импортируем settings здесь, чтобы избежать циклического импорта
    from localestore.config import settings
    # Модели должны быть зарегистрированы в metadata до create_all
    from localestore import models  # noqa: F401
    
    engine = create_engine(database_url or settings.DATABASE_URL)
    
    # Создаём session factory
    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False
    )
    
    # Создаём таблицы
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    logger.info("✅ Все таблицы созданы")
    
    return session_maker


async def close_db():
    """Закрытие соединений с БД"""
    if engine:
        await engine.dispose()
