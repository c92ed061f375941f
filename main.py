import asyncio
import logging

from localestore.config import settings
from localestore.i18n import FileCollector, TranslationStore, LocaleError

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def create_storage():
    """Создать хранилище переводов и функцию его закрытия"""
    if settings.LOCALE_BACKEND == 'redis':
        from localestore.redis_db import RedisDatabase
        from localestore.services_redis.locale_service import RedisLocaleStore

        db = RedisDatabase()
        await db.connect()
        return RedisLocaleStore(db), db.disconnect

    if settings.LOCALE_BACKEND == 'sql':
        from localestore.database import init_db, close_db
        from localestore.services.locale_service import SqlLocaleStore

        session_maker = await init_db()
        return SqlLocaleStore(session_maker), close_db

    from localestore.services.memory_service import MemoryLocaleStore

    async def noop():
        pass

    return MemoryLocaleStore(), noop


async def create_locale():
    """Создать менеджер переводов"""
    storage, close = await create_storage()
    locale = TranslationStore(storage, FileCollector(settings.LOCALES_PATTERN))
    return locale, close


async def main():
    """Главная функция: загрузить переводы и вывести сводку"""
    try:
        locale, close = await create_locale()
    except Exception as e:
        logger.error(f"❌ Хранилище ({settings.LOCALE_BACKEND}) недоступно: {e}")
        raise

    try:
        await locale.initialize(settings.LOCALES_DIR)

        for language in locale.languages:
            logger.info(f"🌐 {language}: {len(locale.locales(language))} строк")
    except LocaleError as e:
        logger.error(f"❌ Ошибка загрузки переводов: {e}")
        raise
    finally:
        await close()


if __name__ == '__main__':
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("👋 Stopped")
