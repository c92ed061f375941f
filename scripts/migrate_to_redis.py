#!/usr/bin/env python3
"""
Скрипт для миграции переводов из SQL базы в Redis
Повторный запуск безопасен: записи обновляются по (language, msg)
"""

import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from localestore.database import init_db, close_db
from localestore.redis_db import RedisDatabase
from localestore.services.locale_service import SqlLocaleStore
from localestore.services_redis.locale_service import RedisLocaleStore
from localestore.i18n.exceptions import StoreError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def migrate_locales(source, target) -> int:
    """Миграция переводов"""
    logger.info("🔄 Начинаем миграцию переводов...")

    records = await source.find_all()

    migrated_count = 0
    for record in records:
        try:
            await target.upsert(record)
            migrated_count += 1
        except StoreError as e:
            logger.error(f"❌ Ошибка миграции перевода {record.language}/{record.msg!r}: {e}")

    logger.info(f"✅ Мигрировано переводов: {migrated_count} из {len(records)}")

    return migrated_count


async def main():
    """Главная функция миграции"""
    redis_db = RedisDatabase()
    try:
        session_maker = await init_db()
        await redis_db.connect()

        await migrate_locales(SqlLocaleStore(session_maker), RedisLocaleStore(redis_db))

        logger.info("🎉 Миграция завершена!")
    finally:
        await redis_db.disconnect()
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
