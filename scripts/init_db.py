"""
Скрипт инициализации базы данных переводов
Запуск: python scripts/init_db.py
"""
import asyncio
import sys
from pathlib import Path

# Добавляем корневую директорию в путь
sys.path.insert(0, str(Path(__file__).parent.parent))

from localestore import database
from localestore.config import settings
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main():
    """Инициализация БД"""
    try:
        logger.info(f"🔧 Инициализация базы данных {settings.DATABASE_URL}...")

        # Создаём таблицы
        await database.init_db()

        logger.info("✅ База данных успешно инициализирована!")
        logger.info("📋 Созданные таблицы:")
        logger.info("  - locales")

    except Exception as e:
        logger.error(f"❌ Ошибка инициализации: {e}")
        raise
    finally:
        await database.close_db()


if __name__ == '__main__':
    asyncio.run(main())
