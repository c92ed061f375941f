import json
import logging
from datetime import datetime
from typing import List, Optional
from redis.exceptions import RedisError
from localestore.redis_db import RedisDatabase
from localestore.models_redis import TranslationRecord
from localestore.i18n.exceptions import StoreError

logger = logging.getLogger(__name__)


class RedisLocaleStore:
    """Хранилище переводов в Redis"""
    
    def __init__(self, db: RedisDatabase):
        self.db = db
    
    async def find_all(self) -> List[TranslationRecord]:
        """Получить все переводы"""
        try:
            docs = await self.db.get_all_locales()
            return [TranslationRecord.from_dict(doc) for doc in docs]
        except (RedisError, json.JSONDecodeError, TypeError, KeyError) as e:
            logger.error(f"❌ Ошибка чтения переводов из Redis: {e}")
            raise StoreError(f"Failed to read translations: {e}") from e
    
    async def find_one(self, language: str, msg: str) -> Optional[TranslationRecord]:
        """Найти перевод по языку и сообщению"""
        try:
            doc = await self.db.get_locale(language, msg)
            if not doc:
                return None
            return TranslationRecord.from_dict(doc)
        except (RedisError, json.JSONDecodeError, TypeError, KeyError) as e:
            logger.error(f"❌ Ошибка чтения перевода {language}/{msg!r}: {e}")
            raise StoreError(f"Failed to read translation: {e}") from e
    
    async def upsert(self, record: TranslationRecord) -> TranslationRecord:
        """Создать или обновить перевод"""
        record.updated_at = datetime.utcnow()
        try:
            await self.db.set_locale(record.language, record.msg, record.to_dict())
        except RedisError as e:
            logger.error(f"❌ Ошибка записи перевода {record.language}/{record.msg!r}: {e}")
            raise StoreError(f"Failed to save translation: {e}") from e
        
        logger.info(f"💾 Redis: {record.language}/{record.msg!r} сохранён")
        
        return record
