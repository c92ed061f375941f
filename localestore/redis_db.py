import json
import logging
from typing import Optional, Dict, Any, List
import redis.asyncio as redis
from localestore.config import settings

logger = logging.getLogger(__name__)


class RedisDatabase:
    """Класс для работы с Redis базой данных"""
    
    def __init__(self, url: Optional[str] = None, prefix: Optional[str] = None, client=None):
        self.url = url or settings.REDIS_CONNECTION_URL
        self.prefix = prefix or settings.REDIS_LOCALES_PREFIX
        self.client = client
    
    async def connect(self):
        """Подключение к Redis"""
        try:
            if self.client is None:
                self.client = redis.from_url(
                    self.url,
                    encoding="utf-8",
                    decode_responses=True
                )
            # Тестируем подключение
            await self.client.ping()
            logger.info("✅ Redis подключение установлено")
        except Exception as e:
            logger.error(f"❌ Ошибка подключения к Redis: {e}")
            if self.client is not None:
                await self.client.aclose()
                self.client = None
            raise
    
    async def disconnect(self):
        """Отключение от Redis"""
        if self.client:
            await self.client.aclose()
            logger.info("✅ Redis соединение закрыто")
    
    def language_key(self, language: str) -> str:
        """Ключ хеша с переводами языка"""
        return f"{self.prefix}:{language}"
    
    async def set_locale(self, language: str, msg: str, doc: Dict[str, Any]):
        """Сохранить документ перевода"""
        data = json.dumps(doc, default=str)
        await self.client.hset(self.language_key(language), msg, data)
    
    async def get_locale(self, language: str, msg: str) -> Optional[Dict[str, Any]]:
        """Получить документ перевода"""
        data = await self.client.hget(self.language_key(language), msg)
        if data:
            return json.loads(data)
        return None
    
    async def get_all_locales(self) -> List[Dict[str, Any]]:
        """Получить все документы переводов"""
        pattern = f"{self.prefix}:*"
        keys = await self.client.keys(pattern)
        keys.sort()
        
        docs = []
        for key in keys:
            entries = await self.client.hgetall(key)
            for data in entries.values():
                docs.append(json.loads(data))
        
        return docs
    