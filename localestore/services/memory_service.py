from datetime import datetime
from typing import Dict, List, Optional, Tuple
from dataclasses import replace
from localestore.models_redis import TranslationRecord


class MemoryLocaleStore:
    """Хранилище переводов в памяти процесса (для разработки и тестов)"""
    
    def __init__(self, records: Optional[List[TranslationRecord]] = None):
        self._records: Dict[Tuple[str, str], TranslationRecord] = {}
        for record in records or []:
            self._records[(record.language, record.msg)] = replace(record)
    
    async def find_all(self) -> List[TranslationRecord]:
        """Получить все переводы"""
        return [replace(record) for record in self._records.values()]
    
    async def find_one(self, language: str, msg: str) -> Optional[TranslationRecord]:
        """Найти перевод по языку и сообщению"""
        record = self._records.get((language, msg))
        return replace(record) if record else None
    
    async def upsert(self, record: TranslationRecord) -> TranslationRecord:
        """Создать или обновить перевод"""
        record.updated_at = datetime.utcnow()
        self._records[(record.language, record.msg)] = replace(record)
        return record
