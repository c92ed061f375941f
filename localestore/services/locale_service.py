from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from localestore.models import Translation
from localestore.models_redis import TranslationRecord
from localestore.i18n.exceptions import StoreError
import logging

logger = logging.getLogger(__name__)


def _to_record(row: Translation) -> TranslationRecord:
    return TranslationRecord(
        language=row.language,
        msg=row.msg,
        translation=row.translation,
        created_at=row.created_at,
        updated_at=row.updated_at
    )


class SqlLocaleStore:
    """Хранилище переводов в SQL базе данных"""
    
    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self.session_maker = session_maker
    
    async def find_all(self) -> List[TranslationRecord]:
        """Получить все переводы"""
        try:
            async with self.session_maker() as session:
                result = await session.execute(
                    select(Translation).order_by(Translation.id)
                )
                rows = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"❌ Ошибка чтения переводов из БД: {e}")
            raise StoreError(f"Failed to read translations: {e}") from e
        
        return [_to_record(row) for row in rows]
    
    async def find_one(self, language: str, msg: str) -> Optional[TranslationRecord]:
        """Найти перевод по языку и сообщению"""
        try:
            async with self.session_maker() as session:
                result = await session.execute(
                    select(Translation).where(
                        Translation.language == language,
                        Translation.msg == msg
                    )
                )
                row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"❌ Ошибка чтения перевода {language}/{msg!r}: {e}")
            raise StoreError(f"Failed to read translation: {e}") from e
        
        return _to_record(row) if row else None
    
    async def upsert(self, record: TranslationRecord) -> TranslationRecord:
        """Создать или обновить перевод"""
        try:
            async with self.session_maker() as session:
                result = await session.execute(
                    select(Translation).where(
                        Translation.language == record.language,
                        Translation.msg == record.msg
                    )
                )
                row = result.scalar_one_or_none()
                
                if not row:
                    row = Translation(language=record.language, msg=record.msg)
                    session.add(row)
                
                row.translation = record.translation
                
                await session.commit()
                await session.refresh(row)
        except SQLAlchemyError as e:
            logger.error(f"❌ Ошибка записи перевода {record.language}/{record.msg!r}: {e}")
            raise StoreError(f"Failed to save translation: {e}") from e
        
        logger.info(f"💾 БД: {record.language}/{record.msg!r} сохранён")
        
        return _to_record(row)
