"""Менеджер переводов.

Переводы собираются из JSON-файлов вида ``<имя>.<язык>.json`` и из
хранилища (Redis, SQL или память). Файлы задают значения по умолчанию:
первый загруженный файл побеждает. Записи хранилища всегда перекрывают
файлы, а ``translate`` сначала пишет в хранилище и только потом в память.
"""
import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from localestore.i18n.collector import FileCollector
from localestore.i18n.exceptions import LoadError, UndefinedLanguageError
from localestore.models_redis import TranslationRecord

logger = logging.getLogger(__name__)


def is_translation_file(path: Union[str, Path]) -> bool:
    """Имя файла имеет вид <имя>.<xx>.<расширение>"""
    parts = Path(path).name.split('.')
    return len(parts) == 3 and len(parts[1]) == 2


def language_from_filename(path: Union[str, Path]) -> str:
    """Код языка - второй сегмент имени файла"""
    parts = Path(path).name.split('.')
    if len(parts) < 2 or not parts[1]:
        raise LoadError(path, "file name does not contain a language code")
    return parts[1]


def _read_translations(path: Path) -> Dict[str, str]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            payload = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(path, f"cannot read file: {e}") from e
    except json.JSONDecodeError as e:
        raise LoadError(path, f"malformed JSON: {e}") from e
    
    if not isinstance(payload, dict):
        raise LoadError(path, "expected a JSON object")
    
    for msg, translation in payload.items():
        if not isinstance(translation, str):
            raise LoadError(path, f"translation of {msg!r} is not a string")
    
    return payload


class TranslationStore:
    """Переводы в памяти + хранилище для постоянных переопределений.
    
    ``storage`` должен предоставлять корутины ``find_all()``,
    ``find_one(language, msg)`` и ``upsert(record)``; ошибки хранилища
    поднимаются как ``StoreError``.
    """
    
    def __init__(self, storage, collector: Optional[FileCollector] = None):
        self.storage = storage
        self.collector = collector or FileCollector()
        self._locales: Dict[str, Dict[str, str]] = {}
    
    @property
    def languages(self) -> List[str]:
        """Загруженные языки"""
        return list(self._locales)
    
    async def add_from_file(self, path: Union[str, Path]) -> int:
        """Добавить переводы из JSON-файла, не заменяя существующие"""
        path = Path(path)
        language = language_from_filename(path)
        translations = await asyncio.to_thread(_read_translations, path)
        
        locale = self._locales.setdefault(language, {})
        added = 0
        for msg, translation in translations.items():
            if msg in locale:
                continue
            locale[msg] = translation
            added += 1
        
        logger.info(f"📄 {path.name}: {language} +{added} из {len(translations)}")
        
        return added
    
    async def add_from_dir(self, directory: Union[str, Path]) -> int:
        """Добавить все файлы переводов из директории"""
        files = await self.collector.collect(directory)
        
        added = 0
        for path in files:
            if not is_translation_file(path):
                logger.debug(f"⏭ Пропущен файл {path}: имя не в формате <имя>.<язык>.json")
                continue
            added += await self.add_from_file(path)
        
        return added
    
    async def load_from_store(self) -> int:
        """Загрузить переводы из хранилища, перекрывая файловые"""
        records = await self.storage.find_all()
        
        for record in records:
            self._locales.setdefault(record.language, {})[record.msg] = record.translation
        
        logger.info(f"🗄 Из хранилища загружено переводов: {len(records)}")
        
        return len(records)
    
    async def initialize(self, directory: Optional[Union[str, Path]] = None):
        """Загрузить переводы из директории, затем из хранилища"""
        if directory:
            await self.add_from_dir(directory)
        
        await self.load_from_store()
        
        logger.info(f"✅ Локализация готова, языки: {', '.join(self.languages) or '-'}")
    
    def locales(self, language: str) -> Dict[str, str]:
        """Все переводы языка"""
        if language not in self._locales:
            raise UndefinedLanguageError(language)
        
        return self._locales[language]
    
    async def translate(self, language: str, msg: str, translation: str) -> TranslationRecord:
        """Сохранить перевод в хранилище, затем в памяти"""
        record = await self.storage.find_one(language, msg)
        
        if record is None:
            record = TranslationRecord(language=language, msg=msg, translation=translation)
        else:
            record.translation = translation
        
        record = await self.storage.upsert(record)
        
        self._locales.setdefault(language, {})[msg] = translation
        
        logger.info(f"✏️ Перевод {language}/{msg!r} обновлён")
        
        return record
    
    def _substitute(self, text: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Замена токенов :name (по мотивам strtr из PHP)"""
        if not params:
            return text
        
        tokens = [(f":{name}", str(value)) for name, value in params.items()]
        
        result = []
        i = 0
        while i < len(text):
            for token, value in tokens:
                if text.startswith(token, i):
                    result.append(value)
                    i += len(token)
                    break
            else:
                result.append(text[i])
                i += 1
        
        return ''.join(result)
    
    def t(self, language: str, msg: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Получить перевод с подстановкой параметров"""
        locale = self._locales.get(language)
        if locale and msg in locale:
            msg = locale[msg]
        
        return self._substitute(msg, params)
