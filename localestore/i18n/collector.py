import asyncio
import logging
from pathlib import Path
from typing import List, Union
from localestore.i18n.exceptions import LoadError

logger = logging.getLogger(__name__)


class FileCollector:
    """Поиск файлов переводов в директории (рекурсивно)"""
    
    def __init__(self, pattern: str = '*.json'):
        self.pattern = pattern
    
    def _scan(self, directory: Path) -> List[Path]:
        if not directory.is_dir():
            raise LoadError(directory, "not a directory")
        # Лексикографический порядок: от него зависит, какой файл побеждает
        return sorted(path for path in directory.rglob(self.pattern) if path.is_file())
    
    async def collect(self, directory: Union[str, Path]) -> List[Path]:
        """Получить список файлов, отсортированный по пути"""
        directory = Path(directory)
        try:
            files = await asyncio.to_thread(self._scan, directory)
        except OSError as e:
            raise LoadError(directory, f"cannot list directory: {e}") from e
        
        logger.debug(f"📂 {directory}: найдено файлов {len(files)}")
        
        return files
