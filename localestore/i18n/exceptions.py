"""Ошибки менеджера переводов"""


class LocaleError(Exception):
    """Базовая ошибка локализации"""


class LoadError(LocaleError):
    """Файл или директорию с переводами не удалось прочитать"""
    
    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class StoreError(LocaleError):
    """Ошибка чтения или записи в хранилище переводов"""


class UndefinedLanguageError(LocaleError):
    """Для языка не загружено ни одного перевода"""
    
    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Language '{language}' is not defined")
