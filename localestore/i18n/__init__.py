from localestore.i18n.collector import FileCollector
from localestore.i18n.exceptions import LocaleError, LoadError, StoreError, UndefinedLanguageError
from localestore.i18n.translator import TranslationStore, is_translation_file, language_from_filename

__all__ = [
    'FileCollector', 'TranslationStore', 'is_translation_file', 'language_from_filename',
    'LocaleError', 'LoadError', 'StoreError', 'UndefinedLanguageError',
]
