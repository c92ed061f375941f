import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Настройки приложения"""
    
    # Источник переводов
    LOCALE_BACKEND: str = os.getenv('LOCALE_BACKEND', 'redis')
    LOCALES_DIR: str = os.getenv('LOCALES_DIR', '')
    LOCALES_PATTERN: str = os.getenv('LOCALES_PATTERN', '*.json')
    
    # Redis Database
    REDIS_URL: str = os.getenv('REDIS_URL', '')
    REDIS_HOST: str = os.getenv('REDIS_HOST', 'localhost')
    REDIS_PORT: int = int(os.getenv('REDIS_PORT', 6379))
    REDIS_PASSWORD: str = os.getenv('REDIS_PASSWORD', '')
    REDIS_DB: int = int(os.getenv('REDIS_DB', 0))
    REDIS_LOCALES_PREFIX: str = os.getenv('REDIS_LOCALES_PREFIX', 'locales')
    
    # SQL Database
    DATABASE_URL: str = os.getenv('DATABASE_URL', 'sqlite+aiosqlite:///./locales.db')
    
    # Logging
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')
    
    BACKENDS = ('redis', 'sql', 'memory')
    
    @property
    def REDIS_CONNECTION_URL(self) -> str:
        """Получить URL подключения к Redis"""
        if self.REDIS_URL:
            return self.REDIS_URL
        
        if self.REDIS_PASSWORD:
            return f"redis://:{self.REDIS_PASSWORD}@{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"
        else:
            return f"redis://{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"
    
    def validate(self):
        """Валидация настроек"""
        if self.LOCALE_BACKEND not in self.BACKENDS:
            raise ValueError(f"❌ LOCALE_BACKEND должен быть одним из {', '.join(self.BACKENDS)}")
        if self.REDIS_PORT <= 0:
            raise ValueError("❌ REDIS_PORT должен быть положительным")


settings = Settings()
settings.validate()
