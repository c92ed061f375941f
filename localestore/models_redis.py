from datetime import datetime
from typing import Dict, Any
from dataclasses import dataclass, asdict, fields


@dataclass
class TranslationRecord:
    """Модель перевода для хранилища"""
    language: str
    msg: str
    translation: str
    
    # Метаданные
    created_at: datetime = None
    updated_at: datetime = None
    
    def __post_init__(self):
        if self.created_at is None:
            self.created_at = datetime.utcnow()
        if self.updated_at is None:
            self.updated_at = self.created_at
    
    def to_dict(self) -> Dict[str, Any]:
        """Преобразовать в словарь"""
        return asdict(self)
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TranslationRecord':
        """Создать из словаря"""
        if not isinstance(data, dict):
            raise TypeError(f"expected a dict, got {type(data).__name__}")
        # Неизвестные поля (например id) отбрасываем
        known = {field.name for field in fields(cls)}
        data = {key: value for key, value in data.items() if key in known}
        # Обработка datetime полей
        for name in ['created_at', 'updated_at']:
            if data.get(name) and isinstance(data[name], str):
                try:
                    data[name] = datetime.fromisoformat(data[name])
                except ValueError:
                    data[name] = None
        
        return cls(**data)
