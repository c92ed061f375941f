from sqlalchemy import BigInteger, Integer, String, Text, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime
from localestore.database import Base


class Translation(Base):
    __tablename__ = 'locales'
    __table_args__ = (
        UniqueConstraint('language', 'msg', name='uq_locales_language_msg'),
    )
    
    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, 'sqlite'), primary_key=True, autoincrement=True)
    language: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    
    # Исходная строка (обычно английская) и её перевод
    msg: Mapped[str] = mapped_column(String(512), nullable=False)
    translation: Mapped[str] = mapped_column(Text, nullable=False)
    
    # Метаданные
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
