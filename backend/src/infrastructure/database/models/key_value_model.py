"""Key-value SQLAlchemy model."""

from datetime import datetime, timezone
from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class KeyValueModel(Base):
    """SQLAlchemy model for durable key-value entries."""
    
    __tablename__ = "key_value_store"
    
    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        onupdate=_utcnow,
        nullable=False
    )
    
    def __repr__(self) -> str:
        return f"KeyValueModel(key={self.key!r})"
