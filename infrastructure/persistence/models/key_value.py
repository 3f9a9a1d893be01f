from datetime import datetime

from sqlalchemy import DateTime, LargeBinary, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
	pass


class KeyValueDB(Base):
	__tablename__ = 'key_value_store'

	key: Mapped[str] = mapped_column(String(100), primary_key=True)
	value: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
	updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
