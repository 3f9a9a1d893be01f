from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from domain.exceptions.currency import StorageError
from infrastructure.persistence.database import Database
from infrastructure.persistence.models.key_value import KeyValueDB


class SQLKeyValueStore:
	def __init__(self, database: Database):
		self.database = database

	async def get(self, key: str) -> bytes | None:
		try:
			async with self.database.session() as session:
				row = await session.get(KeyValueDB, key)
				return row.value if row is not None else None
		except SQLAlchemyError as e:
			raise StorageError(f'Database read failed for {key}: {e}') from e

	async def set(self, key: str, value: bytes) -> None:
		try:
			async with self.database.session() as session:
				row = await session.get(KeyValueDB, key)
				if row is None:
					session.add(KeyValueDB(key=key, value=value, updated_at=datetime.now()))
				else:
					row.value = value
					row.updated_at = datetime.now()
		except SQLAlchemyError as e:
			raise StorageError(f'Database write failed for {key}: {e}') from e

	async def close(self) -> None:
		await self.database.close()
