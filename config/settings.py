from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Application
	APP_NAME: str = 'Currency Converter'
	DEBUG: bool = True
	LOG_LEVEL: str = 'INFO'
	LOG_DIRECTORY: str | None = None

	# Rate source
	RATE_PROVIDER: Literal['fixerio', 'openexchange', 'mock'] = 'fixerio'
	FIXERIO_API_KEY: str = ''
	FIXERIO_BASE_URL: str = 'http://data.fixer.io/api'
	OPENEXCHANGE_APP_ID: str = ''
	PROVIDER_TIMEOUT: int = 10

	# Persistence
	STORAGE_BACKEND: Literal['memory', 'redis', 'sqlite'] = 'sqlite'
	REDIS_URL: str = 'redis://localhost:6379'
	DATABASE_URL: str = 'sqlite+aiosqlite:///./currency_converter.db'

	# Engine
	DEBOUNCE_SECONDS: float = 0.3
	CACHE_VALIDITY_SECONDS: float = 300
	HISTORY_LIMIT: int = 50
	HISTORY_MIN_AMOUNT: float = 0.01
	RESTORE_PREFERENCES: bool = False
	DEFAULT_FROM: str = 'EUR'
	DEFAULT_TO: str = 'PLN'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
