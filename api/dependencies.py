import logging

from application.services import ConversionEngine, build_engine
from config.settings import Settings
from domain.catalog import CurrencyCatalog, default_catalog
from infrastructure.persistence import KeyValueStore, create_store
from infrastructure.providers import create_rate_source

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	engine: ConversionEngine | None = None
	store: KeyValueStore | None = None


deps = AppDependencies()


async def init_dependencies(settings: Settings) -> None:
	"""Build the store, rate source and engine, then restore persisted state."""
	logger.info('Initializing dependencies...')

	rate_source = create_rate_source(settings)
	deps.store = await create_store(settings)
	deps.engine = build_engine(settings, rate_source, deps.store)
	await deps.engine.start()

	logger.info(
		f'Dependencies initialized (provider={rate_source.name}, base={rate_source.base_code}, '
		f'storage={settings.STORAGE_BACKEND})'
	)


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.engine:
		await deps.engine.close()
		deps.engine = None
	if deps.store:
		await deps.store.close()
		deps.store = None

	logger.info('Cleanup complete')


def get_engine() -> ConversionEngine:
	if deps.engine is None:
		raise RuntimeError('Conversion engine not initialized')
	return deps.engine


def get_catalog() -> CurrencyCatalog:
	return default_catalog
