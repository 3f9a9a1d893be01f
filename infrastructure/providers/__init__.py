from config.settings import Settings

from .base import RateSource
from .fixerio import FixerIOProvider
from .mock import MockRateSource
from .openexchange import OpenExchangeProvider

__all__ = ['RateSource', 'FixerIOProvider', 'MockRateSource', 'OpenExchangeProvider', 'create_rate_source']


def create_rate_source(settings: Settings) -> RateSource:
	if settings.RATE_PROVIDER == 'fixerio':
		return FixerIOProvider(
			settings.FIXERIO_API_KEY,
			timeout=settings.PROVIDER_TIMEOUT,
			base_url=settings.FIXERIO_BASE_URL,
		)
	if settings.RATE_PROVIDER == 'openexchange':
		return OpenExchangeProvider(settings.OPENEXCHANGE_APP_ID, timeout=settings.PROVIDER_TIMEOUT)
	return MockRateSource()
