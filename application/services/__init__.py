from .conversion_engine import ConversionEngine, build_engine
from .history_store import HistoryStore
from .preferences_store import PreferencesStore

__all__ = ['ConversionEngine', 'HistoryStore', 'PreferencesStore', 'build_engine']
