from .lms_client import LmsClient
from .lms_response import LmsResponse
from .config import Config, ConfigError, load_config
from .sync_engine import AppState, Snapshot, SyncEngine

__all__ = [
    'LmsClient',
    'LmsResponse',
    'Config',
    'ConfigError',
    'load_config',
    'AppState',
    'Snapshot',
    'SyncEngine',
]
