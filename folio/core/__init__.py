"""
Folio Core
==========

Core utilities and shared functionality for folio modules.
"""

from .config import Config
from .database import Database
from .exceptions import FolioError, ValidationError, NotFoundError, TransportError
from .logging_service import LoggingService, logger
from .store import ResourceStore, get_store
from .sync import AdminPanel, PanelState, apply_mutation_result

__all__ = [
    'Config', 'Database', 'LoggingService', 'logger',
    'FolioError', 'ValidationError', 'NotFoundError', 'TransportError',
    'ResourceStore', 'get_store',
    'AdminPanel', 'PanelState', 'apply_mutation_result',
]
