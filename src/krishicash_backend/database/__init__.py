"""Database connectivity helpers and configuration objects."""

from krishicash_backend.database.base import BaseSchema
from krishicash_backend.database.dependencies import get_database
from krishicash_backend.database.repositories import SaveSlotRepository
from krishicash_backend.database.schemas import SaveSlotSchema
from krishicash_backend.database.service import DatabaseService
from krishicash_backend.settings import BackendSettings, get_settings, settings

__all__ = [
    "BackendSettings",
    "BaseSchema",
    "DatabaseService",
    "SaveSlotRepository",
    "SaveSlotSchema",
    "get_database",
    "get_settings",
    "settings",
]
