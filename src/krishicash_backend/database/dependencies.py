"""FastAPI dependencies for database access."""

from functools import cache
from typing import Annotated

from fastapi import Depends

from krishicash_backend.database.service import DatabaseService
from krishicash_backend.settings import BackendSettings, get_settings

SettingsDep = Annotated[BackendSettings, Depends(get_settings)]


@cache
def _build_database_service(database_url: str) -> DatabaseService:
    """Create a cached :class:`DatabaseService` with its tables in place."""
    database = DatabaseService(database_url)
    database.create_schema()
    return database


def get_database(settings: SettingsDep) -> DatabaseService:
    """Return the cached database service instance."""
    return _build_database_service(settings.database_url)
