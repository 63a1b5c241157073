"""Repositories wrapping database access patterns."""

from krishicash_backend.database.repositories.save_slot import SaveSlotRepository

__all__ = ["SaveSlotRepository"]
