"""SQLAlchemy schemas."""

from krishicash_backend.database.schemas.save_slot import SaveSlotSchema

__all__ = ["SaveSlotSchema"]
