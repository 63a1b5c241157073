"""Repository helpers for working with save slots."""

from sqlalchemy.orm import Session

from krishicash_backend.database.schemas import SaveSlotSchema


class SaveSlotRepository:
    """Encapsulates persistence operations for :class:`SaveSlotSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_key(self, key: str) -> SaveSlotSchema | None:
        """Return the save slot stored under *key*."""
        return self._session.get(SaveSlotSchema, key)

    def upsert(self, key: str, payload: str) -> SaveSlotSchema:
        """Store *payload* under *key*, replacing the previous payload."""
        slot = self.get_by_key(key)
        if slot is None:
            slot = SaveSlotSchema(key=key, payload=payload)
            self._session.add(slot)
        else:
            slot.payload = payload
        self._session.flush()
        return slot
