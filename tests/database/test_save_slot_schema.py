"""Database schema specific tests."""

from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from sqlalchemy import Table

from krishicash_backend.database import DatabaseService, SaveSlotRepository
from krishicash_backend.database.schemas import SaveSlotSchema


def test_save_slot_schema_is_keyed_by_slot_name() -> None:
    table = cast("Table", SaveSlotSchema.__table__)

    assert table.name == "save_slots"
    assert [column.name for column in table.primary_key.columns] == ["key"]
    assert not table.c.payload.nullable


def test_repository_upsert_replaces_the_payload(tmp_path) -> None:
    database = DatabaseService(f"sqlite:///{tmp_path / 'schema.db'}")
    database.create_schema()

    with database.session() as session:
        SaveSlotRepository(session).upsert("slot", "first")
    with database.session() as session:
        created = SaveSlotRepository(session).get_by_key("slot").created_at
        SaveSlotRepository(session).upsert("slot", "second")

    with database.session() as session:
        repository = SaveSlotRepository(session)
        slot = repository.get_by_key("slot")
        assert slot.payload == "second"
        assert slot.created_at == created
        assert repository.get_by_key("missing") is None
