"""Tests for contact submission and listing against a real SQLite store."""

from datetime import timezone

import pytest
from sqlalchemy import text

from conftest import valid_contact
from nova.core.exceptions import StorageError, ValidationError
from nova.services.ContactService import ContactService


async def insert_raw(manager, name, created_at):
    async with manager.get_session() as session:
        await session.execute(
            text(
                "INSERT INTO contacts (name, email, subject, message, created_at) "
                "VALUES (:name, 'raw@x.io', 'Raw', 'Inserted directly', :created_at)"
            ),
            {"name": name, "created_at": created_at},
        )


async def test_submit_returns_strictly_increasing_ids(session_manager):
    ids = []
    async with session_manager.get_session() as session:
        service = ContactService(session)
        for i in range(5):
            ids.append(await service.submit(**valid_contact(name=f"Sender {i}")))

    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)


@pytest.mark.parametrize("field", ["name", "email", "subject", "message"])
async def test_submit_rejects_empty_field_without_writing(session_manager, field):
    async with session_manager.get_session() as session:
        service = ContactService(session)
        await service.submit(**valid_contact())
        before = len(await service.list())

        with pytest.raises(ValidationError) as exc_info:
            await service.submit(**valid_contact(**{field: ""}))

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "All fields are required"
        assert len(await service.list()) == before


async def test_submit_accepts_any_non_empty_email(session_manager):
    async with session_manager.get_session() as session:
        service = ContactService(session)
        contact_id = await service.submit(**valid_contact(email="not an email"))
        contacts = await service.list()

    assert contacts[0].id == contact_id
    assert contacts[0].email == "not an email"


async def test_submit_keeps_values_verbatim(session_manager):
    async with session_manager.get_session() as session:
        service = ContactService(session)
        await service.submit(**valid_contact(name="  Ada  ", message="<b>hi</b>"))
        contact = (await service.list())[0]

    assert contact.name == "  Ada  "
    assert contact.message == "<b>hi</b>"


async def test_round_trip_through_list(session_manager):
    async with session_manager.get_session() as session:
        service = ContactService(session)
        contact_id = await service.submit(name="Ada", email="ada@x.io", subject="Hi", message="Test")
        contacts = await service.list()

    assert len(contacts) == 1
    contact = contacts[0]
    assert contact.id == contact_id
    assert (contact.name, contact.email, contact.subject, contact.message) == ("Ada", "ada@x.io", "Hi", "Test")
    assert contact.created_at is not None


async def test_submit_rejects_unencodable_text_without_writing(session_manager):
    async with session_manager.get_session() as session:
        service = ContactService(session)

        with pytest.raises(ValidationError) as exc_info:
            await service.submit(**valid_contact(name="Ada \ud800"))

        assert exc_info.value.status_code == 400
        assert await service.list() == []


async def test_list_timestamps_are_utc(session_manager):
    await insert_raw(session_manager, "Dated", "2024-01-01 08:00:00")

    async with session_manager.get_session() as session:
        contact = (await ContactService(session).list())[0]

    assert contact.created_at.tzinfo == timezone.utc
    assert contact.created_at.isoformat() == "2024-01-01T08:00:00+00:00"


async def test_list_orders_newest_first(session_manager):
    await insert_raw(session_manager, "Oldest", "2024-01-01 08:00:00")
    await insert_raw(session_manager, "Newest", "2024-03-01 08:00:00")
    await insert_raw(session_manager, "Middle", "2024-02-01 08:00:00")

    async with session_manager.get_session() as session:
        contacts = await ContactService(session).list()

    assert [c.name for c in contacts] == ["Newest", "Middle", "Oldest"]


async def test_list_timestamps_are_non_increasing(session_manager):
    async with session_manager.get_session() as session:
        service = ContactService(session)
        for i in range(4):
            await service.submit(**valid_contact(name=f"Sender {i}"))
        contacts = await service.list()

    timestamps = [c.created_at for c in contacts]
    assert timestamps == sorted(timestamps, reverse=True)
    # Same-second submissions fall back to newest id first
    assert [c.name for c in contacts] == ["Sender 3", "Sender 2", "Sender 1", "Sender 0"]


async def test_list_skips_rows_that_fail_to_decode(session_manager):
    await insert_raw(session_manager, "Good", "2024-01-01 08:00:00")
    await insert_raw(session_manager, "Broken", "not-a-date")
    await insert_raw(session_manager, "Also good", "2024-01-02 08:00:00")

    async with session_manager.get_session() as session:
        contacts = await ContactService(session).list()

    assert [c.name for c in contacts] == ["Also good", "Good"]


async def test_list_empty_store(session_manager):
    async with session_manager.get_session() as session:
        assert await ContactService(session).list() == []


async def test_submit_storage_failure_raises_storage_error(session_manager):
    async with session_manager.get_session() as session:
        await session.execute(text("DROP TABLE contacts"))
        await session.commit()

    with pytest.raises(StorageError) as exc_info:
        async with session_manager.get_session() as session:
            await ContactService(session).submit(**valid_contact())

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Failed to save contact information"


async def test_list_storage_failure_raises_storage_error(session_manager):
    async with session_manager.get_session() as session:
        await session.execute(text("DROP TABLE contacts"))
        await session.commit()

    with pytest.raises(StorageError):
        async with session_manager.get_session() as session:
            await ContactService(session).list()
