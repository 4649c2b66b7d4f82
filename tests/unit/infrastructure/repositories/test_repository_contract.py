"""Contract tests run against both repository implementations.

The in-memory and SQL repositories must be interchangeable, so every test in
this module runs once per backend.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from eventdesk.core.exceptions import (
    ConsultationNotFoundError,
    ContactInquiryNotFoundError,
    DuplicateBookingIdError,
    DuplicateUserError,
    UserNotFoundError,
)
from eventdesk.domain.interfaces.repositories import (
    IAdminRepository,
    IConsultationRepository,
    IContactInquiryRepository,
    IUserRepository,
)
from eventdesk.infrastructure.repositories import (
    AdminRepository,
    ConsultationRepository,
    ContactInquiryRepository,
    InMemoryAdminRepository,
    InMemoryConsultationRepository,
    InMemoryContactInquiryRepository,
    InMemoryUserRepository,
    UserRepository,
)
from tests.factories import create_fake_admin, create_fake_consultation, create_fake_contact, create_fake_user

BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


@dataclass
class Repositories:
    users: IUserRepository
    admins: IAdminRepository
    consultations: IConsultationRepository
    contacts: IContactInquiryRepository


@pytest_asyncio.fixture(params=["memory", "sql"])
async def repos(request, memory_store, sql_engine):
    if request.param == "memory":
        yield Repositories(
            users=InMemoryUserRepository(memory_store),
            admins=InMemoryAdminRepository(memory_store),
            consultations=InMemoryConsultationRepository(memory_store),
            contacts=InMemoryContactInquiryRepository(memory_store),
        )
        return
    session_factory = async_sessionmaker(bind=sql_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield Repositories(
            users=UserRepository(session),
            admins=AdminRepository(session),
            consultations=ConsultationRepository(session),
            contacts=ContactInquiryRepository(session),
        )


class TestUserRepository:
    async def test_ids_start_at_one_and_increment(self, repos):
        first = await repos.users.insert(create_fake_user(email="a@x.com"))
        second = await repos.users.insert(create_fake_user(email="b@x.com"))

        assert (first.id, second.id) == (1, 2)

    async def test_lookup_by_id_and_email(self, repos):
        saved = await repos.users.insert(create_fake_user(email="a@x.com", full_name="Ana"))

        assert (await repos.users.get_by_id(saved.id)).full_name == "Ana"
        assert (await repos.users.get_by_email("a@x.com")).id == saved.id
        assert await repos.users.get_by_email("missing@x.com") is None
        assert await repos.users.get_by_id(99) is None

    async def test_email_lookup_is_exact(self, repos):
        await repos.users.insert(create_fake_user(email="a@x.com"))

        assert await repos.users.get_by_email("A@x.com") is None

    async def test_duplicate_email_is_rejected(self, repos):
        await repos.users.insert(create_fake_user(email="a@x.com"))

        with pytest.raises(DuplicateUserError):
            await repos.users.insert(create_fake_user(email="a@x.com"))

        assert len(await repos.users.list_all()) == 1

    async def test_update_fields(self, repos):
        saved = await repos.users.insert(create_fake_user(email="a@x.com"))
        expires = BASE_TIME + timedelta(hours=1)

        updated = await repos.users.update(
            saved.id, {"password_reset_token": "f" * 64, "password_reset_token_expires_at": expires}
        )

        assert updated.password_reset_token == "f" * 64
        fetched = await repos.users.get_by_email("a@x.com")
        assert fetched.password_reset_token == "f" * 64

    async def test_update_missing_user(self, repos):
        with pytest.raises(UserNotFoundError):
            await repos.users.update(5, {"full_name": "Nobody"})

    async def test_update_rejects_unknown_fields(self, repos):
        saved = await repos.users.insert(create_fake_user(email="a@x.com"))

        with pytest.raises(ValueError):
            await repos.users.update(saved.id, {"not_a_column": 1})


class TestAdminRepository:
    async def test_insert_and_lookup(self, repos):
        saved = await repos.admins.insert(create_fake_admin(email="admin@x.com", security_code="code"))

        fetched = await repos.admins.get_by_email("admin@x.com")
        assert fetched.id == saved.id == 1
        assert fetched.security_code == "code"

    async def test_duplicate_admin_email_is_rejected(self, repos):
        await repos.admins.insert(create_fake_admin(email="admin@x.com"))

        with pytest.raises(DuplicateUserError):
            await repos.admins.insert(create_fake_admin(email="admin@x.com"))


class TestConsultationRepository:
    async def test_lookup_by_booking_id(self, repos):
        saved = await repos.consultations.insert(create_fake_consultation(booking_id="RGM-1000"))

        assert (await repos.consultations.get_by_booking_id("RGM-1000")).id == saved.id
        assert await repos.consultations.get_by_booking_id("RGM-2000") is None

    async def test_duplicate_booking_id_is_rejected(self, repos):
        await repos.consultations.insert(create_fake_consultation(booking_id="RGM-1000"))

        with pytest.raises(DuplicateBookingIdError):
            await repos.consultations.insert(create_fake_consultation(booking_id="RGM-1000"))

        assert len(await repos.consultations.list_all()) == 1

    async def test_list_all_is_ordered_by_creation_time(self, repos):
        await repos.consultations.insert(create_fake_consultation(booking_id="RGM-3", created_at=BASE_TIME + timedelta(minutes=2)))
        await repos.consultations.insert(create_fake_consultation(booking_id="RGM-1", created_at=BASE_TIME))
        await repos.consultations.insert(create_fake_consultation(booking_id="RGM-2", created_at=BASE_TIME + timedelta(minutes=1)))

        assert [c.booking_id for c in await repos.consultations.list_all()] == ["RGM-1", "RGM-2", "RGM-3"]

    async def test_list_by_owner(self, repos):
        owner = await repos.users.insert(create_fake_user(email="owner@x.com"))
        await repos.consultations.insert(create_fake_consultation(booking_id="RGM-1", user_id=owner.id))
        await repos.consultations.insert(create_fake_consultation(booking_id="RGM-2"))

        owned = await repos.consultations.list_by_owner(owner.id)

        assert [c.booking_id for c in owned] == ["RGM-1"]

    async def test_update_returns_updated_record(self, repos):
        saved = await repos.consultations.insert(create_fake_consultation(booking_id="RGM-1"))

        updated = await repos.consultations.update(saved.id, {"status": "scheduled", "admin_comment": "ok"})

        assert (updated.status, updated.admin_comment, updated.booking_id) == ("scheduled", "ok", "RGM-1")

    async def test_update_missing_consultation(self, repos):
        with pytest.raises(ConsultationNotFoundError):
            await repos.consultations.update(1, {"status": "scheduled"})


class TestContactInquiryRepository:
    async def test_insert_list_and_update(self, repos):
        first = await repos.contacts.insert(create_fake_contact(created_at=BASE_TIME))
        await repos.contacts.insert(create_fake_contact(created_at=BASE_TIME + timedelta(seconds=1)))

        updated = await repos.contacts.update(first.id, {"status": "replied"})

        assert updated.status == "replied"
        assert [c.id for c in await repos.contacts.list_all()] == [1, 2]

    async def test_list_by_owner(self, repos):
        owner = await repos.users.insert(create_fake_user(email="owner@x.com"))
        await repos.contacts.insert(create_fake_contact(user_id=owner.id))
        await repos.contacts.insert(create_fake_contact())

        assert len(await repos.contacts.list_by_owner(owner.id)) == 1

    async def test_update_missing_inquiry(self, repos):
        with pytest.raises(ContactInquiryNotFoundError):
            await repos.contacts.update(1, {"status": "replied"})
