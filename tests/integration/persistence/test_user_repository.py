"""Integration tests for UserRepositorySQLAlchemy with SQLite."""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import pytest

from friggsys.application.exceptions import DuplicateEmailError
from friggsys.domain.shared.exceptions import ValidationError
from friggsys.domain.shared.pagination import PageOrder, PageParameters
from friggsys.domain.user import Email, Name, Telephone, UserStatus
from tests.shared.factories import TEST_EMAIL, TEST_PASSWORD_HASH, make_user

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


async def _seed(user_repo, count: int):
    users = []
    for index in range(count):
        stamp = BASE_TIME + timedelta(minutes=index)
        user = make_user(
            name=f"User number {index:02d}",
            email=f"user{index:02d}@example.com",
            created_at=stamp,
            updated_at=stamp,
        )
        users.append(await user_repo.save(user))
    return users


class TestUserRepositorySQLAlchemy:
    """Integration tests for UserRepositorySQLAlchemy."""

    @pytest.mark.asyncio
    async def test_save_and_find_by_id(self, user_repo):
        user = make_user()

        saved = await user_repo.save(user)
        found = await user_repo.find_by_id(user.id)

        assert saved == user
        assert found is not None
        assert isinstance(found.id, UUID)
        assert found.name == user.name
        assert found.email == TEST_EMAIL
        assert found.telephone == user.telephone
        assert found.password == TEST_PASSWORD_HASH
        assert found.status == UserStatus.ACTIVE
        assert found.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_find_by_id_not_found(self, user_repo):
        assert await user_repo.find_by_id(uuid4()) is None

    @pytest.mark.asyncio
    async def test_find_by_email(self, user_repo):
        user = make_user()
        await user_repo.save(user)

        found = await user_repo.find_by_email(Email.of(TEST_EMAIL))

        assert found is not None
        assert found.id == user.id
        assert await user_repo.find_by_email(Email.of("other@example.com")) is None

    @pytest.mark.asyncio
    async def test_exists(self, user_repo):
        user = make_user()
        await user_repo.save(user)

        assert await user_repo.exists_by_id(user.id)
        assert not await user_repo.exists_by_id(uuid4())
        assert await user_repo.exists_by_email(Email.of(TEST_EMAIL))
        assert not await user_repo.exists_by_email(Email.of("other@example.com"))

    @pytest.mark.asyncio
    async def test_save_existing_updates_row(self, user_repo):
        user = make_user()
        await user_repo.save(user)

        user.update(
            Name.of("Alice Cooper"),
            Email.of("cooper@example.com"),
            Telephone.of("(21) 1234-5678"),
        )
        user.block()
        await user_repo.save(user)

        found = await user_repo.find_by_id(user.id)
        assert found.name == "Alice Cooper"
        assert found.email == "cooper@example.com"
        assert found.is_blocked
        assert await user_repo.count() == 1

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, user_repo):
        await user_repo.save(make_user())

        with pytest.raises(DuplicateEmailError):
            await user_repo.save(make_user(name="Someone Else"))

    @pytest.mark.asyncio
    async def test_delete(self, user_repo):
        user = make_user()
        await user_repo.save(user)

        await user_repo.delete(user.id)

        assert await user_repo.find_by_id(user.id) is None
        assert await user_repo.count() == 0

    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(self, user_repo):
        await user_repo.delete(uuid4())

        assert await user_repo.count() == 0


class TestUserRepositoryPaging:
    """Paging and ordering through find_all."""

    @pytest.mark.asyncio
    async def test_empty_table(self, user_repo):
        page = await user_repo.find_all(PageParameters())

        assert page.data == []
        assert page.data_amount == 0
        assert page.pages_amount == 0
        assert page.first_page
        assert page.last_page

    @pytest.mark.asyncio
    async def test_pages_in_creation_order_by_default(self, user_repo):
        users = await _seed(user_repo, 5)

        first = await user_repo.find_all(PageParameters(page=0, size=2))
        last = await user_repo.find_all(PageParameters(page=2, size=2))

        assert [u.id for u in first.data] == [users[0].id, users[1].id]
        assert first.data_amount == 5
        assert first.pages_amount == 3
        assert first.first_page
        assert not first.last_page
        assert [u.id for u in last.data] == [users[4].id]
        assert not last.first_page
        assert last.last_page

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, user_repo):
        await _seed(user_repo, 3)

        page = await user_repo.find_all(PageParameters(page=5, size=2))

        assert page.data == []
        assert page.data_amount == 3
        assert page.last_page

    @pytest.mark.asyncio
    async def test_order_by_name_desc(self, user_repo):
        await _seed(user_repo, 3)

        page = await user_repo.find_all(
            PageParameters(order_by="name", direction=PageOrder.DESC)
        )

        assert [u.name for u in page.data] == [
            "User number 02",
            "User number 01",
            "User number 00",
        ]

    @pytest.mark.asyncio
    async def test_camel_case_sort_key(self, user_repo):
        users = await _seed(user_repo, 3)

        page = await user_repo.find_all(
            PageParameters(order_by="createdAt", direction="desc")
        )

        assert [u.id for u in page.data] == [u.id for u in reversed(users)]

    @pytest.mark.asyncio
    async def test_unknown_sort_key_rejected(self, user_repo):
        with pytest.raises(ValidationError) as exc_info:
            await user_repo.find_all(PageParameters(order_by="password"))

        assert exc_info.value.field == "orderBy"
