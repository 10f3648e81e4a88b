"""
UserService tests: argument checks, existence checks and commit counts.
"""

import uuid

import pytest

from user_api.app.core.errors import DuplicateKeyError, InvalidArgumentError, NotFoundError
from user_api.app.schemas.user import User
from user_api.app.services.user_service import UserService


class TestUserService:
    """Service operations against isolated in-memory stores"""

    def test_requires_context(self):
        with pytest.raises(InvalidArgumentError):
            UserService(None)

    @pytest.mark.asyncio
    async def test_create_user_with_valid_user(self, user_service):
        user = User(id=uuid.uuid4(), name="New User", email="new.user@example.com")

        assert await user_service.create_user(user) == 1
        assert await user_service.get_user(user.id) == user

    @pytest.mark.asyncio
    async def test_create_user_with_none(self, user_service):
        with pytest.raises(InvalidArgumentError):
            await user_service.create_user(None)

    @pytest.mark.asyncio
    async def test_create_user_with_duplicate_id(self, seeded_user_service, test_user):
        with pytest.raises(DuplicateKeyError):
            await seeded_user_service.create_user(test_user)

    @pytest.mark.asyncio
    async def test_list_users_with_seed(self, seeded_user_service, test_user):
        users = await seeded_user_service.list_users()

        assert users == [test_user]

    @pytest.mark.asyncio
    async def test_list_users_without_seed(self, user_service):
        assert await user_service.list_users() == []

    @pytest.mark.asyncio
    async def test_get_user_with_seed(self, seeded_user_service, test_user):
        user = await seeded_user_service.get_user(test_user.id)

        assert user.id == test_user.id

    @pytest.mark.asyncio
    async def test_get_user_without_seed(self, user_service, test_user):
        with pytest.raises(NotFoundError, match=str(test_user.id)):
            await user_service.get_user(test_user.id)

    @pytest.mark.asyncio
    async def test_update_user_with_valid_user(self, seeded_user_service, test_user):
        changed = User(id=test_user.id, name="Updated", email="updated@example.com")

        assert await seeded_user_service.update_user(changed) == 1

        stored = await seeded_user_service.get_user(test_user.id)
        assert stored.name == "Updated"
        assert stored.email == "updated@example.com"

    @pytest.mark.asyncio
    async def test_update_user_with_none(self, seeded_user_service):
        with pytest.raises(InvalidArgumentError):
            await seeded_user_service.update_user(None)

    @pytest.mark.asyncio
    async def test_update_user_without_seed(self, user_service, test_user):
        with pytest.raises(NotFoundError):
            await user_service.update_user(test_user)

    @pytest.mark.asyncio
    async def test_delete_user_with_seed(self, seeded_user_service, test_user):
        assert await seeded_user_service.delete_user(test_user.id) == 1

        with pytest.raises(NotFoundError):
            await seeded_user_service.get_user(test_user.id)

    @pytest.mark.asyncio
    async def test_delete_user_without_seed(self, user_service, test_user):
        with pytest.raises(NotFoundError):
            await user_service.delete_user(test_user.id)
