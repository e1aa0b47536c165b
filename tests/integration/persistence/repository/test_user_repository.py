"""Integration tests for PostgresUserRepository."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from chatter.domain.model import User
from chatter.domain.repository import UserRepository
from chatter.domain.service import UserService
from chatter.domain.value import UserId
from chatter.domain.value.types import Email, Username
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

integration_env = create_env_fixture(unmock={"persistence"})


class TestUserRepositoryIntegration:
    """Integration tests for user persistence."""

    @pytest.mark.asyncio
    async def test_register_and_lookup(self, integration_env):
        """Username lookup ignores case; email is stored lower-cased."""
        # Arrange
        user_service = await integration_env.get(UserService)
        user_repo = await integration_env.get(UserRepository)
        name = f"user{uuid4().hex[:12]}"

        # Act
        user = await user_service.register(name, f"{name}@Example.com", "secret1")

        # Assert
        by_name = await user_repo.find_by_username(Username(name.upper()))
        by_email = await user_repo.find_by_email(Email(f"{name}@example.com"))
        assert by_name is not None and by_name.id == user.id
        assert by_email is not None and by_email.id == user.id

    @pytest.mark.asyncio
    async def test_duplicate_save_keeps_transaction_usable(self, integration_env):
        """A uniqueness violation does not abort the surrounding transaction."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        name = f"user{uuid4().hex[:12]}"
        first = User(
            id=UserId(uuid4()),
            username=Username(name),
            email=Email(f"{name}@example.com"),
            password_hash="hash",
        )
        await user_repo.save(first)
        duplicate = first.model_copy(
            update={"id": UserId(uuid4()), "username": Username(f"{name}x")}
        )

        # Act
        with pytest.raises(IntegrityError):
            await user_repo.save(duplicate)

        # Assert
        found = await user_repo.find_by_id(first.id)
        assert found is not None and found.email == first.email
