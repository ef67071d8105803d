from unittest.mock import AsyncMock, Mock

import pytest

from src.platform.exception.exceptions import ConflictError, DomainError, NotFoundError
from src.service.train_booking.app.command.sign_up_use_case import SignUpUseCase
from src.service.train_booking.app.command.update_profile_use_case import UpdateProfileUseCase
from src.service.train_booking.app.query.get_user_profile_use_case import GetUserProfileUseCase
from src.service.train_booking.domain.entity.user_entity import UserEntity


@pytest.fixture
def command_repo():
    repo = AsyncMock()

    async def _persist(user):
        user.id = user.id or 1
        return user

    repo.create.side_effect = _persist
    repo.update.side_effect = _persist
    return repo


@pytest.fixture
def query_repo():
    repo = AsyncMock()
    repo.exists_by_email.return_value = False
    repo.get_by_id.return_value = UserEntity(
        id=1, email='ada@example.com', full_name='Ada', hashed_password='old'
    )
    return repo


@pytest.fixture
def password_hasher():
    hasher = Mock()
    hasher.hash_password.return_value = 'hashed'
    return hasher


@pytest.mark.unit
class TestSignUp:
    @pytest.fixture
    def use_case(self, command_repo, query_repo, password_hasher):
        return SignUpUseCase(
            user_command_repo=command_repo,
            user_query_repo=query_repo,
            password_hasher=password_hasher,
        )

    async def test_sign_up(self, use_case, command_repo, query_repo):
        user = await use_case.sign_up(
            email='Ada@Example.com', password='secret123', full_name=' Ada ', phone=' '
        )

        assert user.id == 1
        assert user.email == 'ada@example.com'
        assert user.full_name == 'Ada'
        assert user.phone is None
        assert user.hashed_password == 'hashed'
        query_repo.exists_by_email.assert_awaited_once_with('ada@example.com')
        command_repo.create.assert_awaited_once()

    async def test_duplicate_email(self, use_case, command_repo, query_repo):
        query_repo.exists_by_email.return_value = True

        with pytest.raises(ConflictError, match='Email already registered'):
            await use_case.sign_up(email='ada@example.com', password='secret123', full_name='Ada')
        command_repo.create.assert_not_awaited()

    async def test_blank_full_name(self, use_case):
        with pytest.raises(DomainError, match='Full name is required'):
            await use_case.sign_up(email='ada@example.com', password='secret123', full_name=' ')

    async def test_short_password(self, use_case, command_repo):
        with pytest.raises(DomainError):
            await use_case.sign_up(email='ada@example.com', password='abc', full_name='Ada')
        command_repo.create.assert_not_awaited()


@pytest.mark.unit
class TestProfile:
    async def test_update_profile(self, command_repo, query_repo, password_hasher):
        use_case = UpdateProfileUseCase(
            user_command_repo=command_repo,
            user_query_repo=query_repo,
            password_hasher=password_hasher,
        )

        user = await use_case.update_profile(user_id=1, full_name='Ada Lovelace', phone='555')

        assert user.full_name == 'Ada Lovelace'
        assert user.phone == '555'
        assert user.hashed_password == 'old'
        command_repo.update.assert_awaited_once()

    async def test_update_missing_user(self, command_repo, query_repo, password_hasher):
        query_repo.get_by_id.return_value = None
        use_case = UpdateProfileUseCase(
            user_command_repo=command_repo,
            user_query_repo=query_repo,
            password_hasher=password_hasher,
        )

        with pytest.raises(NotFoundError):
            await use_case.update_profile(user_id=9, full_name='Nobody')

    async def test_get_profile(self, query_repo):
        user = await GetUserProfileUseCase(user_query_repo=query_repo).get_profile(user_id=1)

        assert user.email == 'ada@example.com'
        query_repo.get_by_id.assert_awaited_once_with(1)
