from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, DomainError
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.train_booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.train_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.train_booking.domain.entity.user_entity import UserEntity


class SignUpUseCase:
    def __init__(
        self,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            password_hasher=password_hasher,
        )

    @Logger.io
    async def sign_up(
        self, *, email: str, password: str, full_name: str, phone: Optional[str] = None
    ) -> UserEntity:
        if not full_name.strip():
            raise DomainError('Full name is required')

        user_entity = UserEntity(
            email=email,
            full_name=full_name.strip(),
            phone=(phone or '').strip() or None,
        )

        if await self.user_query_repo.exists_by_email(user_entity.email):
            raise ConflictError('Email already registered')

        user_entity.set_password(password, self.password_hasher)
        created = await self.user_command_repo.create(user_entity)

        Logger.base.info(f'👤 [SIGN_UP] Registered user {created.id}')
        return created
