from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.train_booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.train_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.train_booking.domain.entity.user_entity import UserEntity


class UpdateProfileUseCase:
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
    async def update_profile(
        self,
        *,
        user_id: int,
        full_name: Optional[str] = None,
        phone: Optional[str] = None,
        password: Optional[str] = None,
    ) -> UserEntity:
        user_entity = await self.user_query_repo.get_by_id(user_id)
        if not user_entity:
            raise NotFoundError('User not found')

        user_entity.update_profile(
            full_name=full_name,
            phone=phone,
            plain_password=password,
            password_hasher=self.password_hasher,
        )
        return await self.user_command_repo.update(user_entity)
