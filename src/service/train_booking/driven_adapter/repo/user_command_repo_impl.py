from typing import AsyncContextManager, Callable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.train_booking.domain.entity.user_entity import UserEntity
from src.service.train_booking.driven_adapter.model.user_model import UserModel


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = UserModel(
                email=user_entity.email,
                hashed_password=user_entity.hashed_password,
                full_name=user_entity.full_name,
                phone=user_entity.phone,
            )

            session.add(user_model)
            await session.commit()
            await session.refresh(user_model)

            return self._model_to_entity(user_model)

    @Logger.io
    async def update(self, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel).where(UserModel.id == user_entity.id))
            user_model = result.scalar_one_or_none()
            if not user_model:
                raise NotFoundError('User not found')

            user_model.full_name = user_entity.full_name
            user_model.phone = user_entity.phone
            if user_entity.hashed_password:
                user_model.hashed_password = user_entity.hashed_password

            await session.commit()
            await session.refresh(user_model)

            return self._model_to_entity(user_model)

    def _model_to_entity(self, user_model: UserModel) -> UserEntity:
        return UserEntity(
            id=user_model.id,
            email=user_model.email,
            full_name=user_model.full_name,
            phone=user_model.phone,
            created_at=user_model.created_at,
        )
