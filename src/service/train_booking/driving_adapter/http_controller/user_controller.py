from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Cookie, Depends, Header, Response, status
from sqlalchemy.exc import IntegrityError

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.command.sign_up_use_case import SignUpUseCase
from src.service.train_booking.app.command.update_profile_use_case import UpdateProfileUseCase
from src.service.train_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.train_booking.app.query.get_user_profile_use_case import GetUserProfileUseCase
from src.service.train_booking.domain.entity.user_entity import UserEntity
from src.service.train_booking.driving_adapter.http_controller.auth.jwt_auth import (
    JwtAuth,
    extract_bearer_token,
)
from src.service.train_booking.driving_adapter.schema.user_schema import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    SignUpRequest,
    UpdateProfileRequest,
    UserResponse,
)


# === API Router ===

router = APIRouter()


@inject
async def get_current_user(
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    token: Optional[str] = Cookie(None, alias=settings.AUTH_COOKIE_NAME),
    authorization: Optional[str] = Header(None),
) -> UserEntity:
    """Current user from the auth cookie or an Authorization: Bearer header (no DB query)"""
    return jwt_auth.get_current_user_info_from_jwt(token or extract_bearer_token(authorization))


def _to_response(user_entity: UserEntity) -> UserResponse:
    return UserResponse(
        id=user_entity.id or 0,
        email=user_entity.email,
        full_name=user_entity.full_name,
        phone=user_entity.phone,
        created_at=user_entity.created_at,
    )


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_user(
    request: SignUpRequest,
    use_case: SignUpUseCase = Depends(SignUpUseCase.depends),
) -> UserResponse:
    try:
        user_entity = await use_case.sign_up(
            email=request.email,
            password=request.password.get_secret_value(),
            full_name=request.full_name,
            phone=request.phone,
        )
    except IntegrityError as e:
        # Lost a race with a concurrent signup for the same email
        raise ConflictError('Email already registered') from e

    return _to_response(user_entity)


@router.post('/login')
@Logger.io
@inject
async def login(
    response: Response,
    request: LoginRequest,
    user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> LoginResponse:
    user_entity = await jwt_auth.authenticate_user(
        user_query_repo=user_query_repo,
        email=request.email,
        password=request.password.get_secret_value(),
    )

    token = jwt_auth.create_jwt_token(user_entity)

    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        max_age=jwt_auth.max_age_seconds,
        httponly=True,
        samesite='lax',
        secure=settings.AUTH_COOKIE_SECURE,
    )

    return LoginResponse(token=token, user=_to_response(user_entity))


@router.post('/logout')
@Logger.io
async def logout(response: Response) -> MessageResponse:
    response.delete_cookie(key=settings.AUTH_COOKIE_NAME, httponly=True, samesite='lax')
    return MessageResponse(message='Logged out')


@router.get('')
@Logger.io
async def get_me(current_user: UserEntity = Depends(get_current_user)) -> UserResponse:
    return _to_response(current_user)


@router.get('/profile')
@Logger.io
async def get_profile(
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetUserProfileUseCase = Depends(GetUserProfileUseCase.depends),
) -> UserResponse:
    user_entity = await use_case.get_profile(user_id=current_user.id or 0)
    return _to_response(user_entity)


@router.patch('/profile')
@Logger.io
async def update_profile(
    request: UpdateProfileRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UpdateProfileUseCase = Depends(UpdateProfileUseCase.depends),
) -> UserResponse:
    user_entity = await use_case.update_profile(
        user_id=current_user.id or 0,
        full_name=request.full_name,
        phone=request.phone,
        password=request.password.get_secret_value() if request.password else None,
    )
    return _to_response(user_entity)
