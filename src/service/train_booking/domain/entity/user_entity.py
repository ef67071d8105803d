from datetime import datetime
from typing import TYPE_CHECKING, Optional

import attrs
from pydantic import SecretStr

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError, DomainError, LoginError


if TYPE_CHECKING:
    from src.service.train_booking.app.interface.i_password_hasher import IPasswordHasher


def normalize_email(email: str) -> str:
    return (email or '').strip().lower()


@attrs.define
class UserEntity:
    email: str = attrs.field(default='', converter=normalize_email)
    full_name: str = ''
    phone: Optional[str] = None
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def validate_exists(self) -> None:
        if not self.id or not self.email:
            raise AuthenticationError('User not found')

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise LoginError('Invalid email or password')

        return user_entity

    @staticmethod
    def validate_password_length(plain_password: str) -> None:
        if len(plain_password) < settings.MIN_PASSWORD_LENGTH:
            raise DomainError(
                f'Password must be at least {settings.MIN_PASSWORD_LENGTH} characters'
            )

    def set_password(self, plain_password: str, password_hasher: 'IPasswordHasher') -> None:
        self.validate_password_length(plain_password)
        # Use SecretStr to protect sensitive password data
        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )

    def update_profile(
        self,
        *,
        full_name: Optional[str] = None,
        phone: Optional[str] = None,
        plain_password: Optional[str] = None,
        password_hasher: Optional['IPasswordHasher'] = None,
    ) -> None:
        if full_name is None and phone is None and plain_password is None:
            raise DomainError('No fields to update')

        if full_name is not None:
            if not full_name.strip():
                raise DomainError('Full name cannot be empty')
            self.full_name = full_name.strip()

        if phone is not None:
            self.phone = phone.strip() or None

        if plain_password is not None:
            if password_hasher is None:
                raise RuntimeError('Password hasher required to change password')
            self.set_password(plain_password, password_hasher)
