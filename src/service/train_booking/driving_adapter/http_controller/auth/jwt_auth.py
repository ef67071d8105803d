"""
User Authentication Service

Stateless HS256 JWT: the token carries everything needed to rebuild the
current user without a database round trip.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from fastapi import HTTPException, status
import jwt

from src.platform.config.core_setting import settings
from src.service.train_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.train_booking.domain.entity.user_entity import UserEntity


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_days = settings.ACCESS_TOKEN_EXPIRE_DAYS

    @property
    def max_age_seconds(self) -> int:
        return self.token_expire_days * 24 * 60 * 60

    def create_jwt_token(self, user_entity: UserEntity) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(user_entity.id),
            'exp': now + timedelta(days=self.token_expire_days),
            'iat': now,
            'user_id': user_entity.id,
            'email': user_entity.email,
            'full_name': user_entity.full_name,
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail='Invalid token')

    async def authenticate_user(
        self, user_query_repo: IUserQueryRepo, email: str, password: str
    ) -> UserEntity:
        user_entity = await user_query_repo.verify_password(email=email, plain_password=password)
        return UserEntity.validate_user_exists(user_entity)

    def get_current_user_info_from_jwt(self, token: Optional[str]) -> UserEntity:
        if not token:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED, detail='Not authenticated'
            )

        payload = self.decode_jwt_token(token)

        user_id = payload.get('user_id')
        email = payload.get('email')
        if not user_id or not email:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail='Invalid token')

        # Rebuild UserEntity from JWT payload (no DB query)
        return UserEntity(id=user_id, email=email, full_name=payload.get('full_name') or '')


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, credentials = authorization.partition(' ')
    if scheme.lower() != 'bearer' or not credentials.strip():
        return None
    return credentials.strip()
