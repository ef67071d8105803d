"""
User API Schemas - Pydantic models for request/response
"""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, SecretStr

from src.service.train_booking.driving_adapter.schema.base_schema import CamelModel


class SignUpRequest(CamelModel):
    email: EmailStr
    password: SecretStr = Field(
        ..., max_length=72, description='At least 6 characters (bcrypt limit is 72)'
    )
    full_name: str = Field(..., max_length=255)
    phone: Optional[str] = Field(None, max_length=50)

    class Config:
        json_schema_extra = {
            'example': {
                'email': 'user@example.com',
                'password': 'secret123',
                'fullName': 'Jane Doe',
                'phone': '0912345678',
            }
        }


class LoginRequest(CamelModel):
    email: EmailStr
    password: SecretStr = Field(..., min_length=1, max_length=72)

    class Config:
        json_schema_extra = {'example': {'email': 'user@example.com', 'password': 'secret123'}}


class UpdateProfileRequest(CamelModel):
    full_name: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    password: Optional[SecretStr] = Field(None, max_length=72)


class UserResponse(CamelModel):
    id: int
    email: str
    full_name: str
    phone: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        json_schema_extra = {
            'example': {
                'id': 1,
                'email': 'user@example.com',
                'fullName': 'Jane Doe',
                'phone': '0912345678',
                'createdAt': '2025-01-01T08:00:00Z',
            }
        }


class LoginResponse(CamelModel):
    token: str
    user: UserResponse


class MessageResponse(CamelModel):
    message: str
