"""User domain schemas - Pydantic models for accounts and sessions"""

from typing import Optional

from pydantic import BaseModel, field_validator

from ...models import User
from ...shared.validators import validate_us_phone, validate_username
from ...utils.sanitization import validate_and_sanitize_input

MIN_PASSWORD_LENGTH = 8
# bcrypt only uses the first 72 bytes
MAX_PASSWORD_BYTES = 72


class RegisterRequest(BaseModel):
    """Schema for creating an account"""

    username: str
    password: str
    fullName: Optional[str] = None
    phoneNumber: Optional[str] = None

    @field_validator("username")
    @classmethod
    def check_username(cls, v):
        return validate_username(v)

    @field_validator("password")
    @classmethod
    def check_password(cls, v):
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        if len(v.encode()) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v

    @field_validator("fullName")
    @classmethod
    def clean_full_name(cls, v):
        if v:
            return validate_and_sanitize_input(v, max_length=255) or None
        return v

    @field_validator("phoneNumber")
    @classmethod
    def validate_phone(cls, v):
        if v:
            return validate_us_phone(v)
        return v


class LoginRequest(BaseModel):
    username: str
    password: str


class ProfileUpdate(BaseModel):
    """Schema for updating the current user's profile (all fields optional)"""

    fullName: Optional[str] = None
    phoneNumber: Optional[str] = None
    address: Optional[str] = None
    emergencyContact: Optional[str] = None
    emergencyPhone: Optional[str] = None

    @field_validator("fullName", "emergencyContact")
    @classmethod
    def clean_name(cls, v):
        if v:
            return validate_and_sanitize_input(v, max_length=255)
        return v

    @field_validator("address")
    @classmethod
    def clean_address(cls, v):
        if v:
            return validate_and_sanitize_input(v, max_length=500)
        return v

    @field_validator("phoneNumber", "emergencyPhone")
    @classmethod
    def validate_phone(cls, v):
        if v:
            return validate_us_phone(v)
        return v


class UserResponse(BaseModel):
    """Schema for user response (the password hash is never exposed)"""

    id: int
    username: str
    fullName: Optional[str] = None
    phoneNumber: Optional[str] = None
    address: Optional[str] = None
    emergencyContact: Optional[str] = None
    emergencyPhone: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            fullName=user.full_name,
            phoneNumber=user.phone_number,
            address=user.address,
            emergencyContact=user.emergency_contact,
            emergencyPhone=user.emergency_phone,
        )


class AuthResponse(BaseModel):
    token: str
    user: UserResponse
