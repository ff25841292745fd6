"""User service - Business logic for registration, login and profiles"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...auth import create_session_token, hash_password, verify_password
from ...errors import ConflictError, NotFoundError, UnauthenticatedError
from ...models import User
from .repository import UserRepository
from .schemas import AuthResponse, LoginRequest, ProfileUpdate, RegisterRequest, UserResponse

logger = logging.getLogger(__name__)

# ProfileUpdate field -> User column
PROFILE_FIELDS = {
    "fullName": "full_name",
    "phoneNumber": "phone_number",
    "address": "address",
    "emergencyContact": "emergency_contact",
    "emergencyPhone": "emergency_phone",
}


class UserService:
    """Service layer for user accounts"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepository()

    def register(self, data: RegisterRequest) -> AuthResponse:
        """Create an account and sign it in"""
        if self.repo.get_user_by_username(self.db, data.username):
            raise ConflictError("Username already exists")

        try:
            user = self.repo.create_user(
                self.db,
                username=data.username,
                password=hash_password(data.password),
                full_name=data.fullName,
                phone_number=data.phoneNumber,
            )
        except IntegrityError as e:
            # Lost a race with a concurrent registration of the same name
            self.db.rollback()
            raise ConflictError("Username already exists") from e

        logger.info(f"✅ Registered user {user.id} ({user.username})")
        return self._session_for(user)

    def login(self, data: LoginRequest) -> AuthResponse:
        user = self.repo.get_user_by_username(self.db, data.username.strip())
        if not user or not verify_password(data.password, user.password):
            logger.warning(f"⚠️ Failed login attempt for '{data.username}'")
            raise UnauthenticatedError("Invalid username or password")

        logger.info(f"🔐 User {user.id} signed in")
        return self._session_for(user)

    def get_user(self, user_id: int) -> User:
        user = self.repo.get_user(self.db, user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def update_profile(self, user_id: int, data: ProfileUpdate) -> User:
        """Apply only the fields present in the request"""
        user = self.get_user(user_id)
        provided = data.model_dump(exclude_unset=True)
        update_data = {PROFILE_FIELDS[k]: v for k, v in provided.items() if k in PROFILE_FIELDS}
        if not update_data:
            return user
        return self.repo.update_user(self.db, user, **update_data)

    @staticmethod
    def _session_for(user: User) -> AuthResponse:
        return AuthResponse(token=create_session_token(user.id), user=UserResponse.from_user(user))
