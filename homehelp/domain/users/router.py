"""User router - FastAPI endpoints for accounts and sessions"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ...auth import get_current_user, get_current_user_id
from ...database import get_db
from ...models import User
from .schemas import AuthResponse, LoginRequest, ProfileUpdate, RegisterRequest, UserResponse
from .service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Users"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Dependency injection for UserService"""
    return UserService(db)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(data: RegisterRequest, service: UserService = Depends(get_user_service)):
    """Create an account; returns a bearer token for it"""
    return service.register(data)


@router.post("/login", response_model=AuthResponse)
async def login(data: LoginRequest, service: UserService = Depends(get_user_service)):
    return service.login(data)


@router.get("/user", response_model=UserResponse)
async def get_me(user: User = Depends(get_current_user)):
    """Current user's profile"""
    return UserResponse.from_user(user)


@router.patch("/user/profile", response_model=UserResponse)
async def update_profile(
    data: ProfileUpdate,
    user_id: int = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
):
    return UserResponse.from_user(service.update_profile(user_id, data))
