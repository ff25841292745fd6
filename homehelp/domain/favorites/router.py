"""Favorite router - FastAPI endpoints for a user's favorite providers"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ...auth import get_current_user_id
from ...database import get_db
from ..catalog.schemas import ProviderResponse
from .schemas import FavoriteCreate
from .service import FavoriteService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/user/favorites", tags=["Favorites"])


def get_favorite_service(db: Session = Depends(get_db)) -> FavoriteService:
    """Dependency injection for FavoriteService"""
    return FavoriteService(db)


@router.get("", response_model=list[ProviderResponse])
async def list_favorites(
    user_id: int = Depends(get_current_user_id),
    service: FavoriteService = Depends(get_favorite_service),
):
    """List the current user's favorite providers"""
    return service.get_favorites(user_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_favorite(
    data: FavoriteCreate,
    user_id: int = Depends(get_current_user_id),
    service: FavoriteService = Depends(get_favorite_service),
):
    """Favorite a provider (no-op if already a favorite)"""
    service.add_favorite(user_id, data.providerId)
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete("/{provider_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_favorite(
    provider_id: int,
    user_id: int = Depends(get_current_user_id),
    service: FavoriteService = Depends(get_favorite_service),
):
    """Remove a provider from favorites (no-op if not a favorite)"""
    service.remove_favorite(user_id, provider_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
