"""Favorite service - Business logic for favorite providers"""

import logging

from sqlalchemy.orm import Session

from ..catalog.schemas import ProviderResponse
from .repository import FavoriteRepository

logger = logging.getLogger(__name__)


class FavoriteService:
    """Service layer for the user/provider favorite relationship"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = FavoriteRepository()

    def get_favorites(self, user_id: int) -> list[ProviderResponse]:
        providers = self.repo.get_favorite_providers(self.db, user_id)
        return [ProviderResponse.from_provider(p, is_favorite=True) for p in providers]

    def add_favorite(self, user_id: int, provider_id: int) -> None:
        created = self.repo.add_favorite_provider(self.db, user_id, provider_id)
        if created:
            logger.info(f"✅ User {user_id} favorited provider {provider_id}")

    def remove_favorite(self, user_id: int, provider_id: int) -> None:
        removed = self.repo.remove_favorite_provider(self.db, user_id, provider_id)
        if removed:
            logger.info(f"✅ User {user_id} removed provider {provider_id} from favorites")
