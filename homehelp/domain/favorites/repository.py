"""Favorite repository - Database operations for user/provider favorites"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...models import Favorite, Provider
from ..catalog.repository import CatalogRepository

logger = logging.getLogger(__name__)


class FavoriteRepository:
    """Repository for the favorite relationship, keyed by (user_id, provider_id)"""

    @staticmethod
    def is_favorite(db: Session, user_id: int, provider_id: int) -> bool:
        return (
            db.query(Favorite.id)
            .filter(Favorite.user_id == user_id, Favorite.provider_id == provider_id)
            .first()
            is not None
        )

    @staticmethod
    def add_favorite_provider(db: Session, user_id: int, provider_id: int) -> bool:
        """
        Add a favorite. Adding an existing favorite is a no-op.

        Returns True if a new relationship was created.
        """
        if FavoriteRepository.is_favorite(db, user_id, provider_id):
            return False

        db.add(Favorite(user_id=user_id, provider_id=provider_id))
        try:
            db.commit()
        except IntegrityError:
            # Another request created the same favorite between check and insert
            db.rollback()
            return False
        return True

    @staticmethod
    def remove_favorite_provider(db: Session, user_id: int, provider_id: int) -> bool:
        """
        Remove a favorite. Removing a missing favorite is a no-op.

        Returns True if a relationship was removed.
        """
        deleted = (
            db.query(Favorite)
            .filter(Favorite.user_id == user_id, Favorite.provider_id == provider_id)
            .delete(synchronize_session=False)
        )
        db.commit()
        return deleted > 0

    @staticmethod
    def get_favorite_provider_ids(db: Session, user_id: int) -> list[int]:
        """Provider ids favorited by a user, oldest favorite first"""
        rows = (
            db.query(Favorite.provider_id)
            .filter(Favorite.user_id == user_id)
            .order_by(Favorite.created_at.asc(), Favorite.id.asc())
            .all()
        )
        return [row.provider_id for row in rows]

    @staticmethod
    def get_favorite_providers(db: Session, user_id: int) -> list[Provider]:
        """Favorite providers that still exist in the catalog"""
        provider_ids = FavoriteRepository.get_favorite_provider_ids(db, user_id)
        return CatalogRepository.get_providers_by_ids(db, provider_ids)
