"""Catalog service - Service and provider lookups with per-user favorite overlay"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...errors import NotFoundError
from ...models import Provider, Service
from ..favorites.repository import FavoriteRepository
from .repository import CatalogRepository
from .schemas import ProviderResponse

logger = logging.getLogger(__name__)


class CatalogService:
    """Service layer for the read-only service/provider catalog"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = CatalogRepository()

    def get_services(self) -> list[Service]:
        return self.repo.get_all_services(self.db)

    def get_service(self, service_id: int) -> Service:
        service = self.repo.get_service(self.db, service_id)
        if not service:
            raise NotFoundError("Service not found")
        return service

    def get_provider(self, provider_id: int, user_id: Optional[int] = None) -> ProviderResponse:
        provider = self.repo.get_provider(self.db, provider_id)
        if not provider:
            raise NotFoundError("Provider not found")
        return self.annotate([provider], user_id)[0]

    def get_providers(self, user_id: Optional[int] = None) -> list[ProviderResponse]:
        return self.annotate(self.repo.get_all_providers(self.db), user_id)

    def get_providers_for_service(
        self, service_id: int, user_id: Optional[int] = None
    ) -> list[ProviderResponse]:
        providers = self.repo.get_providers_by_service(self.db, service_id)
        return self.annotate(providers, user_id)

    def annotate(self, providers: list[Provider], user_id: Optional[int]) -> list[ProviderResponse]:
        """Build per-caller provider views with isFavorite set for user_id"""
        favorite_ids = (
            set(FavoriteRepository.get_favorite_provider_ids(self.db, user_id))
            if user_id is not None
            else set()
        )
        return [ProviderResponse.from_provider(p, p.id in favorite_ids) for p in providers]
