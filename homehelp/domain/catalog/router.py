"""Catalog router - FastAPI endpoints for services and providers"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import get_optional_user_id
from ...database import get_db
from .schemas import ProviderResponse, ServiceResponse
from .service import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Catalog"])


def get_catalog_service(db: Session = Depends(get_db)) -> CatalogService:
    """Dependency injection for CatalogService"""
    return CatalogService(db)


# ============================================================================
# SERVICES
# ============================================================================


@router.get("/services", response_model=list[ServiceResponse])
async def list_services(service: CatalogService = Depends(get_catalog_service)):
    """List all service categories"""
    return [ServiceResponse.from_service(s) for s in service.get_services()]


@router.get("/services/{service_id}", response_model=ServiceResponse)
async def get_service(service_id: int, service: CatalogService = Depends(get_catalog_service)):
    """Get a single service category"""
    return ServiceResponse.from_service(service.get_service(service_id))


@router.get("/services/{service_id}/providers", response_model=list[ProviderResponse])
async def list_providers_for_service(
    service_id: int,
    user_id: Optional[int] = Depends(get_optional_user_id),
    service: CatalogService = Depends(get_catalog_service),
):
    """List providers who perform a service"""
    return service.get_providers_for_service(service_id, user_id)


# ============================================================================
# PROVIDERS
# ============================================================================


@router.get("/providers", response_model=list[ProviderResponse])
async def list_providers(
    user_id: Optional[int] = Depends(get_optional_user_id),
    service: CatalogService = Depends(get_catalog_service),
):
    """List every provider"""
    return service.get_providers(user_id)


@router.get("/providers/service/{service_id}", response_model=list[ProviderResponse])
async def list_providers_for_service_legacy(
    service_id: int,
    user_id: Optional[int] = Depends(get_optional_user_id),
    service: CatalogService = Depends(get_catalog_service),
):
    """Older path for providers by service, kept for existing clients"""
    return service.get_providers_for_service(service_id, user_id)


@router.get("/providers/{provider_id}", response_model=ProviderResponse)
async def get_provider(
    provider_id: int,
    user_id: Optional[int] = Depends(get_optional_user_id),
    service: CatalogService = Depends(get_catalog_service),
):
    """Get a single provider"""
    return service.get_provider(provider_id, user_id)
