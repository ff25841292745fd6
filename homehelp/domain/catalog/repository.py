"""Catalog repository - Database operations for services and providers"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...models import Provider, Service

logger = logging.getLogger(__name__)


class CatalogRepository:
    """Repository for service and provider catalog operations"""

    @staticmethod
    def get_all_services(db: Session) -> list[Service]:
        """Get all services in catalog order"""
        return db.query(Service).order_by(Service.id).all()

    @staticmethod
    def get_service(db: Session, service_id: int) -> Optional[Service]:
        return db.query(Service).filter(Service.id == service_id).first()

    @staticmethod
    def get_provider(db: Session, provider_id: int) -> Optional[Provider]:
        return db.query(Provider).filter(Provider.id == provider_id).first()

    @staticmethod
    def get_all_providers(db: Session) -> list[Provider]:
        return db.query(Provider).order_by(Provider.id).all()

    @staticmethod
    def get_providers_by_ids(db: Session, provider_ids: list[int]) -> list[Provider]:
        """Get providers for the given ids, preserving the order of provider_ids and skipping unknown ids"""
        if not provider_ids:
            return []
        found = {p.id: p for p in db.query(Provider).filter(Provider.id.in_(provider_ids)).all()}
        return [found[pid] for pid in provider_ids if pid in found]

    @staticmethod
    def get_providers_by_service(db: Session, service_id: int) -> list[Provider]:
        """Get providers who perform a service (empty list for an unknown service)"""
        return (
            db.query(Provider)
            .join(Provider.services)
            .filter(Service.id == service_id)
            .order_by(Provider.id)
            .all()
        )

    @staticmethod
    def create_service(db: Session, **service_data) -> Service:
        service = Service(**service_data)
        db.add(service)
        db.commit()
        db.refresh(service)
        return service

    @staticmethod
    def create_provider(db: Session, service_names: list[str], **provider_data) -> Provider:
        """Create a provider linked to the services with the given names"""
        services = db.query(Service).filter(Service.name.in_(service_names)).all() if service_names else []

        missing = set(service_names) - {s.name for s in services}
        if missing:
            logger.warning(f"⚠️ Provider {provider_data.get('name')} references unknown services: {sorted(missing)}")

        provider = Provider(**provider_data)
        provider.services = services
        db.add(provider)
        db.commit()
        db.refresh(provider)
        return provider
