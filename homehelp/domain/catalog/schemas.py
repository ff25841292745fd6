"""Catalog domain schemas - Pydantic models for services and providers"""

from pydantic import BaseModel

from ...models import Provider, Service


class ServiceResponse(BaseModel):
    """Schema for a service catalog entry"""

    id: int
    name: str
    shortDescription: str
    description: str
    icon: str
    inclusions: list[str]

    @classmethod
    def from_service(cls, service: Service) -> "ServiceResponse":
        return cls(
            id=service.id,
            name=service.name,
            shortDescription=service.short_description,
            description=service.description,
            icon=service.icon,
            inclusions=list(service.inclusions or []),
        )


class ProviderResponse(BaseModel):
    """
    Provider as seen by one caller.

    isFavorite is computed per request and must only ever live on this
    response object, never on the Provider row.
    """

    id: int
    name: str
    experience: str
    rating: float
    reviews: int
    tags: list[str]
    services: list[str]
    isFavorite: bool = False

    @classmethod
    def from_provider(cls, provider: Provider, is_favorite: bool = False) -> "ProviderResponse":
        return cls(
            id=provider.id,
            name=provider.name,
            experience=provider.experience,
            rating=provider.rating,
            reviews=provider.reviews,
            tags=list(provider.tags or []),
            services=provider.service_names,
            isFavorite=is_favorite,
        )
