"""Favorite domain schemas"""

from pydantic import BaseModel


class FavoriteCreate(BaseModel):
    """Schema for favoriting a provider"""

    providerId: int
