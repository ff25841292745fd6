"""Message service - Business logic for provider message threads"""

import logging

from sqlalchemy.orm import Session

from ...errors import ValidationError
from ...models import Message
from ...shared.timeutils import utc_now
from ...utils.sanitization import validate_and_sanitize_input
from ..catalog.repository import CatalogRepository
from ..catalog.schemas import ProviderResponse
from ..favorites.repository import FavoriteRepository
from .repository import MessageRepository
from .schemas import MessageCreate

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 2000


class MessageService:
    """Service layer for sending and reading messages"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = MessageRepository()

    def send_message(self, data: MessageCreate, user_id: int) -> Message:
        """Append a user-authored message to the thread with a provider"""
        try:
            content = validate_and_sanitize_input(data.content, max_length=MAX_MESSAGE_LENGTH)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        if not content:
            raise ValidationError("Message content cannot be empty")

        message = self.repo.create_message(
            self.db,
            user_id=user_id,
            provider_id=data.providerId,
            content=content,
            from_user=True,
            timestamp=utc_now(),
        )
        logger.info(f"📨 User {user_id} sent message {message.id} to provider {data.providerId}")
        return message

    def record_provider_reply(self, user_id: int, provider_id: int, content: str) -> Message:
        """Append a provider-authored message to a thread"""
        return self.repo.create_message(
            self.db,
            user_id=user_id,
            provider_id=provider_id,
            content=content,
            from_user=False,
            timestamp=utc_now(),
        )

    def get_thread(self, user_id: int, provider_id: int) -> list[Message]:
        return self.repo.get_messages(self.db, user_id, provider_id)

    def get_messaged_providers(self, user_id: int) -> list[ProviderResponse]:
        """Providers the user has a thread with, each flagged with current favorite status"""
        provider_ids = self.repo.get_messaged_provider_ids(self.db, user_id)
        providers = CatalogRepository.get_providers_by_ids(self.db, provider_ids)
        favorite_ids = set(FavoriteRepository.get_favorite_provider_ids(self.db, user_id))
        return [ProviderResponse.from_provider(p, p.id in favorite_ids) for p in providers]
