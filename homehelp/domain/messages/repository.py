"""Message repository - Database operations for user/provider message threads"""

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Message


class MessageRepository:
    """Repository for append-only message threads"""

    @staticmethod
    def create_message(db: Session, **message_data) -> Message:
        message = Message(**message_data)
        db.add(message)
        db.commit()
        db.refresh(message)
        return message

    @staticmethod
    def get_messages(db: Session, user_id: int, provider_id: int) -> list[Message]:
        """Thread between a user and a provider, oldest first (id breaks timestamp ties)"""
        return (
            db.query(Message)
            .filter(Message.user_id == user_id, Message.provider_id == provider_id)
            .order_by(Message.timestamp.asc(), Message.id.asc())
            .all()
        )

    @staticmethod
    def get_messaged_provider_ids(db: Session, user_id: int) -> list[int]:
        """Distinct providers in the user's messages, in order of first contact"""
        first_at = func.min(Message.timestamp).label("first_at")
        first_id = func.min(Message.id).label("first_id")
        rows = (
            db.query(Message.provider_id, first_at, first_id)
            .filter(Message.user_id == user_id)
            .group_by(Message.provider_id)
            .order_by(first_at, first_id)
            .all()
        )
        return [row.provider_id for row in rows]
