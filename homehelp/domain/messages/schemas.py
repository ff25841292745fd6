"""Message domain schemas - Pydantic models for validation"""

from datetime import datetime

from pydantic import BaseModel

from ...models import Message


class MessageCreate(BaseModel):
    """Schema for sending a message to a provider"""

    providerId: int
    content: str


class MessageResponse(BaseModel):
    id: int
    userId: int
    providerId: int
    content: str
    fromUser: bool
    timestamp: datetime

    @classmethod
    def from_message(cls, message: Message) -> "MessageResponse":
        return cls(
            id=message.id,
            userId=message.user_id,
            providerId=message.provider_id,
            content=message.content,
            fromUser=message.from_user,
            timestamp=message.timestamp,
        )
