"""Message router - FastAPI endpoints for provider message threads"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, status
from sqlalchemy.orm import Session

from ...auth import get_current_user_id
from ...database import get_db
from ..catalog.schemas import ProviderResponse
from .auto_reply import AutoReplyScheduler, get_auto_reply_scheduler
from .schemas import MessageCreate, MessageResponse
from .service import MessageService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/messages", tags=["Messages"])


def get_message_service(db: Session = Depends(get_db)) -> MessageService:
    """Dependency injection for MessageService"""
    return MessageService(db)


@router.get("/providers", response_model=list[ProviderResponse])
async def list_messaged_providers(
    user_id: int = Depends(get_current_user_id),
    service: MessageService = Depends(get_message_service),
):
    """Providers the current user has exchanged messages with"""
    return service.get_messaged_providers(user_id)


@router.get("/provider/{provider_id}", response_model=list[MessageResponse])
async def get_thread(
    provider_id: int,
    user_id: int = Depends(get_current_user_id),
    service: MessageService = Depends(get_message_service),
):
    """Message thread with one provider, oldest first"""
    return [MessageResponse.from_message(m) for m in service.get_thread(user_id, provider_id)]


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message(
    data: MessageCreate,
    background_tasks: BackgroundTasks,
    user_id: int = Depends(get_current_user_id),
    service: MessageService = Depends(get_message_service),
    auto_reply: AutoReplyScheduler = Depends(get_auto_reply_scheduler),
):
    """Send a message to a provider"""
    message = service.send_message(data, user_id)

    # Queue the provider's reply after the response is sent
    background_tasks.add_task(auto_reply.schedule, user_id, data.providerId)

    return MessageResponse.from_message(message)
