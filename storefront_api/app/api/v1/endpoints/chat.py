"""
Shopping‑assistant chat endpoints for API v1.

``POST /chat`` stores the user's message and responds with the bot's
reply.  The reply is always a stored message: when the completion
service is unavailable the bot answers with an apology instead of the
request failing.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from storefront_api.app.api.deps import get_chat_service
from storefront_api.app.schemas.chat import ChatMessageCreate, ChatMessageRead
from storefront_api.app.services.chat_service import ChatService


router = APIRouter()


@router.get("/{user_id}", response_model=List[ChatMessageRead])
async def get_chat_messages(user_id: int, service: ChatService = Depends(get_chat_service)) -> List[ChatMessageRead]:
    return service.get_chat_messages(user_id)


@router.post("", response_model=ChatMessageRead, status_code=status.HTTP_201_CREATED)
async def send_chat_message(
    message: ChatMessageCreate,
    service: ChatService = Depends(get_chat_service),
) -> ChatMessageRead:
    return await service.send_message(message)
