"""
Shopping‑assistant chat.

Every user has one conversation, ordered by message timestamp.  When a
user posts a message it is stored first; the whole conversation is
then sent to the completion collaborator together with a fixed system
instruction and the reply is stored as a bot message.  If the
collaborator fails, the failure is logged and an apology is stored as
the bot reply instead; the user's message is kept either way.
"""

import logging
from typing import List, Tuple

from ..core.completion import CompletionClient, CompletionError
from ..core.store import Store
from ..schemas.chat import ChatMessageCreate, ChatMessageRead


logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful shopping assistant for GudiMart.com, an e-commerce platform. "
    "Help users find products, provide information about shipping, returns, and answer "
    "general questions about shopping on our platform. Keep responses concise and friendly."
)
FALLBACK_REPLY = "I'm sorry, I'm having trouble responding right now. Please try again later."
CHAT_MAX_TOKENS = 250


class ChatService:
    """Service for chat history and bot replies."""

    def __init__(self, store: Store, completion: CompletionClient) -> None:
        self.messages = store.chat_messages
        self.completion = completion

    def get_chat_messages(self, user_id: int) -> List[ChatMessageRead]:
        """Return the user's conversation, oldest message first."""
        history = self.messages.list(lambda m: m.user_id == user_id)
        return sorted(history, key=lambda m: m.timestamp)

    def add_chat_message(self, data: ChatMessageCreate) -> ChatMessageRead:
        return self.messages.create(data)

    @staticmethod
    def to_turns(history: List[ChatMessageRead]) -> List[Tuple[str, str]]:
        return [("assistant" if m.is_bot else "user", m.message) for m in history]

    async def send_message(self, data: ChatMessageCreate) -> ChatMessageRead:
        """Store a user message and return the stored bot reply."""
        self.add_chat_message(data)
        history = self.get_chat_messages(data.user_id)
        try:
            reply = await self.completion.complete(SYSTEM_PROMPT, self.to_turns(history), max_tokens=CHAT_MAX_TOKENS)
        except CompletionError:
            logger.exception("Chat completion failed for user %s", data.user_id)
            reply = FALLBACK_REPLY
        return self.add_chat_message(ChatMessageCreate(user_id=data.user_id, is_bot=True, message=reply or FALLBACK_REPLY))
