"""
Text‑completion collaborator backed by the OpenAI chat API.

The store never talks to the model directly.  The chat and content
generation services hand an ordered list of ``(role, text)`` turns plus
a system instruction to ``CompletionClient.complete`` and get one
generated text back.  Any failure (missing API key, network error,
API error) is raised as ``CompletionError`` so callers only need to
handle a single exception type.

The underlying ``AsyncOpenAI`` client is created lazily on the first
call, which keeps application start‑up free of network or credential
checks.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from openai import AsyncOpenAI

from .config import settings


logger = logging.getLogger(__name__)

Turn = Tuple[str, str]


class CompletionError(RuntimeError):
    """Raised when the completion service could not produce a reply."""


class CompletionClient:
    """Thin async wrapper around the chat completions endpoint."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.openai_api_key
        self.model = model or settings.openai_model
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.api_key:
                raise CompletionError("OPENAI_API_KEY not set")
            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    @staticmethod
    def build_messages(system: str, turns: Sequence[Turn]) -> List[Dict[str, Any]]:
        messages: List[Dict[str, Any]] = [{"role": "system", "content": system}]
        messages.extend({"role": role, "content": text} for role, text in turns)
        return messages

    async def complete(self, system: str, turns: Sequence[Turn], max_tokens: int = 250) -> str:
        """Return the model's reply to ``turns`` under the ``system`` instruction.

        Raises
        ------
        CompletionError
            If the client cannot be created or the API call fails.
        """
        client = self._get_client()
        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=self.build_messages(system, turns),
                max_tokens=max_tokens,
            )
        except Exception as exc:
            raise CompletionError(f"Completion request failed: {exc}") from exc
        if not response.choices:
            raise CompletionError("Completion response contained no choices")
        content = response.choices[0].message.content or ""
        logger.debug("Completion returned %d characters", len(content))
        return content
