"""
AI‑assisted copywriting for event posts.

The service builds a system instruction from the event (and the
target platform, when one is given) and asks the completion
collaborator to answer the user's prompt.  Unlike the chat there is no
fallback text: a failed completion propagates as ``CompletionError``
and the route reports it to the caller.
"""

import logging
from typing import Optional

from ..core.completion import CompletionClient
from ..core.store import Store
from ..schemas.ai import ContentGenerationRequest, GeneratedContent
from ..schemas.event import EventRead
from ..schemas.social import SocialPlatformRead


logger = logging.getLogger(__name__)

GENERATION_MAX_TOKENS = 500


def build_system_prompt(event: EventRead, platform: Optional[SocialPlatformRead]) -> str:
    prompt = f'You are a social media content creator for an event named "{event.name}". '
    prompt += f'The event is described as: "{event.description or "No description available"}". '
    if platform is not None:
        prompt += f"Create engaging content specifically for {platform.name}. "
    else:
        prompt += "Create engaging social media content. "
    prompt += "Your job is to craft compelling, concise content that will engage the target audience."
    return prompt


class ContentGenerationService:
    def __init__(self, store: Store, completion: CompletionClient) -> None:
        self.events = store.events
        self.platforms = store.social_platforms
        self.completion = completion

    async def generate(self, request: ContentGenerationRequest) -> Optional[GeneratedContent]:
        """Generate post copy for an event.

        Returns ``None`` if the event does not exist.  An unknown
        platform id falls back to generic copy.
        """
        event = self.events.get(request.event_id)
        if event is None:
            return None
        platform = self.platforms.get(request.platform) if request.platform is not None else None
        logger.info("Generating content for event %s (platform %s)", event.id, platform.name if platform else "generic")
        content = await self.completion.complete(
            build_system_prompt(event, platform),
            [("user", request.prompt)],
            max_tokens=GENERATION_MAX_TOKENS,
        )
        return GeneratedContent(
            content=content,
            event=event.name,
            platform=platform.name if platform is not None else "Generic",
        )
