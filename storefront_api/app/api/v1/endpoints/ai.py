"""
AI content generation endpoint for API v1.

Generates post copy for an event, optionally tailored to a social
platform.  A failing completion service is reported as 502 so clients
can tell it apart from their own mistakes.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from storefront_api.app.api.deps import get_generation_service
from storefront_api.app.core.completion import CompletionError
from storefront_api.app.schemas.ai import ContentGenerationRequest, GeneratedContent
from storefront_api.app.services.generation_service import ContentGenerationService


router = APIRouter()


@router.post("/generate-content", response_model=GeneratedContent)
async def generate_content(
    request: ContentGenerationRequest,
    service: ContentGenerationService = Depends(get_generation_service),
) -> GeneratedContent:
    try:
        generated = await service.generate(request)
    except CompletionError as e:
        logging.getLogger(__name__).exception("Content generation failed for event %s", request.event_id)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to generate content") from e
    if generated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return generated
