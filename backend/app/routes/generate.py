"""
Handles prompt generation from a scene description.

Responsibilities:
- Accept {description, platform} JSON
- Dispatch to the completion provider with the platform template
- Map rate limits to 429 and provider failures to 500
"""

import asyncio
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from app.core.dependencies import get_prompt_service
from app.core.errors import GenerationFailed, PromptcraftError
from app.core.logger import get_logger
from app.models.request_models import GeneratePromptRequest
from app.models.response_models import ErrorResponse, PromptResponse
from app.services.prompt_service import PromptService

logger = get_logger(__name__)

router = APIRouter(prefix="/generate-prompt", tags=["Generate"])


@router.post(
    "",
    response_model=PromptResponse,
    responses={400: {"model": ErrorResponse}, 429: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_prompt(
    body: Optional[GeneratePromptRequest] = Body(None),
    service: PromptService = Depends(get_prompt_service)
):
    """
    Generates a platform-specific video prompt from a scene description.
    """
    # An empty POST is treated like {} so it gets the missing-field message
    body = body or GeneratePromptRequest()

    try:
        # Provider SDK call is blocking
        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(
            None,
            service.generate_from_description,
            body.description,
            body.platform
        )
        return result.to_response()

    except PromptcraftError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error generating prompt: {str(e)}")
        raise HTTPException(status_code=500, detail=GenerationFailed.default_message)
