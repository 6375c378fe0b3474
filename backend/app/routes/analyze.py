"""
Handles video upload analysis.

Responsibilities:
- Accept a multipart upload (video file + platform id)
- Reject bad type / oversized files before any provider call
- Dispatch to the video understanding provider with the platform template
"""

import asyncio
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from app.core.dependencies import get_max_upload_bytes, get_prompt_service
from app.core.errors import AnalysisFailed, PromptcraftError
from app.core.logger import get_logger
from app.models.response_models import ErrorResponse, PromptResponse
from app.services.prompt_service import PromptService

logger = get_logger(__name__)

router = APIRouter(prefix="/analyze-video", tags=["Analyze"])


@router.post(
    "",
    response_model=PromptResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze_video(
    video: Optional[UploadFile] = File(None),
    platform: Optional[str] = Form(None),
    service: PromptService = Depends(get_prompt_service),
    max_upload_bytes: int = Depends(get_max_upload_bytes)
):
    """
    Analyzes an uploaded clip and generates a prompt that recreates it.
    """
    try:
        data = b""
        mime_type = None
        if video is not None:
            # One byte past the limit is enough to know it is too large
            data = await video.read(max_upload_bytes + 1)
            mime_type = video.content_type
            await video.close()

        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(
            None,
            service.generate_from_video,
            data,
            mime_type,
            platform
        )
        return result.to_response()

    except PromptcraftError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error analyzing video: {str(e)}")
        raise HTTPException(status_code=500, detail=AnalysisFailed.default_message)
