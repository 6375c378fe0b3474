"""
Orchestrator for prompt generation.

Responsibilities:
- Validate description / upload input before any provider call
- Resolve the target platform template
- Dispatch to the completion provider (text path) or the media
  analysis provider (video path)
- Keep uploaded video on disk only for the duration of the call
"""

from dataclasses import dataclass
from typing import Dict, Optional

from app.core.errors import (
    AnalysisFailed,
    EmptyInput,
    GenerationFailed,
    MissingFile,
    PromptcraftError,
    RateLimited,
)
from app.core.logger import get_logger
from app.core.utils import extension_for, scoped_temp_file
from app.services.completion_service import CompletionClient
from app.services.platform_registry import PlatformRegistry
from app.services.prompt_templates import build_analysis_prompt, build_user_prompt
from app.services.upload_validator import UploadValidator
from app.services.video_analysis_service import MediaAnalysisClient

logger = get_logger(__name__)


@dataclass
class GeneratedPrompt:
    text: str
    platform: str

    def to_response(self) -> Dict[str, str]:
        return {"prompt": self.text, "platform": self.platform}


class PromptService:
    """
    Turns a scene description or a video clip into a platform prompt.

    All collaborators are injected so tests can swap the providers out.
    """

    def __init__(
        self,
        registry: PlatformRegistry,
        completion_client: CompletionClient,
        media_client: MediaAnalysisClient,
        validator: Optional[UploadValidator] = None,
        temp_dir: Optional[str] = None
    ):
        self.registry = registry
        self.completion_client = completion_client
        self.media_client = media_client
        self.validator = validator or UploadValidator()
        self.temp_dir = temp_dir

    def generate_from_description(
        self,
        description: Optional[str],
        platform_id: Optional[str]
    ) -> GeneratedPrompt:
        """
        Generate a prompt from a prose scene description.

        Raises:
            EmptyInput: Description blank or platform missing
            UnknownPlatform: platform_id not registered
            RateLimited: Provider rate limit
            GenerationFailed: Any other provider failure
        """
        if not description or not description.strip() or not platform_id:
            raise EmptyInput("Description and platform are required")

        template = self.registry.get(platform_id)
        logger.info(f"Generating {template.id} prompt from description ({len(description)} chars)")

        try:
            text = self.completion_client.complete(
                template.system_prompt,
                build_user_prompt(template, description),
            )
        except (RateLimited, GenerationFailed):
            raise
        except PromptcraftError as e:
            raise GenerationFailed(e.message) from e
        except Exception as e:
            logger.error(f"Completion failed for {template.id}: {e}")
            raise GenerationFailed(str(e) or GenerationFailed.default_message) from e

        return GeneratedPrompt(text=text, platform=template.display_name)

    def generate_from_video(
        self,
        data: Optional[bytes],
        mime_type: Optional[str],
        platform_id: Optional[str]
    ) -> GeneratedPrompt:
        """
        Analyze an uploaded clip and generate a prompt that recreates it.

        The bytes are written to a temp file that is removed before this
        returns or raises.

        Raises:
            MissingFile: No video bytes
            InvalidUpload: Disallowed type or over the size limit
            EmptyInput: Platform missing
            UnknownPlatform: platform_id not registered
            AnalysisFailed: Any provider failure
        """
        if not data:
            raise MissingFile("Video file is required")

        self.validator.validate(mime_type, len(data))

        if not platform_id:
            raise EmptyInput("Platform is required")

        template = self.registry.get(platform_id)
        logger.info(f"Analyzing {mime_type} upload ({len(data)} bytes) for {template.id}")

        with scoped_temp_file(data, suffix=extension_for(mime_type), directory=self.temp_dir) as path:
            with open(path, "rb") as f:
                video_data = f.read()

            try:
                text = self.media_client.analyze_media(
                    video_data,
                    mime_type,
                    build_analysis_prompt(template),
                )
            except PromptcraftError as e:
                logger.error(f"Video analysis failed for {template.id}: {e.message}")
                raise AnalysisFailed() from e

        return GeneratedPrompt(text=text, platform=template.display_name)
