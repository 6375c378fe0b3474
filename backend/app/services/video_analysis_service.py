"""
Service wrapper for the multimodal video understanding provider (Gemini).

Responsibilities:
- Lazily create the google-genai client from configured credentials
- Send the video inline (the SDK base64-encodes it) plus instructions
- Translate SDK errors into RateLimited / AnalysisFailed
"""

from typing import Optional, Protocol

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from app.core.errors import AnalysisFailed, RateLimited
from app.core.logger import get_logger

logger = get_logger(__name__)


class MediaAnalysisClient(Protocol):
    def analyze_media(self, data: bytes, mime_type: str, instruction_text: str) -> str:
        ...


class GeminiVideoAnalysisClient:
    """Video analysis client backed by the google-genai SDK."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gemini-2.0-flash",
        client: Optional[genai.Client] = None
    ):
        self.api_key = api_key
        self.model = model
        self._client = client

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            if not self.api_key:
                raise AnalysisFailed("GOOGLE_AI_API_KEY is not configured")
            self._client = genai.Client(api_key=self.api_key)
            logger.info("Gemini client initialized")
        return self._client

    def analyze_media(self, data: bytes, mime_type: str, instruction_text: str) -> str:
        """
        Ask the model to analyze a video and answer per the instructions.

        Raises:
            RateLimited: Provider returned HTTP 429
            AnalysisFailed: Any other provider failure or an empty answer
        """
        contents = [
            types.Part.from_bytes(data=data, mime_type=mime_type),
            instruction_text,
        ]

        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=contents,
            )
        except genai_errors.APIError as e:
            if e.code == 429:
                logger.error(f"Gemini rate limit hit: {e}")
                raise RateLimited() from e
            logger.error(f"Gemini analysis failed: {e}")
            raise AnalysisFailed(e.message or str(e)) from e

        text = response.text
        if not text:
            raise AnalysisFailed("Provider returned an empty response")
        return text
