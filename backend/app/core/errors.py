"""
Error taxonomy for prompt generation.

Client-input errors map to 400, provider rate limits to 429 and
opaque provider failures to 500. Routes turn these into HTTPExceptions.
"""


class PromptcraftError(Exception):
    """Base error carrying a client-visible message and HTTP status."""

    status_code: int = 500
    default_message: str = "Unexpected error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ClientInputError(PromptcraftError):
    status_code = 400


class EmptyInput(ClientInputError):
    default_message = "Description and platform are required"


class MissingFile(ClientInputError):
    default_message = "Video file is required"


class UnknownPlatform(ClientInputError):
    default_message = "Invalid platform selected"


class InvalidUpload(ClientInputError):
    default_message = "Invalid video upload"


class RateLimited(PromptcraftError):
    status_code = 429
    default_message = "Rate limit exceeded. Please wait and try again."


class GenerationFailed(PromptcraftError):
    default_message = "Failed to generate prompt. Please try again."


class AnalysisFailed(PromptcraftError):
    default_message = "Failed to analyze video. Please try again."
