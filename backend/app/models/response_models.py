"""
Pydantic models for API response schemas.

Responsibilities:
- Define standard response structures
- Ensure consistent API output
"""

from pydantic import BaseModel, Field


class PlatformInfo(BaseModel):
    id: str = Field(..., description="Platform id used in requests")
    name: str = Field(..., description="Human-readable platform name")


class PromptResponse(BaseModel):
    prompt: str = Field(..., description="Generated prompt text, verbatim from the provider")
    platform: str = Field(..., description="Display name of the target platform")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Human-readable error message")
