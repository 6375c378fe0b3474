"""
Pydantic models for API request validation.

Responsibilities:
- Define schemas for incoming JSON payloads
- Leave required-field checks to the service so missing fields get
  the same error message as blank ones
"""

from typing import Optional

from pydantic import BaseModel, Field


class GeneratePromptRequest(BaseModel):
    description: Optional[str] = Field(None, description="Prose description of the scene")
    platform: Optional[str] = Field(None, description="Target platform id, e.g. 'veo-3.1'")
