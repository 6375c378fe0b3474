"""
FastAPI dependencies.

The registry and prompt service are built once in create_app and kept
on app.state; handlers receive them through these functions.
"""

from fastapi import Request

from app.services.platform_registry import PlatformRegistry
from app.services.prompt_service import PromptService


def get_registry(request: Request) -> PlatformRegistry:
    return request.app.state.registry


def get_prompt_service(request: Request) -> PromptService:
    return request.app.state.prompt_service


def get_max_upload_bytes(request: Request) -> int:
    return request.app.state.prompt_service.validator.max_file_size
