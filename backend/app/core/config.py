"""
Application configuration settings.

Responsibilities:
- Load environment variables (and a local .env file if present)
- Define provider credentials and model parameters
- Define upload limits, temp storage and static client paths
- Configure API settings (host, port, CORS, logging)
"""

import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    PROJECT_NAME: str = "Promptcraft"
    API_PREFIX: str = "/api"

    def __init__(self):
        # Text completion provider
        self.OPENAI_API_KEY: Optional[str] = os.getenv("OPENAI_API_KEY")
        self.OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-5.1")
        self.OPENAI_MAX_COMPLETION_TOKENS: int = int(os.getenv("OPENAI_MAX_COMPLETION_TOKENS", "2048"))
        self.OPENAI_TEMPERATURE: float = float(os.getenv("OPENAI_TEMPERATURE", "0.7"))

        # Video understanding provider
        self.GOOGLE_AI_API_KEY: Optional[str] = os.getenv("GOOGLE_AI_API_KEY")
        self.GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")

        # Uploads
        self.MAX_UPLOAD_BYTES: int = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))
        self.UPLOAD_DIR: Optional[str] = os.getenv("UPLOAD_DIR") or None

        self.PLATFORM_TEMPLATES_FILE: Optional[str] = os.getenv("PLATFORM_TEMPLATES_FILE") or None

        # Server
        self.CORS_ORIGINS: List[str] = _split_csv(os.getenv("CORS_ORIGINS", "*"))
        self.STATIC_DIR: Optional[str] = os.getenv("STATIC_DIR") or None
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
        self.LOG_FILE: Optional[str] = os.getenv("LOG_FILE") or None
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "3001"))


settings = Settings()
