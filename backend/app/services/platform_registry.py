"""
Registry of target video platforms and their prompt templates.

Responsibilities:
- Define the immutable PlatformTemplate record
- Hold the default Veo / Sora templates in display order
- Exact-match lookup by platform id
- Optionally merge templates from a JSON file at startup
"""

import json
import os
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from app.core.errors import UnknownPlatform
from app.core.logger import get_logger
from app.services.prompt_templates import SORA_SYSTEM_PROMPT, VEO_SYSTEM_PROMPT

logger = get_logger(__name__)


@dataclass(frozen=True)
class PlatformTemplate:
    """Prompt conventions for one generative-video platform."""
    id: str
    display_name: str
    system_prompt: str

    def summary(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.display_name}


DEFAULT_TEMPLATES = (
    PlatformTemplate(id="veo-3.1", display_name="Veo 3.1", system_prompt=VEO_SYSTEM_PROMPT),
    PlatformTemplate(id="sora-2", display_name="Sora 2", system_prompt=SORA_SYSTEM_PROMPT),
)


class PlatformRegistry:
    """
    Read-only lookup over platform templates.

    Built once when the app starts and handed to request handlers;
    ids are matched exactly (case-sensitive, no trimming).

    Example:
        registry = PlatformRegistry()
        template = registry.get("sora-2")
        registry.list_platforms()  # [{"id": "veo-3.1", "name": "Veo 3.1"}, ...]
    """

    def __init__(self, templates: Optional[Iterable[PlatformTemplate]] = None):
        if templates is None:
            templates = DEFAULT_TEMPLATES

        # dicts keep insertion order, which is the listing order
        self._templates: Dict[str, PlatformTemplate] = {}
        for template in templates:
            self._templates[template.id] = template

    @classmethod
    def from_file(cls, filepath: Optional[str]) -> "PlatformRegistry":
        """
        Build a registry from the defaults plus templates in a JSON file.

        The file maps platform id to {"name": ..., "system_prompt": ...}.
        Entries with an existing id replace the default in place; new ids
        are appended. A missing or unreadable file leaves the defaults.
        """
        templates = {t.id: t for t in DEFAULT_TEMPLATES}

        if not filepath:
            return cls(templates.values())

        if not os.path.exists(filepath):
            logger.warning(f"Platform templates file not found: {filepath}")
            return cls(templates.values())

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                raw = json.load(f)

            for platform_id, entry in raw.items():
                templates[platform_id] = PlatformTemplate(
                    id=platform_id,
                    display_name=entry["name"],
                    system_prompt=entry["system_prompt"],
                )
            logger.info(f"Loaded {len(raw)} platform templates from {filepath}")
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Could not load platform templates from {filepath}: {e}")
            templates = {t.id: t for t in DEFAULT_TEMPLATES}

        return cls(templates.values())

    def get(self, platform_id: Optional[str]) -> PlatformTemplate:
        """Return the template for platform_id or raise UnknownPlatform."""
        template = self._templates.get(platform_id)
        if template is None:
            raise UnknownPlatform()
        return template

    def list_platforms(self) -> List[Dict[str, str]]:
        """Get [{id, name}, ...] in registration order."""
        return [template.summary() for template in self._templates.values()]

    def __len__(self) -> int:
        return len(self._templates)
