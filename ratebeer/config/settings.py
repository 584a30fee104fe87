"""Scraper settings.

Values come from the environment (``RATEBEER_*`` variables) or from a JSON
config file, see ``loader.load_settings``.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict

from ..urls import BASE_URL

DEFAULT_USER_AGENT = "ratebeer-scraper (+https://github.com/ratebeer-scraper)"


@dataclass
class ScraperSettings:
    base_url: str = BASE_URL
    timeout: float = 30.0
    max_concurrent: int = 5
    user_agent: str = DEFAULT_USER_AGENT
    alias_redirect_limit: int = 5
    html_parser: str = "html.parser"
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.max_concurrent < 1:
            raise ValueError(
                f"max_concurrent must be at least 1, got {self.max_concurrent}"
            )
        if self.alias_redirect_limit < 1:
            raise ValueError(
                "alias_redirect_limit must be at least 1, "
                f"got {self.alias_redirect_limit}"
            )
        self.base_url = self.base_url.rstrip("/")

    @classmethod
    def from_env(cls, **overrides: Any) -> "ScraperSettings":
        """Build settings from RATEBEER_* environment variables."""
        values: Dict[str, Any] = {
            "base_url": os.getenv("RATEBEER_BASE_URL", BASE_URL),
            "timeout": float(os.getenv("RATEBEER_TIMEOUT", "30")),
            "max_concurrent": int(os.getenv("RATEBEER_MAX_CONCURRENT", "5")),
            "user_agent": os.getenv("RATEBEER_USER_AGENT", DEFAULT_USER_AGENT),
            "alias_redirect_limit": int(
                os.getenv("RATEBEER_ALIAS_REDIRECT_LIMIT", "5")
            ),
            "html_parser": os.getenv("RATEBEER_HTML_PARSER", "html.parser"),
        }
        values.update(overrides)
        return cls(**values)
