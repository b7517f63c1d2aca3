"""Settings loaded from the environment (and a local `.env` file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; JobIngest/1.0)"
DEFAULT_NOTION_VERSION = "2022-06-28"
DEFAULT_TIMEOUT_S = 20.0


@dataclass
class Settings:
    notion_api_key: Optional[str] = None
    notion_database_id: Optional[str] = None
    notion_version: str = DEFAULT_NOTION_VERSION
    user_agent: str = DEFAULT_USER_AGENT
    timeout_s: float = DEFAULT_TIMEOUT_S

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv()
        raw_timeout = os.getenv("JOB_INGEST_TIMEOUT_S", str(DEFAULT_TIMEOUT_S))
        try:
            timeout_s = float(raw_timeout)
        except ValueError as exc:
            raise ConfigError(f"JOB_INGEST_TIMEOUT_S must be a number, got {raw_timeout!r}") from exc
        return cls(
            notion_api_key=os.getenv("NOTION_API_KEY") or None,
            notion_database_id=os.getenv("NOTION_DATABASE_ID") or None,
            notion_version=os.getenv("NOTION_VERSION", DEFAULT_NOTION_VERSION),
            user_agent=os.getenv("JOB_INGEST_USER_AGENT", DEFAULT_USER_AGENT),
            timeout_s=timeout_s,
        )

    def require(self) -> "Settings":
        """Raise ConfigError if the Notion credentials are missing."""
        missing = [
            env
            for env, value in (
                ("NOTION_API_KEY", self.notion_api_key),
                ("NOTION_DATABASE_ID", self.notion_database_id),
            )
            if not value
        ]
        if missing:
            raise ConfigError(f"Missing required environment variable(s): {', '.join(missing)}")
        return self
