"""Test-run configuration via environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class PomConfig:
    """Process-wide settings shared by every driver."""

    command_timeout_ms: int = 4000
    poll_interval_ms: int = 100
    headless: bool = True
    browser: str = "chromium"
    base_url: str | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> PomConfig:
        """Load config from environment variables."""
        return cls(
            command_timeout_ms=int(os.environ.get("POM_COMMAND_TIMEOUT", "4000")),
            poll_interval_ms=int(os.environ.get("POM_POLL_INTERVAL", "100")),
            headless=os.environ.get("POM_HEADLESS", "true").lower() == "true",
            browser=os.environ.get("POM_BROWSER", "chromium"),
            base_url=os.environ.get("POM_BASE_URL") or None,
            log_level=os.environ.get("POM_LOG_LEVEL", "INFO"),
        )
