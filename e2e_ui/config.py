"""Shared configuration for the browser end-to-end suite.

Configuration is read from environment variables once, at import time:

- PARABANK_BASE_URL (or legacy BASE_URL): banking demo under test
- STOREFRONT_BASE_URL: storefront sample app (storefront specs skip if unset)
- PLAYWRIGHT_HEADLESS / PLAYWRIGHT_BROWSER / PLAYWRIGHT_CHANNEL
- UI_SHARED_SESSION: reuse one browser context and page across tests
- UI_VIDEO / UI_SCREENSHOT / UI_TRACE / UI_ARTIFACT_DIR: artifact capture
- UI_STORAGE_STATE / UI_SAVE_STORAGE_STATE: stored authentication state
- PARABANK_MOCK: serve the banking pages from the local mock app
"""
from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from copy import deepcopy
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, Optional
from urllib.parse import urljoin

logger = logging.getLogger(__name__)

DEFAULT_PARABANK_URL = "https://parabank.parasoft.com/parabank/"

BROWSER_TYPES = {"chromium", "firefox", "webkit"}
VIDEO_MODES = {"on", "off", "retain-on-failure"}
SCREENSHOT_MODES = {"on", "off", "only-on-failure"}
TRACE_MODES = {"on", "off", "retain-on-failure"}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _env_choice(name: str, default: str, choices: set[str]) -> str:
    value = os.getenv(name, default).strip().lower()
    if value not in choices:
        raise ValueError(f"{name}={value!r} is not one of {sorted(choices)}")
    return value


@dataclass
class AppTarget:
    """A web application under test and the root URL it is served from."""

    name: str
    base_url: str

    def url(self, path: str = "") -> str:
        """Return an absolute URL for the provided path."""
        return urljoin(self.base_url.rstrip("/") + "/", path.lstrip("/"))


class UiTestConfig:
    """Run-level configuration loaded from the environment.

    Everything here is passthrough configuration: the fixtures read it,
    nothing in the page objects or workflows depends on it directly.
    """

    def __init__(self) -> None:
        parabank_url = os.getenv("PARABANK_BASE_URL") or os.getenv("BASE_URL") or DEFAULT_PARABANK_URL
        # Older runs pointed BASE_URL at index.htm; the suite wants the app root.
        if parabank_url.endswith(".htm"):
            parabank_url = parabank_url.rsplit("/", 1)[0] + "/"
        self.parabank = AppTarget(name="parabank", base_url=parabank_url)

        storefront_url = os.getenv("STOREFRONT_BASE_URL")
        self.storefront: Optional[AppTarget] = (
            AppTarget(name="storefront", base_url=storefront_url) if storefront_url else None
        )

        self.playwright_headless: bool = _env_flag("PLAYWRIGHT_HEADLESS", "true")
        self.browser_type: str = _env_choice("PLAYWRIGHT_BROWSER", "chromium", BROWSER_TYPES)
        self.browser_channel: Optional[str] = os.getenv("PLAYWRIGHT_CHANNEL") or None
        self.viewport: Dict[str, int] = {
            "width": int(os.getenv("UI_VIEWPORT_WIDTH", "1280")),
            "height": int(os.getenv("UI_VIEWPORT_HEIGHT", "720")),
        }

        self.shared_session: bool = _env_flag("UI_SHARED_SESSION", "true")

        self.video: str = _env_choice("UI_VIDEO", "off", VIDEO_MODES)
        self.screenshot: str = _env_choice("UI_SCREENSHOT", "only-on-failure", SCREENSHOT_MODES)
        self.trace: str = _env_choice("UI_TRACE", "retain-on-failure", TRACE_MODES)
        self.artifact_dir: Path = Path(os.getenv("UI_ARTIFACT_DIR", "test-results"))

        storage_state = os.getenv("UI_STORAGE_STATE")
        self.storage_state_path: Optional[Path] = Path(storage_state) if storage_state else None
        self.save_storage_state: bool = _env_flag("UI_SAVE_STORAGE_STATE", "false")

        self.use_mock_parabank: bool = _env_flag("PARABANK_MOCK", "false")
        self.mock_host: str = os.getenv("PARABANK_MOCK_HOST", "127.0.0.1")
        self.mock_port: int = int(os.getenv("PARABANK_MOCK_PORT", "5580"))

        self.log_level: str = os.getenv("UI_LOG_LEVEL", "INFO").upper()

        logger.debug(
            "Loaded UI config: parabank=%s storefront=%s browser=%s headless=%s shared=%s",
            self.parabank.base_url,
            self.storefront.base_url if self.storefront else None,
            self.browser_type,
            self.playwright_headless,
            self.shared_session,
        )

    # ---- url helpers ------------------------------------------------------------
    @property
    def base_url(self) -> str:
        return self.parabank.base_url

    def url(self, path: str = "") -> str:
        """Absolute URL on the banking app."""
        return self.parabank.url(path)

    def storefront_url(self, path: str = "") -> str:
        """Absolute URL on the storefront app; fails fast when it is not configured."""
        if self.storefront is None:
            raise RuntimeError("STOREFRONT_BASE_URL is not set")
        return self.storefront.url(path)

    # ---- artifact helpers -------------------------------------------------------
    @property
    def records_video(self) -> bool:
        return self.video != "off"

    def artifact_path(self, test_name: str) -> Path:
        """Per-test artifact directory, created on demand."""
        safe = "".join(ch if ch.isalnum() or ch in "-_." else "-" for ch in test_name)
        path = self.artifact_dir / safe
        path.mkdir(parents=True, exist_ok=True)
        return path

    # ---- overrides ----------------------------------------------------------------
    @contextmanager
    def use_parabank_url(self, base_url: str) -> Iterator[AppTarget]:
        """Temporarily point the banking target somewhere else (the mock app)."""
        previous = self.parabank
        self.parabank = deepcopy(previous)
        self.parabank.base_url = base_url
        try:
            yield self.parabank
        finally:
            self.parabank = previous


# Singleton instance - initialized on first import
settings = UiTestConfig()
