"""
Direct Playwright Client
========================

Launches one browser in-process and hands out contexts configured from
``e2e_ui.config.settings`` (viewport, base URL, stored auth state, video).

Usage:
    async with PlaywrightClient() as client:
        context = await client.new_context(base_url=settings.url())
        page = await context.new_page()
        await page.goto("index.htm")
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from playwright.async_api import Browser, BrowserContext, Playwright, async_playwright

from e2e_ui.auth_state import storage_state_for
from e2e_ui.config import settings
from e2e_ui.timeouts import VERY_LONG

logger = logging.getLogger(__name__)


class PlaywrightClient:
    """
    Owns the Playwright driver and a single launched browser.

    Contexts created through :meth:`new_context` belong to the caller; the
    client only closes the browser and stops the driver.
    """

    def __init__(
        self,
        browser_type: Optional[str] = None,
        headless: Optional[bool] = None,
        channel: Optional[str] = None,
        timeout: int = VERY_LONG,
    ):
        """
        Args:
            browser_type: chromium, firefox or webkit (None = from settings)
            headless: Run in headless mode (None = from settings)
            channel: Browser channel such as "chrome" (None = from settings)
            timeout: Default action timeout in milliseconds for new contexts
        """
        self.browser_type = browser_type or settings.browser_type
        self.headless = settings.playwright_headless if headless is None else headless
        self.channel = channel if channel is not None else settings.browser_channel
        self.timeout = timeout

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    async def __aenter__(self) -> "PlaywrightClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def connect(self) -> None:
        """Start the driver and launch the browser."""
        self._playwright = await async_playwright().start()
        launcher = getattr(self._playwright, self.browser_type)
        launch_options: Dict[str, Any] = {"headless": self.headless}
        if self.channel:
            launch_options["channel"] = self.channel
        try:
            self._browser = await launcher.launch(**launch_options)
        except Exception:
            await self._playwright.stop()
            self._playwright = None
            raise
        logger.info(
            "Launched %s (channel=%s, headless=%s)", self.browser_type, self.channel, self.headless
        )

    async def new_context(
        self,
        base_url: Optional[str] = None,
        video_dir: Optional[Path] = None,
        storage_state: Optional[Path] = None,
        **kwargs: Any,
    ) -> BrowserContext:
        """
        Create a browser context with the suite's defaults.

        Args:
            base_url: Resolves relative ``page.goto`` paths
            video_dir: Record video of every page in this context into this directory
            storage_state: Stored auth state file; ignored with a warning if missing
            **kwargs: Extra Playwright context options (override the defaults)
        """
        if not self._browser:
            raise RuntimeError("Client not connected. Use 'async with' or call connect()")

        options: Dict[str, Any] = {
            "viewport": dict(settings.viewport),
            "ignore_https_errors": True,
        }
        if base_url:
            options["base_url"] = base_url
        if video_dir is not None:
            options["record_video_dir"] = str(video_dir)
            options["record_video_size"] = dict(settings.viewport)
        state_path = storage_state_for(storage_state)
        if state_path:
            options["storage_state"] = state_path
        options.update(kwargs)

        context = await self._browser.new_context(**options)
        context.set_default_timeout(self.timeout)
        return context

    async def close(self) -> None:
        """Close the browser and stop the driver; safe to call more than once."""
        if self._browser:
            if self._browser.is_connected():
                await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

    @property
    def browser(self) -> Browser:
        if not self._browser:
            raise RuntimeError("Client not connected")
        return self._browser
