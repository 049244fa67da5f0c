"""Per-test screenshots, traces and videos, kept according to the configured modes."""
from __future__ import annotations

import logging
import weakref
from pathlib import Path
from typing import Optional

from playwright.async_api import BrowserContext
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from e2e_ui.config import settings

logger = logging.getLogger(__name__)

# Contexts on which tracing.start() already ran; chunks are recorded per test.
_traced_contexts: "weakref.WeakSet[BrowserContext]" = weakref.WeakSet()


def should_keep(mode: str, failed: bool) -> bool:
    """Whether an artifact recorded under ``mode`` survives this outcome."""
    if mode == "on":
        return True
    if mode in {"only-on-failure", "retain-on-failure"}:
        return failed
    return False


class ArtifactRecorder:
    """Records one test's artifacts into ``<artifact_dir>/<test name>/``.

    Usage:
        recorder = ArtifactRecorder(context, page, request.node.name)
        await recorder.start()
        yield page
        await recorder.finish(failed=request.node.rep_call.failed)
    """

    def __init__(self, context: BrowserContext, page: Page, test_name: str):
        self.context = context
        self.page = page
        self.test_name = test_name
        self._tracing = False

    @property
    def directory(self) -> Path:
        return settings.artifact_path(self.test_name)

    async def start(self) -> None:
        if settings.trace == "off":
            return
        if self.context not in _traced_contexts:
            await self.context.tracing.start(screenshots=True, snapshots=True, sources=True)
            _traced_contexts.add(self.context)
        await self.context.tracing.start_chunk(title=self.test_name)
        self._tracing = True

    async def finish(self, failed: bool) -> None:
        if should_keep(settings.screenshot, failed) and not self.page.is_closed():
            path = self.directory / "screenshot.png"
            try:
                await self.page.screenshot(path=str(path), full_page=True)
                print(f"📸 {path}")
            except PlaywrightError as exc:
                logger.warning("Screenshot for %s failed: %s", self.test_name, exc)

        if self._tracing:
            self._tracing = False
            if should_keep(settings.trace, failed):
                path = self.directory / "trace.zip"
                await self.context.tracing.stop_chunk(path=str(path))
                logger.info("Trace saved: %s", path)
            else:
                await self.context.tracing.stop_chunk()


async def discard_video(page: Page, failed: bool) -> Optional[Path]:
    """Delete the page's video unless the video mode keeps it; call after the context closed."""
    if page.video is None:
        return None
    path = Path(await page.video.path())
    if should_keep(settings.video, failed):
        logger.info("Video saved: %s", path)
        return path
    path.unlink(missing_ok=True)
    return None
