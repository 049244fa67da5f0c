"""
Shared browser session for cross-scenario state reuse.

One ``SharedSession`` is built per test run by the session-scoped fixture in
``e2e_ui/conftest.py`` and injected into every test that wants continuity.
It owns at most one browser, one context and one synthetic user identity.
Cookies, DOM and login state therefore survive from one scenario to the next.

Nothing here is locked: the suite runs on a single worker, and that
sequential execution is what keeps the shared state consistent.
"""
from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

from playwright.async_api import Browser, BrowserContext, Page

from e2e_ui.identity import UserIdentity, create_identity

logger = logging.getLogger(__name__)

ContextFactory = Callable[[], Awaitable[BrowserContext]]


class SharedSession:
    """
    Holder of the run-wide browser, context and user identity.

    Usage:
        session = SharedSession()
        await session.get_or_create_shared_browser(client.browser)
        context = await session.get_or_create_shared_context(make_context)
        page = await session.get_or_create_shared_page()
        user = session.get_or_create_shared_user()
        ...
        await session.close_shared_state()
    """

    def __init__(self, identity_prefix: str = "testuser") -> None:
        self.identity_prefix = identity_prefix
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._user: Optional[UserIdentity] = None

    def __repr__(self) -> str:
        user = self._user.username if self._user else None
        return (
            f"SharedSession(browser={self._browser is not None}, "
            f"context={self._context is not None}, user={user})"
        )

    # ---- identity -----------------------------------------------------------------
    def get_or_create_shared_user(self) -> UserIdentity:
        """Return the run's identity, creating it on first use."""
        if self._user is None:
            self._user = create_identity(self.identity_prefix)
            logger.info("Created shared user %s", self._user.username)
        return self._user

    def peek_shared_user(self) -> Optional[UserIdentity]:
        """Return the run's identity without creating one."""
        return self._user

    def reset_shared_user(self) -> None:
        """Forget the identity so the next request creates a fresh one."""
        if self._user is not None:
            logger.debug("Reset shared user %s", self._user.username)
        self._user = None

    # ---- browser / context / page -------------------------------------------------
    async def get_or_create_shared_browser(self, supplied: Browser) -> Browser:
        """Adopt ``supplied`` as the shared browser unless one is already held."""
        if self._browser is None:
            self._browser = supplied
            logger.debug("Adopted shared browser")
        return self._browser

    async def get_or_create_shared_context(self, factory: ContextFactory) -> BrowserContext:
        """Return the shared context; ``factory`` is awaited only when none exists yet."""
        if self._context is None:
            self._context = await factory()
            logger.debug("Created shared browser context")
        return self._context

    async def get_or_create_shared_page(self) -> Page:
        """Reuse the first open page of the shared context, or open a new one."""
        if self._context is None:
            raise RuntimeError("No shared context; call get_or_create_shared_context() first")
        open_pages = [page for page in self._context.pages if not page.is_closed()]
        if open_pages:
            return open_pages[0]
        logger.debug("Opening new page on shared context")
        return await self._context.new_page()

    @property
    def browser(self) -> Optional[Browser]:
        return self._browser

    @property
    def context(self) -> Optional[BrowserContext]:
        return self._context

    # ---- teardown -------------------------------------------------------------------
    async def close_shared_state(self) -> None:
        """Close the context and browser and drop every singleton.

        Runs once at the end of the suite, never between tests.
        """
        context, browser = self._context, self._browser
        self._context = None
        self._browser = None
        self._user = None
        if context is not None:
            await context.close()
        if browser is not None and browser.is_connected():
            await browser.close()
        logger.debug("Closed shared session state")
