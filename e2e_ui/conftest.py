"""
Fixtures for the browser end-to-end suite.

Scenarios ask for page objects and user preconditions; the fixtures decide
where the browser, context and page come from:

- shared mode (UI_SHARED_SESSION=1, default): one context and one page live
  for the whole run, so cookies and login state carry over between tests
- isolated mode: every test gets a fresh context that is closed afterwards

The run-wide state sits in one ``SharedSession`` owned by the
``shared_session`` fixture; nothing is kept in module globals.
"""
from __future__ import annotations

import logging
from typing import AsyncIterator, Awaitable, Callable, List

import httpx
import pytest
import pytest_asyncio
from playwright.async_api import BrowserContext
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from e2e_ui.artifacts import ArtifactRecorder, discard_video
from e2e_ui.auth_state import save_auth_state
from e2e_ui.config import settings
from e2e_ui.identity import UserIdentity
from e2e_ui.mock_parabank import MockServer, reset_mock_state
from e2e_ui.pages.parabank import ParaBankPages
from e2e_ui.pages.storefront import StorefrontPages
from e2e_ui.playwright_client import PlaywrightClient
from e2e_ui.shared_session import SharedSession
from e2e_ui.waiters import is_authenticated
from e2e_ui.workflows import ensure_logged_in_user, logout, setup_registered_user

logger = logging.getLogger(__name__)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store test results for use in fixtures."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


def _failed(request) -> bool:
    rep = getattr(request.node, "rep_call", None)
    return rep is not None and rep.failed


@pytest.fixture(scope="session", autouse=True)
def suite_log_level():
    logging.getLogger("e2e_ui").setLevel(settings.log_level)


# ============================================================================
# Targets
# ============================================================================

@pytest.fixture(scope="session")
def mock_parabank_server():
    """Serve the banking pages locally when PARABANK_MOCK is on; None otherwise."""
    if not settings.use_mock_parabank:
        yield None
        return

    reset_mock_state()
    server = MockServer(host=settings.mock_host, port=settings.mock_port)
    server.start()
    with settings.use_parabank_url(server.url):
        yield server
    server.stop()
    reset_mock_state()


@pytest.fixture(scope="session")
def parabank_available(mock_parabank_server) -> str:
    """Base URL of a reachable banking app; skips the ParaBank scenarios otherwise."""
    try:
        response = httpx.get(settings.url("index.htm"), timeout=15.0, follow_redirects=True)
    except httpx.HTTPError as exc:
        pytest.skip(f"ParaBank not reachable at {settings.base_url} ({exc}); set PARABANK_MOCK=1 to run offline")
    if response.status_code >= 500:
        pytest.skip(f"ParaBank at {settings.base_url} answered {response.status_code}")
    return settings.base_url


# ============================================================================
# Browser lifecycle
# ============================================================================

@pytest_asyncio.fixture(scope="session")
async def playwright_client() -> AsyncIterator[PlaywrightClient]:
    """One launched browser for the whole run."""
    client = PlaywrightClient()
    try:
        await client.connect()
    except PlaywrightError as exc:
        pytest.skip(
            f"Could not launch {settings.browser_type} ({exc}); "
            f"install it with: playwright install {settings.browser_type}"
        )
    yield client
    await client.close()


@pytest_asyncio.fixture(scope="session")
async def shared_session(playwright_client) -> AsyncIterator[SharedSession]:
    session = SharedSession()
    await session.get_or_create_shared_browser(playwright_client.browser)
    yield session
    await session.close_shared_state()


async def _close_with_videos(context: BrowserContext, failed: bool) -> None:
    pages: List[Page] = list(context.pages)
    await context.close()
    for page in pages:
        await discard_video(page, failed)


@pytest_asyncio.fixture
async def context(request, playwright_client, shared_session, parabank_available) -> AsyncIterator[BrowserContext]:
    """The shared context in shared mode, else a fresh one closed after the test."""
    if settings.shared_session:
        async def make_shared_context() -> BrowserContext:
            video_dir = settings.artifact_path("shared-session") if settings.records_video else None
            return await playwright_client.new_context(
                base_url=parabank_available,
                video_dir=video_dir,
                storage_state=settings.storage_state_path,
            )

        yield await shared_session.get_or_create_shared_context(make_shared_context)
        return

    video_dir = settings.artifact_path(request.node.name) if settings.records_video else None
    isolated = await playwright_client.new_context(
        base_url=parabank_available,
        video_dir=video_dir,
        storage_state=settings.storage_state_path,
    )
    yield isolated
    await _close_with_videos(isolated, _failed(request))


@pytest_asyncio.fixture
async def page(request, context, shared_session) -> AsyncIterator[Page]:
    if settings.shared_session:
        current = await shared_session.get_or_create_shared_page()
    else:
        current = await context.new_page()

    recorder = ArtifactRecorder(context, current, request.node.name)
    await recorder.start()
    yield current
    await recorder.finish(failed=_failed(request))


# ============================================================================
# ParaBank page objects
# ============================================================================

@pytest.fixture
def parabank(page) -> ParaBankPages:
    return ParaBankPages.for_page(page)


@pytest.fixture
def home_page(parabank):
    return parabank.home


@pytest.fixture
def register_page(parabank):
    return parabank.register


@pytest.fixture
def open_account_page(parabank):
    return parabank.open_account


@pytest.fixture
def transfer_page(parabank):
    return parabank.transfer


@pytest.fixture
def accounts_overview_page(parabank):
    return parabank.accounts_overview


@pytest.fixture
def bill_pay_page(parabank):
    return parabank.bill_pay


@pytest.fixture
def services_page(parabank):
    return parabank.services


@pytest.fixture
def contact_page(parabank):
    return parabank.contact


@pytest.fixture
def lookup_page(parabank):
    return parabank.lookup


# ============================================================================
# User preconditions
# ============================================================================

@pytest_asyncio.fixture
async def registered_user(parabank) -> AsyncIterator[UserIdentity]:
    """A brand-new account, never the shared identity.

    Registration logs the new account in; it is logged out afterwards so a
    shared context does not carry the wrong user into the next test.
    """
    identity = await setup_registered_user(parabank)
    yield identity
    if settings.shared_session and await is_authenticated(parabank.page):
        await logout(parabank)


@pytest_asyncio.fixture
async def logged_in_user(shared_session, parabank, context) -> UserIdentity:
    """The shared identity, authenticated on the current page."""
    identity = await ensure_logged_in_user(shared_session, parabank)
    if settings.save_storage_state and settings.storage_state_path:
        await save_auth_state(context, settings.storage_state_path)
    return identity


# ============================================================================
# Storefront
# ============================================================================

@pytest.fixture
def storefront_base_url() -> str:
    if settings.storefront is None:
        pytest.skip("STOREFRONT_BASE_URL is not set; storefront specs need the sample shop URL")
    return settings.storefront.base_url


@pytest_asyncio.fixture
async def new_storefront_context(
    request, playwright_client, storefront_base_url
) -> AsyncIterator[Callable[[], Awaitable[BrowserContext]]]:
    """Factory for extra isolated storefront contexts; all are closed after the test."""
    created: List[BrowserContext] = []

    async def factory() -> BrowserContext:
        video_dir = settings.artifact_path(request.node.name) if settings.records_video else None
        ctx = await playwright_client.new_context(base_url=storefront_base_url, video_dir=video_dir)
        created.append(ctx)
        return ctx

    yield factory
    for ctx in created:
        await _close_with_videos(ctx, _failed(request))


@pytest_asyncio.fixture
async def storefront_page(request, new_storefront_context) -> AsyncIterator[Page]:
    """A page in its own context on the storefront; never the shared banking context."""
    ctx = await new_storefront_context()
    current = await ctx.new_page()
    recorder = ArtifactRecorder(ctx, current, request.node.name)
    await recorder.start()
    yield current
    await recorder.finish(failed=_failed(request))


@pytest.fixture
def storefront(storefront_page) -> StorefrontPages:
    return StorefrontPages.for_page(storefront_page)
