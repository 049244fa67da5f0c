"""SharedSession registry semantics, with fake browser objects."""

from __future__ import annotations

import itertools

import pytest

from e2e_ui import identity as identity_module
from e2e_ui.shared_session import SharedSession


class FakePage:
    def __init__(self):
        self.closed = False

    def is_closed(self) -> bool:
        return self.closed


class FakeContext:
    def __init__(self):
        self.pages: list[FakePage] = []
        self.closed = False

    async def new_page(self) -> FakePage:
        page = FakePage()
        self.pages.append(page)
        return page

    async def close(self) -> None:
        self.closed = True


class FakeBrowser:
    def __init__(self, connected: bool = True):
        self.connected = connected
        self.close_calls = 0

    def is_connected(self) -> bool:
        return self.connected

    async def close(self) -> None:
        self.close_calls += 1
        self.connected = False


@pytest.fixture
def ticking_clock(monkeypatch):
    ticks = itertools.count(1700000000000)
    real_create = identity_module.create_identity
    monkeypatch.setattr(
        "e2e_ui.shared_session.create_identity",
        lambda prefix="testuser": real_create(prefix, clock=lambda: next(ticks)),
    )


class TestSharedUser:

    def test_peek_is_empty_until_created(self):
        session = SharedSession()

        assert session.peek_shared_user() is None
        user = session.get_or_create_shared_user()
        assert session.peek_shared_user() is user

    def test_get_or_create_is_idempotent(self, ticking_clock):
        session = SharedSession()

        assert session.get_or_create_shared_user() is session.get_or_create_shared_user()

    def test_reset_yields_different_identity(self, ticking_clock):
        session = SharedSession()
        first = session.get_or_create_shared_user()

        session.reset_shared_user()
        second = session.get_or_create_shared_user()

        assert second.username != first.username


class TestBrowserAndContext:

    async def test_first_browser_is_adopted(self):
        session = SharedSession()
        first, second = FakeBrowser(), FakeBrowser()

        assert await session.get_or_create_shared_browser(first) is first
        assert await session.get_or_create_shared_browser(second) is first
        assert session.browser is first

    async def test_context_factory_runs_once(self):
        session = SharedSession()
        calls = []

        async def factory():
            calls.append(1)
            return FakeContext()

        context = await session.get_or_create_shared_context(factory)
        again = await session.get_or_create_shared_context(factory)

        assert context is again is session.context
        assert len(calls) == 1

    async def test_page_requires_context(self):
        with pytest.raises(RuntimeError):
            await SharedSession().get_or_create_shared_page()

    async def test_page_is_reused(self):
        session = SharedSession()
        context = FakeContext()

        async def factory():
            return context

        await session.get_or_create_shared_context(factory)
        page = await session.get_or_create_shared_page()

        assert await session.get_or_create_shared_page() is page
        assert context.pages == [page]

    async def test_closed_page_is_replaced(self):
        session = SharedSession()
        context = FakeContext()

        async def factory():
            return context

        await session.get_or_create_shared_context(factory)
        stale = await session.get_or_create_shared_page()
        stale.closed = True

        fresh = await session.get_or_create_shared_page()
        assert fresh is not stale
        assert not fresh.is_closed()


class TestCloseSharedState:

    async def test_closes_everything_and_clears(self):
        session = SharedSession()
        browser, context = FakeBrowser(), FakeContext()

        async def factory():
            return context

        await session.get_or_create_shared_browser(browser)
        await session.get_or_create_shared_context(factory)
        session.get_or_create_shared_user()

        await session.close_shared_state()

        assert context.closed
        assert browser.close_calls == 1
        assert session.browser is None
        assert session.context is None
        assert session.peek_shared_user() is None

    async def test_disconnected_browser_is_not_closed_again(self):
        session = SharedSession()
        browser = FakeBrowser(connected=False)
        await session.get_or_create_shared_browser(browser)

        await session.close_shared_state()

        assert browser.close_calls == 0

    async def test_close_without_state_is_noop(self):
        await SharedSession().close_shared_state()
