from __future__ import annotations

from playwright.async_api import Page, expect

from e2e_ui import timeouts
from e2e_ui.timeouts import INVALID_LOGIN_MESSAGE


class LoginPage:
    def __init__(self, page: Page) -> None:
        self.page = page
        self.login_tab = page.get_by_role("tab", name="Log in")
        self.email_input = page.get_by_role("textbox", name="Email")
        self.password_input = page.get_by_role("textbox", name="Password")
        self.login_button = page.get_by_role("button", name="Log in")
        self.error_message = page.get_by_text(INVALID_LOGIN_MESSAGE)

    async def goto(self) -> None:
        await self.page.goto("/login")

    async def login(self, email: str, password: str) -> None:
        await self.page.goto("/login", wait_until="domcontentloaded")
        await expect(self.login_tab).to_be_visible(timeout=timeouts.MEDIUM)
        await self.login_tab.click()
        await expect(self.email_input).to_be_visible(timeout=timeouts.MEDIUM)
        await expect(self.password_input).to_be_visible()
        await self.email_input.fill(email)
        await self.password_input.fill(password)
        await self.login_button.click()

    async def expect_error_visible(self) -> None:
        await expect(self.error_message).to_be_visible()
