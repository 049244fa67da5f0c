from __future__ import annotations

from playwright.async_api import Page, expect

from e2e_ui.identity import StorefrontRegistration


class SignUpPage:
    def __init__(self, page: Page) -> None:
        self.page = page
        self.sign_up_tab = page.get_by_role("tab", name="Sign Up")
        self.first_name_input = page.get_by_role("textbox", name="First Name")
        self.last_name_input = page.get_by_role("textbox", name="Last Name")
        self.email_input = page.get_by_role("textbox", name="Email")
        self.password_input = page.get_by_role("textbox", name="Password", exact=True)
        self.confirm_password_input = page.get_by_role("textbox", name="Confirm Password")
        self.register_button = page.get_by_role("button", name="Register")

    async def goto(self) -> None:
        await self.page.goto("/login")

    async def open_tab(self) -> None:
        await self.sign_up_tab.click()

    async def register(self, data: StorefrontRegistration) -> None:
        await self.open_tab()
        await expect(self.first_name_input).to_be_visible()
        await self.first_name_input.fill(data.first_name)
        await self.last_name_input.fill(data.last_name)
        await self.email_input.fill(data.email)
        await self.password_input.fill(data.password)
        await self.confirm_password_input.fill(data.password)
        await self.register_button.click()
