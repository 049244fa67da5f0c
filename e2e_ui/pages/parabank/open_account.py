from __future__ import annotations

from playwright.async_api import Page, expect

from e2e_ui import timeouts
from e2e_ui.pages.parabank.base import ParaBankBasePage

ACCOUNT_OPENED_TEXT = "Congratulations, your account is now open."


class OpenAccountPage(ParaBankBasePage):
    """Open New Account flow (openaccount.htm)."""

    path = "openaccount.htm"

    def __init__(self, page: Page) -> None:
        super().__init__(page)
        self.heading = page.get_by_role("heading", name="Open New Account")
        self.account_type_dropdown = page.locator("#type")
        self.from_account_dropdown = page.locator("#fromAccountId")
        self.open_account_button = page.locator('input[value="Open New Account"]')
        self.congratulations_message = page.locator(f'p:has-text("{ACCOUNT_OPENED_TEXT}")')
        self.new_account_id_link = page.locator("#newAccountId")

    async def open_account(self, account_type: str = "SAVINGS") -> None:
        await self.account_type_dropdown.select_option(account_type)
        # The funding-account list is filled by an XHR after page load.
        await expect(self.from_account_dropdown.locator("option").first).to_be_attached(timeout=timeouts.SHORT)
        await self.open_account_button.click()
        await self.page.wait_for_load_state("networkidle", timeout=timeouts.LONG)

    async def new_account_id(self) -> str:
        await expect(self.new_account_id_link).to_be_visible(timeout=timeouts.MEDIUM)
        return (await self.new_account_id_link.text_content() or "").strip()
