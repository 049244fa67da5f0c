from __future__ import annotations

from typing import Optional

from playwright.async_api import Page, expect

from e2e_ui import timeouts
from e2e_ui.pages.parabank.base import ParaBankBasePage


class TransferPage(ParaBankBasePage):
    """Transfer Funds form (transfer.htm)."""

    path = "transfer.htm"

    def __init__(self, page: Page) -> None:
        super().__init__(page)
        self.heading = page.get_by_role("heading", name="Transfer Funds")
        self.amount_field = page.locator("#amount")
        self.from_account_dropdown = page.locator("#fromAccountId")
        self.to_account_dropdown = page.locator("#toAccountId")
        self.transfer_button = page.locator('input[value="Transfer"]')
        self.transfer_complete_heading = page.locator('h1:has-text("Transfer Complete")')

    async def transfer(self, amount: str, to_account_id: str, from_account_id: Optional[str] = None) -> None:
        await self.amount_field.fill(amount)
        # Both account lists load asynchronously; wait for the target to be selectable.
        await expect(self.to_account_dropdown.locator(f'option[value="{to_account_id}"]')).to_be_attached(
            timeout=timeouts.SHORT
        )
        if from_account_id:
            await self.from_account_dropdown.select_option(from_account_id)
        await self.to_account_dropdown.select_option(to_account_id)
        await self.transfer_button.click()
        await self.page.wait_for_load_state("networkidle", timeout=timeouts.MEDIUM)
