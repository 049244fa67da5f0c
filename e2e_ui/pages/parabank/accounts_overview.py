from __future__ import annotations

from playwright.async_api import Locator, Page, expect

from e2e_ui import timeouts
from e2e_ui.pages.parabank.base import ParaBankBasePage


def parse_amount(text: str) -> float:
    """'$1,200.50' -> 1200.5; empty text reads as zero."""
    cleaned = text.replace("$", "").replace(",", "").strip()
    return float(cleaned) if cleaned else 0.0


class AccountsOverviewPage(ParaBankBasePage):
    """Accounts Overview table (overview.htm)."""

    path = "overview.htm"

    def __init__(self, page: Page) -> None:
        super().__init__(page)
        self.heading = page.get_by_role("heading", name="Accounts Overview")
        self.accounts_table = page.locator("#accountTable")

    def account_link(self, account_id: str) -> Locator:
        return self.page.locator(f'a[href*="id={account_id}"]')

    async def balance_of(self, account_id: str) -> float:
        link = self.account_link(account_id)
        await expect(link).to_be_visible(timeout=timeouts.SHORT)
        row = link.locator("xpath=ancestor::tr")
        # Columns: account, balance, available amount
        balance_text = await row.locator("td").nth(1).text_content()
        return parse_amount(balance_text or "")
