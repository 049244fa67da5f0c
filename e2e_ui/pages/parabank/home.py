from __future__ import annotations

from playwright.async_api import Locator, Page

from e2e_ui.pages.parabank.base import ParaBankBasePage


class HomePage(ParaBankBasePage):
    """ParaBank landing page (index.htm)."""

    path = "index.htm"

    def __init__(self, page: Page) -> None:
        super().__init__(page)

        # ATM Services
        self.withdraw_funds_link: Locator = page.get_by_role("link", name="Withdraw Funds")
        self.check_balances_link: Locator = page.get_by_role("link", name="Check Balances")
        self.make_deposits_link: Locator = page.get_by_role("link", name="Make Deposits")

        # Online Services
        self.account_history_link: Locator = page.get_by_role("link", name="Account History")

        # Latest News
        self.parabank_reopened_link: Locator = page.get_by_role("link", name="ParaBank Is Now Re-Opened")
        self.online_bill_pay_news_link: Locator = page.get_by_role("link", name="New! Online Bill Pay")
        self.online_account_transfers_news_link: Locator = page.get_by_role(
            "link", name="New! Online Account Transfers"
        )

    async def go_to_register(self) -> None:
        await self.register_link.click()

    async def go_to_forgot_login_info(self) -> None:
        await self.forgot_login_info_link.click()

    async def go_to_admin_page(self) -> None:
        await self.admin_page_link.click()
