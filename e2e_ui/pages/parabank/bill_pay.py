from __future__ import annotations

from typing import Optional

from playwright.async_api import Page

from e2e_ui import timeouts
from e2e_ui.identity import PayeeData
from e2e_ui.pages.parabank.base import ParaBankBasePage


class BillPayPage(ParaBankBasePage):
    """Bill Payment Service form (billpay.htm)."""

    path = "billpay.htm"

    def __init__(self, page: Page) -> None:
        super().__init__(page)
        self.page_title = page.get_by_role("heading", name="Bill Payment Service")
        self.payee_name_field = page.locator('input[name="payee.name"]')
        self.payee_address_field = page.locator('input[name="payee.address.street"]')
        self.payee_city_field = page.locator('input[name="payee.address.city"]')
        self.payee_state_field = page.locator('input[name="payee.address.state"]')
        self.payee_zip_code_field = page.locator('input[name="payee.address.zipCode"]')
        self.payee_phone_field = page.locator('input[name="payee.phoneNumber"]')
        self.payee_account_number_field = page.locator('input[name="payee.accountNumber"]')
        self.verify_account_field = page.locator('input[name="verifyAccount"]')
        self.amount_field = page.locator('input[name="amount"]')
        self.from_account_dropdown = page.locator("#fromAccountId")
        self.send_payment_button = page.locator('input[value="Send Payment"]')

        self.payment_complete_heading = page.locator('h1:has-text("Bill Payment Complete")')
        self.payment_amount = page.locator("span#amount")

    async def fill_payee_information(self, payee: PayeeData) -> None:
        await self.payee_name_field.fill(payee.name)
        await self.payee_address_field.fill(payee.address)
        await self.payee_city_field.fill(payee.city)
        await self.payee_state_field.fill(payee.state)
        await self.payee_zip_code_field.fill(payee.zip_code)
        await self.payee_phone_field.fill(payee.phone)
        await self.payee_account_number_field.fill(payee.account_number)
        await self.verify_account_field.fill(payee.account_number)

    async def submit_payment(self, payee: PayeeData, amount: str, from_account_id: Optional[str] = None) -> None:
        await self.fill_payee_information(payee)
        await self.amount_field.fill(amount)
        await self.from_account_dropdown.locator("option").first.wait_for(state="attached", timeout=timeouts.SHORT)
        if from_account_id:
            await self.from_account_dropdown.select_option(from_account_id)
        await self.send_payment_button.click()
        await self.page.wait_for_load_state("networkidle", timeout=timeouts.MEDIUM)
