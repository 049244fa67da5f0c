from __future__ import annotations

from playwright.async_api import Page

from e2e_ui.identity import UserIdentity
from e2e_ui.pages.parabank.base import ParaBankBasePage
from e2e_ui.pages.parabank.register import form_row_input


class LookupPage(ParaBankBasePage):
    """Forgotten-login lookup (lookup.htm)."""

    path = "lookup.htm"

    def __init__(self, page: Page) -> None:
        super().__init__(page)
        self.page_title = page.get_by_role("heading", name="Customer Lookup")
        self.lookup_description = page.locator("p").filter(has_text="Please fill out the following information")
        self.first_name_field = form_row_input(page, "First Name:")
        self.last_name_field = form_row_input(page, "Last Name:")
        self.address_field = form_row_input(page, "Address:")
        self.city_field = form_row_input(page, "City:")
        self.state_field = form_row_input(page, "State:")
        self.zip_code_field = form_row_input(page, "Zip Code:")
        self.ssn_field = form_row_input(page, "SSN:")
        self.find_my_login_info_button = page.get_by_role("button", name="Find My Login Info")

    async def fill_lookup_form(self, identity: UserIdentity) -> None:
        await self.first_name_field.fill(identity.first_name)
        await self.last_name_field.fill(identity.last_name)
        await self.address_field.fill(identity.address)
        await self.city_field.fill(identity.city)
        await self.state_field.fill(identity.state)
        await self.zip_code_field.fill(identity.zip_code)
        await self.ssn_field.fill(identity.ssn)

    async def find_login_info(self, identity: UserIdentity) -> None:
        await self.fill_lookup_form(identity)
        await self.find_my_login_info_button.click()
