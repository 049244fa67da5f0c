from __future__ import annotations

from playwright.async_api import Locator, Page

from e2e_ui.identity import UserIdentity
from e2e_ui.pages.parabank.base import ParaBankBasePage


def form_row_input(page: Page, label: str) -> Locator:
    """Input in the form-table row whose label cell reads ``label``."""
    return page.locator("table tbody tr").filter(has_text=label).locator("input")


class RegisterPage(ParaBankBasePage):
    """Customer sign-up form (register.htm)."""

    path = "register.htm"

    def __init__(self, page: Page) -> None:
        super().__init__(page)
        self.first_name_field = form_row_input(page, "First Name:")
        self.last_name_field = form_row_input(page, "Last Name:")
        self.address_field = form_row_input(page, "Address:")
        self.city_field = form_row_input(page, "City:")
        self.state_field = form_row_input(page, "State:")
        self.zip_code_field = form_row_input(page, "Zip Code:")
        self.phone_field = form_row_input(page, "Phone #:")
        self.ssn_field = form_row_input(page, "SSN:")
        self.reg_username_field = form_row_input(page, "Username:")
        self.reg_password_field = form_row_input(page, "Password:")
        self.confirm_password_field = form_row_input(page, "Confirm:")
        self.register_button = page.get_by_role("button", name="Register")

    @property
    def form_fields(self) -> list[Locator]:
        """Field locators in the same order as ``UserIdentity.registration_fields()``."""
        return [
            self.first_name_field,
            self.last_name_field,
            self.address_field,
            self.city_field,
            self.state_field,
            self.zip_code_field,
            self.phone_field,
            self.ssn_field,
            self.reg_username_field,
            self.reg_password_field,
            self.confirm_password_field,
        ]

    async def fill_registration_form(self, identity: UserIdentity) -> None:
        for field, value in zip(self.form_fields, identity.registration_fields()):
            await field.fill(value)

    async def submit_registration(self) -> None:
        await self.register_button.click()

    async def register(self, identity: UserIdentity) -> None:
        await self.fill_registration_form(identity)
        await self.submit_registration()
