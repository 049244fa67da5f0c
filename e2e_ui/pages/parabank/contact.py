from __future__ import annotations

from dataclasses import dataclass

from playwright.async_api import Page

from e2e_ui.pages.parabank.base import ParaBankBasePage
from e2e_ui.pages.parabank.register import form_row_input


@dataclass
class ContactMessage:
    name: str
    email: str
    phone: str
    message: str


class ContactPage(ParaBankBasePage):
    """Customer Care form (contact.htm)."""

    path = "contact.htm"

    def __init__(self, page: Page) -> None:
        super().__init__(page)
        self.page_title = page.get_by_role("heading", name="Customer Care")
        self.contact_description = page.locator("p").filter(has_text="Email support is available")
        self.name_field = form_row_input(page, "Name:")
        self.email_field = form_row_input(page, "Email:")
        self.phone_field = form_row_input(page, "Phone:")
        self.message_field = page.locator("table tbody tr").filter(has_text="Message:").locator("textarea, input")
        self.send_to_customer_care_button = page.get_by_role("button", name="Send to Customer Care")

    async def fill_contact_form(self, contact: ContactMessage) -> None:
        await self.name_field.fill(contact.name)
        await self.email_field.fill(contact.email)
        await self.phone_field.fill(contact.phone)
        await self.message_field.fill(contact.message)

    async def submit_contact_form(self) -> None:
        await self.send_to_customer_care_button.click()

    async def send_contact_message(self, contact: ContactMessage) -> None:
        await self.fill_contact_form(contact)
        await self.submit_contact_form()

    async def get_page_title(self) -> str:
        return await self.page_title.text_content() or ""

    async def get_contact_description(self) -> str:
        return await self.contact_description.text_content() or ""
