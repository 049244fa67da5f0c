from __future__ import annotations

from playwright.async_api import Page

from e2e_ui.pages.parabank.base import ParaBankBasePage


class ServicesPage(ParaBankBasePage):
    """Web-service catalogue (services.htm)."""

    path = "services.htm"

    def __init__(self, page: Page) -> None:
        super().__init__(page)
        self.bookstore_services_section = page.locator("text=Available Bookstore SOAP services:")
        self.parabank_services_section = page.locator("text=Available ParaBank SOAP services:")
        self.restful_services_section = page.locator("text=Available RESTful services:")

        self.bookstore_service_links = page.locator('a[href*="store-01?wsdl"]')
        self.bookstore_v2_service_links = page.locator('a[href*="store-01V2?wsdl"]')
        self.bookstore_wss_username_token_links = page.locator('a[href*="store-wss-01?wsdl"]')
        self.bookstore_wss_signature_links = page.locator('a[href*="store-wss-02?wsdl"]')
        self.bookstore_wss_encryption_links = page.locator('a[href*="store-wss-03?wsdl"]')
        self.bookstore_wss_signature_encryption_links = page.locator('a[href*="store-wss-04?wsdl"]')

        self.loan_processor_service_links = page.locator('a[href*="LoanProcessor?wsdl"]')
        self.parabank_service_links = page.locator('a[href*="ParaBank?wsdl"]')

        self.restful_service_links = page.locator('a[href*="bank?_wadl&_type=xml"]')
        self.open_api_link = page.locator('a[href*="api-docs/index.html"]')

    async def is_bookstore_services_visible(self) -> bool:
        return await self.bookstore_services_section.is_visible()

    async def is_parabank_services_visible(self) -> bool:
        return await self.parabank_services_section.is_visible()

    async def is_restful_services_visible(self) -> bool:
        return await self.restful_services_section.is_visible()

    async def click_bookstore_service_wsdl(self) -> None:
        await self.bookstore_service_links.first.click()

    async def click_bookstore_v2_service_wsdl(self) -> None:
        await self.bookstore_v2_service_links.first.click()

    async def click_loan_processor_service_wsdl(self) -> None:
        await self.loan_processor_service_links.first.click()

    async def click_parabank_service_wsdl(self) -> None:
        await self.parabank_service_links.first.click()

    async def click_restful_service_wadl(self) -> None:
        await self.restful_service_links.first.click()

    async def click_open_api_link(self) -> None:
        await self.open_api_link.first.click()
