"""Locators every ParaBank screen shares: header, navigation, login panel, footer."""
from __future__ import annotations

import re

from playwright.async_api import Locator, Page


class ParaBankBasePage:
    """Common chrome of a ParaBank page plus the Account Services menu.

    Subclasses set ``path`` and add the locators of their own form.
    """

    path = "index.htm"

    def __init__(self, page: Page) -> None:
        self.page = page

        # Header
        self.parabank_logo: Locator = page.get_by_role("img", name="ParaBank")
        self.admin_page_link: Locator = page.locator("#headerPanel a[href*='admin.htm']")

        # Navigation
        self.about_us_link: Locator = page.get_by_role("link", name="About Us").first
        self.services_link: Locator = page.get_by_role("link", name="Services").first
        self.products_link: Locator = page.get_by_role("link", name="Products").first
        self.locations_link: Locator = page.get_by_role("link", name="Locations").first
        self.admin_page_nav_link: Locator = page.get_by_role("link", name="Admin Page")

        # Secondary navigation
        self.home_link: Locator = page.get_by_role("link", name="home", exact=True)
        self.about_link: Locator = page.get_by_role("link", name="about", exact=True)
        self.contact_link: Locator = page.get_by_role("link", name="contact", exact=True)

        # Login panel (only rendered while logged out)
        self.username_field: Locator = page.locator('input[name="username"]')
        self.password_field: Locator = page.locator('input[name="password"]')
        self.login_button: Locator = page.get_by_role("button", name="Log In")
        self.forgot_login_info_link: Locator = page.get_by_role("link", name="Forgot login info?")
        self.register_link: Locator = page.get_by_role("link", name="Register")
        self.error_banner: Locator = page.locator("text=Error!")

        # Account Services (only rendered while logged in)
        services = page.locator("#leftPanel")
        self.account_services_heading: Locator = page.locator("text=Account Services").first
        self.open_new_account_link: Locator = services.get_by_role("link", name=re.compile("open new account", re.I))
        self.accounts_overview_link: Locator = services.get_by_role("link", name=re.compile("accounts overview", re.I))
        self.transfer_funds_link: Locator = services.get_by_role("link", name=re.compile("transfer funds", re.I))
        self.bill_pay_link: Locator = services.get_by_role("link", name=re.compile("bill pay", re.I))
        self.log_out_link: Locator = services.get_by_role("link", name=re.compile("log out", re.I))

        # Footer
        self.footer_forum_link: Locator = page.get_by_role("link", name="Forum")
        self.footer_site_map_link: Locator = page.get_by_role("link", name="Site Map")
        self.footer_contact_us_link: Locator = page.get_by_role("link", name="Contact Us")
        self.parasoft_website_link: Locator = page.get_by_role("link", name="www.parasoft.com")

    async def goto(self) -> None:
        await self.page.goto(self.path)

    async def login(self, username: str, password: str) -> None:
        await self.username_field.fill(username)
        await self.password_field.fill(password)
        await self.login_button.click()

    async def go_to_about_us(self) -> None:
        await self.about_us_link.click()

    async def go_to_services(self) -> None:
        await self.services_link.click()

    async def go_to_contact(self) -> None:
        await self.contact_link.click()

    async def go_to_home(self) -> None:
        await self.home_link.click()

    async def click_logo(self) -> None:
        await self.parabank_logo.click()
