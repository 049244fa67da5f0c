"""ParaBank page objects and the per-test bundle handed to scenarios."""
from __future__ import annotations

from dataclasses import dataclass

from playwright.async_api import Page

from e2e_ui.pages.parabank.accounts_overview import AccountsOverviewPage
from e2e_ui.pages.parabank.base import ParaBankBasePage
from e2e_ui.pages.parabank.bill_pay import BillPayPage
from e2e_ui.pages.parabank.contact import ContactMessage, ContactPage
from e2e_ui.pages.parabank.home import HomePage
from e2e_ui.pages.parabank.lookup import LookupPage
from e2e_ui.pages.parabank.open_account import OpenAccountPage
from e2e_ui.pages.parabank.register import RegisterPage
from e2e_ui.pages.parabank.services import ServicesPage
from e2e_ui.pages.parabank.transfer import TransferPage


@dataclass
class ParaBankPages:
    """One instance of every ParaBank page object, all borrowing the same page handle."""

    page: Page
    home: HomePage
    register: RegisterPage
    open_account: OpenAccountPage
    transfer: TransferPage
    accounts_overview: AccountsOverviewPage
    bill_pay: BillPayPage
    services: ServicesPage
    contact: ContactPage
    lookup: LookupPage

    @classmethod
    def for_page(cls, page: Page) -> "ParaBankPages":
        return cls(
            page=page,
            home=HomePage(page),
            register=RegisterPage(page),
            open_account=OpenAccountPage(page),
            transfer=TransferPage(page),
            accounts_overview=AccountsOverviewPage(page),
            bill_pay=BillPayPage(page),
            services=ServicesPage(page),
            contact=ContactPage(page),
            lookup=LookupPage(page),
        )


__all__ = [
    "AccountsOverviewPage",
    "BillPayPage",
    "ContactMessage",
    "ContactPage",
    "HomePage",
    "LookupPage",
    "OpenAccountPage",
    "ParaBankBasePage",
    "ParaBankPages",
    "RegisterPage",
    "ServicesPage",
    "TransferPage",
]
