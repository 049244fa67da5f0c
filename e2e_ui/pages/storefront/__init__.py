"""Storefront sample app page objects."""
from __future__ import annotations

from dataclasses import dataclass

from playwright.async_api import Page

from e2e_ui.pages.storefront.cart import CartPage
from e2e_ui.pages.storefront.header_footer import HeaderFooter
from e2e_ui.pages.storefront.home import HomePage
from e2e_ui.pages.storefront.login import LoginPage
from e2e_ui.pages.storefront.order_history import OrderHistoryPage
from e2e_ui.pages.storefront.product import ProductPage
from e2e_ui.pages.storefront.signup import SignUpPage


@dataclass
class StorefrontPages:
    page: Page
    home: HomePage
    login: LoginPage
    signup: SignUpPage
    cart: CartPage
    product: ProductPage
    order_history: OrderHistoryPage
    header_footer: HeaderFooter

    @classmethod
    def for_page(cls, page: Page) -> "StorefrontPages":
        return cls(
            page=page,
            home=HomePage(page),
            login=LoginPage(page),
            signup=SignUpPage(page),
            cart=CartPage(page),
            product=ProductPage(page),
            order_history=OrderHistoryPage(page),
            header_footer=HeaderFooter(page),
        )


__all__ = [
    "CartPage",
    "HeaderFooter",
    "HomePage",
    "LoginPage",
    "OrderHistoryPage",
    "ProductPage",
    "SignUpPage",
    "StorefrontPages",
]
