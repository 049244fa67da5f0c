from __future__ import annotations

import re

from playwright.async_api import Page, expect


class HeaderFooter:
    """Storefront header (brand, cart, user menu) and footer links."""

    def __init__(self, page: Page) -> None:
        self.page = page
        self.brand_link = page.get_by_role("link", name="Company brand clickable to go back to homepage")
        self.cart_link = page.get_by_role("link", name=re.compile("cart", re.I))
        self.user_menu_button = page.get_by_role("button", name=re.compile("Test User|Order History"))
        self.order_history_link = page.get_by_role("link", name="Order History")
        self.contact_us_footer = page.get_by_role("link", name="Contact us")
        self.faqs_footer = page.get_by_role("link", name="FAQs")
        self.our_clients_footer = page.get_by_role("link", name="Our clients")

    async def open_home(self) -> None:
        await self.brand_link.click()

    async def open_cart(self) -> None:
        await self.cart_link.click()

    async def open_order_history(self) -> None:
        if await self.user_menu_button.is_visible():
            await self.user_menu_button.click()
            await self.order_history_link.click()
            return
        await self.page.goto("/my-account/order-history")

    async def explore_footer(self) -> None:
        await expect(self.contact_us_footer).to_be_visible()
        await expect(self.faqs_footer).to_be_visible()
        await expect(self.our_clients_footer).to_be_visible()

    async def logout(self) -> None:
        await self.user_menu_button.click()
        await self.page.locator('p[role="button"]').filter(has_text="Log Out").click()
