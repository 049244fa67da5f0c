from __future__ import annotations

import re

from playwright.async_api import Page, expect


class ProductPage:
    def __init__(self, page: Page) -> None:
        self.page = page
        self.add_to_cart_button = page.get_by_role("button", name=re.compile("add to cart", re.I))
        self.categories_label = page.get_by_text("Categories").first

    async def expect_loaded(self) -> None:
        await expect(self.page).to_have_url(re.compile(r"/shop/"))
        await expect(self.categories_label).to_be_visible()

    async def add_to_cart(self) -> bool:
        """Click Add to cart when the product offers it; returns whether it did."""
        if await self.add_to_cart_button.is_visible():
            await self.add_to_cart_button.click()
            return True
        return False
