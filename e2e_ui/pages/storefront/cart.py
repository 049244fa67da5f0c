from __future__ import annotations

import re

from playwright.async_api import Page


class CartPage:
    def __init__(self, page: Page) -> None:
        self.page = page
        self.empty_heading = page.get_by_role("heading", name="Your Shopping Cart is empty")
        self.recommended_first_product = page.get_by_role("link", name=re.compile("Devon 7 Jones")).first

    async def goto(self) -> None:
        await self.page.goto("/cart")

    async def open_first_recommended_product(self) -> None:
        await self.recommended_first_product.click()
