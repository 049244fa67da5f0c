from __future__ import annotations

import re

from playwright.async_api import Page, expect


class OrderHistoryPage:
    def __init__(self, page: Page) -> None:
        self.page = page
        self.heading = page.get_by_role("heading", name=re.compile("Order History", re.I))

    async def expect_visible(self) -> None:
        await expect(self.heading).to_be_visible()
