"""Session-outcome markers for the banking app.

Each state transition (anonymous -> registered, -> logged out, -> logged in)
is confirmed by its own page marker with a bounded wait, never by trusting
the action that triggered it.
"""
from __future__ import annotations

import logging
import re

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page, expect

from e2e_ui import timeouts

logger = logging.getLogger(__name__)

REGISTRATION_SUCCESS_TEXT = "Your account was created successfully"
ACCOUNT_SERVICES_TEXT = "Account Services"
ERROR_BANNER_TEXT = "Error!"

LOGIN_URL = re.compile(r"login\.htm")
INDEX_URL = re.compile(r"index\.htm")


async def wait_for_registration_success(page: Page, timeout: int = timeouts.MEDIUM) -> None:
    await expect(page.locator(f"text={REGISTRATION_SUCCESS_TEXT}")).to_be_visible(timeout=timeout)


async def wait_for_login_success(page: Page, timeout: int = timeouts.MEDIUM) -> None:
    """Left the login page and no error banner is showing."""
    await expect(page).not_to_have_url(LOGIN_URL, timeout=timeout)
    await expect(page.locator(f"text={ERROR_BANNER_TEXT}")).not_to_be_visible(timeout=timeout)


async def wait_for_logout_success(page: Page, timeout: int = timeouts.MEDIUM) -> None:
    """Redirected to the index page with the login form showing."""
    await expect(page).to_have_url(INDEX_URL, timeout=timeout)
    await expect(page.locator('input[name="username"]')).to_be_visible(timeout=timeout)


async def is_authenticated(page: Page, timeout: int = timeouts.PROBE) -> bool:
    """Probe the "Account Services" panel; absence or any probe failure means False.

    Recomputed on every call: the server may have expired the session, or an
    earlier scenario may have logged out.
    """
    try:
        await expect(page.locator(f"text={ACCOUNT_SERVICES_TEXT}").first).to_be_visible(timeout=timeout)
    except (AssertionError, PlaywrightError) as exc:
        logger.debug("Account Services marker not visible: %s", exc)
        return False
    return True


async def cleanup_test_data(page: Page, home_path: str = "index.htm") -> None:
    """Drop cookies and web storage so the next scenario starts anonymous."""
    await page.goto(home_path)
    await page.context.clear_cookies()
    await page.evaluate("() => { localStorage.clear(); sessionStorage.clear(); }")
