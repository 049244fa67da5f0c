"""Reusable banking workflows built on the page objects and session markers."""
from __future__ import annotations

import enum
import logging
import re
from typing import Optional

from playwright.async_api import expect

from e2e_ui import timeouts
from e2e_ui.identity import PayeeData, UserIdentity, create_identity
from e2e_ui.pages.parabank import ParaBankPages
from e2e_ui.shared_session import SharedSession
from e2e_ui.waiters import (
    LOGIN_URL,
    is_authenticated,
    wait_for_login_success,
    wait_for_logout_success,
    wait_for_registration_success,
)

logger = logging.getLogger(__name__)

LOGIN_RESULT_URL = re.compile(r"(login|overview)\.htm")


class AuthOutcome(enum.Enum):
    """How a precondition step left the session authenticated."""

    ALREADY = "already"
    LOGGED_IN = "logged_in"
    REGISTERED = "registered"


# ============================================================================
# Registration / login / logout
# ============================================================================

async def register_identity(pages: ParaBankPages, identity: UserIdentity) -> UserIdentity:
    """Sign ``identity`` up and wait for the confirmation; registration also logs in."""
    await pages.home.goto()
    await pages.home.go_to_register()
    await expect(pages.page).to_have_url(re.compile(r"register\.htm"))
    await pages.register.register(identity)
    await wait_for_registration_success(pages.page)
    logger.info("Registered user %s", identity.username)
    return identity


async def setup_registered_user(pages: ParaBankPages, identity: Optional[UserIdentity] = None) -> UserIdentity:
    """Register a brand-new account; never touches the shared identity."""
    return await register_identity(pages, identity or create_identity("registered"))


async def login_attempt(pages: ParaBankPages, identity: UserIdentity) -> bool:
    """Submit the login form once and report whether it took.

    Returns True without submitting if the home page already shows no login
    panel (the context carries a valid session).
    """
    await pages.home.goto()
    if not await pages.home.username_field.is_visible():
        return True
    await pages.home.login(identity.username, identity.password)
    # The POST lands on login.htm when rejected, overview.htm when accepted.
    await pages.page.wait_for_url(LOGIN_RESULT_URL, timeout=timeouts.MEDIUM)
    if LOGIN_URL.search(pages.page.url):
        return False
    return not await pages.home.error_banner.is_visible()


async def login(pages: ParaBankPages, identity: UserIdentity) -> None:
    """Log in and require the login marker."""
    await pages.home.goto()
    await pages.home.login(identity.username, identity.password)
    await wait_for_login_success(pages.page)
    logger.info("Logged in as %s", identity.username)


async def logout(pages: ParaBankPages) -> None:
    """Log out through whatever control the page offers, then wait for the login form."""
    page = pages.page
    candidates = [
        page.get_by_role("link", name=re.compile("log ?out", re.I)),
        page.get_by_role("button", name=re.compile("log ?out", re.I)),
        page.locator('a[href*="logout"], a[href*="signout"]'),
    ]
    for control in candidates:
        if await control.first.is_visible():
            await control.first.click()
            break
    else:
        logger.warning("No logout control found; clearing cookies instead")
        await page.context.clear_cookies()
        await pages.home.goto()
    await wait_for_logout_success(page)


# ============================================================================
# Session preconditions
# ============================================================================

async def ensure_authenticated(
    session: SharedSession,
    pages: ParaBankPages,
    identity: Optional[UserIdentity] = None,
) -> AuthOutcome:
    """Idempotent precondition: leave the page logged in as the shared identity.

    The live "Account Services" probe decides; a known identity is not proof
    of a live session. If logging in fails because the account does not
    exist on the server yet, the identity is registered instead.
    """
    identity = identity or session.get_or_create_shared_user()
    if await is_authenticated(pages.page):
        logger.info("Already logged in with shared user %s", identity.username)
        return AuthOutcome.ALREADY

    logger.info("Logging in with shared user %s", identity.username)
    if await login_attempt(pages, identity):
        await wait_for_login_success(pages.page)
        return AuthOutcome.LOGGED_IN

    logger.info("Login rejected for %s, registering it", identity.username)
    await register_identity(pages, identity)
    return AuthOutcome.REGISTERED


async def ensure_logged_in_user(session: SharedSession, pages: ParaBankPages) -> UserIdentity:
    """Body of the logged-in-user fixture.

    - no shared identity yet: create and register it (registration logs in)
    - shared identity, session live: nothing to do
    - shared identity, session gone: log in explicitly

    A rejected login raises; only ``ensure_authenticated`` falls back to
    registering.
    """
    identity = session.peek_shared_user()
    if identity is None:
        identity = session.get_or_create_shared_user()
        await register_identity(pages, identity)
        return identity

    if await is_authenticated(pages.page):
        logger.info("Already logged in with shared user %s", identity.username)
        return identity

    await login(pages, identity)
    return identity


# ============================================================================
# Banking flows
# ============================================================================

async def open_new_account(pages: ParaBankPages, account_type: str = "SAVINGS") -> str:
    """Open an account of ``account_type`` from Account Services; returns its id."""
    await pages.home.open_new_account_link.click()
    await expect(pages.page).to_have_url(re.compile(r"openaccount\.htm"))
    await expect(pages.open_account.heading).to_be_visible()

    await pages.open_account.open_account(account_type)
    await expect(pages.open_account.congratulations_message).to_be_visible(timeout=timeouts.MEDIUM)
    account_id = await pages.open_account.new_account_id()
    logger.info("Opened %s account %s", account_type, account_id)
    return account_id


async def transfer_funds(
    pages: ParaBankPages,
    amount: str,
    to_account_id: str,
    from_account_id: Optional[str] = None,
) -> None:
    await pages.home.transfer_funds_link.click()
    await expect(pages.page).to_have_url(re.compile(r"transfer\.htm"))
    await expect(pages.transfer.heading).to_be_visible()

    await pages.transfer.transfer(amount, to_account_id, from_account_id)
    await expect(pages.transfer.transfer_complete_heading).to_be_visible(timeout=timeouts.MEDIUM)
    logger.info("Transferred %s to account %s", amount, to_account_id)


async def account_balance(pages: ParaBankPages, account_id: str) -> float:
    """Balance of ``account_id`` as listed on Accounts Overview."""
    await pages.home.accounts_overview_link.click()
    await expect(pages.page).to_have_url(re.compile(r"overview\.htm"))
    await pages.page.wait_for_load_state("networkidle")
    return await pages.accounts_overview.balance_of(account_id)


async def pay_bill(
    pages: ParaBankPages,
    payee: PayeeData,
    amount: str,
    from_account_id: Optional[str] = None,
) -> None:
    await pages.home.bill_pay_link.click()
    await expect(pages.page).to_have_url(re.compile(r"billpay\.htm"))
    await expect(pages.bill_pay.page_title).to_be_visible()

    await pages.bill_pay.submit_payment(payee, amount, from_account_id)
    await expect(pages.bill_pay.payment_complete_heading).to_be_visible(timeout=timeouts.MEDIUM)
    logger.info("Paid %s to %s", amount, payee.name)
