"""
Core storefront flow: sign up, explore, then log in from a fresh guest context.
"""
import pytest
from playwright.async_api import expect

from e2e_ui.identity import storefront_registration_data
from e2e_ui.pages.storefront import StorefrontPages

pytestmark = [pytest.mark.e2e, pytest.mark.storefront, pytest.mark.asyncio(loop_scope="session")]


async def test_signup_explore_and_login(storefront, new_storefront_context):
    account = storefront_registration_data()

    await storefront.home.goto()
    await storefront.home.maybe_validate_and_close_welcome_popup()
    await storefront.home.expect_home_loaded()

    await storefront.signup.goto()
    await storefront.signup.register(account)
    print(f"📝 Signed up {account.email}")

    await storefront.header_footer.open_home()
    await storefront.home.expect_home_loaded()
    await storefront.header_footer.explore_footer()

    guest_context = await new_storefront_context()
    guest = StorefrontPages.for_page(await guest_context.new_page())

    await guest.home.goto()
    await guest.home.maybe_validate_and_close_welcome_popup()
    await guest.home.click_login_header()
    await guest.login.login(account.email, account.password)
    await guest.header_footer.open_home()
    await guest.home.expect_home_loaded()
    print("✅ Logged in from a fresh context")


async def test_cart_product_and_order_history(storefront):
    await storefront.home.goto()
    await storefront.home.maybe_validate_and_close_welcome_popup()

    await storefront.header_footer.open_cart()
    await expect(storefront.cart.empty_heading).to_be_visible()
    await storefront.cart.open_first_recommended_product()
    await storefront.product.expect_loaded()
    assert await storefront.product.add_to_cart()

    account = storefront_registration_data()
    await storefront.signup.goto()
    await storefront.signup.register(account)
    await storefront.header_footer.open_order_history()
    await storefront.order_history.expect_visible()

    await storefront.header_footer.logout()
    await storefront.home.click_login_header()
    await expect(storefront.login.login_tab).to_be_visible()
