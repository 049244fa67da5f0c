"""
Journey 05: Transfer funds into a freshly opened savings account

1. Open a SAVINGS account (the transfer target)
2. Transfer 200 from the default account
3. Check the target's balance on Accounts Overview
"""
import pytest

from e2e_ui.workflows import account_balance, open_new_account, transfer_funds

pytestmark = [pytest.mark.e2e, pytest.mark.parabank, pytest.mark.asyncio(loop_scope="session")]

TRANSFER_AMOUNT = "200"


async def test_transfer_to_new_savings_account(logged_in_user, parabank):
    savings_account_id = await open_new_account(parabank, "SAVINGS")
    print(f"📝 Transfer target: {savings_account_id}")

    await transfer_funds(parabank, TRANSFER_AMOUNT, savings_account_id)
    print("✅ Transfer Complete message displayed")

    balance = await account_balance(parabank, savings_account_id)
    print(f"💰 Balance of {savings_account_id}: {balance:.2f}")
    assert balance >= float(TRANSFER_AMOUNT)
