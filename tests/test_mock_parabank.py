"""Mock ParaBank app through the Flask test client."""

from __future__ import annotations

import pytest

from e2e_ui import mock_parabank
from e2e_ui.identity import DEFAULT_PAYEE, create_identity
from e2e_ui.mock_parabank import ACCOUNTS, CUSTOMERS, create_mock_parabank_app, reset_mock_state


@pytest.fixture
def client():
    reset_mock_state()
    app = create_mock_parabank_app()
    with app.test_client() as client:
        yield client
    reset_mock_state()


def _register(client, identity):
    form = {
        "customer.firstName": identity.first_name,
        "customer.lastName": identity.last_name,
        "customer.address.street": identity.address,
        "customer.address.city": identity.city,
        "customer.address.state": identity.state,
        "customer.address.zipCode": identity.zip_code,
        "customer.phoneNumber": identity.phone,
        "customer.ssn": identity.ssn,
        "customer.username": identity.username,
        "customer.password": identity.password,
        "repeatedPassword": identity.confirm_password,
    }
    return client.post("/register.htm", data=form)


@pytest.fixture
def identity():
    return create_identity(clock=lambda: 1700000000000)


@pytest.fixture
def registered(client, identity):
    _register(client, identity)
    return identity


def _default_account_id(username: str) -> int:
    return mock_parabank.accounts_of(username)[0]["id"]


class TestSession:

    def test_index_shows_login_panel_when_anonymous(self, client):
        body = client.get("/index.htm").get_data(as_text=True)

        assert 'name="username"' in body
        assert "Account Services" not in body

    def test_registration_logs_in(self, client, identity):
        response = _register(client, identity)
        body = response.get_data(as_text=True)

        assert response.status_code == 200
        assert "Your account was created successfully. You are now logged in." in body
        assert "Account Services" in body
        assert CUSTOMERS[identity.username]["customer_id"]

    def test_duplicate_username_is_rejected(self, client, registered):
        client.get("/logout.htm")

        body = _register(client, registered).get_data(as_text=True)

        assert "This username already exists." in body
        assert len(CUSTOMERS) == 1

    def test_wrong_password_shows_error(self, client, registered):
        client.get("/logout.htm")

        body = client.post("/login.htm", data={"username": registered.username, "password": "nope"}).get_data(
            as_text=True
        )

        assert "Error!" in body
        assert "could not be verified" in body

    def test_login_redirects_to_overview(self, client, registered):
        client.get("/logout.htm")

        response = client.post("/login.htm", data={"username": registered.username, "password": registered.password})

        assert response.status_code == 302
        assert response.headers["Location"].endswith("overview.htm")

    def test_logout_returns_to_index(self, client, registered):
        response = client.get("/logout.htm")

        assert response.headers["Location"].endswith("index.htm")
        assert "Account Services" not in client.get("/index.htm").get_data(as_text=True)

    def test_banking_pages_need_login(self, client):
        response = client.get("/overview.htm")

        assert response.status_code == 302
        assert response.headers["Location"].endswith("index.htm")


class TestBanking:

    def test_new_customer_has_default_balance(self, client, registered):
        body = client.get("/overview.htm").get_data(as_text=True)

        assert 'id="accountTable"' in body
        assert f"activity.htm?id={_default_account_id(registered.username)}" in body
        assert "$1,000.00" in body

    def test_open_savings_account(self, client, registered):
        source = _default_account_id(registered.username)

        body = client.post("/openaccount.htm", data={"type": "1", "fromAccountId": source}).get_data(as_text=True)

        assert "Congratulations, your account is now open." in body
        assert 'id="newAccountId"' in body
        new_account = mock_parabank.accounts_of(registered.username)[-1]
        assert new_account["type"] == "SAVINGS"
        assert new_account["balance"] == mock_parabank.MINIMUM_DEPOSIT
        assert ACCOUNTS[source]["balance"] == mock_parabank.DEFAULT_BALANCE - mock_parabank.MINIMUM_DEPOSIT

    def test_transfer_moves_funds(self, client, registered):
        source = _default_account_id(registered.username)
        client.post("/openaccount.htm", data={"type": "1", "fromAccountId": source})
        target = mock_parabank.accounts_of(registered.username)[-1]["id"]

        body = client.post(
            "/transfer.htm", data={"amount": "200", "fromAccountId": source, "toAccountId": target}
        ).get_data(as_text=True)

        assert "Transfer Complete!" in body
        assert ACCOUNTS[target]["balance"] == 300.0
        assert ACCOUNTS[source]["balance"] == 700.0

    def test_transfer_without_amount_is_rejected(self, client, registered):
        source = _default_account_id(registered.username)

        body = client.post(
            "/transfer.htm", data={"amount": "", "fromAccountId": source, "toAccountId": source}
        ).get_data(as_text=True)

        assert "The amount cannot be empty." in body

    def test_bill_pay(self, client, registered):
        source = _default_account_id(registered.username)
        form = {
            "payee.name": DEFAULT_PAYEE.name,
            "payee.address.street": DEFAULT_PAYEE.address,
            "payee.address.city": DEFAULT_PAYEE.city,
            "payee.address.state": DEFAULT_PAYEE.state,
            "payee.address.zipCode": DEFAULT_PAYEE.zip_code,
            "payee.phoneNumber": DEFAULT_PAYEE.phone,
            "payee.accountNumber": DEFAULT_PAYEE.account_number,
            "verifyAccount": DEFAULT_PAYEE.account_number,
            "amount": "50",
            "fromAccountId": source,
        }

        body = client.post("/billpay.htm", data=form).get_data(as_text=True)

        assert "Bill Payment Complete" in body
        assert '<span id="amount">$50.00</span>' in body
        assert ACCOUNTS[source]["balance"] == 950.0

    def test_bill_pay_rejects_mismatched_account(self, client, registered):
        body = client.post(
            "/billpay.htm", data={"payee.accountNumber": "1", "verifyAccount": "2", "amount": "5"}
        ).get_data(as_text=True)

        assert "The account numbers do not match." in body
        assert "Bill Payment Complete" not in body


class TestPublicPages:

    def test_lookup_finds_customer_and_logs_in(self, client, registered):
        client.get("/logout.htm")
        form = {
            "firstName": registered.first_name,
            "lastName": registered.last_name,
            "address.street": registered.address,
            "address.city": registered.city,
            "address.state": registered.state,
            "address.zipCode": registered.zip_code,
            "ssn": registered.ssn,
        }

        body = client.post("/lookup.htm", data=form).get_data(as_text=True)

        assert "Your login information was located successfully" in body
        assert "Account Services" in body

    def test_contact_thanks_sender(self, client):
        body = client.post("/contact.htm", data={"name": "Test User"}).get_data(as_text=True)

        assert "Thank you Test User" in body

    def test_services_lists_catalogues(self, client):
        body = client.get("/services.htm").get_data(as_text=True)

        assert "Available Bookstore SOAP services:" in body
        assert "ParaBank?wsdl" in body
