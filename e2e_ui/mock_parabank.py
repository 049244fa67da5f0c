"""Mock ParaBank server for offline E2E runs.

This mock app renders the ParaBank screens the journeys drive, with the same
element ids, form field names and confirmation texts as the public demo:
- index.htm / login.htm / logout.htm: login panel and session handling
- register.htm: customer sign-up (logs the new customer in)
- overview.htm / activity.htm: accounts table with balances
- openaccount.htm / transfer.htm / billpay.htm: banking forms
- services.htm / contact.htm / lookup.htm / about.htm: public pages

State lives in module-level dictionaries, like the real demo's database
after a reset; ``reset_mock_state()`` wipes it.
"""
from __future__ import annotations

import itertools
import logging
import secrets
import threading
import time
from typing import Any, Dict, List, Optional

from flask import Flask, abort, redirect, render_template, request, session
from jinja2 import DictLoader
from werkzeug.serving import make_server

logger = logging.getLogger(__name__)

# Mock data storage
CUSTOMERS: Dict[str, Dict[str, Any]] = {}  # username -> profile + password + customer_id
ACCOUNTS: Dict[int, Dict[str, Any]] = {}  # account_id -> {customer, type, balance}

ACCOUNT_TYPES = {"0": "CHECKING", "1": "SAVINGS"}
DEFAULT_BALANCE = 1000.00
MINIMUM_DEPOSIT = 100.00
FIRST_ACCOUNT_ID = 12345
ACCOUNT_ID_STEP = 111

_account_ids = itertools.count(FIRST_ACCOUNT_ID, ACCOUNT_ID_STEP)
_customer_ids = itertools.count(12212, 111)

REGISTRATION_FIELDS = [
    ("First Name:", "customer.firstName"),
    ("Last Name:", "customer.lastName"),
    ("Address:", "customer.address.street"),
    ("City:", "customer.address.city"),
    ("State:", "customer.address.state"),
    ("Zip Code:", "customer.address.zipCode"),
    ("Phone #:", "customer.phoneNumber"),
    ("SSN:", "customer.ssn"),
    ("Username:", "customer.username"),
    ("Password:", "customer.password"),
    ("Confirm:", "repeatedPassword"),
]

LOOKUP_FIELDS = [
    ("First Name:", "firstName"),
    ("Last Name:", "lastName"),
    ("Address:", "address.street"),
    ("City:", "address.city"),
    ("State:", "address.state"),
    ("Zip Code:", "address.zipCode"),
    ("SSN:", "ssn"),
]

PAYEE_FIELDS = [
    ("Payee Name:", "payee.name"),
    ("Address:", "payee.address.street"),
    ("City:", "payee.address.city"),
    ("State:", "payee.address.state"),
    ("Zip Code:", "payee.address.zipCode"),
    ("Phone #:", "payee.phoneNumber"),
    ("Account #:", "payee.accountNumber"),
    ("Verify Account #:", "verifyAccount"),
    ("Amount: $", "amount"),
]

TEMPLATES = {
    "layout.html": """<!DOCTYPE html>
<html>
<head><title>ParaBank | {{ title }}</title></head>
<body>
<div id="mainPanel">
  <div id="headerPanel">
    <a href="admin.htm"><img class="admin" src="data:," alt="ParaBank"></a>
    <p class="caption">Experience the difference</p>
    <ul class="leftmenu">
      <li><a href="about.htm">About Us</a></li>
      <li><a href="services.htm">Services</a></li>
      <li><a href="products.htm">Products</a></li>
      <li><a href="locations.htm">Locations</a></li>
      <li><a href="admin.htm">Admin Page</a></li>
    </ul>
    <ul class="button">
      <li class="home"><a href="index.htm">home</a></li>
      <li class="aboutus"><a href="about.htm">about</a></li>
      <li class="contact"><a href="contact.htm">contact</a></li>
    </ul>
  </div>
  <div id="bodyPanel">
    <div id="leftPanel">
    {% if customer %}
      <p class="smallText"><b>Welcome</b> {{ customer.first_name }} {{ customer.last_name }}</p>
      <h2>Account Services</h2>
      <ul>
        <li><a href="openaccount.htm">Open New Account</a></li>
        <li><a href="overview.htm">Accounts Overview</a></li>
        <li><a href="transfer.htm">Transfer Funds</a></li>
        <li><a href="billpay.htm">Bill Pay</a></li>
        <li><a href="logout.htm">Log Out</a></li>
      </ul>
    {% else %}
      <h2>Customer Login</h2>
      <form method="post" action="login.htm" name="login">
        <p><b>Username</b></p>
        <div class="login"><input type="text" class="input" name="username"></div>
        <p><b>Password</b></p>
        <div class="login"><input type="password" class="input" name="password"></div>
        <div class="login"><input type="submit" class="button" value="Log In"></div>
      </form>
      <p><a href="lookup.htm">Forgot login info?</a></p>
      <p><a href="register.htm">Register</a></p>
    {% endif %}
    </div>
    <div id="rightPanel">
    {% block content %}{% endblock %}
    </div>
  </div>
</div>
<div id="footerPanel">
  <ul>
    <li><a href="index.htm">Home</a> | </li>
    <li><a href="about.htm">About Us</a> | </li>
    <li><a href="services.htm">Services</a> | </li>
    <li><a href="http://forums.parasoft.com/">Forum</a> | </li>
    <li><a href="sitemap.htm">Site Map</a> | </li>
    <li><a href="contact.htm">Contact Us</a></li>
  </ul>
  <p class="visit">Visit us at <a href="http://www.parasoft.com/">www.parasoft.com</a></p>
</div>
</body>
</html>""",
    "form_rows.html": """<table class="form2"><tbody>
{% for label, name in fields %}
  <tr>
    <td align="right" width="30%"><b>{{ label }}</b></td>
    <td width="20%"><input class="input" name="{{ name }}" value="{{ values.get(name, '') }}"
      {% if 'assword' in name %}type="password"{% else %}type="text"{% endif %}></td>
    <td><span class="error">{{ errors.get(name, '') }}</span></td>
  </tr>
{% endfor %}
</tbody></table>""",
    "index.html": """{% extends "layout.html" %}{% block content %}
<ul class="services">
  <li class="captionone">ATM Services</li>
  <li><a href="services.htm">Withdraw Funds</a></li>
  <li><a href="services.htm">Transfer Funds</a></li>
  <li><a href="services.htm">Check Balances</a></li>
  <li><a href="services.htm">Make Deposits</a></li>
</ul>
<ul class="servicestwo">
  <li class="captiontwo">Online Services</li>
  <li><a href="services.htm">Bill Pay</a></li>
  <li><a href="services.htm">Account History</a></li>
  <li><a href="services.htm">Transfer Funds</a></li>
</ul>
<h4>Latest News</h4>
<ul class="events">
  <li><a href="news.htm#6">ParaBank Is Now Re-Opened</a></li>
  <li><a href="news.htm#5">New! Online Bill Pay</a></li>
  <li><a href="news.htm#4">New! Online Account Transfers</a></li>
</ul>
{% endblock %}""",
    "error.html": """{% extends "layout.html" %}{% block content %}
<h1 class="title">Error!</h1>
<p class="error">{{ message }}</p>
{% endblock %}""",
    "register.html": """{% extends "layout.html" %}{% block content %}
<h1 class="title">Signing up is easy!</h1>
<p>If you have an account with us you can sign-up for free instant online access. You will have to provide some personal information.</p>
<form id="customerForm" method="post" action="register.htm">
{% include "form_rows.html" %}
<input type="submit" class="button" value="Register">
</form>
{% endblock %}""",
    "welcome.html": """{% extends "layout.html" %}{% block content %}
<h1 class="title">Welcome {{ customer.username }}</h1>
<p>Your account was created successfully. You are now logged in.</p>
{% endblock %}""",
    "overview.html": """{% extends "layout.html" %}{% block content %}
<h1 class="title">Accounts Overview</h1>
<table id="accountTable" class="table">
  <thead><tr><th>Account</th><th>Balance*</th><th>Available Amount</th></tr></thead>
  <tbody>
  {% for account in accounts %}
    <tr>
      <td><a href="activity.htm?id={{ account.id }}">{{ account.id }}</a></td>
      <td>{{ account.balance|money }}</td>
      <td>{{ account.balance|money }}</td>
    </tr>
  {% endfor %}
  </tbody>
  <tfoot><tr><td><b>Total</b></td><td><b>{{ total|money }}</b></td><td></td></tr></tfoot>
</table>
<p class="smallText">*Balance includes deposits that may be subject to holds</p>
{% endblock %}""",
    "activity.html": """{% extends "layout.html" %}{% block content %}
<h1 class="title">Account Details</h1>
<table>
  <tr><td>Account Number:</td><td id="accountId">{{ account.id }}</td></tr>
  <tr><td>Account Type:</td><td id="accountType">{{ account.type }}</td></tr>
  <tr><td>Balance:</td><td id="balance">{{ account.balance|money }}</td></tr>
</table>
{% endblock %}""",
    "openaccount.html": """{% extends "layout.html" %}{% block content %}
<h1 class="title">Open New Account</h1>
<form method="post" action="openaccount.htm">
  <p><b>What type of Account would you like to open?</b></p>
  <select id="type" name="type">
  {% for value, label in account_types %}<option value="{{ value }}">{{ label }}</option>{% endfor %}
  </select>
  <p><b>A minimum of {{ minimum|money }} must be deposited into this account at time of opening.
  Please choose an existing account to transfer funds into the new account.</b></p>
  <select id="fromAccountId" name="fromAccountId">
  {% for account in accounts %}<option value="{{ account.id }}">{{ account.id }}</option>{% endfor %}
  </select>
  <div><input type="submit" class="button" value="Open New Account"></div>
</form>
{% endblock %}""",
    "account_opened.html": """{% extends "layout.html" %}{% block content %}
<h1 class="title">Account Opened!</h1>
<p>Congratulations, your account is now open.</p>
<p><b>Your new account number:</b> <a id="newAccountId" href="activity.htm?id={{ account.id }}">{{ account.id }}</a></p>
{% endblock %}""",
    "transfer.html": """{% extends "layout.html" %}{% block content %}
<h1 class="title">Transfer Funds</h1>
<p class="error">{{ error or '' }}</p>
<form method="post" action="transfer.htm">
  <p><b>Amount:</b> $<input id="amount" name="amount" type="text"></p>
  <div>
    <b>From account #</b>
    <select id="fromAccountId" name="fromAccountId">
    {% for account in accounts %}<option value="{{ account.id }}">{{ account.id }}</option>{% endfor %}
    </select>
    <b>to account #</b>
    <select id="toAccountId" name="toAccountId">
    {% for account in accounts %}<option value="{{ account.id }}">{{ account.id }}</option>{% endfor %}
    </select>
  </div>
  <div><input type="submit" class="button" value="Transfer"></div>
</form>
{% endblock %}""",
    "transfer_complete.html": """{% extends "layout.html" %}{% block content %}
<h1 class="title">Transfer Complete!</h1>
<p><span id="amountResult">{{ amount|money }}</span> has been transferred from account #<span id="fromAccountIdResult">{{ from_id }}</span>
to account #<span id="toAccountIdResult">{{ to_id }}</span>.</p>
<p>See Account Activity for more details.</p>
{% endblock %}""",
    "billpay.html": """{% extends "layout.html" %}{% block content %}
<h1 class="title">Bill Payment Service</h1>
<p>Enter payee information</p>
<form name="billpayForm" method="post" action="billpay.htm">
{% include "form_rows.html" %}
<p><b>From account #:</b>
  <select id="fromAccountId" name="fromAccountId">
  {% for account in accounts %}<option value="{{ account.id }}">{{ account.id }}</option>{% endfor %}
  </select></p>
<input type="submit" class="button" value="Send Payment">
</form>
{% endblock %}""",
    "billpay_complete.html": """{% extends "layout.html" %}{% block content %}
<h1 class="title">Bill Payment Complete</h1>
<p>Bill Payment to <span id="payeeName">{{ payee }}</span> in the amount of <span id="amount">{{ amount|money }}</span>
from account <span id="fromAccountId">{{ from_id }}</span> was successful.</p>
<p>See Account Activity for more details.</p>
{% endblock %}""",
    "services.html": """{% extends "layout.html" %}{% block content %}
<span class="heading">Available Bookstore SOAP services:</span>
<table>
  <tr><td><a href="services/bookstore/store-01?wsdl">Bookstore</a></td></tr>
  <tr><td><a href="services/bookstore/store-01V2?wsdl">Bookstore (v2)</a></td></tr>
  <tr><td><a href="services/bookstore/store-wss-01?wsdl">Bookstore (WS-Security UsernameToken)</a></td></tr>
  <tr><td><a href="services/bookstore/store-wss-02?wsdl">Bookstore (WS-Security Signature)</a></td></tr>
  <tr><td><a href="services/bookstore/store-wss-03?wsdl">Bookstore (WS-Security Encryption)</a></td></tr>
  <tr><td><a href="services/bookstore/store-wss-04?wsdl">Bookstore (WS-Security Signature+Encryption)</a></td></tr>
</table>
<span class="heading">Available ParaBank SOAP services:</span>
<table>
  <tr><td><a href="services/LoanProcessor?wsdl">LoanProcessor</a></td></tr>
  <tr><td><a href="services/ParaBank?wsdl">ParaBank</a></td></tr>
</table>
<span class="heading">Available RESTful services:</span>
<table>
  <tr><td><a href="services/bank?_wadl&_type=xml">ParaBank REST API</a></td></tr>
  <tr><td><a href="api-docs/index.html">OpenAPI</a></td></tr>
</table>
{% endblock %}""",
    "contact.html": """{% extends "layout.html" %}{% block content %}
<h1 class="title">Customer Care</h1>
<p>Email support is available by filling out the following form.</p>
<form id="contactForm" method="post" action="contact.htm">
<table class="form2"><tbody>
  <tr><td align="right"><b>Name:</b></td><td><input class="input" name="name" type="text"></td></tr>
  <tr><td align="right"><b>Email:</b></td><td><input class="input" name="email" type="text"></td></tr>
  <tr><td align="right"><b>Phone:</b></td><td><input class="input" name="phone" type="text"></td></tr>
  <tr><td align="right"><b>Message:</b></td><td><textarea class="input" name="message" rows="10" cols="40"></textarea></td></tr>
</tbody></table>
<input type="submit" class="button" value="Send to Customer Care">
</form>
{% endblock %}""",
    "contact_sent.html": """{% extends "layout.html" %}{% block content %}
<h1 class="title">Customer Care</h1>
<p>Thank you {{ name }}</p>
<p>A Customer Care Representative will be contacting you.</p>
{% endblock %}""",
    "lookup.html": """{% extends "layout.html" %}{% block content %}
<h1 class="title">Customer Lookup</h1>
<p>Please fill out the following information in order to validate your account.</p>
<p class="error">{{ error or '' }}</p>
<form id="lookupForm" method="post" action="lookup.htm">
{% include "form_rows.html" %}
<input type="submit" class="button" value="Find My Login Info">
</form>
{% endblock %}""",
    "lookup_found.html": """{% extends "layout.html" %}{% block content %}
<h1 class="title">Customer Lookup</h1>
<p>Your login information was located successfully. You are now logged in. </p>
<p><b>Username</b>: {{ customer.username }}<br><b>Password</b>: {{ customer.password }}</p>
{% endblock %}""",
    "about.html": """{% extends "layout.html" %}{% block content %}
<h1 class="title">ParaSoft Demo Website</h1>
<p>ParaBank is a demo site used for demonstration of Parasoft software solutions.</p>
<p>All materials herein are used solely for simulating a realistic online banking website.</p>
{% endblock %}""",
}


def reset_mock_state() -> None:
    """Drop every customer and account."""
    global _account_ids, _customer_ids
    CUSTOMERS.clear()
    ACCOUNTS.clear()
    _account_ids = itertools.count(FIRST_ACCOUNT_ID, ACCOUNT_ID_STEP)
    _customer_ids = itertools.count(12212, 111)


def create_customer(profile: Dict[str, str]) -> Dict[str, Any]:
    """Store a customer and open its default checking account."""
    customer = dict(profile)
    customer["customer_id"] = next(_customer_ids)
    CUSTOMERS[customer["username"]] = customer
    open_account(customer["username"], "CHECKING", DEFAULT_BALANCE)
    return customer


def open_account(username: str, account_type: str, balance: float) -> Dict[str, Any]:
    account = {"id": next(_account_ids), "customer": username, "type": account_type, "balance": balance}
    ACCOUNTS[account["id"]] = account
    return account


def accounts_of(username: str) -> List[Dict[str, Any]]:
    return [account for account in ACCOUNTS.values() if account["customer"] == username]


def _parse_amount(raw: Optional[str]) -> Optional[float]:
    try:
        amount = float((raw or "").replace(",", "").strip())
    except ValueError:
        return None
    return amount if amount > 0 else None


def create_mock_parabank_app() -> Flask:
    """Create and configure the mock ParaBank Flask app."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.secret_key = secrets.token_hex(16)
    app.jinja_loader = DictLoader(TEMPLATES)
    app.jinja_env.filters["money"] = lambda value: f"${value:,.2f}"

    def current_customer() -> Optional[Dict[str, Any]]:
        username = session.get("username")
        return CUSTOMERS.get(username) if username else None

    def page(template: str, title: str, **context: Any):
        return render_template(template, title=title, customer=current_customer(), **context)

    def owned_account(raw_id: Optional[str], username: str) -> Optional[Dict[str, Any]]:
        try:
            account = ACCOUNTS.get(int(raw_id or ""))
        except ValueError:
            return None
        if account is None or account["customer"] != username:
            return None
        return account

    @app.before_request
    def require_login():
        protected = {"overview", "activity", "openaccount", "transfer", "billpay"}
        if request.endpoint in protected and current_customer() is None:
            return redirect("index.htm")
        return None

    @app.route("/")
    @app.route("/index.htm")
    def index():
        return page("index.html", "Welcome | Online Banking")

    @app.route("/login.htm", methods=["POST"])
    def login():
        customer = CUSTOMERS.get(request.form.get("username", ""))
        if not request.form.get("username") or not request.form.get("password"):
            return page("error.html", "Error", message="Please enter a username and password.")
        if customer is None or customer["password"] != request.form.get("password"):
            return page("error.html", "Error", message="The username and password could not be verified.")
        session["username"] = customer["username"]
        logger.debug("Mock login for %s", customer["username"])
        return redirect("overview.htm")

    @app.route("/logout.htm")
    def logout():
        session.clear()
        return redirect("index.htm")

    @app.route("/register.htm", methods=["GET", "POST"])
    def register():
        values: Dict[str, str] = {}
        errors: Dict[str, str] = {}
        if request.method == "POST":
            values = {name: request.form.get(name, "").strip() for _, name in REGISTRATION_FIELDS}
            for label, name in REGISTRATION_FIELDS:
                if not values[name]:
                    errors[name] = f"{label.rstrip(':#').strip()} is required."
            if values["customer.username"] in CUSTOMERS:
                errors["customer.username"] = "This username already exists."
            if values["customer.password"] != values["repeatedPassword"]:
                errors["repeatedPassword"] = "Passwords did not match."
            if not errors:
                customer = create_customer({
                    "username": values["customer.username"],
                    "password": values["customer.password"],
                    "first_name": values["customer.firstName"],
                    "last_name": values["customer.lastName"],
                    "street": values["customer.address.street"],
                    "city": values["customer.address.city"],
                    "state": values["customer.address.state"],
                    "zip_code": values["customer.address.zipCode"],
                    "phone": values["customer.phoneNumber"],
                    "ssn": values["customer.ssn"],
                })
                session["username"] = customer["username"]
                logger.debug("Mock registration for %s", customer["username"])
                return page("welcome.html", "Customer Created")
        return page("register.html", "Register", fields=REGISTRATION_FIELDS, values=values, errors=errors)

    @app.route("/overview.htm")
    def overview():
        accounts = accounts_of(session["username"])
        total = sum(account["balance"] for account in accounts)
        return page("overview.html", "Accounts Overview", accounts=accounts, total=total)

    @app.route("/activity.htm")
    def activity():
        account = owned_account(request.args.get("id"), session["username"])
        if account is None:
            abort(404)
        return page("activity.html", "Account Activity", account=account)

    @app.route("/openaccount.htm", methods=["GET", "POST"])
    def openaccount():
        username = session["username"]
        if request.method == "POST":
            source = owned_account(request.form.get("fromAccountId"), username)
            account_type = ACCOUNT_TYPES.get(request.form.get("type", ""))
            if source is None or account_type is None:
                return page("error.html", "Error", message="Could not open the requested account.")
            source["balance"] -= MINIMUM_DEPOSIT
            account = open_account(username, account_type, MINIMUM_DEPOSIT)
            return page("account_opened.html", "Open Account", account=account)
        return page(
            "openaccount.html",
            "Open Account",
            account_types=sorted(ACCOUNT_TYPES.items()),
            accounts=accounts_of(username),
            minimum=MINIMUM_DEPOSIT,
        )

    @app.route("/transfer.htm", methods=["GET", "POST"])
    def transfer():
        username = session["username"]
        accounts = accounts_of(username)
        if request.method == "POST":
            amount = _parse_amount(request.form.get("amount"))
            source = owned_account(request.form.get("fromAccountId"), username)
            target = owned_account(request.form.get("toAccountId"), username)
            if amount is None:
                return page("transfer.html", "Transfer Funds", accounts=accounts, error="The amount cannot be empty.")
            if source is None or target is None:
                return page("transfer.html", "Transfer Funds", accounts=accounts, error="Unknown account.")
            source["balance"] -= amount
            target["balance"] += amount
            return page(
                "transfer_complete.html", "Transfer Funds", amount=amount, from_id=source["id"], to_id=target["id"]
            )
        return page("transfer.html", "Transfer Funds", accounts=accounts, error=None)

    @app.route("/billpay.htm", methods=["GET", "POST"])
    def billpay():
        username = session["username"]
        accounts = accounts_of(username)
        values: Dict[str, str] = {}
        errors: Dict[str, str] = {}
        if request.method == "POST":
            values = {name: request.form.get(name, "").strip() for _, name in PAYEE_FIELDS}
            for label, name in PAYEE_FIELDS:
                if not values[name]:
                    errors[name] = f"{label.rstrip(':$ #').strip()} is required."
            if values["payee.accountNumber"] != values["verifyAccount"]:
                errors["verifyAccount"] = "The account numbers do not match."
            amount = _parse_amount(values["amount"])
            if amount is None and "amount" not in errors:
                errors["amount"] = "Please enter a valid amount."
            source = owned_account(request.form.get("fromAccountId"), username)
            if not errors and source is not None and amount is not None:
                source["balance"] -= amount
                return page(
                    "billpay_complete.html",
                    "Bill Pay",
                    payee=values["payee.name"],
                    amount=amount,
                    from_id=source["id"],
                )
        return page("billpay.html", "Bill Pay", fields=PAYEE_FIELDS, values=values, errors=errors, accounts=accounts)

    @app.route("/services.htm")
    def services():
        return page("services.html", "Services")

    @app.route("/about.htm")
    def about():
        return page("about.html", "About Us")

    @app.route("/contact.htm", methods=["GET", "POST"])
    def contact():
        if request.method == "POST":
            return page("contact_sent.html", "Customer Care", name=request.form.get("name", ""))
        return page("contact.html", "Customer Care")

    @app.route("/lookup.htm", methods=["GET", "POST"])
    def lookup():
        values: Dict[str, str] = {}
        if request.method == "POST":
            values = {name: request.form.get(name, "").strip() for _, name in LOOKUP_FIELDS}
            for customer in CUSTOMERS.values():
                if (
                    customer["first_name"] == values["firstName"]
                    and customer["last_name"] == values["lastName"]
                    and customer["ssn"] == values["ssn"]
                ):
                    session["username"] = customer["username"]
                    return page("lookup_found.html", "Customer Lookup")
            return page(
                "lookup.html",
                "Customer Lookup",
                fields=LOOKUP_FIELDS,
                values=values,
                errors={},
                error="The customer information provided could not be found.",
            )
        return page("lookup.html", "Customer Lookup", fields=LOOKUP_FIELDS, values=values, errors={}, error=None)

    return app


class MockServer:
    """Runs the mock app on a background werkzeug thread."""

    def __init__(self, host: str = "127.0.0.1", port: int = 5580):
        self.host = host
        self.port = port
        self.app = create_mock_parabank_app()
        self.server = None
        self.thread: Optional[threading.Thread] = None

    def start(self) -> None:
        self.server = make_server(self.host, self.port, self.app, threaded=True)
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.thread.start()
        time.sleep(0.2)  # Give server time to start
        logger.info("Mock ParaBank listening on %s", self.url)

    def stop(self) -> None:
        if self.server:
            self.server.shutdown()
            if self.thread:
                self.thread.join(timeout=5)
            self.server = None

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}/"
