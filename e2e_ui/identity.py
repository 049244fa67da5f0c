"""Synthetic user identities and test data for both applications."""
from __future__ import annotations

import logging
import secrets
import string
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from e2e_ui.timeouts import PASSWORD_LENGTH

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD = "TestPassword123!"
REGISTRATION_SUCCESS_MESSAGE = "Your account was created successfully. You are now logged in."


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


@dataclass
class UserIdentity:
    """Credentials plus the profile fields the banking registration form asks for."""

    username: str
    password: str
    confirm_password: str
    first_name: str
    last_name: str
    address: str
    city: str
    state: str
    zip_code: str
    phone: str
    ssn: str

    def registration_fields(self) -> List[str]:
        """Values in the order the registration form lays its rows out."""
        return [
            self.first_name,
            self.last_name,
            self.address,
            self.city,
            self.state,
            self.zip_code,
            self.phone,
            self.ssn,
            self.username,
            self.password,
            self.confirm_password,
        ]


def create_identity(prefix: str = "testuser", clock: Optional[Callable[[], int]] = None) -> UserIdentity:
    """Build a fresh identity whose username is the current epoch-millisecond timestamp.

    Uniqueness comes only from the clock: two calls inside the same
    millisecond return the same username. The prefix only labels the
    identity in logs; the banking app gets the bare timestamp.
    """
    now = (clock or _epoch_millis)()
    identity = UserIdentity(
        username=str(now),
        password=DEFAULT_PASSWORD,
        confirm_password=DEFAULT_PASSWORD,
        first_name="Test",
        last_name="User",
        address="123 Test Street",
        city="Test City",
        state="CA",
        zip_code="12345",
        phone="555-123-4567",
        ssn="123-45-6789",
    )
    logger.debug("Created identity %s (prefix=%s)", identity.username, prefix)
    return identity


@dataclass
class ExpectedUser:
    identity: UserIdentity
    expected_message: str


PREDEFINED_TEST_USER = ExpectedUser(
    identity=UserIdentity(
        username="john",
        password="demo",
        confirm_password="demo",
        first_name="John",
        last_name="Smith",
        address="123 Main St",
        city="Anytown",
        state="CA",
        zip_code="12345",
        phone="555-123-4567",
        ssn="123-45-6789",
    ),
    expected_message=REGISTRATION_SUCCESS_MESSAGE,
)

INVALID_TEST_USER = UserIdentity(
    username="invaliduser",
    password="wrongpassword",
    confirm_password="wrongpassword",
    first_name="Invalid",
    last_name="User",
    address="456 Wrong St",
    city="Wrong City",
    state="XX",
    zip_code="00000",
    phone="555-999-9999",
    ssn="999-99-9999",
)


@dataclass
class PayeeData:
    name: str
    address: str
    city: str
    state: str
    zip_code: str
    phone: str
    account_number: str


DEFAULT_PAYEE = PayeeData(
    name="Test Utility Company",
    address="123 Billing Street",
    city="Billing City",
    state="CA",
    zip_code="12345",
    phone="555-987-6543",
    account_number="99999",
)


# ============================================================================
# Storefront data
# ============================================================================

PASSWORD_SYMBOLS = "@$!%*?&"
_BASE36 = string.digits + string.ascii_lowercase


@dataclass
class StorefrontRegistration:
    first_name: str
    last_name: str
    email: str
    password: str


@dataclass
class StorefrontLogin:
    email: str
    password: str


def unique_email() -> str:
    suffix = "".join(secrets.choice(_BASE36) for _ in range(6))
    return f"test.{_epoch_millis()}.{suffix}@example.com"


def strong_password(length: int = PASSWORD_LENGTH) -> str:
    """Random password with at least one lowercase, uppercase, digit and symbol."""
    classes = [string.ascii_lowercase, string.ascii_uppercase, string.digits, PASSWORD_SYMBOLS]
    if length < len(classes):
        raise ValueError(f"password length must be at least {len(classes)}")
    chars = [secrets.choice(pool) for pool in classes]
    alphabet = "".join(classes)
    chars.extend(secrets.choice(alphabet) for _ in range(length - len(classes)))
    secrets.SystemRandom().shuffle(chars)
    return "".join(chars)


def storefront_registration_data() -> StorefrontRegistration:
    return StorefrontRegistration(
        first_name="Test",
        last_name="User",
        email=unique_email(),
        password=strong_password(),
    )


def storefront_login_data(email: Optional[str] = None, password: Optional[str] = None) -> StorefrontLogin:
    return StorefrontLogin(email=email or unique_email(), password=password or strong_password())


def invalid_login_data() -> StorefrontLogin:
    return StorefrontLogin(email="invalid@example.com", password="invalid-password")
