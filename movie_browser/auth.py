import base64
import logging
import re
import time
from datetime import datetime, timezone

from movie_browser.config import CURRENT_USER_KEY, PASSWORD_SALT, USERS_KEY
from movie_browser.errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from movie_browser.models import Account, Result, Session

log = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


def obfuscate_password(password):
    """
    Obfuscates a password for storage.

    This is base64 over the password plus a static salt: deterministic and
    reversible, so it only keeps plain text out of casual view. Replace with
    a salted one-way hash before using the store for anything real.

    Args:
        password (str): The plain text password.

    Returns:
        str: The obfuscated token.
    """
    return base64.b64encode((password + PASSWORD_SALT).encode("utf-8")).decode("ascii")


def is_valid_email(email):
    return bool(EMAIL_RE.match(email))


class CredentialStore:
    """
    Registers accounts and manages the single current session.

    Both the accounts list and the session live in a KeyValueStore, so a
    session survives restarts until logout or a storage clear.
    """

    def __init__(self, store):
        self.store = store

    def get_accounts(self):
        """
        Retrieves all registered accounts.

        Returns:
            list[Account]: Accounts in registration order.
        """
        return [Account.from_dict(a) for a in self.store.get(USERS_KEY) or []]

    def save_accounts(self, accounts):
        self.store.set(USERS_KEY, [a.to_dict() for a in accounts])

    def find_account(self, email):
        email = email.strip().lower()
        for account in self.get_accounts():
            if account.email.lower() == email:
                return account
        return None

    def register(self, name, email, password):
        """
        Creates a new account. Does not log the user in.

        Args:
            name (str): Display name.
            email (str): Email, compared case-insensitively.
            password (str): Plain text password, at least 6 characters.

        Returns:
            Result: A successful result.

        Raises:
            ValidationError: A field is empty, the email is malformed or the
                password is too short.
            DuplicateEmailError: The email is already registered.
        """
        name = (name or "").strip()
        email = (email or "").strip()
        password = password or ""

        if not name or not email or not password:
            raise ValidationError("All fields are required")
        if not is_valid_email(email):
            raise ValidationError("Invalid email format", field="email")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
                field="password",
            )

        accounts = self.get_accounts()
        if any(a.email.lower() == email.lower() for a in accounts):
            raise DuplicateEmailError("Email already registered")

        account = Account(
            id=self._new_id(accounts),
            name=name,
            email=email.lower(),
            password=obfuscate_password(password),
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        accounts.append(account)
        self.save_accounts(accounts)
        log.info("Registered account %s", account.email)

        return Result(success=True, message="Registration successful! Please login.")

    def login(self, email, password):
        """
        Authenticates a user and stores the session.

        Returns:
            Result: A successful result carrying the new Session.

        Raises:
            ValidationError: Email or password is empty.
            NotFoundError: No account has that email.
            InvalidCredentialsError: The password does not match.
        """
        email = (email or "").strip()
        if not email or not password:
            raise ValidationError("Email and password are required")

        account = self.find_account(email)
        if account is None:
            raise NotFoundError("User not found. Please register first.")

        if account.password != obfuscate_password(password):
            raise InvalidCredentialsError("Invalid email or password")

        session = account.to_session()
        self.store.set(CURRENT_USER_KEY, session.to_dict())
        log.info("Logged in %s", session.email)

        return Result(success=True, message="Login successful!", session=session)

    def logout(self):
        session = self.current_session()
        self.store.remove(CURRENT_USER_KEY)
        if session:
            log.info("Logged out %s", session.email)

    def current_session(self):
        data = self.store.get(CURRENT_USER_KEY)
        return Session.from_dict(data) if data else None

    def is_authenticated(self):
        return self.current_session() is not None

    @staticmethod
    def _new_id(accounts):
        # Millisecond timestamps can collide when registering in a tight loop
        new_id = int(time.time() * 1000)
        taken = {a.id for a in accounts}
        while new_id in taken:
            new_id += 1
        return new_id
