"""User accounts and customer contact records."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_PASSWORD = "password"


@dataclass(frozen=True)
class Account:
    """A username and password pair."""

    username: str
    password: str


@dataclass(frozen=True)
class CustomerInfo:
    """A customer's real name and contact number."""

    name: str
    contact: str


@dataclass
class AccountStore:
    """Login accounts together with known customer details."""

    accounts: list[Account] = field(default_factory=list)
    customers: list[CustomerInfo] = field(default_factory=list)

    @classmethod
    def default_admins(cls) -> "AccountStore":
        """The built-in administrator accounts."""
        return cls([Account("admin", DEFAULT_PASSWORD)])

    @classmethod
    def default_customers(cls) -> "AccountStore":
        """The built-in customer account and customer records."""
        return cls(
            [Account("user1", DEFAULT_PASSWORD)],
            [CustomerInfo(f"Customer {n}", f"contact-{n}") for n in range(1, 6)],
        )

    def create_user(
        self, username: str, real_name: str, contact: str, password: str
    ) -> Account:
        """Register a login account and return it.

        Only the login is stored; the name and contact are accepted for the
        registration form but not kept.
        """
        account = Account(username, password)
        self.accounts.append(account)
        return account

    def authenticate(self, username: str, password: str) -> bool:
        """Whether some account has exactly this username and password."""
        return any(
            account.username == username and account.password == password
            for account in self.accounts
        )