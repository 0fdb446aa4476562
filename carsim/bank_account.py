"""Bank accounts with balances, limits and transfers."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .util import format_with_commas, generate_uuid_v4

_REQUIRED_KEYS = ("uuid", "balance", "minBalance", "withdrawLimit", "depositLimit")


@dataclass
class BankAccount:
    """An account holding a balance, guarded by a minimum balance and per-operation limits."""

    balance: float
    min_balance: float
    withdraw_limit: float
    deposit_limit: float
    uuid: str = field(default_factory=generate_uuid_v4)

    def __post_init__(self) -> None:
        if self.balance < self.min_balance:
            raise ValueError("starting balance is lower than the minimum balance")

    def can_withdraw(self, amount: float) -> bool:
        """Whether ``amount`` may be withdrawn now."""
        return amount <= self.withdraw_limit and amount <= self.balance - self.min_balance

    def can_deposit(self, amount: float) -> bool:
        """Whether ``amount`` may be deposited now."""
        return amount <= self.deposit_limit

    def withdraw(self, amount: float) -> bool:
        """Withdraw ``amount`` if allowed; return whether it happened."""
        if not self.can_withdraw(amount):
            return False
        self.balance -= amount
        return True

    def deposit(self, amount: float) -> bool:
        """Deposit ``amount`` if allowed; return whether it happened."""
        if not self.can_deposit(amount):
            return False
        self.balance += amount
        return True

    @staticmethod
    def check_transaction(sender: BankAccount, receiver: BankAccount, amount: float) -> bool:
        """Whether ``amount`` can move from ``sender`` to ``receiver``."""
        return sender.can_withdraw(amount) and receiver.can_deposit(amount)

    @staticmethod
    def make_transaction(sender: BankAccount, receiver: BankAccount, amount: float) -> bool:
        """Move ``amount`` from ``sender`` to ``receiver`` if possible."""
        if not BankAccount.check_transaction(sender, receiver, amount):
            print("Transaction impossible")
            return False
        sender.withdraw(amount)
        receiver.deposit(amount)
        return True

    def to_dict(self) -> dict[str, Any]:
        """Serialise the account to a JSON-compatible dictionary."""
        return {
            "uuid": self.uuid,
            "balance": self.balance,
            "minBalance": self.min_balance,
            "withdrawLimit": self.withdraw_limit,
            "depositLimit": self.deposit_limit,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BankAccount:
        """Build an account from a dictionary made by :meth:`to_dict`."""
        for key in _REQUIRED_KEYS:
            if key not in data:
                raise ValueError(f"{key} does not exist in JSON")
        return cls(
            float(data["balance"]),
            float(data["minBalance"]),
            float(data["withdrawLimit"]),
            float(data["depositLimit"]),
            str(data["uuid"]),
        )

    def save(self, data_dir: str | Path = "data") -> Path:
        """Write the account as ``<data_dir>/bank_accounts/<uuid>.json``."""
        directory = Path(data_dir) / "bank_accounts"
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{self.uuid}.json"
        with path.open("w", encoding="utf-8") as file:
            json.dump(self.to_dict(), file, indent=4)
            file.write("\n")
        return path

    def __str__(self) -> str:
        return (
            f"  Balance: ${format_with_commas(self.balance)}\n"
            f"  Minimum balance: ${format_with_commas(self.min_balance)}\n"
            f"  Withdraw limit: ${format_with_commas(self.withdraw_limit)}\n"
            f"  Deposit limit: ${format_with_commas(self.deposit_limit)}\n"
        )