"""People who hold a bank account and own vehicles."""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Mapping

from .bank_account import BankAccount
from .util import format_with_commas, generate_uuid_v4
from .vehicle import Vehicle

_REQUIRED_KEYS = (
    "uuid",
    "firstName",
    "middleName",
    "lastName",
    "birthTimestamp",
    "height",
    "bankAccount",
    "vehicles",
)

_SECONDS_PER_YEAR = 60.0 * 60.0 * 24.0 * 365.0


class Person:
    """A person with a name, birth date, height, bank account and vehicles."""

    def __init__(
        self,
        first_name: str,
        middle_name: str,
        last_name: str,
        birth_timestamp: int,
        height: float,
        bank_account: BankAccount,
        uuid: str | None = None,
    ) -> None:
        self._first_name = first_name
        self.middle_name = middle_name
        self._last_name = last_name
        self.birth_timestamp = birth_timestamp
        self.height = height
        self.bank_account = bank_account
        self.uuid = uuid if uuid is not None else generate_uuid_v4()
        self.vehicles: list[Vehicle] = []

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        if not value:
            raise ValueError("first name must not be empty")
        self._first_name = value

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str) -> None:
        if not value:
            raise ValueError("last name must not be empty")
        self._last_name = value

    def change_height(self, delta: float) -> bool:
        """Change the height by ``delta`` cm unless it would not stay positive."""
        if self.height + delta <= 0:
            return False
        self.height += delta
        return True

    def age(self, now: int | None = None) -> float:
        """Age in years of 365 days at unix time ``now`` (default: the current time)."""
        current = int(time.time()) if now is None else now
        return (current - self.birth_timestamp) / _SECONDS_PER_YEAR

    def to_dict(self) -> dict[str, Any]:
        """Serialise the person, their account and vehicles."""
        return {
            "uuid": self.uuid,
            "firstName": self.first_name,
            "middleName": self.middle_name,
            "lastName": self.last_name,
            "birthTimestamp": self.birth_timestamp,
            "height": self.height,
            "bankAccount": self.bank_account.to_dict(),
            "vehicles": [vehicle.to_dict() for vehicle in self.vehicles],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Person:
        """Build a person from a dictionary made by :meth:`to_dict`."""
        for key in _REQUIRED_KEYS:
            if key not in data:
                raise ValueError(f"{key} does not exist in JSON")
        person = cls(
            str(data["firstName"]),
            str(data["middleName"]),
            str(data["lastName"]),
            int(data["birthTimestamp"]),
            float(data["height"]),
            BankAccount.from_dict(data["bankAccount"]),
            str(data["uuid"]),
        )
        person.vehicles.extend(Vehicle.from_dict(item) for item in data["vehicles"])
        return person

    def save(self, data_dir: str | Path = "data") -> Path:
        """Write the person as ``<data_dir>/people/<uuid>.json``."""
        directory = Path(data_dir) / "people"
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{self.uuid}.json"
        with path.open("w", encoding="utf-8") as file:
            json.dump(self.to_dict(), file, indent=4)
            file.write("\n")
        return path

    @classmethod
    def load_from_path(cls, path: str | Path) -> Person:
        """Load a person from the JSON file at ``path``."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"{path} does not exist")
        with path.open(encoding="utf-8") as file:
            return cls.from_dict(json.load(file))

    @classmethod
    def load_from_uuid(cls, uuid: str, data_dir: str | Path = "data") -> Person:
        """Load the person saved under ``uuid`` in ``data_dir``."""
        return cls.load_from_path(Path(data_dir) / "people" / f"{uuid}.json")

    @property
    def full_name(self) -> str:
        parts = [self.first_name]
        if self.middle_name:
            parts.append(self.middle_name)
        parts.append(self.last_name)
        return " ".join(parts)

    def __str__(self) -> str:
        return (
            f"{self.full_name} | Age: {format_with_commas(self.age())} years"
            f" | Height: {self.height:g}cm"
            f" | Balance: ${format_with_commas(float(self.bank_account.balance))}"
            f" | UUID: {self.uuid}"
        )

    def __repr__(self) -> str:
        return f"Person({self.full_name!r}, uuid={self.uuid!r})"