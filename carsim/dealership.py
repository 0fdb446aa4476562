"""Vehicle dealerships that own, buy and sell vehicles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .bank_account import BankAccount
from .util import format_with_commas, generate_uuid_v4
from .vehicle import Vehicle

_REQUIRED_KEYS = ("uuid", "name", "bankAccount", "vehicles")

DIRECTORY_NAME = "vehicle-dealership"


@dataclass(eq=False)
class VehicleDealership:
    """A company with a bank account that can own, buy and sell vehicles."""

    name: str
    bank_account: BankAccount
    uuid: str = field(default_factory=generate_uuid_v4)
    vehicles: list[Vehicle] = field(default_factory=list)

    def _owns(self, vehicle: Vehicle) -> bool:
        return any(owned is vehicle for owned in self.vehicles)

    def buy_vehicle_from(self, idx: int, buyer_account: BankAccount) -> Vehicle | None:
        """Sell the vehicle at ``idx`` to the holder of ``buyer_account``.

        Returns the vehicle, or ``None`` if there is no such vehicle or the
        payment could not be made.
        """
        if not 0 <= idx < len(self.vehicles):
            return None
        desired = self.vehicles[idx]
        if not BankAccount.make_transaction(buyer_account, self.bank_account, desired.price):
            return None
        del self.vehicles[idx]
        return desired

    def sell_vehicle_to(self, vehicle: Vehicle | None, seller_account: BankAccount) -> int | None:
        """Buy ``vehicle`` from the holder of ``seller_account``.

        Returns the vehicle's index in :attr:`vehicles`, or ``None`` if there
        is no vehicle, it is already owned, or the payment could not be made.
        """
        if vehicle is None or self._owns(vehicle):
            return None
        if not BankAccount.make_transaction(self.bank_account, seller_account, vehicle.price):
            return None
        self.vehicles.append(vehicle)
        return len(self.vehicles) - 1

    def give_vehicle(self, vehicle: Vehicle) -> int | None:
        """Add ``vehicle`` without payment; ``None`` if it is already owned."""
        if self._owns(vehicle):
            return None
        self.vehicles.append(vehicle)
        return len(self.vehicles) - 1

    def to_dict(self) -> dict[str, Any]:
        """Serialise the dealership, its account and its vehicles."""
        return {
            "uuid": self.uuid,
            "name": self.name,
            "bankAccount": self.bank_account.to_dict(),
            "vehicles": [vehicle.to_dict() for vehicle in self.vehicles],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VehicleDealership:
        """Build a dealership from a dictionary made by :meth:`to_dict`."""
        for key in _REQUIRED_KEYS:
            if key not in data:
                raise ValueError(f"{key} does not exist in JSON")
        dealership = cls(
            str(data["name"]),
            BankAccount.from_dict(data["bankAccount"]),
            str(data["uuid"]),
        )
        dealership.vehicles.extend(Vehicle.from_dict(item) for item in data["vehicles"])
        return dealership

    def save(self, data_dir: str | Path = "data") -> Path:
        """Write the dealership as ``<data_dir>/vehicle-dealership/<uuid>.json``."""
        directory = Path(data_dir) / DIRECTORY_NAME
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{self.uuid}.json"
        with path.open("w", encoding="utf-8") as file:
            json.dump(self.to_dict(), file, indent=4)
            file.write("\n")
        return path

    @classmethod
    def load_from_path(cls, path: str | Path) -> VehicleDealership:
        """Load a dealership from the JSON file at ``path``."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"{path} does not exist")
        with path.open(encoding="utf-8") as file:
            return cls.from_dict(json.load(file))

    @classmethod
    def load_from_uuid(cls, uuid: str, data_dir: str | Path = "data") -> VehicleDealership:
        """Load the dealership saved under ``uuid`` in ``data_dir``."""
        return cls.load_from_path(Path(data_dir) / DIRECTORY_NAME / f"{uuid}.json")

    def __str__(self) -> str:
        return (
            f"Dealership Name: {self.name}\n"
            f"  UUID: {self.uuid}\n"
            f"  # of vehicles: {format_with_commas(len(self.vehicles))}\n"
            f"Bank Account Info:\n{self.bank_account}\n"
        )