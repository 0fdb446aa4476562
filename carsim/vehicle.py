"""Vehicles that can be started, driven and given a driver."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping

from .util import format_with_commas, generate_uuid_v4

if TYPE_CHECKING:
    from .person import Person

_REQUIRED_KEYS = (
    "uuid",
    "name",
    "price",
    "wheels",
    "doors",
    "seats",
    "maxPassengers",
    "maxSpeed",
    "manufacturer",
    "mileage",
    "horsepower",
    "started",
    "color",
)


def _plain(value: float) -> str:
    """Render a number the way a default stream does (six significant digits)."""
    return f"{value:g}"


@dataclass(eq=False)
class Vehicle:
    """A vehicle with its specifications, mileage, colour and an optional driver."""

    name: str
    price: float
    wheels: int
    doors: int
    seats: int
    max_passengers: int
    manufacturer: str
    mileage: float
    horsepower: float
    max_speed: float
    color: str
    driver: Person | None = field(default=None, init=False, repr=False)
    started: bool = field(default=False, init=False)
    uuid: str = field(default_factory=generate_uuid_v4, init=False)

    def start(self) -> bool:
        """Start the vehicle; fails if it is already running."""
        if self.started:
            return False
        self.started = True
        return True

    def stop(self) -> bool:
        """Stop the vehicle; fails if it is not running."""
        if not self.started:
            return False
        self.started = False
        return True

    def drive(self, distance: float) -> bool:
        """Add ``distance`` km to the mileage if running and the distance is positive."""
        if not self.started or distance <= 0:
            return False
        self.mileage += distance
        return True

    def add_driver(self, driver: Person | None) -> bool:
        """Seat ``driver`` unless there already is one or none is given."""
        if self.driver is not None or driver is None:
            return False
        self.driver = driver
        return True

    def remove_driver(self) -> bool:
        """Remove the current driver, if any."""
        if self.driver is None:
            return False
        self.driver = None
        return True

    def change_color(self, new_color: str) -> bool:
        """Repaint the vehicle; an empty or unchanged colour is refused."""
        if not new_color or new_color == self.color:
            return False
        self.color = new_color
        return True

    def change_price(self, new_price: float) -> bool:
        """Set a new, positive price."""
        if new_price <= 0:
            return False
        self.price = new_price
        return True

    def to_dict(self) -> dict[str, Any]:
        """Serialise the vehicle; it is always stored as not started and without a driver."""
        return {
            "uuid": self.uuid,
            "name": self.name,
            "price": self.price,
            "wheels": self.wheels,
            "doors": self.doors,
            "seats": self.seats,
            "maxPassengers": self.max_passengers,
            "maxSpeed": self.max_speed,
            "manufacturer": self.manufacturer,
            "mileage": self.mileage,
            "horsepower": self.horsepower,
            "started": False,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Vehicle:
        """Build a vehicle from a dictionary made by :meth:`to_dict`.

        The loaded vehicle receives a freshly generated UUID.
        """
        for key in _REQUIRED_KEYS:
            if key not in data:
                raise ValueError(f"{key} does not exist in JSON")
        return cls(
            str(data["name"]),
            float(data["price"]),
            int(data["wheels"]),
            int(data["doors"]),
            int(data["seats"]),
            int(data["maxPassengers"]),
            str(data["manufacturer"]),
            float(data["mileage"]),
            float(data["horsepower"]),
            float(data["maxSpeed"]),
            str(data["color"]),
        )

    def save(self, data_dir: str | Path = "data") -> Path:
        """Write the vehicle as ``<data_dir>/vehicles/<uuid>.json``."""
        directory = Path(data_dir) / "vehicles"
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{self.uuid}.json"
        with path.open("w", encoding="utf-8") as file:
            json.dump(self.to_dict(), file, indent=4)
            file.write("\n")
        return path

    def __str__(self) -> str:
        return (
            f"Vehicle Name: {self.name}\n"
            f"  Price: ${format_with_commas(float(self.price))}\n"
            f"  Started?: {'Yes' if self.started else 'No'}\n"
            f"  Wheels: {self.wheels}\n"
            f"  Doors: {self.doors}\n"
            f"  Seats: {self.seats}\n"
            f"  Max passengers: {self.max_passengers}\n"
            f"  Manufacturer: {self.manufacturer}\n"
            f"  Mileage: {_plain(self.mileage)} km\n"
            f"  Horsepower: {_plain(self.horsepower)} hp\n"
            f"  Max speed: {_plain(self.max_speed)} km/h\n"
            f"  Color: {self.color}\n"
        )