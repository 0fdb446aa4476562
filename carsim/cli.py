"""Interactive console simulator for people, vehicles and dealerships."""

from __future__ import annotations

import argparse
import calendar
import sys
import time
from pathlib import Path
from typing import Callable, Sequence, TextIO

from .bank_account import BankAccount
from .colorize import rize
from .dealership import DIRECTORY_NAME, VehicleDealership
from .person import Person
from .util import format_with_commas, prompt_line, prompt_with_validation
from .vehicle import Vehicle

BANNER = r"""
   _____           _____ _
  / ____|         / ____(_)
 | |     __ _ _ _| (___  _ _ __ ___
 | |    / _` | '__\___ \| | '_ ` _ \
 | |___| (_| | |  ____) | | | | | | |
  \_____\__,_|_| |_____/|_|_| |_| |_|
"""

MENU = (
    "What would you like to do?\n"
    "-- User actions --\n"
    "  1: Switch current user account\n"
    "  2: View your own info\n"
    "  3: View info about your bank account\n"
    "  4: View your own vehicles\n"
    "  5: Sell your car to a dealership\n"
    "-- Dealership actions --\n"
    "  10: View all dealerships\n"
    "  11: View a dealership's info\n"
    "  12: View a dealership's cars\n"
    "  13: Buy a dealership's car\n"
    "  14: Manufacture a car for the dealership\n"
    "-- System actions --\n"
    "  -2: Delete user account data\n"
    "  -5: Create vehicle dealership\n"
    "  -7: Delete vehicle dealership\n"
    "  -10: Save\n"
    "  -100: Quit\n"
)

QUIT_CHOICE = -100


def _non_empty(text: str) -> bool:
    return bool(text)


def _birth_timestamp(year: int, month: int, day: int) -> int:
    """Local unix time of the given date at the current time of day."""
    now = time.localtime()
    fields = (year, month, day, now.tm_hour, now.tm_min, now.tm_sec, 0, 0, -1)
    try:
        return int(time.mktime(fields))
    except (OverflowError, ValueError):
        return calendar.timegm(fields)


class CarSimulator:
    """The interactive simulator: loads saved state, runs the menu and saves on request."""

    def __init__(
        self,
        data_dir: str | Path = "data",
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.data_dir = Path(data_dir)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.people: list[Person] = []
        self.dealerships: list[VehicleDealership] = []
        self.player: Person | None = None

    # Console helpers

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _ask_line(self, prompt: str, checker: Callable[[str], bool] | None = None) -> str:
        return prompt_line(prompt, checker, self.stdin, self.stdout)

    def _ask_int(self, prompt: str, checker: Callable[[int], bool] | None = None) -> int:
        return prompt_with_validation(prompt, int, checker, self.stdin, self.stdout)

    def _ask_float(self, prompt: str, checker: Callable[[float], bool] | None = None) -> float:
        return prompt_with_validation(prompt, float, checker, self.stdin, self.stdout)

    def _ask_index(self, prompt: str, count: Callable[[], int]) -> int:
        """Ask for a 1-based index into a list and return it 0-based."""
        return self._ask_int(prompt, lambda x: 0 < x <= count()) - 1

    def _list_dealership_names(self, indent: str = "  ") -> None:
        for number, dealership in enumerate(self.dealerships, start=1):
            self._write(f"{indent}{number}. {dealership.name}\n")

    # Data

    def _people_dir(self) -> Path:
        return self.data_dir / "people"

    def _dealership_dir(self) -> Path:
        return self.data_dir / DIRECTORY_NAME

    def load_data(self) -> None:
        """Create the data directories if needed and load every saved person and dealership."""
        self._people_dir().mkdir(parents=True, exist_ok=True)
        self._dealership_dir().mkdir(parents=True, exist_ok=True)
        self.people.extend(Person.load_from_path(path) for path in sorted(self._people_dir().iterdir()))
        self.dealerships.extend(
            VehicleDealership.load_from_path(path) for path in sorted(self._dealership_dir().iterdir())
        )

    def save_all(self) -> None:
        """Save every person and dealership currently in memory."""
        for person in self.people:
            person.save(self.data_dir)
        for dealership in self.dealerships:
            dealership.save(self.data_dir)
        self._write("Saved all data!\n")

    # Builders from user input

    def _bank_account_from_input(self) -> BankAccount:
        self._write(rize("- Banking details -\n", "White", "Blue"))
        min_balance = self._ask_float("Minimum balance: ", lambda x: x >= 0)
        starting = self._ask_float("Starting balance: ", lambda x: x >= min_balance)
        withdraw_limit = self._ask_float("Withdraw limit: ", lambda x: x >= 0)
        deposit_limit = self._ask_float("Deposit limit: ", lambda x: x >= 0)
        return BankAccount(starting, min_balance, withdraw_limit, deposit_limit)

    def _person_from_input(self) -> Person:
        first_name = self._ask_line("First name: ", _non_empty)
        middle_name = self._ask_line("Middle name: ")
        last_name = self._ask_line("Last name: ", _non_empty)
        year = self._ask_int("Birth year: ", lambda x: x >= 1900)
        month = self._ask_int("Birth month: ", lambda x: 1 <= x <= 12)
        day = self._ask_int("Birth day: ", lambda x: 1 <= x <= 31)
        height = self._ask_float("Height (cm): ", lambda x: x >= 0)
        account = self._bank_account_from_input()
        return Person(first_name, middle_name, last_name, _birth_timestamp(year, month, day), height, account)

    def _dealership_from_input(self) -> VehicleDealership:
        self._write(rize("-- Create a vehicle dealership --\n", "White", "Green"))
        name = self._ask_line("Name of dealership: ", _non_empty)
        return VehicleDealership(name, self._bank_account_from_input())

    def _vehicle_from_input(self) -> Vehicle | None:
        if not self.dealerships:
            self._write(
                "ERROR: You cannot generate a vehicle without any vehicle dealerships. "
                "Please make one before making a vehicle."
            )
            return None
        self._write(rize("-- Create a vehicle --\n", "White", "Green"))
        name = self._ask_line("Complete name of vehicle (ex. Honda Accord 2023 Touring Hybrid): ", _non_empty)
        price = self._ask_float("Price of vehicle: $", lambda x: x >= 0)
        manufacturer = self._ask_line("Manufacturer: ", _non_empty)
        wheels = self._ask_int("# of wheels on vehicle: ", lambda x: x > 0)
        doors = self._ask_int("# of doors on vehicle: ", lambda x: x > 0)
        seats = self._ask_int("# of seats in vehicle: ", lambda x: x > 0)
        max_passengers = self._ask_int("Maximum # of passengers in vehicle: ", lambda x: x >= 0)
        mileage = self._ask_float("Starting mileage on vehicle (km): ", lambda x: x >= 0)
        horsepower = self._ask_float("Horsepower available: ", lambda x: x >= 0)
        max_speed = self._ask_float("Max speed available (km/h): ", lambda x: x >= 0)
        color = self._ask_line("Color (ex. Canyon River Blue Metallic): ", _non_empty)

        vehicle = Vehicle(
            name, price, wheels, doors, seats, max_passengers, manufacturer, mileage, horsepower, max_speed, color
        )
        self._write(f"Vehicle successfully created: {vehicle}\n")
        self._write("Please choose a dealership to add it under.\n")
        self._list_dealership_names(indent="")
        idx = self._ask_index(
            "Enter the index of the dealership to add the vehicle to: ", lambda: len(self.dealerships)
        )
        self.dealerships[idx].give_vehicle(vehicle)
        self._write(f"Successfully generated vehicle for {self.dealerships[idx].name}!\n")
        return vehicle

    # Actions

    def _switch_account(self) -> None:
        self._write(rize("List of preloaded people:\n", "Green"))
        for number, person in enumerate(self.people, start=1):
            self._write(f"{number}. {person}\n")
        if not self.people:
            self._write(
                "  No people profiles could be loaded in :( If you didn't expect this, "
                "check the path of your data files (should be data/people)\n"
            )
        answer = self._ask_line(
            "Would you like to import your account (i, will error if none are imported), "
            "or create a new one (c)? ",
            lambda s: (s == "i" and bool(self.people)) or s == "c",
        )
        if answer == "c":
            self.people.append(self._person_from_input())
            self.player = self.people[-1]
        else:
            idx = self._ask_index("Enter the index of the account to import: ", lambda: len(self.people))
            self.player = self.people[idx]
        self._write(f"Your info: {self.player}\n")

    def _show_info(self) -> None:
        self._write(f"Your current info: {self.player}\n")

    def _show_bank_account(self) -> None:
        self._write(f"Your bank account info: \n{self.player.bank_account}\n")

    def _show_vehicles(self) -> None:
        self._write("Your vehicle list: \n")
        for number, vehicle in enumerate(self.player.vehicles, start=1):
            self._write(f"{number}. {vehicle}\n")
        if not self.player.vehicles:
            self._write("  You have no vehicles :(\n")

    def _sell_vehicle(self) -> None:
        player = self.player
        if not player.vehicles:
            self._write("You cannot sell your vehicle when you don't have any. Please buy a vehicle and try again.\n")
            return
        if not self.dealerships:
            self._write(
                "You cannot sell your vehicle when no dealerships exist. Please make a dealership and try again.\n"
            )
            return
        self._write("Your vehicles:: \n")
        for number, vehicle in enumerate(player.vehicles, start=1):
            self._write(f"{number}: {vehicle.name}, ${format_with_commas(float(vehicle.price))}\n")
        vehicle_idx = self._ask_index(
            "Which vehicle would you like to sell? (give index) ", lambda: len(player.vehicles)
        )
        self._write("List of all dealerships: \n")
        self._list_dealership_names()
        dealership_idx = self._ask_index(
            "Which dealership would you like to sell your vehicle to? (give index) ", lambda: len(self.dealerships)
        )
        dealership = self.dealerships[dealership_idx]
        sold_idx = dealership.sell_vehicle_to(player.vehicles[vehicle_idx], player.bank_account)
        if sold_idx is None:
            self._write(
                "The transaction could not be completed, likely because the dealership doesn't have enough money "
                "or due to deposit/withdraw limits on either accounts. Please check these and try again later.\n"
            )
            return
        del player.vehicles[vehicle_idx]
        self._write(
            f"The transaction was successful! {dealership.name} now owns this vehicle:\n"
            f"{dealership.vehicles[sold_idx]}\n"
        )

    def _list_dealerships(self) -> None:
        self._write("List of all dealerships: \n")
        self._list_dealership_names()
        if not self.dealerships:
            self._write("  There are no dealerships :(\n")

    def _show_dealership(self) -> None:
        if not self.dealerships:
            self._write("There are no dealerships to view.\n")
            return
        idx = self._ask_index(
            "Which dealership would like to view more info about? (give index)  ", lambda: len(self.dealerships)
        )
        self._write(f"{self.dealerships[idx]}\n")

    def _print_dealership_vehicles(self, dealership: VehicleDealership) -> None:
        self._write(f"Vehicles of {dealership.name}: \n")
        for number, vehicle in enumerate(dealership.vehicles, start=1):
            self._write(f"{number}: {vehicle}\n")
        if not dealership.vehicles:
            self._write("  There are no vehicles :(\n")

    def _show_dealership_vehicles(self) -> None:
        if not self.dealerships:
            self._write("There are no dealerships to view.\n")
            return
        idx = self._ask_index(
            "Which dealership's vehicles would you like to view? (give index) ", lambda: len(self.dealerships)
        )
        self._print_dealership_vehicles(self.dealerships[idx])

    def _buy_vehicle(self) -> None:
        if not self.dealerships:
            self._write("There are no dealerships to view.\n")
            return
        idx = self._ask_index(
            "Which dealership's vehicles would like to buy? (give index) ", lambda: len(self.dealerships)
        )
        dealership = self.dealerships[idx]
        self._print_dealership_vehicles(dealership)
        if not dealership.vehicles:
            return
        vehicle_idx = self._ask_index(
            "Which vehicle would like to buy? (give index) ", lambda: len(dealership.vehicles)
        )
        bought = dealership.buy_vehicle_from(vehicle_idx, self.player.bank_account)
        if bought is None:
            self._write(
                "The transaction could not be completed, likely because you don't have enough money or "
                "deposit/withdraw limits on either accounts. Please check these.\n"
            )
            return
        self.player.vehicles.append(bought)
        self._write(f"The transaction was successful! You now own this vehicle:\n{bought}\n")

    def _manufacture_vehicle(self) -> None:
        if not self.dealerships:
            self._write("There are no dealerships to generate a vehicle for.\n")
            return
        self._vehicle_from_input()

    def _delete_person(self) -> None:
        idx = self._ask_index("Enter the index of the account to delete: ", lambda: len(self.people))
        if self.people[idx] is self.player:
            self._write("You cannot delete the user that you are signed in as.\n")
            return
        del self.people[idx]
        self._write("Successfully deleted account data.\n")

    def _create_dealership(self) -> None:
        self.dealerships.append(self._dealership_from_input())
        self._write("Successfully created a dealership!\n")

    def _delete_dealership(self) -> None:
        if not self.dealerships:
            self._write("There are no dealerships to delete.\n")
            return
        idx = self._ask_index("Enter the index of the dealership to delete: ", lambda: len(self.dealerships))
        del self.dealerships[idx]
        self._write("Successfully deleted dealership data.\n")

    def _actions(self) -> dict[int, Callable[[], None]]:
        return {
            1: self._switch_account,
            2: self._show_info,
            3: self._show_bank_account,
            4: self._show_vehicles,
            5: self._sell_vehicle,
            10: self._list_dealerships,
            11: self._show_dealership,
            12: self._show_dealership_vehicles,
            13: self._buy_vehicle,
            14: self._manufacture_vehicle,
            -2: self._delete_person,
            -5: self._create_dealership,
            -7: self._delete_dealership,
            -10: self.save_all,
        }

    def run(self) -> int:
        """Load the saved state and run the menu until the user quits; return the exit status."""
        self._write(rize(BANNER, "Orange", "Default", "Bold"))
        self._write(rize("Welcome to the Car Simulator!\n", "Red", "Default", "Bold"))
        self.load_data()
        self._switch_account()
        self._write("\n\n")

        actions = self._actions()
        while True:
            self._write(MENU)
            choice = self._ask_int("Choice: ")
            if choice == QUIT_CHOICE:
                self._write("Thank you for using the program!\n")
                return 0
            action = actions.get(choice)
            if action is None:
                self._write("Invalid input. Please try again.")
            else:
                action()
            self._ask_line("\nPress enter to continue...")
            self._write("\n\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulator from the command line."""
    parser = argparse.ArgumentParser(prog="carsim", description="Simulate people, vehicles and dealerships.")
    parser.add_argument("--data-dir", default="data", help="directory holding saved state (default: data)")
    args = parser.parse_args(argv)
    simulator = CarSimulator(args.data_dir)
    try:
        return simulator.run()
    except EOFError:
        sys.stdout.write("\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())