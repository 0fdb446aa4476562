# carsim

carsim is an interactive, text-based car simulator. In it you create:

- **people**, each with a bank account;
- **vehicle dealerships**, which own, buy and sell vehicles.

People can buy cars from dealerships and sell them back. All of this state can be saved as JSON files, so a later session can continue where you left off.

The package has no dependencies beyond the Python standard library. It needs Python 3.10 or later.

## Installation

```
pip install .
```

To install with the test requirements:

```
pip install ".[test]"
```

## Running

```
carsim
carsim --data-dir path/to/state
```

### Loading saved state

`--data-dir` sets the directory that holds saved state. The default is `data`, relative to the current directory.

On start, carsim creates `<data-dir>/people/` and `<data-dir>/vehicle-dealership/` if they are missing. It then loads every file in them:

- each file in `people/` as a person;
- each file in `vehicle-dealership/` as a dealership.

### Choosing a person

After loading, you choose who you are playing as. You can import one of the loaded people by number, or create a new person. A new person needs:

- a name;
- a birth date;
- a height;
- banking details.

### The menu

Next, a numbered menu appears:

| Choice | Action |
| --- | --- |
| `1` | Switch current user account |
| `2` | View your own info |
| `3` | View info about your bank account |
| `4` | View your own vehicles |
| `5` | Sell your car to a dealership |
| `10` | View all dealerships |
| `11` | View a dealership's info |
| `12` | View a dealership's cars |
| `13` | Buy a dealership's car |
| `14` | Manufacture a car for the dealership |
| `-2` | Delete user account data |
| `-5` | Create vehicle dealership |
| `-7` | Delete vehicle dealership |
| `-10` | Save |
| `-100` | Quit |

### Input and exit

Each prompt repeats until you give a valid answer.

Nothing is written to disk until you choose **Save** (`-10`). Save writes every person and every dealership in memory. Deleting a person or a dealership only removes it from memory; a file that was already saved stays on disk.

The command exits with status 0 when you quit with `-100`. It exits with status 1 if input ends before that.

## Using the library

The model classes also work on their own:

```python
from carsim.bank_account import BankAccount
from carsim.vehicle import Vehicle
from carsim.dealership import VehicleDealership

dealer = VehicleDealership("Main Street Motors", BankAccount(50_000, 0, 40_000, 100_000))
buyer = BankAccount(30_000, 0, 30_000, 30_000)

car = Vehicle("Hatchback 2023", 25_000, 4, 5, 5, 5, "Acme", 0, 150, 190, "Blue")
dealer.give_vehicle(car)

bought = dealer.buy_vehicle_from(0, buyer)  # the Vehicle, or None if the transaction fails
print(buyer)                               # balance and limits, formatted with commas
```

### BankAccount (`carsim.bank_account`)

A `BankAccount` takes these arguments, in this order:

1. a starting balance;
2. a minimum balance;
3. a withdraw limit;
4. a deposit limit;
5. optionally, a UUID.

A starting balance below the minimum balance raises `ValueError`.

- `withdraw()` and `deposit()` return whether the operation happened.
- `can_withdraw()` and `can_deposit()` check an amount without changing the balance.
- `BankAccount.make_transaction(sender, receiver, amount)` moves money between two accounts. It returns `True` on success. If the transfer is not possible, it prints `Transaction impossible` and returns `False`.
- `BankAccount.check_transaction(sender, receiver, amount)` checks a transfer without making it.

### Vehicle (`carsim.vehicle`)

A `Vehicle` can be:

- started and stopped with `start()` and `stop()`;
- driven with `drive(distance)`, which works only while the vehicle is started and the distance is positive;
- given or relieved of a driver with `add_driver()` and `remove_driver()`;
- repainted with `change_color()`;
- repriced with `change_price()`.

Each of these methods returns whether it succeeded.

### Person (`carsim.person`)

A `Person` has:

- `first_name` and `last_name`; setting either to an empty string raises `ValueError`;
- a `middle_name`, which may be empty;
- a birth timestamp;
- a `height`, changed with `change_height()`;
- a `bank_account`;
- a `vehicles` list.

`age()` gives the age in 365-day years.

### VehicleDealership (`carsim.dealership`)

A `VehicleDealership` has three methods:

- `buy_vehicle_from(idx, buyer_account)` sells a vehicle to a buyer. It returns the vehicle, or `None` if there is no vehicle at that index or the payment fails.
- `sell_vehicle_to(vehicle, seller_account)` buys a vehicle from a seller. It returns the vehicle's new index, or `None` if the vehicle is missing, is already owned, or the payment fails.
- `give_vehicle(vehicle)` adds a vehicle without payment. It returns the vehicle's new index, or `None` if the vehicle is already owned.

### Saving and loading

`BankAccount`, `Vehicle`, `Person` and `VehicleDealership` all provide:

- `to_dict()` and `from_dict()`. `from_dict()` raises `ValueError` when a required key is missing.
- `save(data_dir)`, which writes `<uuid>.json` into a subdirectory of `data_dir`:

| Class | Subdirectory |
| --- | --- |
| `BankAccount` | `bank_accounts/` |
| `Vehicle` | `vehicles/` |
| `Person` | `people/` |
| `VehicleDealership` | `vehicle-dealership/` |

`Person` and `VehicleDealership` also have `load_from_path()` and `load_from_uuid()`. These raise `FileNotFoundError` for a missing file.

### Helper modules

- `carsim.util` provides:
  - `generate_uuid_v4()`;
  - `format_with_commas()`;
  - the prompt helpers `prompt_with_validation()` and `prompt_line()`.
- `carsim.colorize.rize()` wraps text in ANSI colour codes.

## Limitations

- People and dealerships store their bank account and vehicles inside their own JSON file. The separate `bank_accounts/` and `vehicles/` files are never read back.
- A vehicle's driver is not saved.
- A vehicle is always saved as stopped.
- A vehicle loaded from a file gets a new UUID.