import json

import pytest

from carsim.bank_account import BankAccount
from carsim.dealership import VehicleDealership
from carsim.vehicle import Vehicle


def make_vehicle(name="Roadster", price=5000.0):
    return Vehicle(name, price, 4, 4, 5, 4, "Maker", 100.0, 150.0, 180.0, "Blue")


def make_account(balance=10000.0, limit=100000.0):
    return BankAccount(balance, 0.0, limit, limit)


def make_dealership(balance=50000.0):
    return VehicleDealership("Lot", make_account(balance))


def test_give_vehicle_returns_indices_and_refuses_duplicates():
    dealer = make_dealership()
    first = make_vehicle("A")
    second = make_vehicle("B")
    assert dealer.give_vehicle(first) == 0
    assert dealer.give_vehicle(second) == 1
    assert dealer.give_vehicle(first) is None
    assert dealer.vehicles == [first, second]


def test_buy_vehicle_moves_money_and_vehicle():
    dealer = make_dealership()
    vehicle = make_vehicle()
    dealer.give_vehicle(vehicle)
    buyer = make_account()
    buyer_start = buyer.balance
    dealer_start = dealer.bank_account.balance

    bought = dealer.buy_vehicle_from(0, buyer)

    assert bought is vehicle
    assert dealer.vehicles == []
    assert buyer.balance == buyer_start - vehicle.price
    assert dealer.bank_account.balance == dealer_start + vehicle.price


@pytest.mark.parametrize("idx", [1, 5, -1])
def test_buy_vehicle_out_of_range(idx):
    dealer = make_dealership()
    dealer.give_vehicle(make_vehicle())
    buyer = make_account()
    assert dealer.buy_vehicle_from(idx, buyer) is None
    assert len(dealer.vehicles) == 1


def test_buy_from_empty_dealership():
    dealer = make_dealership()
    assert dealer.buy_vehicle_from(0, make_account()) is None


def test_buy_vehicle_insufficient_funds_keeps_everything():
    dealer = make_dealership()
    vehicle = make_vehicle(price=5000.0)
    dealer.give_vehicle(vehicle)
    buyer = make_account(balance=100.0)
    dealer_start = dealer.bank_account.balance

    assert dealer.buy_vehicle_from(0, buyer) is None
    assert dealer.vehicles == [vehicle]
    assert buyer.balance == 100.0
    assert dealer.bank_account.balance == dealer_start


def test_sell_vehicle_to_dealership():
    dealer = make_dealership()
    dealer.give_vehicle(make_vehicle("Existing"))
    vehicle = make_vehicle("Sold")
    seller = make_account()
    seller_start = seller.balance
    dealer_start = dealer.bank_account.balance

    idx = dealer.sell_vehicle_to(vehicle, seller)

    assert idx == len(dealer.vehicles) - 1
    assert dealer.vehicles[idx] is vehicle
    assert seller.balance == seller_start + vehicle.price
    assert dealer.bank_account.balance == dealer_start - vehicle.price


def test_sell_none_vehicle():
    dealer = make_dealership()
    assert dealer.sell_vehicle_to(None, make_account()) is None
    assert dealer.vehicles == []


def test_sell_already_owned_vehicle():
    dealer = make_dealership()
    vehicle = make_vehicle()
    dealer.give_vehicle(vehicle)
    seller = make_account()
    start = seller.balance
    assert dealer.sell_vehicle_to(vehicle, seller) is None
    assert seller.balance == start
    assert len(dealer.vehicles) == 1


def test_sell_when_dealership_cannot_pay():
    dealer = make_dealership(balance=10.0)
    seller = make_account()
    assert dealer.sell_vehicle_to(make_vehicle(), seller) is None
    assert dealer.vehicles == []
    assert dealer.bank_account.balance == 10.0


def test_dict_round_trip():
    dealer = make_dealership()
    dealer.give_vehicle(make_vehicle("A"))
    dealer.give_vehicle(make_vehicle("B"))
    data = dealer.to_dict()

    loaded = VehicleDealership.from_dict(data)

    assert loaded.name == dealer.name
    assert loaded.uuid == dealer.uuid
    assert loaded.bank_account.to_dict() == dealer.bank_account.to_dict()
    assert [v.name for v in loaded.vehicles] == ["A", "B"]


def test_to_dict_keys():
    dealer = make_dealership()
    assert set(dealer.to_dict()) == {"uuid", "name", "bankAccount", "vehicles"}
    assert dealer.to_dict()["vehicles"] == []


@pytest.mark.parametrize("missing", ["uuid", "name", "bankAccount", "vehicles"])
def test_from_dict_missing_key(missing):
    data = make_dealership().to_dict()
    del data[missing]
    with pytest.raises(ValueError, match=missing):
        VehicleDealership.from_dict(data)


def test_save_and_load(tmp_path):
    dealer = make_dealership()
    dealer.give_vehicle(make_vehicle("Saved"))
    path = dealer.save(tmp_path)

    assert path == tmp_path / "vehicle-dealership" / f"{dealer.uuid}.json"
    assert json.loads(path.read_text(encoding="utf-8")) == dealer.to_dict()

    loaded = VehicleDealership.load_from_path(path)
    assert loaded.uuid == dealer.uuid
    assert [v.name for v in loaded.vehicles] == ["Saved"]

    by_uuid = VehicleDealership.load_from_uuid(dealer.uuid, tmp_path)
    assert by_uuid.to_dict()["bankAccount"] == dealer.bank_account.to_dict()


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        VehicleDealership.load_from_path(tmp_path / "absent.json")
    with pytest.raises(FileNotFoundError):
        VehicleDealership.load_from_uuid("absent", tmp_path)


def test_str_format():
    dealer = make_dealership()
    dealer.give_vehicle(make_vehicle("A"))
    dealer.give_vehicle(make_vehicle("B"))
    text = str(dealer)
    assert text.startswith(f"Dealership Name: Lot\n  UUID: {dealer.uuid}\n")
    assert "  # of vehicles: 2\n" in text
    assert text.endswith(f"Bank Account Info:\n{dealer.bank_account}\n")