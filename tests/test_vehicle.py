import json

import pytest

from carsim.vehicle import Vehicle


def make_vehicle(**overrides):
    values = dict(
        name="Honda Accord 2023 Touring Hybrid",
        price=45000.0,
        wheels=4,
        doors=4,
        seats=5,
        max_passengers=4,
        manufacturer="Honda",
        mileage=1500.0,
        horsepower=204.0,
        max_speed=180.0,
        color="Canyon River Blue Metallic",
    )
    values.update(overrides)
    return Vehicle(**values)


def test_new_vehicle_is_stopped_without_driver():
    vehicle = make_vehicle()
    assert vehicle.started is False
    assert vehicle.driver is None


def test_start_and_stop_cycle():
    vehicle = make_vehicle()
    assert vehicle.stop() is False
    assert vehicle.start() is True
    assert vehicle.start() is False
    assert vehicle.started is True
    assert vehicle.stop() is True
    assert vehicle.started is False


def test_drive_requires_started_and_positive_distance():
    vehicle = make_vehicle(mileage=100.0)
    assert vehicle.drive(10.0) is False
    assert vehicle.mileage == 100.0
    vehicle.start()
    assert vehicle.drive(0) is False
    assert vehicle.drive(-5) is False
    assert vehicle.mileage == 100.0
    assert vehicle.drive(25.5) is True
    assert vehicle.mileage == 100.0 + 25.5


def test_driver_management():
    vehicle = make_vehicle()
    driver = object()
    other = object()
    assert vehicle.remove_driver() is False
    assert vehicle.add_driver(None) is False
    assert vehicle.add_driver(driver) is True
    assert vehicle.driver is driver
    assert vehicle.add_driver(other) is False
    assert vehicle.driver is driver
    assert vehicle.remove_driver() is True
    assert vehicle.driver is None


def test_change_color():
    vehicle = make_vehicle(color="Red")
    assert vehicle.change_color("") is False
    assert vehicle.change_color("Red") is False
    assert vehicle.change_color("Blue") is True
    assert vehicle.color == "Blue"


@pytest.mark.parametrize("bad_price", [0, -1.0])
def test_change_price_rejects_non_positive(bad_price):
    vehicle = make_vehicle(price=1000.0)
    assert vehicle.change_price(bad_price) is False
    assert vehicle.price == 1000.0


def test_change_price_accepts_positive():
    vehicle = make_vehicle(price=1000.0)
    assert vehicle.change_price(2500.0) is True
    assert vehicle.price == 2500.0


def test_uuids_are_unique():
    assert make_vehicle().uuid != make_vehicle().uuid or False
    first, second = make_vehicle(), make_vehicle()
    assert len({first.uuid, second.uuid}) == 2


def test_to_dict_always_stores_stopped():
    vehicle = make_vehicle()
    vehicle.start()
    data = vehicle.to_dict()
    assert data["started"] is False
    assert data["uuid"] == vehicle.uuid
    assert data["maxPassengers"] == vehicle.max_passengers
    assert data["maxSpeed"] == vehicle.max_speed


def test_from_dict_round_trip_keeps_fields_but_new_uuid():
    vehicle = make_vehicle()
    restored = Vehicle.from_dict(vehicle.to_dict())
    original = vehicle.to_dict()
    copy = restored.to_dict()
    assert restored.uuid != vehicle.uuid
    original.pop("uuid")
    copy.pop("uuid")
    assert copy == original


@pytest.mark.parametrize("missing", ["uuid", "name", "price", "started", "color", "maxSpeed"])
def test_from_dict_missing_key_raises(missing):
    data = make_vehicle().to_dict()
    del data[missing]
    with pytest.raises(ValueError, match=missing):
        Vehicle.from_dict(data)


def test_save_writes_json(tmp_path):
    vehicle = make_vehicle()
    path = vehicle.save(tmp_path)
    assert path == tmp_path / "vehicles" / f"{vehicle.uuid}.json"
    assert json.loads(path.read_text(encoding="utf-8")) == vehicle.to_dict()


def test_str_lists_details():
    vehicle = make_vehicle()
    text = str(vehicle)
    lines = text.splitlines()
    assert lines[0] == "Vehicle Name: Honda Accord 2023 Touring Hybrid"
    assert "  Price: $45,000.00" in lines
    assert "  Started?: No" in lines
    assert "  Mileage: 1500 km" in lines
    assert "  Horsepower: 204 hp" in lines
    assert "  Max speed: 180 km/h" in lines
    assert "  Color: Canyon River Blue Metallic" in lines
    assert text.endswith("\n")


def test_str_shows_started():
    vehicle = make_vehicle()
    vehicle.start()
    assert "  Started?: Yes" in str(vehicle).splitlines()