import pytest
from pydantic import ValidationError

from garage.models import Perk, Sponsor, VehicleClass, Weapon


def test_weapon_is_frozen():
    weapon = Weapon(id="mg", name="MG", cost=2)

    assert weapon.slots == 1
    assert weapon.unique is False

    with pytest.raises((TypeError, ValidationError)):
        weapon.cost = 5  # type: ignore[misc]


def test_negative_cost_is_rejected():
    with pytest.raises(ValidationError):
        Weapon(id="mg", name="MG", cost=-1)

    with pytest.raises(ValidationError):
        VehicleClass(id="car", name="Car", base_cost=-3, max_hull=4)


def test_vehicle_class_slot_defaults_to_zero():
    vehicle_class = VehicleClass(id="car", name="Car", base_cost=10, max_hull=4)

    assert vehicle_class.weapon_slots == 0
    assert vehicle_class.upgrade_slots == 0
    assert vehicle_class.build_slots is None


def test_sponsor_color_must_be_hex():
    with pytest.raises(ValidationError):
        Sponsor(id="bad", name="Bad", color="green")

    assert Sponsor(id="ok", name="Ok", color="#0f0").color == "#0f0"


def test_sponsor_allows_perk_by_id_or_class():
    sponsor = Sponsor(id="m", name="Miyazaki", color="#f97316", perks=("evasive",), perk_classes=("daring",))

    assert sponsor.allows_perk(Perk(id="evasive", name="Evasive", line="other", cost=1))
    assert sponsor.allows_perk(Perk(id="slide", name="Slide", line="daring", cost=2))
    assert not sponsor.allows_perk(Perk(id="tank", name="Tank", line="military", cost=1))


def test_vehicle_class_sponsor_restriction():
    open_class = VehicleClass(id="car", name="Car", base_cost=10, max_hull=4)
    restricted = VehicleClass(id="tank", name="Tank", base_cost=40, max_hull=20, sponsors=("rutherford",))
    rutherford = Sponsor(id="rutherford", name="Rutherford", color="#10b981")
    miyazaki = Sponsor(id="miyazaki", name="Miyazaki", color="#f97316")

    assert open_class.available_to(miyazaki)
    assert restricted.available_to(rutherford)
    assert not restricted.available_to(miyazaki)
