from __future__ import annotations

import pytest

from garage.catalog import RuleCatalog
from garage.models import Perk, Sponsor, Upgrade, VehicleClass, Weapon


SPONSORS = [
    Sponsor(id="no_sponsor", name="No Sponsor", color="#64748b", perks=("perk1", "perk2")),
    Sponsor(id="rutherford", name="Rutherford", color="#10b981", perks=("perk1", "perk3", "perk4")),
    Sponsor(id="miyazaki", name="Miyazaki", color="#f97316", perks=("perk2",), perk_classes=("daring",)),
]

VEHICLE_CLASSES = [
    VehicleClass(id="car", name="Car", base_cost=10, max_hull=4, weapon_slots=1, upgrade_slots=2, handling=3, max_gear=4),
    VehicleClass(id="buggy", name="Buggy", base_cost=8, max_hull=2, weapon_slots=2, upgrade_slots=1, handling=4, max_gear=6),
    VehicleClass(
        id="truck",
        name="Truck",
        base_cost=15,
        max_hull=6,
        weapon_slots=3,
        upgrade_slots=3,
        crew=3,
        handling=2,
        max_gear=3,
        build_slots=3,
        sponsors=("rutherford",),
    ),
]

WEAPONS = [
    Weapon(id="mg", name="MG", cost=2),
    Weapon(id="machine_gun", name="Machine Gun", cost=2, slots=1, facing="front"),
    Weapon(id="rocket", name="Rocket Launcher", cost=4, slots=2, unique=True, facing="front"),
    Weapon(id="flamethrower", name="Flamethrower", cost=4, slots=1, special_rules="Fire"),
]

UPGRADES = [
    Upgrade(id="armor", name="Armor", cost=2, hull=1),
    Upgrade(id="nitro", name="Nitro Booster", cost=3),
    Upgrade(id="trailer", name="Trailer", cost=4, handling=-1, gear=-1),
]

PERKS = [
    Perk(id="perk1", name="Perk 1", line="military", cost=1, text="Description for Perk 1"),
    Perk(id="perk2", name="Perk 2", line="daring", cost=2, text="Description for Perk 2"),
    Perk(id="perk3", name="Perk 3", line="military", cost=3, text="Description for Perk 3"),
    Perk(id="perk4", name="Perk 4", line="military", cost=1, text="Description for Perk 4"),
    Perk(id="perk5", name="Perk 5", line="daring", cost=2, text="Description for Perk 5"),
]


@pytest.fixture
def catalog() -> RuleCatalog:
    return RuleCatalog.from_records(
        sponsors=SPONSORS,
        vehicle_classes=VEHICLE_CLASSES,
        weapons=WEAPONS,
        upgrades=UPGRADES,
        perks=PERKS,
    )


@pytest.fixture
def valid_draft() -> dict:
    return {
        "sponsor": "rutherford",
        "vehicles": [
            {
                "id": "vehicle1",
                "type": "car",
                "name": "Test Car",
                "weapons": ["machine_gun_1"],
                "upgrades": ["armor"],
                "perks": ["perk1"],
            }
        ],
        "teamName": "Test Team",
        "maxCost": 50,
    }
