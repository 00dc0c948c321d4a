import pytest

from ascot.collection import OutputCollection
from ascot.energy import (
    CarbonFootprint,
    Energy,
    EnergyClass,
    EnergyEfficiency,
    WaterUseEfficiency,
)


def test_energy_class_names():
    assert str(EnergyClass.A_PLUS_PLUS_PLUS) == "A+++"
    assert str(EnergyClass.G) == "G"
    assert EnergyClass("A+") is EnergyClass.A_PLUS


@pytest.mark.parametrize("cls", [EnergyEfficiency, CarbonFootprint])
def test_percentage_is_clamped(cls):
    assert cls(150, EnergyClass.A).percentage == 100
    assert cls(-150, EnergyClass.A).percentage == -100
    assert cls(42, EnergyClass.A).percentage == 42


@pytest.mark.parametrize("cls", [EnergyEfficiency, CarbonFootprint])
def test_decimal_percentage_scales(cls):
    for value in (-100, -5, 0, 37, 100):
        assert cls(value, EnergyClass.B).decimal_percentage() * 100 == pytest.approx(
            value
        )


def test_energy_efficiency_text():
    assert (
        str(EnergyEfficiency(-5, EnergyClass.D))
        == 'The device saves a 5% of energy for the "D" efficiency class'
    )
    assert str(EnergyEfficiency(5, EnergyClass.C)).startswith("The device consumes a 5%")


def test_carbon_footprint_text():
    assert str(CarbonFootprint(-3, EnergyClass.A)).startswith(
        "The device removes from the atmosphere a 3%"
    )
    assert str(CarbonFootprint(3, EnergyClass.A)).startswith(
        "The device adds to the atmosphere a 3%"
    )


def test_efficiency_equality_and_dict():
    first = EnergyEfficiency(5, EnergyClass.C)
    assert first == EnergyEfficiency(5, EnergyClass.C)
    assert hash(first) == hash(EnergyEfficiency(5, EnergyClass.C))
    assert first.to_dict() == {"percentage": 5, "energy-class": "C"}


def test_water_use_efficiency_dict():
    water = WaterUseEfficiency(gpp=1.5)
    assert water.to_dict() == {
        "gross-primary-productivity": 1.5,
        "penman-monteith-equation": None,
        "water-equivalent-ratio": None,
    }


def test_energy_empty():
    energy = Energy()
    assert energy.is_empty()
    assert energy.to_dict() == {}


def test_energy_serialization_skips_missing():
    efficiency = EnergyEfficiency(-5, EnergyClass.D)
    energy = Energy(energy_efficiencies=OutputCollection([efficiency]))
    assert not energy.is_empty()
    assert energy.to_dict() == {
        "energy-efficiencies": [{"percentage": -5, "energy-class": "D"}]
    }


def test_energy_serialization_all_sections():
    footprint = CarbonFootprint(10, EnergyClass.A_PLUS)
    energy = Energy(
        carbon_footprints=OutputCollection([footprint]),
        water_use_efficiency=WaterUseEfficiency(wer=2.0),
    )
    data = energy.to_dict()
    assert set(data) == {"carbon-footprints", "water-use-efficiency"}
    assert data["carbon-footprints"] == [footprint.to_dict()]
    assert data["water-use-efficiency"]["water-equivalent-ratio"] == 2.0