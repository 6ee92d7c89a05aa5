import pytest

from forza_tuner.domain.enums import DriveType, PIClass, TireCompound
from forza_tuner.domain.models import CarSpecs


@pytest.fixture
def make_specs():
    """Factory for CarSpecs with sensible defaults; override any field by keyword."""
    def _make(**overrides) -> CarSpecs:
        fields = dict(
            weight=3000.0,
            weight_distribution=52.0,
            drive_type=DriveType.RWD,
            pi_class=PIClass.A,
            tire_compound=TireCompound.SPORT,
        )
        fields.update(overrides)
        return CarSpecs(**fields)
    return _make


@pytest.fixture
def rwd_specs(make_specs):
    return make_specs()


@pytest.fixture
def awd_specs(make_specs):
    return make_specs(
        weight=3400.0,
        weight_distribution=56.0,
        drive_type=DriveType.AWD,
        pi_class=PIClass.S1,
        tire_compound=TireCompound.SEMI_SLICK,
        horsepower=650.0,
    )


@pytest.fixture
def fwd_specs(make_specs):
    return make_specs(
        weight=2600.0,
        weight_distribution=62.0,
        drive_type=DriveType.FWD,
        pi_class=PIClass.C,
        tire_compound=TireCompound.STREET,
        horsepower=220.0,
    )
