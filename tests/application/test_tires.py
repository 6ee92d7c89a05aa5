import itertools

import pytest

from forza_tuner.application.pi_scaling import get_pi_class_scale
from forza_tuner.application.tires import calculate_tire_pressure
from forza_tuner.application.variants import VARIANTS_BY_TUNE_TYPE, get_variant_profile
from forza_tuner.domain.enums import DriveType, PIClass, TireCompound, TuneType, TuneVariant


def _pressure(specs, tune_type, variant=None):
    variant = variant or VARIANTS_BY_TUNE_TYPE[tune_type][0]
    return calculate_tire_pressure(
        specs, tune_type, get_variant_profile(variant), get_pi_class_scale(specs.pi_class)
    )


@pytest.mark.parametrize("tune_type", list(TuneType))
def test_pressure_within_bounds_for_every_discipline(make_specs, tune_type):
    combos = itertools.product(TireCompound, [PIClass.D, PIClass.X], DriveType, [35, 65])
    for compound, pi_class, drive_type, dist in combos:
        specs = make_specs(
            tire_compound=compound, pi_class=pi_class, drive_type=drive_type, weight_distribution=dist
        )
        for variant in VARIANTS_BY_TUNE_TYPE[tune_type]:
            front, rear = _pressure(specs, tune_type, variant)
            assert 14.0 <= front <= 55.0
            assert 14.0 <= rear <= 55.0


def test_grip_baseline(make_specs):
    specs = make_specs(
        tire_compound=TireCompound.SPORT, pi_class=PIClass.B, drive_type=DriveType.AWD, weight_distribution=50
    )
    assert _pressure(specs, TuneType.GRIP) == (28.0, 28.0)


def test_drift_soft_front_hard_rear(rwd_specs):
    front, rear = _pressure(rwd_specs, TuneType.DRIFT)
    assert front < rear


def test_drag_hard_front_soft_rear(rwd_specs):
    front, rear = _pressure(rwd_specs, TuneType.DRAG)
    assert front > rear


def test_heavier_axle_gets_more_pressure(make_specs):
    nose_heavy = _pressure(make_specs(drive_type=DriveType.AWD, weight_distribution=60), TuneType.GRIP)
    tail_heavy = _pressure(make_specs(drive_type=DriveType.AWD, weight_distribution=40), TuneType.GRIP)
    assert nose_heavy.front > nose_heavy.rear
    assert tail_heavy.rear > tail_heavy.front


def test_drive_type_offsets_rear(make_specs):
    awd = _pressure(make_specs(drive_type=DriveType.AWD), TuneType.STREET)
    rwd = _pressure(make_specs(drive_type=DriveType.RWD), TuneType.STREET)
    fwd = _pressure(make_specs(drive_type=DriveType.FWD), TuneType.STREET)
    assert rwd.rear == pytest.approx(awd.rear - 0.5)
    assert fwd.rear == pytest.approx(awd.rear + 0.5)
    assert awd.front == rwd.front == fwd.front


def test_tarmac_runs_higher_than_gravel(make_specs):
    specs = make_specs(tire_compound=TireCompound.RALLY, drive_type=DriveType.AWD)
    gravel = _pressure(specs, TuneType.RALLY, TuneVariant.GRAVEL)
    tarmac = _pressure(specs, TuneType.RALLY, TuneVariant.TARMAC)
    assert tarmac.front == pytest.approx(gravel.front + 5.0)
