import pytest

from forza_tuner.application.pi_scaling import get_pi_class_scale
from forza_tuner.application.suspension import (
    base_anti_roll_bar,
    calculate_anti_roll_bars,
    calculate_damping,
    calculate_ride_height,
    calculate_springs,
    spring_rate_for_frequency,
)
from forza_tuner.application.variants import get_variant_profile, resolve_variant
from forza_tuner.domain.enums import DriveType, PIClass, TuneType, TuneVariant


def _suspension(specs, tune_type, variant=None):
    profile = get_variant_profile(resolve_variant(tune_type, variant))
    scale = get_pi_class_scale(specs.pi_class)
    springs = calculate_springs(specs, tune_type, profile, scale)
    arb = calculate_anti_roll_bars(specs, tune_type, profile, scale)
    rebound, bump = calculate_damping(specs, tune_type, springs, scale)
    return springs, arb, rebound, bump


def test_base_anti_roll_bar_is_strictly_increasing():
    values = [base_anti_roll_bar(pct) for pct in range(35, 66)]
    assert all(b > a for a, b in zip(values, values[1:]))
    assert base_anti_roll_bar(50) == pytest.approx(33.0)


def test_spring_rate_grows_with_frequency_and_weight():
    assert spring_rate_for_frequency(800, 2.5) > spring_rate_for_frequency(800, 2.0)
    assert spring_rate_for_frequency(900, 2.0) > spring_rate_for_frequency(800, 2.0)


@pytest.mark.parametrize("tune_type", list(TuneType))
@pytest.mark.parametrize("pi_class", [PIClass.D, PIClass.A, PIClass.X])
def test_outputs_stay_in_range(make_specs, tune_type, pi_class):
    for weight, dist in [(1000, 35), (3000, 50), (10000, 65)]:
        specs = make_specs(weight=weight, weight_distribution=dist, pi_class=pi_class)
        springs, arb, rebound, bump = _suspension(specs, tune_type)

        for rate in springs:
            assert 50 <= rate <= 3000
            assert rate == int(rate)
        for bar in arb:
            assert 1 <= bar <= 65
        for r, b in zip(rebound, bump):
            assert 1 <= b <= r <= 20


def test_higher_class_is_stiffer(make_specs):
    soft, _, _, _ = _suspension(make_specs(pi_class=PIClass.C), TuneType.GRIP)
    stiff, _, _, _ = _suspension(make_specs(pi_class=PIClass.S2), TuneType.GRIP)
    assert stiff.front > soft.front
    assert stiff.rear > soft.rear


def test_nose_heavy_car_gets_stiffer_front(make_specs):
    springs, arb, _, _ = _suspension(make_specs(weight_distribution=60, drive_type=DriveType.AWD), TuneType.GRIP)
    assert springs.front > springs.rear
    assert arb.front > arb.rear


def test_drift_runs_soft_front_bar(rwd_specs):
    _, arb, _, _ = _suspension(rwd_specs, TuneType.DRIFT)
    assert arb.front < arb.rear


def test_race_damps_harder_than_offroad(rwd_specs):
    _, _, race, _ = _suspension(rwd_specs, TuneType.RACE)
    _, _, offroad, _ = _suspension(rwd_specs, TuneType.OFFROAD)
    assert race.front > offroad.front


def test_aero_downforce_adds_spring(make_specs):
    plain, _, _, _ = _suspension(make_specs(), TuneType.GRIP)
    aero, _, _, _ = _suspension(
        make_specs(has_aero=True, front_downforce=300, rear_downforce=400), TuneType.GRIP
    )
    assert aero.front == plain.front + 30
    assert aero.rear == plain.rear + 40


def test_ride_height_presets(make_specs):
    profile = get_variant_profile(TuneVariant.CIRCUIT)
    assert calculate_ride_height(make_specs(), TuneType.GRIP, profile) == (4.5, 4.8)
    assert calculate_ride_height(make_specs(has_aero=True), TuneType.GRIP, profile) == (4.0, 4.2)

    tarmac = get_variant_profile(TuneVariant.TARMAC)
    assert calculate_ride_height(make_specs(), TuneType.RALLY, tarmac) == (6.0, 6.5)
