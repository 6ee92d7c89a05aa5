import pytest

from forza_tuner.application.aero import calculate_aero
from forza_tuner.application.alignment import calculate_alignment
from forza_tuner.application.brakes import BRAKE_PRESETS, BrakePreset, calculate_brakes
from forza_tuner.application.variants import get_variant_profile
from forza_tuner.domain.enums import DriveType, TuneType, TuneVariant


# Alignment

def test_fwd_grip_gets_extra_front_camber_and_rear_toe_out(make_specs):
    fwd = calculate_alignment(make_specs(drive_type=DriveType.FWD, weight_distribution=50), TuneType.GRIP)
    assert fwd.camber_front == pytest.approx(-1.4)
    assert fwd.camber_rear == pytest.approx(-0.8)
    assert fwd.toe_rear == pytest.approx(0.0)
    assert fwd.caster == pytest.approx(5.5)


def test_heavy_nose_heavy_car_gets_more_camber(make_specs):
    light = calculate_alignment(make_specs(weight=3000, weight_distribution=50), TuneType.RACE)
    heavy = calculate_alignment(make_specs(weight=4000, weight_distribution=58), TuneType.RACE)
    assert heavy.camber_front == pytest.approx(light.camber_front - 0.4)
    assert heavy.camber_rear == pytest.approx(light.camber_rear - 0.1)


@pytest.mark.parametrize("tune_type", list(TuneType))
def test_alignment_within_limits(make_specs, tune_type):
    for drive_type in DriveType:
        for weight, dist in [(1200, 38), (5000, 64)]:
            a = calculate_alignment(
                make_specs(weight=weight, weight_distribution=dist, drive_type=drive_type), tune_type
            )
            assert -5.0 <= a.camber_front <= 5.0
            assert -5.0 <= a.camber_rear <= 5.0
            assert -5.0 <= a.toe_front <= 5.0
            assert -5.0 <= a.toe_rear <= 5.0
            assert 1.0 <= a.caster <= 7.0


# Brakes

def test_brake_presets_cover_every_tune_type():
    assert set(BRAKE_PRESETS) == set(TuneType)
    assert all(isinstance(preset, BrakePreset) for preset in BRAKE_PRESETS.values())
    assert BRAKE_PRESETS[TuneType.DRIFT].front_bias == 50


def test_brake_slider_is_inverted(make_specs):
    brakes = calculate_brakes(make_specs(weight_distribution=50), TuneType.GRIP)
    assert brakes.pressure == 100
    assert brakes.front_bias == 60
    assert brakes.balance_slider == 40
    assert brakes.note == "Set slider to 40% to achieve 60% front bias (FH5 slider is inverted)"


def test_brake_bias_follows_weight(make_specs):
    # (65 - 50) * 0.15 = 2.25 -> 2
    brakes = calculate_brakes(make_specs(weight_distribution=65), TuneType.RACE)
    assert brakes.front_bias == 64
    assert brakes.balance_slider == 36


@pytest.mark.parametrize("tune_type", list(TuneType))
def test_brake_slider_range(make_specs, tune_type):
    for dist in (35, 50, 65):
        brakes = calculate_brakes(make_specs(weight_distribution=dist), tune_type)
        assert 45 <= brakes.front_bias <= 70
        assert 30 <= brakes.balance_slider <= 55
        assert brakes.balance_slider + brakes.front_bias == 100


# Aero

def test_no_aero_means_zero_downforce(rwd_specs):
    profile = get_variant_profile(TuneVariant.CIRCUIT)
    assert calculate_aero(rwd_specs, TuneType.GRIP, profile) == (0.0, 0.0)


def test_drag_runs_no_downforce(make_specs):
    profile = get_variant_profile(TuneVariant.STANDING_START)
    specs = make_specs(has_aero=True, front_downforce=300, rear_downforce=450)
    assert calculate_aero(specs, TuneType.DRAG, profile) == (0.0, 0.0)


def test_default_capacity_used_when_unknown(make_specs):
    specs = make_specs(has_aero=True, drive_type=DriveType.AWD, weight_distribution=50)
    profile = get_variant_profile(TuneVariant.CIRCUIT)
    assert calculate_aero(specs, TuneType.GRIP, profile) == (260.0, 300.0)


def test_aero_uses_capacity(make_specs):
    specs = make_specs(
        has_aero=True, drive_type=DriveType.AWD, weight_distribution=50,
        front_downforce=200, rear_downforce=300,
    )
    profile = get_variant_profile(TuneVariant.CIRCUIT)
    front, rear = calculate_aero(specs, TuneType.RACE, profile)
    assert front == 150
    assert rear == 255


def test_aero_utilization_is_capped(make_specs):
    # FWD race with a tail-heavy car: 0.75 - 0.10 + 0.10 front, 0.85 + 0.15 rear
    specs = make_specs(
        has_aero=True, drive_type=DriveType.FWD, weight_distribution=40,
        front_downforce=100, rear_downforce=100,
    )
    profile = get_variant_profile(TuneVariant.SPRINT)
    front, rear = calculate_aero(specs, TuneType.RACE, profile)
    assert front == 75
    assert rear == 100
