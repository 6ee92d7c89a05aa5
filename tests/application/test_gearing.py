import pytest

from forza_tuner.application.gearing import GEARING_PRESETS, calculate_gearing, gear_ratios, power_to_weight
from forza_tuner.application.pi_scaling import get_pi_class_scale
from forza_tuner.application.variants import DEFAULT_VARIANTS, get_variant_profile
from forza_tuner.domain.enums import PIClass, TuneType, TuneVariant


def _gearing(specs, tune_type, variant=None):
    profile = get_variant_profile(variant or DEFAULT_VARIANTS[tune_type])
    return calculate_gearing(specs, tune_type, profile, get_pi_class_scale(specs.pi_class))


def test_gear_ratios_are_geometric():
    ratios = gear_ratios(3.40, 0.72, 6)
    assert len(ratios) == 6
    assert ratios[0] == pytest.approx(3.40)
    assert ratios[-1] == pytest.approx(0.72)
    assert all(b < a for a, b in zip(ratios, ratios[1:]))

    gaps = [a - b for a, b in zip(ratios, ratios[1:])]
    assert gaps[0] > gaps[-1]


@pytest.mark.parametrize("gear_count", [4, 6, 10])
def test_ratio_count_follows_specs(make_specs, gear_count):
    gearing = _gearing(make_specs(gear_count=gear_count), TuneType.GRIP)
    assert len(gearing.ratios) == gear_count


@pytest.mark.parametrize("tune_type", list(TuneType))
def test_final_drive_within_range(make_specs, tune_type):
    for pi_class in PIClass:
        for hp, weight in [(80, 4000), (1500, 2000)]:
            gearing = _gearing(make_specs(pi_class=pi_class, horsepower=hp, weight=weight), tune_type)
            assert 2.5 <= gearing.final_drive <= 5.5
            assert gearing.note == GEARING_PRESETS[tune_type].note


def test_reference_power_to_weight_keeps_base_final_drive(make_specs):
    # Class A reference is 145 hp per 1000 lb
    specs = make_specs(pi_class=PIClass.A, horsepower=435, weight=3000)
    assert power_to_weight(specs) == pytest.approx(145.0)
    assert _gearing(specs, TuneType.GRIP).final_drive == pytest.approx(3.80)


def test_more_power_means_taller_final_drive(make_specs):
    weak = _gearing(make_specs(horsepower=300), TuneType.GRIP)
    strong = _gearing(make_specs(horsepower=700), TuneType.GRIP)
    assert strong.final_drive < weak.final_drive


def test_variant_scales_final_drive(make_specs):
    specs = make_specs(horsepower=435, weight=3000)
    circuit = _gearing(specs, TuneType.GRIP, TuneVariant.CIRCUIT)
    high_speed = _gearing(specs, TuneType.GRIP, TuneVariant.HIGH_SPEED)
    assert high_speed.final_drive < circuit.final_drive
