import pytest

from forza_tuner.application.pi_scaling import PI_CLASS_SCALES, frequency_position, get_pi_class_scale
from forza_tuner.domain.enums import PIClass


def test_every_class_has_a_scale():
    assert set(PI_CLASS_SCALES) == set(PIClass)


@pytest.mark.parametrize("column", [
    "spring_scale", "arb_scale", "damping_scale", "power_multiplier", "pressure_trim_psi",
])
def test_scales_are_non_decreasing_from_d_to_x(column):
    values = [getattr(get_pi_class_scale(c), column) for c in PIClass]
    assert values == sorted(values)


def test_class_a_is_the_reference():
    scale = get_pi_class_scale(PIClass.A)
    assert scale.spring_scale == 1.0
    assert scale.arb_scale == 1.0
    assert scale.damping_scale == 1.0


def test_frequency_position_spans_zero_to_one():
    assert frequency_position(PIClass.D) == 0.0
    assert frequency_position(PIClass.A) == pytest.approx(0.5)
    assert frequency_position(PIClass.X) == 1.0
