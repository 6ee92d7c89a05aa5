import pytest
from pydantic import TypeAdapter, ValidationError

from forza_tuner.application.tune_calculator import calculate_tune
from forza_tuner.domain.enums import DriveType, DrivingStyle, PIClass, TuneType
from forza_tuner.domain.models import (
    AwdDifferential,
    CarSpecs,
    DifferentialSettings,
    FwdDifferential,
    TuneSettings,
)


def test_car_specs_bounds(make_specs):
    with pytest.raises(ValidationError):
        make_specs(weight=900)
    with pytest.raises(ValidationError):
        make_specs(weight_distribution=70)
    with pytest.raises(ValidationError):
        make_specs(driving_style=3)


def test_car_specs_rejects_unknown_fields(make_specs):
    with pytest.raises(ValidationError):
        make_specs(turbo=True)


def test_car_specs_is_frozen(rwd_specs):
    with pytest.raises(ValidationError):
        rwd_specs.weight = 2000


def test_car_specs_parses_strings():
    specs = CarSpecs.model_validate({
        "weight": 3000,
        "weight_distribution": 50,
        "drive_type": "AWD",
        "pi_class": "S1",
        "tire_compound": "semi-slick",
    })
    assert specs.drive_type == DriveType.AWD
    assert specs.pi_class == PIClass.S1
    assert specs.rear_weight_fraction == pytest.approx(0.5)


def test_pi_class_rank_order():
    assert [c.rank for c in PIClass] == list(range(7))
    assert PIClass.X.rank > PIClass.D.rank


def test_driving_style_from_bias():
    assert DrivingStyle.from_bias(-2) == DrivingStyle.STABLE
    assert DrivingStyle.from_bias(-1) == DrivingStyle.STABLE
    assert DrivingStyle.from_bias(0) == DrivingStyle.BALANCED
    assert DrivingStyle.from_bias(1) == DrivingStyle.AGGRESSIVE


def test_differential_union_is_discriminated_by_drive_type():
    adapter = TypeAdapter(DifferentialSettings)
    awd = adapter.validate_python({
        "drive_type": "AWD", "center_balance": 60,
        "front_accel": 30, "front_decel": 10, "rear_accel": 45, "rear_decel": 20,
    })
    fwd = adapter.validate_python({"drive_type": "FWD", "accel": 35, "decel": 20})
    assert isinstance(awd, AwdDifferential)
    assert isinstance(fwd, FwdDifferential)

    with pytest.raises(ValidationError):
        adapter.validate_python({"drive_type": "FWD", "center_balance": 60})


def test_tune_settings_rejects_bump_above_rebound(rwd_specs):
    tune = calculate_tune(rwd_specs, TuneType.GRIP)
    data = tune.model_dump()
    data["bump_front"] = tune.rebound_front + 1
    with pytest.raises(ValidationError):
        TuneSettings.model_validate(data)


def test_tune_settings_rejects_pressure_out_of_range(rwd_specs):
    data = calculate_tune(rwd_specs, TuneType.GRIP).model_dump()
    data["tire_pressure_rear"] = 60.0
    with pytest.raises(ValidationError):
        TuneSettings.model_validate(data)


def test_tune_settings_rejects_non_positive_gear(rwd_specs):
    data = calculate_tune(rwd_specs, TuneType.GRIP).model_dump()
    data["gear_ratios"] = [3.2, 0.0]
    with pytest.raises(ValidationError):
        TuneSettings.model_validate(data)


def test_tune_settings_round_trips_through_json(awd_specs):
    tune = calculate_tune(awd_specs, TuneType.RACE)
    assert TuneSettings.model_validate_json(tune.model_dump_json()) == tune
