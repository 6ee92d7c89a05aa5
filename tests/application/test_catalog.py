from forza_tuner.application.catalog import (
    TUNE_TEMPLATES,
    TUNE_TYPE_DESCRIPTIONS,
    describe_tune_type,
    get_compatible_templates,
    get_template,
    get_templates_for_drive_type,
    get_templates_for_tune_type,
)
from forza_tuner.domain.enums import DriveType, TuneType, TuneVariant


def test_every_tune_type_is_described():
    assert set(TUNE_TYPE_DESCRIPTIONS) == set(TuneType)


def test_describe_includes_variants():
    description = describe_tune_type(TuneType.RALLY)
    assert description.title == "Rally"
    assert description.default_variant == TuneVariant.GRAVEL
    assert description.variants == [TuneVariant.GRAVEL, TuneVariant.TARMAC, TuneVariant.SNOW]


def test_template_ids_are_unique():
    ids = [t.id for t in TUNE_TEMPLATES]
    assert len(ids) == len(set(ids)) == 12


def test_templates_for_tune_type():
    ids = {t.id for t in get_templates_for_tune_type(TuneType.DRIFT)}
    assert ids == {"drift-machine", "tandem-drift"}


def test_templates_for_drive_type():
    ids = {t.id for t in get_templates_for_drive_type(DriveType.FWD)}
    assert ids == {
        "track-day-special", "highway-cruiser", "all-rounder", "a-class-rivals", "wet-weather",
    }
    assert len(get_templates_for_drive_type(DriveType.AWD)) == 11


def test_compatible_templates_filter_drive_type():
    ids = {t.id for t in get_compatible_templates(TuneType.DRIFT, DriveType.AWD)}
    assert ids == {"drift-machine"}
    assert get_compatible_templates(TuneType.RACE, DriveType.RWD) == []


def test_get_template():
    template = get_template("x-class-drag")
    assert template.balance == -40
    assert template.stiffness == 90
    assert get_template("missing") is None
