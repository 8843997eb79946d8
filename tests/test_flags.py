import pytest

from bucketkit.flags import EnumValue

LEVELS = ["trace", "debug", "info", "error"]


def test_default_when_unset():
    value = EnumValue(LEVELS, "info")
    assert str(value) == "info"
    assert value.value == "info"


def test_set_allowed_value():
    value = EnumValue(LEVELS, "info")
    value.set("debug")
    assert str(value) == "debug"


def test_set_rejects_unknown_value():
    value = EnumValue(LEVELS, "info")
    with pytest.raises(ValueError) as excinfo:
        value.set("verbose")
    assert str(excinfo.value) == "allowed values: [trace, debug, info, error]"


def test_rejected_value_keeps_previous_selection():
    value = EnumValue(LEVELS, "info")
    value.set("error")
    with pytest.raises(ValueError):
        value.set("ERROR")
    assert str(value) == "error"


def test_single_choice_enum():
    value = EnumValue(["JSON"], "JSON")
    value.set("JSON")
    assert str(value) == "JSON"
    with pytest.raises(ValueError):
        value.set("CSV")