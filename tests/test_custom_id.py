import pytest

from ina.custom_id import (
    COMPONENT_CUSTOM_ID_LENGTH,
    DATA_SEPARATOR,
    PART_SEPARATOR,
    CustomId,
    CustomIdError,
    ExceededMaxLengthError,
    InvalidCommandError,
    InvalidDataError,
    InvalidVariantError,
    MissingPartError,
)


def test_encoded_form_without_data():
    assert str(CustomId("help", "page")) == "help" + PART_SEPARATOR + "page" + PART_SEPARATOR


def test_encoded_form_with_data():
    identifier = CustomId("help", "page").with_str("one").with_str("two")
    assert str(identifier) == PART_SEPARATOR.join(["help", "page", DATA_SEPARATOR.join(["one", "two"])])


def test_round_trip_with_data():
    identifier = CustomId("role-select", "menu_a").with_str("x").with_value(42)
    parsed = CustomId.parse(str(identifier))
    assert parsed == identifier
    assert parsed.storage == ["x", "42"]


def test_parse_empty_storage_yields_one_empty_entry():
    parsed = CustomId.parse(str(CustomId("cmd", "var")))
    assert parsed.command == "cmd"
    assert parsed.variant == "var"
    assert parsed.storage == [""]


def test_parse_missing_variant():
    with pytest.raises(MissingPartError) as info:
        CustomId.parse("onlycommand")
    assert info.value.part == "variant"


def test_parse_missing_storage():
    with pytest.raises(MissingPartError) as info:
        CustomId.parse("cmd" + PART_SEPARATOR + "var")
    assert info.value.part == "storage"


def test_get_str_and_get():
    identifier = CustomId("cmd", "var").with_value(7).with_str("text")
    assert identifier.get_str(0) == "7"
    assert identifier.get_str(1) == "text"
    assert identifier.get_str(2) is None
    assert identifier.get_str(-1) is None
    assert identifier.get(0, int) == 7
    assert identifier.get(5, int) is None


def test_get_propagates_conversion_error():
    identifier = CustomId("cmd", "var").with_str("nope")
    with pytest.raises(ValueError):
        identifier.get(0, int)


@pytest.mark.parametrize("command", ["bad cmd", "x!", "a.b"])
def test_invalid_command(command):
    with pytest.raises(InvalidCommandError) as info:
        CustomId(command, "var")
    assert info.value.command == command


def test_invalid_variant_reports_command():
    with pytest.raises(InvalidVariantError) as info:
        CustomId("cmd", "bad variant")
    assert info.value.value == "cmd"


@pytest.mark.parametrize("separator", [DATA_SEPARATOR, PART_SEPARATOR])
def test_push_rejects_separators_and_rolls_back(separator):
    identifier = CustomId("cmd", "var").with_str("keep")
    with pytest.raises(InvalidDataError) as info:
        identifier.push_str("a" + separator + "b")
    assert info.value.char == separator
    assert identifier.storage == ["keep"]


def test_max_length_boundary():
    room = COMPONENT_CUSTOM_ID_LENGTH - len("c") - len("v") - 2
    identifier = CustomId("c", "v").with_str("a" * room)
    assert len(str(identifier).encode()) == COMPONENT_CUSTOM_ID_LENGTH

    with pytest.raises(ExceededMaxLengthError) as info:
        identifier.push_str("")
    assert info.value.length == COMPONENT_CUSTOM_ID_LENGTH + len(DATA_SEPARATOR)
    assert identifier.storage == ["a" * room]


def test_length_counts_utf8_bytes():
    room = COMPONENT_CUSTOM_ID_LENGTH - len("c") - len("v") - 2
    with pytest.raises(ExceededMaxLengthError) as info:
        CustomId("c", "v").push_str("é" * (room // 2 + 1))
    assert info.value.length > COMPONENT_CUSTOM_ID_LENGTH


def test_long_command_rejected():
    with pytest.raises(ExceededMaxLengthError) as info:
        CustomId("a" * COMPONENT_CUSTOM_ID_LENGTH, "v")
    assert info.value.length == COMPONENT_CUSTOM_ID_LENGTH + len("v") + 2


def test_errors_share_base_class():
    with pytest.raises(CustomIdError):
        CustomId.parse("x")