import pytest

from rmwkit.errors import InvalidArgumentError
from rmwkit.node_name import (
    NODE_NAME_MAX_NAME_LENGTH,
    NodeNameValidationResult as R,
    node_name_validation_result_string,
    validate_node_name,
)


def test_invalid_parameters():
    with pytest.raises(InvalidArgumentError):
        validate_node_name(None)
    assert node_name_validation_result_string(-1) == (
        "unknown result code for rmw node name validation")


@pytest.mark.parametrize("name", ["nodename", "node_name"])
def test_valid_node_name(name):
    validation = validate_node_name(name)
    assert validation.result is R.VALID
    assert validation.invalid_index is None
    assert node_name_validation_result_string(validation.result) is None


def test_empty_node_name():
    validation = validate_node_name("")
    assert validation.result is R.INVALID_IS_EMPTY_STRING
    assert validation.invalid_index == 0
    assert node_name_validation_result_string(validation.result) is not None
    assert validation.message == "node name must not be empty"


@pytest.mark.parametrize(
    "name, index",
    [
        ("node/name", 4),
        ("node_{name}", 5),
        ("~node_name", 0),
        ("with spaces", 4),
        ("with.periods", 4),
    ],
)
def test_unallowed_characters(name, index):
    validation = validate_node_name(name)
    assert validation.result is R.INVALID_CONTAINS_UNALLOWED_CHARACTERS
    assert validation.invalid_index == index
    assert validation.message == (
        "node name must not contain characters other than alphanumerics or '_'")


def test_starts_with_number():
    validation = validate_node_name("42node")
    assert validation.result is R.INVALID_STARTS_WITH_NUMBER
    assert validation.invalid_index == 0
    assert validation.message == "node name must not start with a number"


def test_long_name_reports_other_error_first():
    validation = validate_node_name("0" * (NODE_NAME_MAX_NAME_LENGTH + 1))
    assert validation.result is R.INVALID_STARTS_WITH_NUMBER
    assert validation.invalid_index == 0


def test_node_name_too_long():
    validation = validate_node_name("a" * (NODE_NAME_MAX_NAME_LENGTH + 1))
    assert validation.result is R.INVALID_TOO_LONG
    assert validation.invalid_index == NODE_NAME_MAX_NAME_LENGTH - 1
    assert node_name_validation_result_string(validation.result) is not None


def test_exactly_max_length_is_valid():
    assert validate_node_name("a" * NODE_NAME_MAX_NAME_LENGTH).is_valid