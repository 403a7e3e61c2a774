"""Validation of fully qualified topic names."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import IntEnum

from rmwkit.errors import InvalidArgumentError

TOPIC_MAX_NAME_LENGTH = 255 - 8

_DIGITS = frozenset(string.digits)
_ALLOWED = frozenset(string.ascii_letters + string.digits + "_/")


class TopicValidationResult(IntEnum):
    """Outcome of validating a fully qualified topic name."""

    VALID = 0
    INVALID_IS_EMPTY_STRING = 1
    INVALID_NOT_ABSOLUTE = 2
    INVALID_ENDS_WITH_FORWARD_SLASH = 3
    INVALID_CONTAINS_UNALLOWED_CHARACTERS = 4
    INVALID_CONTAINS_REPEATED_FORWARD_SLASH = 5
    INVALID_NAME_TOKEN_STARTS_WITH_NUMBER = 6
    INVALID_TOO_LONG = 7


_MESSAGES = {
    TopicValidationResult.INVALID_IS_EMPTY_STRING: "topic name must not be empty",
    TopicValidationResult.INVALID_NOT_ABSOLUTE:
        "topic name must be absolute, it must lead with a '/'",
    TopicValidationResult.INVALID_ENDS_WITH_FORWARD_SLASH: "topic name must not end with a '/'",
    TopicValidationResult.INVALID_CONTAINS_UNALLOWED_CHARACTERS:
        "topic name must not contain characters other than alphanumerics, '_', or '/'",
    TopicValidationResult.INVALID_CONTAINS_REPEATED_FORWARD_SLASH:
        "topic name must not contain repeated '/'",
    TopicValidationResult.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER:
        "topic name must not have a token that starts with a number",
    TopicValidationResult.INVALID_TOO_LONG:
        f"topic length should not exceed '{TOPIC_MAX_NAME_LENGTH}'",
}


def full_topic_name_validation_result_string(validation_result: int) -> str | None:
    """Return a description of a validation result, or None when it is valid."""
    if validation_result == TopicValidationResult.VALID:
        return None
    try:
        return _MESSAGES[TopicValidationResult(validation_result)]
    except ValueError:
        return "unknown result code for rmw topic name validation"


@dataclass(frozen=True)
class TopicNameValidation:
    """Result of a topic name check and the index of the offending character."""

    result: TopicValidationResult
    invalid_index: int | None = None

    @property
    def is_valid(self) -> bool:
        return self.result is TopicValidationResult.VALID

    @property
    def message(self) -> str | None:
        return full_topic_name_validation_result_string(self.result)


def validate_full_topic_name(topic_name: str) -> TopicNameValidation:
    """Check that ``topic_name`` is a valid fully qualified topic name."""
    if not isinstance(topic_name, str):
        raise InvalidArgumentError("topic_name must be a string")
    result = TopicValidationResult
    if not topic_name:
        return TopicNameValidation(result.INVALID_IS_EMPTY_STRING, 0)
    if topic_name[0] != "/":
        return TopicNameValidation(result.INVALID_NOT_ABSOLUTE, 0)
    if topic_name[-1] == "/":
        # catches both "/foo/" and "/"
        return TopicNameValidation(result.INVALID_ENDS_WITH_FORWARD_SLASH, len(topic_name) - 1)
    for index, char in enumerate(topic_name):
        if char not in _ALLOWED:
            return TopicNameValidation(result.INVALID_CONTAINS_UNALLOWED_CHARACTERS, index)
    for index, (char, following) in enumerate(zip(topic_name, topic_name[1:])):
        if char != "/":
            continue
        if following == "/":
            return TopicNameValidation(
                result.INVALID_CONTAINS_REPEATED_FORWARD_SLASH, index + 1)
        if following in _DIGITS:
            return TopicNameValidation(
                result.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER, index + 1)
    # length is checked last since it might be a soft invalidation
    if len(topic_name) > TOPIC_MAX_NAME_LENGTH:
        return TopicNameValidation(result.INVALID_TOO_LONG, TOPIC_MAX_NAME_LENGTH - 1)
    return TopicNameValidation(result.VALID)