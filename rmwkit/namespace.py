"""Validation of node namespaces."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from rmwkit.errors import InvalidArgumentError
from rmwkit.topic_name import (
    TOPIC_MAX_NAME_LENGTH,
    TopicValidationResult,
    validate_full_topic_name,
)

# Leave room for a "/" and a one-character name below the namespace.
NAMESPACE_MAX_LENGTH = TOPIC_MAX_NAME_LENGTH - 2


class NamespaceValidationResult(IntEnum):
    """Outcome of validating a namespace."""

    VALID = 0
    INVALID_IS_EMPTY_STRING = 1
    INVALID_NOT_ABSOLUTE = 2
    INVALID_ENDS_WITH_FORWARD_SLASH = 3
    INVALID_CONTAINS_UNALLOWED_CHARACTERS = 4
    INVALID_CONTAINS_REPEATED_FORWARD_SLASH = 5
    INVALID_NAME_TOKEN_STARTS_WITH_NUMBER = 6
    INVALID_TOO_LONG = 7


_FROM_TOPIC_RESULT = {
    TopicValidationResult.INVALID_IS_EMPTY_STRING:
        NamespaceValidationResult.INVALID_IS_EMPTY_STRING,
    TopicValidationResult.INVALID_NOT_ABSOLUTE: NamespaceValidationResult.INVALID_NOT_ABSOLUTE,
    TopicValidationResult.INVALID_ENDS_WITH_FORWARD_SLASH:
        NamespaceValidationResult.INVALID_ENDS_WITH_FORWARD_SLASH,
    TopicValidationResult.INVALID_CONTAINS_UNALLOWED_CHARACTERS:
        NamespaceValidationResult.INVALID_CONTAINS_UNALLOWED_CHARACTERS,
    TopicValidationResult.INVALID_CONTAINS_REPEATED_FORWARD_SLASH:
        NamespaceValidationResult.INVALID_CONTAINS_REPEATED_FORWARD_SLASH,
    TopicValidationResult.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER:
        NamespaceValidationResult.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER,
}

_MESSAGES = {
    NamespaceValidationResult.INVALID_IS_EMPTY_STRING: "namespace must not be empty",
    NamespaceValidationResult.INVALID_NOT_ABSOLUTE:
        "namespace must be absolute, it must lead with a '/'",
    NamespaceValidationResult.INVALID_ENDS_WITH_FORWARD_SLASH:
        "namespace must not end with a '/', unless only a '/'",
    NamespaceValidationResult.INVALID_CONTAINS_UNALLOWED_CHARACTERS:
        "namespace must not contain characters other than alphanumerics, '_', or '/'",
    NamespaceValidationResult.INVALID_CONTAINS_REPEATED_FORWARD_SLASH:
        "namespace must not contain repeated '/'",
    NamespaceValidationResult.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER:
        "namespace must not have a token that starts with a number",
    NamespaceValidationResult.INVALID_TOO_LONG:
        f"namespace should not exceed '{NAMESPACE_MAX_LENGTH}'",
}


def namespace_validation_result_string(validation_result: int) -> str | None:
    """Return a description of a validation result, or None when it is valid."""
    if validation_result == NamespaceValidationResult.VALID:
        return None
    try:
        return _MESSAGES[NamespaceValidationResult(validation_result)]
    except ValueError:
        return "unknown result code for rmw namespace validation"


@dataclass(frozen=True)
class NamespaceValidation:
    """Result of a namespace check and the index of the offending character."""

    result: NamespaceValidationResult
    invalid_index: int | None = None

    @property
    def is_valid(self) -> bool:
        return self.result is NamespaceValidationResult.VALID

    @property
    def message(self) -> str | None:
        return namespace_validation_result_string(self.result)


def validate_namespace(namespace: str) -> NamespaceValidation:
    """Check that ``namespace`` is a valid node namespace."""
    if not isinstance(namespace, str):
        raise InvalidArgumentError("namespace must be a string")
    if namespace == "/":
        return NamespaceValidation(NamespaceValidationResult.VALID)

    topic_validation = validate_full_topic_name(namespace)
    if topic_validation.result not in (
        TopicValidationResult.VALID,
        TopicValidationResult.INVALID_TOO_LONG,
    ):
        return NamespaceValidation(
            _FROM_TOPIC_RESULT[topic_validation.result], topic_validation.invalid_index)

    # length is checked last since it might be a soft invalidation
    if len(namespace) > NAMESPACE_MAX_LENGTH:
        return NamespaceValidation(
            NamespaceValidationResult.INVALID_TOO_LONG, NAMESPACE_MAX_LENGTH - 1)
    return NamespaceValidation(NamespaceValidationResult.VALID)