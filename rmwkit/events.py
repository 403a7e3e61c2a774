"""Status records reported with middleware events."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar

from rmwkit.errors import InvalidArgumentError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
SIZE_MAX = 2**64 - 1

_INT32 = (INT32_MIN, INT32_MAX)
_SIZE = (0, SIZE_MAX)


class _CountStatus:
    """Checks every field against the integer range its counter can hold."""

    _ranges: ClassVar[dict[str, tuple[int, int]]] = {}

    def __post_init__(self) -> None:
        for item in fields(self):  # type: ignore[arg-type]
            low, high = self._ranges.get(item.name, _INT32)
            value = getattr(self, item.name)
            if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
                raise InvalidArgumentError(
                    f"{item.name} must be an integer in [{low}, {high}], got {value!r}")


@dataclass(frozen=True)
class QoSIncompatibleEventStatus(_CountStatus):
    """Incompatible QoS found between a publisher and a subscription."""

    total_count: int = 0
    total_count_change: int = 0
    last_policy_kind: int = 0


RequestedQoSIncompatibleEventStatus = QoSIncompatibleEventStatus
OfferedQoSIncompatibleEventStatus = QoSIncompatibleEventStatus


@dataclass(frozen=True)
class IncompatibleTypeStatus(_CountStatus):
    """Incompatible types detected on a topic."""

    total_count: int = 0
    total_count_change: int = 0


@dataclass(frozen=True)
class LivelinessChangedStatus(_CountStatus):
    """Liveliness changes of the publishers matched to a subscription."""

    alive_count: int = 0
    not_alive_count: int = 0
    alive_count_change: int = 0
    not_alive_count_change: int = 0


@dataclass(frozen=True)
class LivelinessLostStatus(_CountStatus):
    """Times a publisher failed to assert its liveliness in time."""

    total_count: int = 0
    total_count_change: int = 0


@dataclass(frozen=True)
class MatchedStatus(_CountStatus):
    """Endpoints matched to a publisher or a subscription."""

    _ranges: ClassVar[dict[str, tuple[int, int]]] = {
        "total_count": _SIZE,
        "total_count_change": _SIZE,
        "current_count": _SIZE,
        "current_count_change": _INT32,
    }

    total_count: int = 0
    total_count_change: int = 0
    current_count: int = 0
    current_count_change: int = 0


@dataclass(frozen=True)
class MessageLostStatus(_CountStatus):
    """Messages lost by a subscription."""

    _ranges: ClassVar[dict[str, tuple[int, int]]] = {
        "total_count": _SIZE,
        "total_count_change": _SIZE,
    }

    total_count: int = 0
    total_count_change: int = 0


@dataclass(frozen=True)
class OfferedDeadlineMissedStatus(_CountStatus):
    """Deadline periods in which a publisher failed to provide data."""

    total_count: int = 0
    total_count_change: int = 0


@dataclass(frozen=True)
class RequestedDeadlineMissedStatus(_CountStatus):
    """Deadlines missed for data expected by a subscription."""

    total_count: int = 0
    total_count_change: int = 0