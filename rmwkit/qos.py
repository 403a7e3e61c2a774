"""Quality of service policies and profiles."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TypeVar

from rmwkit.durations import DURATION_UNSPECIFIED, RmwTime
from rmwkit.errors import InvalidArgumentError

_E = TypeVar("_E", bound=IntEnum)


class ReliabilityPolicy(IntEnum):
    """How reliably samples are delivered."""

    SYSTEM_DEFAULT = 0
    RELIABLE = 1
    BEST_EFFORT = 2
    UNKNOWN = 3
    BEST_AVAILABLE = 4


class HistoryPolicy(IntEnum):
    """How samples endure in the queue."""

    SYSTEM_DEFAULT = 0
    KEEP_LAST = 1
    KEEP_ALL = 2
    UNKNOWN = 3


class DurabilityPolicy(IntEnum):
    """How samples persist for late-joining subscriptions."""

    SYSTEM_DEFAULT = 0
    TRANSIENT_LOCAL = 1
    VOLATILE = 2
    UNKNOWN = 3
    BEST_AVAILABLE = 4


class LivelinessPolicy(IntEnum):
    """How a publisher reports that it is alive."""

    SYSTEM_DEFAULT = 0
    AUTOMATIC = 1
    MANUAL_BY_NODE = 2  # deprecated, use MANUAL_BY_TOPIC
    MANUAL_BY_TOPIC = 3
    UNKNOWN = 4
    BEST_AVAILABLE = 5


LIVELINESS_MANUAL_BY_NODE_DEPRECATED_MSG = (
    "LivelinessPolicy.MANUAL_BY_NODE is deprecated. "
    "Use LivelinessPolicy.MANUAL_BY_TOPIC if manually asserted liveliness is needed."
)

QOS_POLICY_DEPTH_SYSTEM_DEFAULT = 0

QOS_DEADLINE_DEFAULT = DURATION_UNSPECIFIED
QOS_DEADLINE_BEST_AVAILABLE = RmwTime(9223372036, 854775806)
QOS_LIFESPAN_DEFAULT = DURATION_UNSPECIFIED
QOS_LIVELINESS_LEASE_DURATION_DEFAULT = DURATION_UNSPECIFIED
QOS_LIVELINESS_LEASE_DURATION_BEST_AVAILABLE = RmwTime(9223372036, 854775806)

_SIZE_LIMIT = 2**64


def _as_policy(enum_type: type[_E], value: object, name: str) -> _E:
    try:
        return enum_type(value)
    except ValueError:
        raise InvalidArgumentError(f"{name} has no policy value {value!r}") from None


@dataclass(frozen=True)
class QoSProfile:
    """A complete quality of service profile.

    Integer policy values are converted to their enumerations; an unknown
    value, a negative depth or a duration that is not an RmwTime raises
    InvalidArgumentError.
    """

    history: HistoryPolicy = HistoryPolicy.SYSTEM_DEFAULT
    depth: int = QOS_POLICY_DEPTH_SYSTEM_DEFAULT
    reliability: ReliabilityPolicy = ReliabilityPolicy.SYSTEM_DEFAULT
    durability: DurabilityPolicy = DurabilityPolicy.SYSTEM_DEFAULT
    deadline: RmwTime = field(default=QOS_DEADLINE_DEFAULT)
    lifespan: RmwTime = field(default=QOS_LIFESPAN_DEFAULT)
    liveliness: LivelinessPolicy = LivelinessPolicy.SYSTEM_DEFAULT
    liveliness_lease_duration: RmwTime = field(default=QOS_LIVELINESS_LEASE_DURATION_DEFAULT)
    avoid_ros_namespace_conventions: bool = False

    def __post_init__(self) -> None:
        policies = (
            ("history", HistoryPolicy),
            ("reliability", ReliabilityPolicy),
            ("durability", DurabilityPolicy),
            ("liveliness", LivelinessPolicy),
        )
        for name, enum_type in policies:
            object.__setattr__(self, name, _as_policy(enum_type, getattr(self, name), name))

        depth = self.depth
        if isinstance(depth, bool) or not isinstance(depth, int) or not 0 <= depth < _SIZE_LIMIT:
            raise InvalidArgumentError(f"depth must be a non-negative size, got {depth!r}")

        for name in ("deadline", "lifespan", "liveliness_lease_duration"):
            if not isinstance(getattr(self, name), RmwTime):
                raise InvalidArgumentError(f"{name} must be an RmwTime")

        object.__setattr__(
            self, "avoid_ros_namespace_conventions", bool(self.avoid_ros_namespace_conventions))

        if self.liveliness is LivelinessPolicy.MANUAL_BY_NODE:
            warnings.warn(LIVELINESS_MANUAL_BY_NODE_DEPRECATED_MSG, DeprecationWarning,
                          stacklevel=3)