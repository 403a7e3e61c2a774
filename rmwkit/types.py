"""Value types describing graph entities, messages and creation options."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from rmwkit.errors import InvalidArgumentError

GID_STORAGE_SIZE = 16
MESSAGE_INFO_SEQUENCE_NUMBER_UNSUPPORTED = 2**64 - 1

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1


def _check_int(name: str, value: object, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        raise InvalidArgumentError(f"{name} must be an integer in [{low}, {high}], got {value!r}")


def _as_storage(name: str, value: object) -> bytes:
    try:
        data = bytes(value)  # type: ignore[call-overload]
    except TypeError:
        raise InvalidArgumentError(f"{name} must be bytes-like") from None
    if len(data) != GID_STORAGE_SIZE:
        raise InvalidArgumentError(
            f"{name} must hold exactly {GID_STORAGE_SIZE} bytes, got {len(data)}")
    return data


def _as_enum(enum_type: type[IntEnum], name: str, value: object) -> IntEnum:
    try:
        return enum_type(value)
    except ValueError:
        raise InvalidArgumentError(f"{name} has no value {value!r}") from None


class EndpointType(IntEnum):
    """Kind of a topic endpoint."""

    INVALID = 0
    PUBLISHER = 1
    SUBSCRIPTION = 2


class UniqueNetworkFlowEndpointsRequirement(IntEnum):
    """Whether the middleware must create unique network flow endpoints."""

    NOT_REQUIRED = 0
    STRICTLY_REQUIRED = 1
    OPTIONALLY_REQUIRED = 2
    SYSTEM_DEFAULT = 3


@dataclass(frozen=True)
class Gid:
    """Globally unique identifier of a graph entity."""

    implementation_identifier: str | None = None
    data: bytes = bytes(GID_STORAGE_SIZE)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _as_storage("data", self.data))


@dataclass(frozen=True)
class RequestId:
    """Identifier of a service request."""

    writer_guid: bytes = bytes(GID_STORAGE_SIZE)
    sequence_number: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "writer_guid", _as_storage("writer_guid", self.writer_guid))
        _check_int("sequence_number", self.sequence_number, _INT64_MIN, _INT64_MAX)


@dataclass(frozen=True)
class ServiceInfo:
    """Meta-data for a service-related take."""

    source_timestamp: int = 0
    received_timestamp: int = 0
    request_id: RequestId = field(default_factory=RequestId)

    def __post_init__(self) -> None:
        _check_int("source_timestamp", self.source_timestamp, _INT64_MIN, _INT64_MAX)
        _check_int("received_timestamp", self.received_timestamp, _INT64_MIN, _INT64_MAX)
        if not isinstance(self.request_id, RequestId):
            raise InvalidArgumentError("request_id must be a RequestId")


@dataclass(frozen=True)
class MessageInfo:
    """Information describing a received message."""

    source_timestamp: int = 0
    received_timestamp: int = 0
    publication_sequence_number: int = 0
    reception_sequence_number: int = 0
    publisher_gid: Gid = field(default_factory=Gid)
    from_intra_process: bool = False

    def __post_init__(self) -> None:
        _check_int("source_timestamp", self.source_timestamp, _INT64_MIN, _INT64_MAX)
        _check_int("received_timestamp", self.received_timestamp, _INT64_MIN, _INT64_MAX)
        _check_int("publication_sequence_number", self.publication_sequence_number,
                   0, _UINT64_MAX)
        _check_int("reception_sequence_number", self.reception_sequence_number, 0, _UINT64_MAX)
        if not isinstance(self.publisher_gid, Gid):
            raise InvalidArgumentError("publisher_gid must be a Gid")
        object.__setattr__(self, "from_intra_process", bool(self.from_intra_process))


@dataclass(frozen=True)
class PublisherOptions:
    """Options used when creating a publisher."""

    rmw_specific_publisher_payload: Any = None
    require_unique_network_flow_endpoints: UniqueNetworkFlowEndpointsRequirement = (
        UniqueNetworkFlowEndpointsRequirement.NOT_REQUIRED)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "require_unique_network_flow_endpoints",
            _as_enum(UniqueNetworkFlowEndpointsRequirement,
                     "require_unique_network_flow_endpoints",
                     self.require_unique_network_flow_endpoints))


@dataclass(frozen=True)
class SubscriptionOptions:
    """Options used when creating a subscription."""

    rmw_specific_subscription_payload: Any = None
    ignore_local_publications: bool = False
    require_unique_network_flow_endpoints: UniqueNetworkFlowEndpointsRequirement = (
        UniqueNetworkFlowEndpointsRequirement.NOT_REQUIRED)
    content_filter_options: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "ignore_local_publications", bool(self.ignore_local_publications))
        object.__setattr__(
            self, "require_unique_network_flow_endpoints",
            _as_enum(UniqueNetworkFlowEndpointsRequirement,
                     "require_unique_network_flow_endpoints",
                     self.require_unique_network_flow_endpoints))


def get_zero_initialized_message_info() -> MessageInfo:
    """Return a message info with every field zeroed."""
    return MessageInfo()