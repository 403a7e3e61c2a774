# rmwkit

Building blocks for a publish/subscribe middleware layer, in plain Python
with no third-party dependencies:

- validation of fully qualified topic names, namespaces and node names, with
  the reason a name was rejected and the index of the offending character;
- `RmwTime`, a seconds/nanoseconds duration with normalisation, saturating
  conversion to total nanoseconds, and the infinite-duration sentinel;
- quality-of-service policies and profiles;
- message and service metadata, publisher and subscription options;
- event status records (matched, message lost, liveliness, deadlines,
  incompatible QoS or type);
- a small exception hierarchy keyed by middleware return codes.

## Installation

```
pip install rmwkit
```

To run the tests:

```
pip install "rmwkit[test]"
pytest
```

## Validating names

```python
from rmwkit.topic_name import (
    TopicValidationResult,
    validate_full_topic_name,
    full_topic_name_validation_result_string,
)

check = validate_full_topic_name("/chatter//foo")
if check.result is not TopicValidationResult.VALID:
    print(full_topic_name_validation_result_string(check.result),
          "at index", check.invalid_index)
```

`validate_full_topic_name` returns a frozen `TopicNameValidation` with
`result`, `invalid_index` (None when the name is valid), and the properties
`is_valid` and `message`. A topic name must be non-empty, start with `/`, not
end with `/`, contain only ASCII letters, digits, `_` and `/`, have no
repeated `/`, and have no token starting with a digit. Its length limit is
`TOPIC_MAX_NAME_LENGTH` (247).

`rmwkit.namespace.validate_namespace` and `rmwkit.node_name.validate_node_name`
work the same way and return `NamespaceValidation` and `NodeNameValidation`,
with the results `NamespaceValidationResult` and `NodeNameValidationResult`.
A namespace follows the topic-name rules, except that `/` alone is valid; its
limit is `NAMESPACE_MAX_LENGTH` (245). A node name may hold only ASCII
letters, digits and `_`, must not start with a digit, and is limited to
`NODE_NAME_MAX_NAME_LENGTH` (255).

A name that is too long is reported only after every other check has passed,
because length is a soft limit; the reported index is then the limit minus
one. `namespace_validation_result_string` and
`node_name_validation_result_string` describe a result, return None for a
valid one, and return an "unknown result code" message for any other number.
Passing something other than a string raises `InvalidArgumentError`.

## Durations

```python
from rmwkit.durations import RmwTime, time_equal, time_total_nsec, time_from_nsec, time_normalize

time_normalize(RmwTime(0, 1_234_567_890))   # RmwTime(sec=1, nsec=234567890)
time_equal(RmwTime(2, 100), RmwTime(1, 1_000_000_100))  # True
time_total_nsec(RmwTime(1, 1))              # 1000000001
time_from_nsec(-1)                          # DURATION_INFINITE
```

Both components of `RmwTime` must be unsigned 64-bit integers, otherwise
`ValueError` is raised. Total nanoseconds saturate at the largest signed
64-bit value instead of overflowing. The module also provides
`DURATION_INFINITE` and `DURATION_UNSPECIFIED`.

## Quality of service

`rmwkit.qos` has `ReliabilityPolicy`, `HistoryPolicy`, `DurabilityPolicy`,
`LivelinessPolicy` and the frozen `QoSProfile`:

```python
from rmwkit.qos import QoSProfile, HistoryPolicy, ReliabilityPolicy

profile = QoSProfile(history=HistoryPolicy.KEEP_LAST, depth=10,
                     reliability=ReliabilityPolicy.RELIABLE)
```

Integer policy values are converted to their enumerations. An unknown policy
value, a negative depth, or a duration that is not an `RmwTime` raises
`InvalidArgumentError`. Choosing `LivelinessPolicy.MANUAL_BY_NODE` issues a
`DeprecationWarning`. The module also defines the default and best-available
deadline, lifespan and lease-duration constants.

## Metadata and options

`rmwkit.types` has `EndpointType`, `UniqueNetworkFlowEndpointsRequirement`,
`Gid`, `RequestId`, `ServiceInfo`, `MessageInfo`, `PublisherOptions` and
`SubscriptionOptions`, all frozen and range-checked on construction.
`Gid.data` and `RequestId.writer_guid` must hold exactly 16 bytes
(`GID_STORAGE_SIZE`). `get_zero_initialized_message_info()` returns a
`MessageInfo` with every field zeroed; `MESSAGE_INFO_SEQUENCE_NUMBER_UNSUPPORTED`
marks a sequence number the middleware does not provide.

## Event statuses

`rmwkit.events` has `MatchedStatus`, `MessageLostStatus`,
`LivelinessChangedStatus`, `LivelinessLostStatus`,
`OfferedDeadlineMissedStatus`, `RequestedDeadlineMissedStatus`,
`QoSIncompatibleEventStatus` and `IncompatibleTypeStatus`. Each field is
checked against the range of its counter (signed 32-bit, or unsigned size for
the counts in `MatchedStatus` and `MessageLostStatus`), raising
`InvalidArgumentError` when out of range.

## Errors

Failures are raised as subclasses of `rmwkit.errors.RmwError`:
`InvalidArgumentError`, `BadAllocError`, `RmwTimeoutError`,
`UnsupportedError`, `IncorrectImplementationError` and
`NodeNameNonExistentError`. Each carries its `rmwkit.errors.ReturnCode` as
`code`. `error_for_code(code, message)` returns the matching exception
instance; it raises `ValueError` for `ReturnCode.OK` and for unknown codes.

## What this package does not do

rmwkit holds data types and checks only. It does not create nodes,
publishers, subscriptions, services or contexts, does not send or receive
messages, and provides no command-line tool.