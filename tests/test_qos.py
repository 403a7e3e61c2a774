import dataclasses

import pytest

from rmwkit.durations import (
    DURATION_INFINITE,
    DURATION_UNSPECIFIED,
    INT64_MAX,
    RmwTime,
    time_total_nsec,
)
from rmwkit.errors import InvalidArgumentError
from rmwkit.qos import (
    QOS_DEADLINE_BEST_AVAILABLE,
    QOS_LIVELINESS_LEASE_DURATION_BEST_AVAILABLE,
    QOS_POLICY_DEPTH_SYSTEM_DEFAULT,
    DurabilityPolicy,
    HistoryPolicy,
    LivelinessPolicy,
    QoSProfile,
    ReliabilityPolicy,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (0, LivelinessPolicy.SYSTEM_DEFAULT),
        (1, LivelinessPolicy.AUTOMATIC),
        (3, LivelinessPolicy.MANUAL_BY_TOPIC),
        (4, LivelinessPolicy.UNKNOWN),
        (5, LivelinessPolicy.BEST_AVAILABLE),
    ],
)
def test_liveliness_values_fixed_by_source(raw, expected):
    profile = QoSProfile(liveliness=raw)
    assert profile.liveliness is expected
    assert int(profile.liveliness) == raw


def test_enumeration_order():
    assert [QoSProfile(reliability=i).reliability.name for i in range(5)] == [
        "SYSTEM_DEFAULT", "RELIABLE", "BEST_EFFORT", "UNKNOWN", "BEST_AVAILABLE"]
    assert [QoSProfile(history=i).history.name for i in range(4)] == [
        "SYSTEM_DEFAULT", "KEEP_LAST", "KEEP_ALL", "UNKNOWN"]
    assert [QoSProfile(durability=i).durability.name for i in range(5)] == [
        "SYSTEM_DEFAULT", "TRANSIENT_LOCAL", "VOLATILE", "UNKNOWN", "BEST_AVAILABLE"]
    with pytest.raises(InvalidArgumentError):
        QoSProfile(history=4)


def test_best_available_durations_are_one_below_infinite():
    assert QOS_DEADLINE_BEST_AVAILABLE == RmwTime(9223372036, 854775806)
    assert time_total_nsec(QOS_DEADLINE_BEST_AVAILABLE) == INT64_MAX - 1
    assert time_total_nsec(DURATION_INFINITE) - 1 == time_total_nsec(
        QOS_LIVELINESS_LEASE_DURATION_BEST_AVAILABLE)


def test_default_profile():
    profile = QoSProfile()
    assert profile.history is HistoryPolicy.SYSTEM_DEFAULT
    assert profile.depth == QOS_POLICY_DEPTH_SYSTEM_DEFAULT == 0
    assert profile.reliability is ReliabilityPolicy.SYSTEM_DEFAULT
    assert profile.durability is DurabilityPolicy.SYSTEM_DEFAULT
    assert profile.deadline == DURATION_UNSPECIFIED
    assert profile.lifespan == DURATION_UNSPECIFIED
    assert profile.liveliness is LivelinessPolicy.SYSTEM_DEFAULT
    assert profile.liveliness_lease_duration == DURATION_UNSPECIFIED
    assert profile.avoid_ros_namespace_conventions is False


def test_integer_policies_are_converted():
    profile = QoSProfile(history=1, reliability=2, durability=1, liveliness=3)
    assert profile.history is HistoryPolicy.KEEP_LAST
    assert profile.reliability is ReliabilityPolicy.BEST_EFFORT
    assert profile.durability is DurabilityPolicy.TRANSIENT_LOCAL
    assert profile.liveliness is LivelinessPolicy.MANUAL_BY_TOPIC


@pytest.mark.parametrize("field_name", ["history", "reliability", "durability", "liveliness"])
def test_unknown_policy_value_rejected(field_name):
    with pytest.raises(InvalidArgumentError):
        QoSProfile(**{field_name: 99})


@pytest.mark.parametrize("depth", [-1, 2**64, 1.5, True])
def test_bad_depth_rejected(depth):
    with pytest.raises(InvalidArgumentError):
        QoSProfile(depth=depth)


@pytest.mark.parametrize(
    "field_name", ["deadline", "lifespan", "liveliness_lease_duration"])
def test_duration_must_be_rmw_time(field_name):
    with pytest.raises(InvalidArgumentError):
        QoSProfile(**{field_name: (1, 0)})


def test_profile_is_immutable_and_comparable():
    profile = QoSProfile(history=HistoryPolicy.KEEP_LAST, depth=10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        profile.depth = 5
    assert profile == QoSProfile(history=1, depth=10)
    changed = dataclasses.replace(profile, depth=5)
    assert changed.depth == 5
    assert changed.history is HistoryPolicy.KEEP_LAST


def test_manual_by_node_is_deprecated():
    with pytest.warns(DeprecationWarning, match="MANUAL_BY_TOPIC"):
        profile = QoSProfile(liveliness=LivelinessPolicy.MANUAL_BY_NODE)
    assert profile.liveliness is LivelinessPolicy.MANUAL_BY_NODE
    with pytest.warns(DeprecationWarning):
        from_int = QoSProfile(liveliness=2)
    assert from_int.liveliness is LivelinessPolicy.MANUAL_BY_NODE


def test_best_available_profile_holds_durations():
    profile = QoSProfile(
        deadline=QOS_DEADLINE_BEST_AVAILABLE,
        liveliness_lease_duration=QOS_LIVELINESS_LEASE_DURATION_BEST_AVAILABLE,
        liveliness=LivelinessPolicy.BEST_AVAILABLE,
        avoid_ros_namespace_conventions=1,
    )
    assert profile.deadline == QOS_DEADLINE_BEST_AVAILABLE
    assert profile.liveliness is LivelinessPolicy.BEST_AVAILABLE
    assert profile.avoid_ros_namespace_conventions is True