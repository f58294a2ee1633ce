import pytest

from rmwcore.errors import RmwInvalidArgumentError
from rmwcore.qos import (
    DurabilityPolicy,
    HistoryPolicy,
    LivelinessPolicy,
    QosPolicyKind,
    ReliabilityPolicy,
)
from rmwcore.qos_string_conversions import (
    durability_policy_from_str,
    durability_policy_to_str,
    history_policy_from_str,
    history_policy_to_str,
    liveliness_policy_from_str,
    liveliness_policy_to_str,
    qos_policy_kind_from_str,
    qos_policy_kind_to_str,
    reliability_policy_from_str,
    reliability_policy_to_str,
)


@pytest.mark.parametrize(
    "kind, name",
    [
        (QosPolicyKind.DURABILITY, "durability"),
        (QosPolicyKind.DEADLINE, "deadline"),
        (QosPolicyKind.LIVELINESS, "liveliness"),
        (QosPolicyKind.RELIABILITY, "reliability"),
        (QosPolicyKind.HISTORY, "history"),
        (QosPolicyKind.LIFESPAN, "lifespan"),
        (QosPolicyKind.DEPTH, "depth"),
        (QosPolicyKind.LIVELINESS_LEASE_DURATION, "liveliness_lease_duration"),
        (QosPolicyKind.AVOID_ROS_NAMESPACE_CONVENTIONS, "avoid_ros_namespace_conventions"),
    ],
)
def test_policy_kind_names(kind, name):
    assert qos_policy_kind_to_str(kind) == name
    assert qos_policy_kind_from_str(name) is kind


@pytest.mark.parametrize(
    "to_str, from_str, value, name",
    [
        (durability_policy_to_str, durability_policy_from_str,
         DurabilityPolicy.SYSTEM_DEFAULT, "system_default"),
        (durability_policy_to_str, durability_policy_from_str,
         DurabilityPolicy.TRANSIENT_LOCAL, "transient_local"),
        (durability_policy_to_str, durability_policy_from_str,
         DurabilityPolicy.VOLATILE, "volatile"),
        (durability_policy_to_str, durability_policy_from_str,
         DurabilityPolicy.BEST_AVAILABLE, "best_available"),
        (history_policy_to_str, history_policy_from_str,
         HistoryPolicy.SYSTEM_DEFAULT, "system_default"),
        (history_policy_to_str, history_policy_from_str,
         HistoryPolicy.KEEP_LAST, "keep_last"),
        (history_policy_to_str, history_policy_from_str,
         HistoryPolicy.KEEP_ALL, "keep_all"),
        (liveliness_policy_to_str, liveliness_policy_from_str,
         LivelinessPolicy.SYSTEM_DEFAULT, "system_default"),
        (liveliness_policy_to_str, liveliness_policy_from_str,
         LivelinessPolicy.AUTOMATIC, "automatic"),
        (liveliness_policy_to_str, liveliness_policy_from_str,
         LivelinessPolicy.MANUAL_BY_TOPIC, "manual_by_topic"),
        (liveliness_policy_to_str, liveliness_policy_from_str,
         LivelinessPolicy.BEST_AVAILABLE, "best_available"),
        (reliability_policy_to_str, reliability_policy_from_str,
         ReliabilityPolicy.SYSTEM_DEFAULT, "system_default"),
        (reliability_policy_to_str, reliability_policy_from_str,
         ReliabilityPolicy.RELIABLE, "reliable"),
        (reliability_policy_to_str, reliability_policy_from_str,
         ReliabilityPolicy.BEST_EFFORT, "best_effort"),
        (reliability_policy_to_str, reliability_policy_from_str,
         ReliabilityPolicy.BEST_AVAILABLE, "best_available"),
    ],
)
def test_policy_value_names(to_str, from_str, value, name):
    assert to_str(value) == name
    assert from_str(name) is value


def test_round_trip_for_every_named_member():
    kinds = [k for k in QosPolicyKind if qos_policy_kind_to_str(k) is not None]
    assert len(kinds) == 9
    assert all(qos_policy_kind_from_str(qos_policy_kind_to_str(k)) is k for k in kinds)

    durabilities = [d for d in DurabilityPolicy if durability_policy_to_str(d) is not None]
    assert len(durabilities) == 4
    assert all(
        durability_policy_from_str(durability_policy_to_str(d)) is d for d in durabilities
    )

    histories = [h for h in HistoryPolicy if history_policy_to_str(h) is not None]
    assert len(histories) == 3
    assert all(history_policy_from_str(history_policy_to_str(h)) is h for h in histories)

    livelinesses = [v for v in LivelinessPolicy if liveliness_policy_to_str(v) is not None]
    assert len(livelinesses) == 4
    assert all(
        liveliness_policy_from_str(liveliness_policy_to_str(v)) is v for v in livelinesses
    )

    reliabilities = [r for r in ReliabilityPolicy if reliability_policy_to_str(r) is not None]
    assert len(reliabilities) == 4
    assert all(
        reliability_policy_from_str(reliability_policy_to_str(r)) is r for r in reliabilities
    )


def test_fallback_has_no_name():
    assert qos_policy_kind_to_str(QosPolicyKind.INVALID) is None
    assert durability_policy_to_str(DurabilityPolicy.UNKNOWN) is None
    assert history_policy_to_str(HistoryPolicy.UNKNOWN) is None
    assert liveliness_policy_to_str(LivelinessPolicy.UNKNOWN) is None
    assert reliability_policy_to_str(ReliabilityPolicy.UNKNOWN) is None


@pytest.mark.parametrize("text", ["", "not_a_policy"])
def test_unrecognized_text_gives_fallback(text):
    assert qos_policy_kind_from_str(text) is QosPolicyKind.INVALID
    assert durability_policy_from_str(text) is DurabilityPolicy.UNKNOWN
    assert history_policy_from_str(text) is HistoryPolicy.UNKNOWN
    assert liveliness_policy_from_str(text) is LivelinessPolicy.UNKNOWN
    assert reliability_policy_from_str(text) is ReliabilityPolicy.UNKNOWN


def test_none_text_is_invalid_argument():
    with pytest.raises(RmwInvalidArgumentError):
        qos_policy_kind_from_str(None)
    with pytest.raises(RmwInvalidArgumentError):
        durability_policy_from_str(None)
    with pytest.raises(RmwInvalidArgumentError):
        history_policy_from_str(None)
    with pytest.raises(RmwInvalidArgumentError):
        liveliness_policy_from_str(None)
    with pytest.raises(RmwInvalidArgumentError):
        reliability_policy_from_str(None)


def test_match_is_exact_not_prefix():
    assert qos_policy_kind_from_str("durabilityX") is QosPolicyKind.INVALID
    assert qos_policy_kind_from_str("dur") is QosPolicyKind.INVALID
    assert qos_policy_kind_from_str("DURABILITY") is QosPolicyKind.INVALID
    assert reliability_policy_from_str("reliable ") is ReliabilityPolicy.UNKNOWN


def test_out_of_range_values_have_no_name():
    assert qos_policy_kind_to_str(QosPolicyKind.DURABILITY | QosPolicyKind.DEADLINE) is None
    assert durability_policy_to_str(99) is None
    assert history_policy_to_str(-1) is None
    assert liveliness_policy_to_str(LivelinessPolicy.MANUAL_BY_NODE) is None
    assert reliability_policy_to_str(99) is None


def test_plain_integers_are_accepted():
    assert history_policy_to_str(int(HistoryPolicy.KEEP_LAST)) == "keep_last"
    assert qos_policy_kind_to_str(int(QosPolicyKind.DEPTH)) == "depth"