"""Conversions between QoS policy values and their string names."""

from __future__ import annotations

from typing import Optional, TypeVar

from rmwcore.errors import RmwInvalidArgumentError
from rmwcore.qos import (
    DurabilityPolicy,
    HistoryPolicy,
    LivelinessPolicy,
    QosPolicyKind,
    ReliabilityPolicy,
)

__all__ = [
    "qos_policy_kind_to_str",
    "durability_policy_to_str",
    "history_policy_to_str",
    "liveliness_policy_to_str",
    "reliability_policy_to_str",
    "qos_policy_kind_from_str",
    "durability_policy_from_str",
    "history_policy_from_str",
    "liveliness_policy_from_str",
    "reliability_policy_from_str",
]

_E = TypeVar("_E")

_POLICY_KIND_NAMES: dict[QosPolicyKind, str] = {
    QosPolicyKind.DURABILITY: "durability",
    QosPolicyKind.DEADLINE: "deadline",
    QosPolicyKind.LIVELINESS: "liveliness",
    QosPolicyKind.RELIABILITY: "reliability",
    QosPolicyKind.HISTORY: "history",
    QosPolicyKind.LIFESPAN: "lifespan",
    QosPolicyKind.DEPTH: "depth",
    QosPolicyKind.LIVELINESS_LEASE_DURATION: "liveliness_lease_duration",
    QosPolicyKind.AVOID_ROS_NAMESPACE_CONVENTIONS: "avoid_ros_namespace_conventions",
}

_DURABILITY_NAMES: dict[DurabilityPolicy, str] = {
    DurabilityPolicy.SYSTEM_DEFAULT: "system_default",
    DurabilityPolicy.TRANSIENT_LOCAL: "transient_local",
    DurabilityPolicy.VOLATILE: "volatile",
    DurabilityPolicy.BEST_AVAILABLE: "best_available",
}

_HISTORY_NAMES: dict[HistoryPolicy, str] = {
    HistoryPolicy.SYSTEM_DEFAULT: "system_default",
    HistoryPolicy.KEEP_LAST: "keep_last",
    HistoryPolicy.KEEP_ALL: "keep_all",
}

_LIVELINESS_NAMES: dict[LivelinessPolicy, str] = {
    LivelinessPolicy.SYSTEM_DEFAULT: "system_default",
    LivelinessPolicy.AUTOMATIC: "automatic",
    LivelinessPolicy.MANUAL_BY_TOPIC: "manual_by_topic",
    LivelinessPolicy.BEST_AVAILABLE: "best_available",
}

_RELIABILITY_NAMES: dict[ReliabilityPolicy, str] = {
    ReliabilityPolicy.SYSTEM_DEFAULT: "system_default",
    ReliabilityPolicy.RELIABLE: "reliable",
    ReliabilityPolicy.BEST_EFFORT: "best_effort",
    ReliabilityPolicy.BEST_AVAILABLE: "best_available",
}


def _reverse(names: dict[_E, str]) -> dict[str, _E]:
    return {name: value for value, name in names.items()}


_POLICY_KIND_BY_NAME = _reverse(_POLICY_KIND_NAMES)
_DURABILITY_BY_NAME = _reverse(_DURABILITY_NAMES)
_HISTORY_BY_NAME = _reverse(_HISTORY_NAMES)
_LIVELINESS_BY_NAME = _reverse(_LIVELINESS_NAMES)
_RELIABILITY_BY_NAME = _reverse(_RELIABILITY_NAMES)


def _lookup_name(names: dict, value: object) -> Optional[str]:
    try:
        return names.get(value)
    except TypeError:
        return None


def _lookup_value(table: dict[str, _E], text: Optional[str], fallback: _E) -> _E:
    if text is None:
        raise RmwInvalidArgumentError("str argument is null")
    return table.get(text, fallback)


def qos_policy_kind_to_str(kind: int) -> Optional[str]:
    """Name of a QoS policy kind, or None for INVALID and unknown values."""
    return _lookup_name(_POLICY_KIND_NAMES, kind)


def durability_policy_to_str(value: int) -> Optional[str]:
    """Name of a durability policy, or None for UNKNOWN and unknown values."""
    return _lookup_name(_DURABILITY_NAMES, value)


def history_policy_to_str(value: int) -> Optional[str]:
    """Name of a history policy, or None for UNKNOWN and unknown values."""
    return _lookup_name(_HISTORY_NAMES, value)


def liveliness_policy_to_str(value: int) -> Optional[str]:
    """Name of a liveliness policy, or None for UNKNOWN and unknown values."""
    return _lookup_name(_LIVELINESS_NAMES, value)


def reliability_policy_to_str(value: int) -> Optional[str]:
    """Name of a reliability policy, or None for UNKNOWN and unknown values."""
    return _lookup_name(_RELIABILITY_NAMES, value)


def qos_policy_kind_from_str(text: str) -> QosPolicyKind:
    """Policy kind named by ``text``; INVALID if the name is not known."""
    return _lookup_value(_POLICY_KIND_BY_NAME, text, QosPolicyKind.INVALID)


def durability_policy_from_str(text: str) -> DurabilityPolicy:
    """Durability policy named by ``text``; UNKNOWN if the name is not known."""
    return _lookup_value(_DURABILITY_BY_NAME, text, DurabilityPolicy.UNKNOWN)


def history_policy_from_str(text: str) -> HistoryPolicy:
    """History policy named by ``text``; UNKNOWN if the name is not known."""
    return _lookup_value(_HISTORY_BY_NAME, text, HistoryPolicy.UNKNOWN)


def liveliness_policy_from_str(text: str) -> LivelinessPolicy:
    """Liveliness policy named by ``text``; UNKNOWN if the name is not known."""
    return _lookup_value(_LIVELINESS_BY_NAME, text, LivelinessPolicy.UNKNOWN)


def reliability_policy_from_str(text: str) -> ReliabilityPolicy:
    """Reliability policy named by ``text``; UNKNOWN if the name is not known."""
    return _lookup_value(_RELIABILITY_BY_NAME, text, ReliabilityPolicy.UNKNOWN)