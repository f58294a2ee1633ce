"""Quality of service policies and the profile that groups them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from rmwcore.duration import DURATION_UNSPECIFIED, Duration

__all__ = [
    "ReliabilityPolicy",
    "HistoryPolicy",
    "DurabilityPolicy",
    "LivelinessPolicy",
    "QosPolicyKind",
    "QosProfile",
    "QOS_POLICY_DEPTH_SYSTEM_DEFAULT",
    "QOS_DEADLINE_DEFAULT",
    "QOS_DEADLINE_BEST_AVAILABLE",
    "QOS_LIFESPAN_DEFAULT",
    "QOS_LIVELINESS_LEASE_DURATION_DEFAULT",
    "QOS_LIVELINESS_LEASE_DURATION_BEST_AVAILABLE",
]


class ReliabilityPolicy(enum.IntEnum):
    """Whether samples must be delivered."""

    SYSTEM_DEFAULT = 0
    RELIABLE = 1
    BEST_EFFORT = 2
    UNKNOWN = 3
    BEST_AVAILABLE = 4


class HistoryPolicy(enum.IntEnum):
    """How samples endure in the queue."""

    SYSTEM_DEFAULT = 0
    KEEP_LAST = 1
    KEEP_ALL = 2
    UNKNOWN = 3


class DurabilityPolicy(enum.IntEnum):
    """How samples persist for late-joining subscribers."""

    SYSTEM_DEFAULT = 0
    TRANSIENT_LOCAL = 1
    VOLATILE = 2
    UNKNOWN = 3
    BEST_AVAILABLE = 4


class LivelinessPolicy(enum.IntEnum):
    """How a publisher reports that it is alive.

    ``MANUAL_BY_NODE`` is deprecated; use ``MANUAL_BY_TOPIC`` when
    liveliness has to be asserted manually.
    """

    SYSTEM_DEFAULT = 0
    AUTOMATIC = 1
    MANUAL_BY_NODE = 2
    MANUAL_BY_TOPIC = 3
    UNKNOWN = 4
    BEST_AVAILABLE = 5


class QosPolicyKind(enum.IntFlag):
    """Individual QoS policies, as distinct bits so they can be combined."""

    INVALID = 1 << 0
    DURABILITY = 1 << 1
    DEADLINE = 1 << 2
    LIVELINESS = 1 << 3
    RELIABILITY = 1 << 4
    HISTORY = 1 << 5
    LIFESPAN = 1 << 6
    DEPTH = 1 << 7
    LIVELINESS_LEASE_DURATION = 1 << 8
    AVOID_ROS_NAMESPACE_CONVENTIONS = 1 << 9


QOS_POLICY_DEPTH_SYSTEM_DEFAULT = 0

QOS_DEADLINE_DEFAULT = DURATION_UNSPECIFIED
QOS_DEADLINE_BEST_AVAILABLE = Duration(9223372036, 854775806)
QOS_LIFESPAN_DEFAULT = DURATION_UNSPECIFIED
QOS_LIVELINESS_LEASE_DURATION_DEFAULT = DURATION_UNSPECIFIED
QOS_LIVELINESS_LEASE_DURATION_BEST_AVAILABLE = Duration(9223372036, 854775806)

_POLICY_FIELDS = {
    "history": HistoryPolicy,
    "reliability": ReliabilityPolicy,
    "durability": DurabilityPolicy,
    "liveliness": LivelinessPolicy,
}
_DURATION_FIELDS = ("deadline", "lifespan", "liveliness_lease_duration")


@dataclass
class QosProfile:
    """A middleware quality of service profile.

    A profile built without arguments is zero initialized: every policy is
    its system default, depth is zero and every duration is unspecified.
    Plain integers given for policies are converted to their enum members.
    """

    history: HistoryPolicy = HistoryPolicy.SYSTEM_DEFAULT
    depth: int = QOS_POLICY_DEPTH_SYSTEM_DEFAULT
    reliability: ReliabilityPolicy = ReliabilityPolicy.SYSTEM_DEFAULT
    durability: DurabilityPolicy = DurabilityPolicy.SYSTEM_DEFAULT
    deadline: Duration = field(default=QOS_DEADLINE_DEFAULT)
    lifespan: Duration = field(default=QOS_LIFESPAN_DEFAULT)
    liveliness: LivelinessPolicy = LivelinessPolicy.SYSTEM_DEFAULT
    liveliness_lease_duration: Duration = field(
        default=QOS_LIVELINESS_LEASE_DURATION_DEFAULT
    )
    avoid_ros_namespace_conventions: bool = False

    def __post_init__(self) -> None:
        for name, policy_type in _POLICY_FIELDS.items():
            setattr(self, name, policy_type(getattr(self, name)))
        if not isinstance(self.depth, int) or isinstance(self.depth, bool):
            raise TypeError("depth must be an integer")
        if self.depth < 0:
            raise ValueError("depth must not be negative")
        for name in _DURATION_FIELDS:
            if not isinstance(getattr(self, name), Duration):
                raise TypeError(f"{name} must be a Duration")
        self.avoid_ros_namespace_conventions = bool(
            self.avoid_ros_namespace_conventions
        )