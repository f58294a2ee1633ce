"""Endpoint, option and message metadata types of the middleware layer."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional

from rmwcore.errors import RmwInvalidArgumentError

__all__ = [
    "GID_STORAGE_SIZE",
    "WRITER_GUID_SIZE",
    "MESSAGE_INFO_SEQUENCE_NUMBER_UNSUPPORTED",
    "EndpointType",
    "UniqueNetworkFlowEndpointsRequirement",
    "LogSeverity",
    "PublisherOptions",
    "SubscriptionOptions",
    "RequestId",
    "ServiceInfo",
    "Gid",
    "MessageInfo",
    "get_default_publisher_options",
    "zero_initialized_message_info",
]

# The most memory any current implementation needs to represent a GID.
GID_STORAGE_SIZE = 24
WRITER_GUID_SIZE = 16
MESSAGE_INFO_SEQUENCE_NUMBER_UNSUPPORTED = 2**64 - 1

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1


class EndpointType(enum.IntEnum):
    """Kind of a topic endpoint."""

    INVALID = 0
    PUBLISHER = 1
    SUBSCRIPTION = 2


class UniqueNetworkFlowEndpointsRequirement(enum.IntEnum):
    """Whether the middleware must create unique network flow endpoints."""

    NOT_REQUIRED = 0
    STRICTLY_REQUIRED = 1
    OPTIONALLY_REQUIRED = 2
    SYSTEM_DEFAULT = 3


class LogSeverity(enum.IntEnum):
    """Log severities, matching the logging utility levels."""

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    FATAL = 50


def _check_int(name: str, value: Any, low: int, high: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer")
    if not low <= value <= high:
        raise ValueError(f"{name} is out of range")


def _fixed_bytes(name: str, value: Any, size: int) -> bytes:
    data = bytes(value)
    if len(data) > size:
        raise RmwInvalidArgumentError(f"{name} is larger than {size} bytes")
    return data.ljust(size, b"\x00")


@dataclass
class PublisherOptions:
    """Options used when creating a publisher."""

    rmw_specific_publisher_payload: Any = None
    require_unique_network_flow_endpoints: UniqueNetworkFlowEndpointsRequirement = (
        UniqueNetworkFlowEndpointsRequirement.NOT_REQUIRED
    )

    def __post_init__(self) -> None:
        self.require_unique_network_flow_endpoints = (
            UniqueNetworkFlowEndpointsRequirement(
                self.require_unique_network_flow_endpoints
            )
        )


@dataclass
class SubscriptionOptions:
    """Options used when creating a subscription."""

    rmw_specific_subscription_payload: Any = None
    ignore_local_publications: bool = False
    require_unique_network_flow_endpoints: UniqueNetworkFlowEndpointsRequirement = (
        UniqueNetworkFlowEndpointsRequirement.NOT_REQUIRED
    )
    content_filter_options: Any = None

    def __post_init__(self) -> None:
        self.ignore_local_publications = bool(self.ignore_local_publications)
        self.require_unique_network_flow_endpoints = (
            UniqueNetworkFlowEndpointsRequirement(
                self.require_unique_network_flow_endpoints
            )
        )


@dataclass(frozen=True)
class RequestId:
    """Identifier of a service request: writer GUID and sequence number.

    A shorter ``writer_guid`` is padded with zero bytes; a longer one is
    rejected.
    """

    writer_guid: bytes = bytes(WRITER_GUID_SIZE)
    sequence_number: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "writer_guid",
            _fixed_bytes("writer_guid", self.writer_guid, WRITER_GUID_SIZE),
        )
        _check_int("sequence_number", self.sequence_number, _INT64_MIN, _INT64_MAX)


@dataclass(frozen=True)
class ServiceInfo:
    """Metadata of a service-related take."""

    source_timestamp: int = 0
    received_timestamp: int = 0
    request_id: RequestId = field(default_factory=RequestId)

    def __post_init__(self) -> None:
        _check_int("source_timestamp", self.source_timestamp, _INT64_MIN, _INT64_MAX)
        _check_int(
            "received_timestamp", self.received_timestamp, _INT64_MIN, _INT64_MAX
        )
        if not isinstance(self.request_id, RequestId):
            raise TypeError("request_id must be a RequestId")


@dataclass(frozen=True)
class Gid:
    """Graph identifier of an entity.

    ``data`` always holds ``GID_STORAGE_SIZE`` bytes; shorter input is padded
    with zero bytes and longer input is rejected.
    """

    implementation_identifier: Optional[str] = None
    data: bytes = bytes(GID_STORAGE_SIZE)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "data", _fixed_bytes("gid", self.data, GID_STORAGE_SIZE)
        )


@dataclass(frozen=True)
class MessageInfo:
    """Metadata describing a received message."""

    source_timestamp: int = 0
    received_timestamp: int = 0
    publication_sequence_number: int = 0
    reception_sequence_number: int = 0
    publisher_gid: Gid = field(default_factory=Gid)
    from_intra_process: bool = False

    def __post_init__(self) -> None:
        _check_int("source_timestamp", self.source_timestamp, _INT64_MIN, _INT64_MAX)
        _check_int(
            "received_timestamp", self.received_timestamp, _INT64_MIN, _INT64_MAX
        )
        _check_int(
            "publication_sequence_number",
            self.publication_sequence_number,
            0,
            _UINT64_MAX,
        )
        _check_int(
            "reception_sequence_number", self.reception_sequence_number, 0, _UINT64_MAX
        )
        if not isinstance(self.publisher_gid, Gid):
            raise TypeError("publisher_gid must be a Gid")
        object.__setattr__(self, "from_intra_process", bool(self.from_intra_process))


def get_default_publisher_options() -> PublisherOptions:
    """Publisher options with no payload and no unique flow endpoints required."""
    return PublisherOptions(
        rmw_specific_publisher_payload=None,
        require_unique_network_flow_endpoints=(
            UniqueNetworkFlowEndpointsRequirement.NOT_REQUIRED
        ),
    )


def zero_initialized_message_info() -> MessageInfo:
    """Message info with every field zero."""
    return MessageInfo()