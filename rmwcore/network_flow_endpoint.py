"""Network flow endpoints of publishers and subscriptions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, List, Optional

from rmwcore.errors import RmwError, RmwInvalidArgumentError

__all__ = [
    "INET_ADDRSTRLEN",
    "TransportProtocol",
    "InternetProtocol",
    "NetworkFlowEndpoint",
    "NetworkFlowEndpointArray",
    "transport_protocol_to_str",
    "internet_protocol_to_str",
]

# Maximum length of an internet address string, terminating null included.
INET_ADDRSTRLEN = 48


class TransportProtocol(enum.IntEnum):
    """Transport protocol of a network flow."""

    UNKNOWN = 0
    UDP = 1
    TCP = 2


class InternetProtocol(enum.IntEnum):
    """Internet protocol of a network flow."""

    UNKNOWN = 0
    IPV4 = 1
    IPV6 = 2


_TRANSPORT_NAMES = {
    TransportProtocol.UNKNOWN: "Unknown",
    TransportProtocol.UDP: "UDP",
    TransportProtocol.TCP: "TCP",
}

_INTERNET_NAMES = {
    InternetProtocol.UNKNOWN: "Unknown",
    InternetProtocol.IPV4: "IPv4",
    InternetProtocol.IPV6: "IPv6",
}


def transport_protocol_to_str(protocol: int) -> str:
    """Name of a transport protocol; "Unknown" for values out of range."""
    try:
        return _TRANSPORT_NAMES.get(protocol, _TRANSPORT_NAMES[TransportProtocol.UNKNOWN])
    except TypeError:
        return _TRANSPORT_NAMES[TransportProtocol.UNKNOWN]


def internet_protocol_to_str(protocol: int) -> str:
    """Name of an internet protocol; "Unknown" for values out of range."""
    try:
        return _INTERNET_NAMES.get(protocol, _INTERNET_NAMES[InternetProtocol.UNKNOWN])
    except TypeError:
        return _INTERNET_NAMES[InternetProtocol.UNKNOWN]


def _check_uint(name: str, value: object, bits: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer")
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} must fit in an unsigned {bits}-bit integer")


@dataclass
class NetworkFlowEndpoint:
    """Network flow endpoint of a publisher or subscription.

    Built without arguments it is zero initialized.
    """

    transport_protocol: TransportProtocol = TransportProtocol.UNKNOWN
    internet_protocol: InternetProtocol = InternetProtocol.UNKNOWN
    transport_port: int = 0
    flow_label: int = 0
    dscp: int = 0
    internet_address: str = ""

    def __post_init__(self) -> None:
        self.transport_protocol = TransportProtocol(self.transport_protocol)
        self.internet_protocol = InternetProtocol(self.internet_protocol)
        _check_uint("transport_port", self.transport_port, 16)
        _check_uint("flow_label", self.flow_label, 32)
        _check_uint("dscp", self.dscp, 8)
        if self.internet_address:
            address, self.internet_address = self.internet_address, ""
            self.set_internet_address(address)

    def set_internet_address(self, address: Optional[str]) -> None:
        """Store a copy of ``address``.

        Raises RmwInvalidArgumentError if it is None or its length is not
        less than INET_ADDRSTRLEN.
        """
        if address is None:
            raise RmwInvalidArgumentError("internet_address is null")
        if not isinstance(address, str):
            raise RmwInvalidArgumentError("internet_address must be a string")
        if len(address.encode("utf-8")) >= INET_ADDRSTRLEN:
            raise RmwInvalidArgumentError("size is not less than RMW_INET_ADDRSTRLEN")
        self.internet_address = address


class NetworkFlowEndpointArray:
    """A sized collection of network flow endpoints.

    A new array is zero initialized: it holds no storage until
    :meth:`init` is called, and :meth:`fini` returns it to that state.
    """

    def __init__(self) -> None:
        self.network_flow_endpoint: Optional[List[NetworkFlowEndpoint]] = None

    @property
    def size(self) -> int:
        """Number of endpoints held."""
        if self.network_flow_endpoint is None:
            return 0
        return len(self.network_flow_endpoint)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[NetworkFlowEndpoint]:
        return iter(self.network_flow_endpoint or ())

    def __getitem__(self, index: int) -> NetworkFlowEndpoint:
        if self.network_flow_endpoint is None:
            raise IndexError("network_flow_endpoint_array is not initialized")
        return self.network_flow_endpoint[index]

    def check_zero(self) -> None:
        """Raise RmwError unless the array is zero initialized."""
        if self.network_flow_endpoint is not None:
            raise RmwError("network_flow_endpoint_array is not zeroed")

    def init(self, size: int) -> None:
        """Allocate ``size`` zero-initialized endpoints."""
        if not isinstance(size, int) or isinstance(size, bool) or size < 0:
            raise RmwInvalidArgumentError("size must be a non-negative integer")
        self.network_flow_endpoint = [NetworkFlowEndpoint() for _ in range(size)]

    def fini(self) -> None:
        """Release the endpoints and return to the zero-initialized state."""
        if self.network_flow_endpoint is None:
            raise RmwInvalidArgumentError(
                "network_flow_endpoint_array->allocator is null"
            )
        self.network_flow_endpoint = None

    def __repr__(self) -> str:
        return f"NetworkFlowEndpointArray({self.network_flow_endpoint!r})"