# rmwcore

Plain Python data types for a publish/subscribe middleware layer: quality of
service (QoS) policies and profiles, relative durations, return codes raised
as exceptions, publisher and subscription options, message metadata, network
flow endpoints and serialized message buffers.

The package has no dependencies outside the standard library and supports
Python 3.10 and later.

## Modules

### `rmwcore.errors`

- `ReturnCode`: an `IntEnum` of result codes (`OK`, `ERROR`, `TIMEOUT`,
  `UNSUPPORTED`, `BAD_ALLOC`, `INVALID_ARGUMENT`,
  `INCORRECT_RMW_IMPLEMENTATION`, `NODE_NAME_NON_EXISTENT`).
- `RmwError` and its subclasses `RmwTimeoutError`, `RmwUnsupportedError`,
  `RmwBadAllocError` (also a `MemoryError`), `RmwInvalidArgumentError` (also a
  `ValueError`), `RmwIncorrectImplementationError` and
  `RmwNodeNameNonExistentError`. Each carries its return code in `code` and
  its text in `message`.
- `error_for_code(code, message)` builds the matching exception. A code
  without its own class gives a plain `RmwError` that keeps the code;
  `ReturnCode.OK` raises `ValueError`.

### `rmwcore.duration`

- `Duration(sec, nsec)`: a frozen dataclass of two unsigned 64-bit integers.
  `nsec` may exceed one second.
- `DURATION_INFINITE` and `DURATION_UNSPECIFIED` constants.
- `time_total_nsec(value)`: total nanoseconds, saturating at `2**63 - 1`.
- `time_equal(left, right)`: compares total nanoseconds, so normalized and
  non-normalized values of the same time are equal.
- `time_from_nsec(nanoseconds)`: builds a `Duration`; a negative input gives
  `DURATION_INFINITE`.
- `time_normalize(value)`: carries whole seconds out of `nsec`.

### `rmwcore.qos`

- Policy enums `ReliabilityPolicy`, `HistoryPolicy`, `DurabilityPolicy` and
  `LivelinessPolicy` (`MANUAL_BY_NODE` is kept but deprecated).
- `QosPolicyKind`: an `IntFlag` with one bit per policy.
- `QosProfile`: a dataclass of history, depth, reliability, durability,
  deadline, lifespan, liveliness, liveliness lease duration and
  `avoid_ros_namespace_conventions`. Built without arguments it is zero
  initialized; plain integers given for policies become enum members.
- Default and best-available constants such as `QOS_DEADLINE_DEFAULT` and
  `QOS_DEADLINE_BEST_AVAILABLE`.

### `rmwcore.qos_string_conversions`

- `qos_policy_kind_to_str`, `durability_policy_to_str`,
  `history_policy_to_str`, `liveliness_policy_to_str` and
  `reliability_policy_to_str` return a name such as `"best_effort"`, or
  `None` for `INVALID`, `UNKNOWN` and values without a name.
- `qos_policy_kind_from_str`, `durability_policy_from_str`,
  `history_policy_from_str`, `liveliness_policy_from_str` and
  `reliability_policy_from_str` return the named value, or `INVALID` /
  `UNKNOWN` for names they do not know. Passing `None` raises
  `RmwInvalidArgumentError`.

### `rmwcore.sanity_checks`

- `check_zero_string_array(array)` accepts an empty sequence, or an object
  whose `size` is 0 and whose `data` is `None`; anything else raises
  `RmwError`.

### `rmwcore.types`

- Enums `EndpointType`, `UniqueNetworkFlowEndpointsRequirement` and
  `LogSeverity`.
- Dataclasses `PublisherOptions`, `SubscriptionOptions`, `RequestId`,
  `ServiceInfo`, `Gid` and `MessageInfo`. `Gid.data` always holds
  `GID_STORAGE_SIZE` (24) bytes and `RequestId.writer_guid` 16 bytes: shorter
  input is padded with zeros and longer input raises
  `RmwInvalidArgumentError`.
- `get_default_publisher_options()` and `zero_initialized_message_info()`.

### `rmwcore.network_flow_endpoint`

- Enums `TransportProtocol` and `InternetProtocol`, with
  `transport_protocol_to_str` and `internet_protocol_to_str` returning
  `"UDP"`, `"TCP"`, `"IPv4"`, `"IPv6"` or `"Unknown"`.
- `NetworkFlowEndpoint`: a dataclass of protocol, port, flow label, DSCP and
  address. `set_internet_address(address)` raises `RmwInvalidArgumentError`
  for `None` or an address of `INET_ADDRSTRLEN` (48) bytes or more.
- `NetworkFlowEndpointArray`: starts empty; `init(size)` fills it with
  zero-initialized endpoints, `fini()` empties it again (and raises
  `RmwInvalidArgumentError` if it was never initialized), `check_zero()`
  raises `RmwError` unless it is empty. It supports `len`, iteration and
  indexing.

### `rmwcore.serialized_message`

- `SerializedMessage`: a byte buffer with `buffer`, `buffer_length` and
  `buffer_capacity`. `init(capacity)` allocates zeroed bytes, `fini()`
  releases them, and `resize(new_size)` grows or truncates the buffer, keeping
  existing content. `resize` requires a size greater than zero and an
  initialized message; violations raise `RmwInvalidArgumentError`.

## Example

```python
from rmwcore.duration import time_from_nsec, time_total_nsec
from rmwcore.qos_string_conversions import (
    reliability_policy_from_str,
    reliability_policy_to_str,
)

policy = reliability_policy_from_str("best_effort")
assert reliability_policy_to_str(policy) == "best_effort"

duration = time_from_nsec(1_500_000_000)
assert (duration.sec, duration.nsec) == (1, 500_000_000)
assert time_total_nsec(duration) == 1_500_000_000
```

## What this package does not do

It holds data types and their checks only. It does not create nodes,
publishers, subscriptions, services or contexts, does not send or receive
messages, and does not query a running graph for topic or service names or
for network flow endpoints.

## Tests

The test suite uses pytest, declared in the `test` extra.