"""Middleware data types: QoS policies, durations, errors, endpoints and messages."""

__version__ = "0.1.0"

__all__ = [
    "duration",
    "errors",
    "network_flow_endpoint",
    "qos",
    "qos_string_conversions",
    "sanity_checks",
    "serialized_message",
    "types",
]