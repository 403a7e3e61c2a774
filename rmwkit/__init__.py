"""Middleware-layer building blocks: name validation, durations, QoS, metadata and event statuses."""

__version__ = "0.1.0"

__all__ = ["durations", "errors", "events", "namespace", "node_name", "qos", "topic_name", "types"]