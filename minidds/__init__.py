"""In-process publish/subscribe with typed topics, publishers, subscribers and a pluggable transport."""

__version__ = "0.1.0"

__all__ = [
    "message",
    "topic",
    "erased",
    "threadsafe_queue",
    "transport",
    "pubsub",
    "participant",
    "demo",
]