"""Message envelope and quality-of-service settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

TopicName = str

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class QoS:
    """Quality of service policy; it carries no settings yet."""


@dataclass
class Message(Generic[T]):
    """A payload together with its topic name, QoS, timestamp and sequence number."""

    data: Optional[T] = None
    topic: TopicName = ""
    qos: QoS = field(default_factory=QoS)
    timestamp: datetime = EPOCH
    sequence_number: int = 0