"""Domain participant: the factory for publishers and subscribers."""

from __future__ import annotations

from typing import TypeVar

from minidds.pubsub import Publisher, Subscriber
from minidds.topic import Topic
from minidds.transport import Transport

T = TypeVar("T")


class DomainParticipant:
    """Creates publishers and subscribers that share one transport."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def create_publisher(self, topic: Topic[T]) -> Publisher[T]:
        """Create a publisher for ``topic`` on the shared transport."""
        return Publisher(topic, self.transport)

    def create_subscriber(self, topic: Topic[T]) -> Subscriber[T]:
        """Create a subscriber for ``topic`` on the shared transport."""
        return Subscriber(topic, self.transport)