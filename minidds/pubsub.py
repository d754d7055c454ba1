"""Publishers and subscribers bound to one topic and a transport."""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

from minidds.erased import AnyMessage, AnyTopic
from minidds.message import Message
from minidds.topic import Topic
from minidds.transport import Transport

T = TypeVar("T")

Callback = Callable[[Message[T]], None]


class Publisher(Generic[T]):
    """Publishes messages on one topic through a transport.

    Normally created by ``DomainParticipant.create_publisher``.
    """

    def __init__(
        self, topic: Optional[Topic[T]], transport: Optional[Transport]
    ) -> None:
        self.topic = topic
        self.transport = transport

    def publish(self, message: Message[T]) -> None:
        """Send a message tagged with the topic's payload type."""
        if self.transport is None or self.topic is None:
            return
        self.transport.send(
            AnyTopic.from_topic(self.topic),
            AnyMessage(message, self.topic.data_type),
        )


class Subscriber(Generic[T]):
    """Receives messages on one topic through a transport.

    Normally created by ``DomainParticipant.create_subscriber``.
    """

    def __init__(
        self, topic: Optional[Topic[T]], transport: Optional[Transport]
    ) -> None:
        self.topic = topic
        self.transport = transport
        self.callback: Optional[Callback] = None

    def set_callback(self, callback: Callback) -> None:
        """Register the callback called for each message of the topic's type."""
        self.callback = callback
        if self.transport is None or self.topic is None:
            return
        data_type = self.topic.data_type

        def deliver(erased: AnyMessage) -> None:
            if erased.data_type is data_type:
                callback(erased.get(data_type))

        self.transport.set_receive_callback(AnyTopic.from_topic(self.topic), deliver)