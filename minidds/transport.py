"""Transport interface and an in-process implementation."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional

from minidds.erased import AnyMessage, AnyTopic
from minidds.message import Message
from minidds.topic import Topic

ErasedCallback = Callable[[AnyMessage], None]


class Transport(ABC):
    """Delivers type-erased messages to callbacks registered per topic."""

    @abstractmethod
    def send(self, topic: AnyTopic, message: AnyMessage) -> None:
        """Send a message on a topic."""

    @abstractmethod
    def set_receive_callback(
        self, topic: AnyTopic, callback: Optional[ErasedCallback]
    ) -> None:
        """Register the callback invoked for messages on a topic."""


class MockTransport(Transport):
    """In-process transport: sending calls the topic's callback directly.

    One callback is kept per topic name; registering again replaces it.
    """

    def __init__(self) -> None:
        self._callbacks: Dict[str, Optional[ErasedCallback]] = {}
        self._lock = threading.RLock()

    def send(self, topic: AnyTopic, message: AnyMessage) -> None:
        with self._lock:
            callback = self._callbacks.get(topic.name)
            if callback is not None:
                callback(message)

    def set_receive_callback(
        self, topic: AnyTopic, callback: Optional[ErasedCallback]
    ) -> None:
        with self._lock:
            self._callbacks[topic.name] = callback

    def send_typed(self, topic: Topic, message: Message) -> None:
        """Send a message tagged with the topic's payload type."""
        self.send(AnyTopic.from_topic(topic), AnyMessage(message, topic.data_type))

    def set_typed_callback(
        self, topic: Topic, callback: Callable[[Message], None]
    ) -> None:
        """Register a callback that only sees messages of the topic's type."""
        data_type = topic.data_type

        def deliver(erased: AnyMessage) -> None:
            if erased.data_type is data_type:
                callback(erased.get(data_type))

        self.set_receive_callback(AnyTopic.from_topic(topic), deliver)