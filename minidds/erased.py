"""Type-erased holders for topics and messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from minidds.message import Message
from minidds.topic import Topic


@dataclass(frozen=True)
class AnyTopic:
    """A topic reduced to its name and payload type."""

    name: str = ""
    data_type: Optional[type] = None

    @classmethod
    def from_topic(cls, topic: Topic) -> "AnyTopic":
        """Erase a typed topic."""
        return cls(topic.name, topic.data_type)

    def valid(self) -> bool:
        """True when the topic has a name and a payload type."""
        return bool(self.name) and self.data_type is not None


@dataclass(frozen=True)
class AnyMessage:
    """A message tagged with the payload type it was sent as.

    When no type is given it is taken from the payload itself.
    """

    message: Optional[Message] = None
    data_type: Optional[type] = None

    def __post_init__(self) -> None:
        if self.message is not None and self.data_type is None:
            object.__setattr__(self, "data_type", type(self.message.data))

    def get(self, data_type: type) -> Message[Any]:
        """Return the message if it was tagged with exactly ``data_type``.

        Raises TypeError when the message is empty or of another type.
        """
        if self.message is None or self.data_type is not data_type:
            raise TypeError(
                f"message holds {self.data_type!r}, not {data_type!r}"
            )
        return self.message

    def has_value(self) -> bool:
        """True when a message is held."""
        return self.message is not None