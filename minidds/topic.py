"""Named topics bound to a payload type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Topic(Generic[T]):
    """A named channel whose messages carry payloads of ``data_type``."""

    name: str
    data_type: type[T]