"""Example programs: a basic publish/subscribe and an asynchronous subscriber."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Sequence, TextIO

from minidds.message import Message
from minidds.participant import DomainParticipant
from minidds.pubsub import Subscriber
from minidds.threadsafe_queue import ThreadSafeQueue
from minidds.topic import Topic
from minidds.transport import MockTransport


@dataclass
class MyData:
    """Example payload."""

    value: int = 0


def _emit(out: TextIO, line: str) -> None:
    out.write(line + "\n")
    out.flush()


class AsyncSubscriber:
    """Queues received messages and prints them from a worker thread."""

    def __init__(self, subscriber: Subscriber[MyData], out: Optional[TextIO] = None) -> None:
        self.subscriber = subscriber
        self.out = out if out is not None else sys.stdout
        self._queue: ThreadSafeQueue[Message[MyData]] = ThreadSafeQueue()
        self._stop = threading.Event()
        self.subscriber.set_callback(self._queue.push)
        self._worker = threading.Thread(target=self.process, daemon=True)
        self._worker.start()

    def process(self) -> None:
        """Print queued messages until stopped."""
        while not self._stop.is_set():
            msg = self._queue.wait_and_pop()
            if self._stop.is_set():
                break
            value = msg.data.value if msg.data is not None else 0
            _emit(self.out, f"[AsyncSubscriber] Received value: {value}")
            _emit(self.out, f"[AsyncSubscriber] Topic: {msg.topic}")
            _emit(self.out, f"[AsyncSubscriber] Sequence: {msg.sequence_number}")

    def close(self) -> None:
        """Stop the worker thread and wait for it to finish."""
        if self._stop.is_set():
            return
        self._stop.set()
        self._queue.push(Message())
        self._worker.join()

    @property
    def running(self) -> bool:
        """True while the worker thread is alive."""
        return self._worker.is_alive()

    def __enter__(self) -> "AsyncSubscriber":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def pubsub_basic(out: Optional[TextIO] = None) -> None:
    """Publish one message and print it from a subscriber callback."""
    out = out if out is not None else sys.stdout
    participant = DomainParticipant(MockTransport())
    topic = Topic("my_topic", MyData)
    publisher = participant.create_publisher(topic)
    subscriber = participant.create_subscriber(topic)

    def on_message(msg: Message[MyData]) -> None:
        _emit(out, f"[Subscriber] Received value: {msg.data.value}")
        _emit(out, f"[Subscriber] Topic: {msg.topic}")
        _emit(out, f"[Subscriber] Sequence: {msg.sequence_number}")

    subscriber.set_callback(on_message)

    msg = Message(
        data=MyData(42),
        topic="my_topic",
        timestamp=datetime.now(timezone.utc),
        sequence_number=1,
    )
    _emit(out, f"[Publisher] Publishing value: {msg.data.value}")
    publisher.publish(msg)
    time.sleep(0.1)


def async_subscriber_demo(out: Optional[TextIO] = None) -> None:
    """Publish five messages quickly to an asynchronous subscriber."""
    out = out if out is not None else sys.stdout
    participant = DomainParticipant(MockTransport())
    topic = Topic("async_topic", MyData)
    publisher = participant.create_publisher(topic)
    subscriber = participant.create_subscriber(topic)

    with AsyncSubscriber(subscriber, out):
        for i in range(1, 6):
            msg = Message(
                data=MyData(i * 10),
                topic="async_topic",
                timestamp=datetime.now(timezone.utc),
                sequence_number=i,
            )
            _emit(out, f"[Publisher] Publishing value: {msg.data.value}")
            publisher.publish(msg)
            time.sleep(0.05)
        time.sleep(0.5)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen example program."""
    parser = argparse.ArgumentParser(prog="minidds", description="Run an example program.")
    parser.add_argument(
        "demo", nargs="?", choices=["basic", "async", "all"], default="all"
    )
    args = parser.parse_args(argv)
    if args.demo in ("basic", "all"):
        pubsub_basic(sys.stdout)
    if args.demo in ("async", "all"):
        async_subscriber_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())