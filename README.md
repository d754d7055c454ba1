# minidds

A small, dependency-free publish/subscribe framework in the spirit of DDS.
Messages travel over named, typed topics; publishers and subscribers are
created by a `DomainParticipant` that shares one transport between them.
The bundled `MockTransport` delivers messages in-process and is thread-safe,
which makes it handy for tests and prototypes.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `minidds.message` – `Message`, a dataclass holding `data`, `topic`, `qos`,
  `timestamp` (defaults to the Unix epoch, UTC) and `sequence_number`
  (defaults to 0); and `QoS`, a policy object that carries no settings yet.
- `minidds.topic` – `Topic(name, data_type)`, a frozen dataclass naming a
  channel and the payload type it carries.
- `minidds.erased` – `AnyTopic` and `AnyMessage`, the type-erased forms that
  transports work with. `AnyTopic.from_topic(topic)` erases a topic and
  `AnyTopic.valid()` reports whether it has both a name and a type.
  `AnyMessage.get(data_type)` returns the held message only if it was tagged
  with exactly that type and raises `TypeError` otherwise;
  `AnyMessage.has_value()` reports whether a message is held.
- `minidds.transport` – `Transport`, the abstract delivery layer with
  `send(topic, message)` and `set_receive_callback(topic, callback)`, and
  `MockTransport`, which calls the registered callback directly when a
  message is sent. It also offers `send_typed(topic, message)` and
  `set_typed_callback(topic, callback)` for working with typed topics.
- `minidds.pubsub` – `Publisher.publish(message)` and
  `Subscriber.set_callback(callback)`.
- `minidds.participant` – `DomainParticipant(transport)` with
  `create_publisher(topic)` and `create_subscriber(topic)`.
- `minidds.threadsafe_queue` – `ThreadSafeQueue`, a FIFO with `push`,
  `try_pop` (returns `None` when empty), blocking `wait_and_pop` and `empty`.
- `minidds.demo` – the example programs behind the `minidds-demo` command.

## Usage

```python
from dataclasses import dataclass
from datetime import datetime

from minidds.message import Message
from minidds.participant import DomainParticipant
from minidds.topic import Topic
from minidds.transport import MockTransport


@dataclass
class Reading:
    value: int


participant = DomainParticipant(MockTransport())
topic = Topic("readings", Reading)
publisher = participant.create_publisher(topic)
subscriber = participant.create_subscriber(topic)

subscriber.set_callback(lambda msg: print(msg.data.value, msg.sequence_number))

publisher.publish(
    Message(data=Reading(42), topic="readings",
            timestamp=datetime.now(), sequence_number=1)
)
```

A publisher tags each message with its topic's data type, and a
subscriber's callback is invoked only for messages tagged with its own
topic's data type. `MockTransport` keeps one callback per topic name;
setting a new one replaces the previous one. Sending on a topic with no
callback does nothing. Callbacks run synchronously in the sending thread.

### Processing on a worker thread

`minidds.demo.AsyncSubscriber(subscriber, out=None)` combines a subscriber
with a `ThreadSafeQueue`: the callback only enqueues, and a worker thread
prints each message to `out` (standard output by default). Call `close()`
to stop the worker, or use it as a context manager; the `running` property
tells whether the worker thread is alive.

## Demo

The `minidds-demo` command runs the example programs:

```
minidds-demo            # both examples
minidds-demo basic      # publish one message to a callback
minidds-demo async      # publish five messages to an AsyncSubscriber
```

The same examples are available as `minidds.demo.pubsub_basic(out)` and
`minidds.demo.async_subscriber_demo(out)`.

## What it does not do

The only transport provided is `MockTransport`, which delivers within one
process. There is no network transport, no discovery between processes and
no persistence of messages. `QoS` is a placeholder with no policies, so
reliability, durability and similar settings are not supported.