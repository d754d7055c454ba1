import io
import time

import pytest

from minidds.demo import AsyncSubscriber, MyData, async_subscriber_demo, main, pubsub_basic
from minidds.message import Message
from minidds.participant import DomainParticipant
from minidds.topic import Topic
from minidds.transport import MockTransport


def _wait_for(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


def _lines(out):
    return out.getvalue().splitlines()


def test_pubsub_basic_output():
    out = io.StringIO()
    pubsub_basic(out)
    assert _lines(out) == [
        "[Publisher] Publishing value: 42",
        "[Subscriber] Received value: 42",
        "[Subscriber] Topic: my_topic",
        "[Subscriber] Sequence: 1",
    ]


def test_async_demo_receives_everything_published():
    out = io.StringIO()
    async_subscriber_demo(out)
    lines = _lines(out)
    published = [l.rsplit(" ", 1)[1] for l in lines if l.startswith("[Publisher]")]
    received = [l.rsplit(" ", 1)[1] for l in lines if "Received value" in l]
    topics = [l for l in lines if l.startswith("[AsyncSubscriber] Topic:")]
    sequences = [l.rsplit(" ", 1)[1] for l in lines if "Sequence:" in l]
    assert len(published) == 5
    assert received == published
    assert topics == ["[AsyncSubscriber] Topic: async_topic"] * 5
    assert sequences == [str(n) for n in range(1, 6)]


@pytest.fixture
def endpoints():
    participant = DomainParticipant(MockTransport())
    topic = Topic("t", MyData)
    return participant.create_publisher(topic), participant.create_subscriber(topic)


def test_async_subscriber_prints_from_worker(endpoints):
    pub, sub = endpoints
    out = io.StringIO()
    with AsyncSubscriber(sub, out) as async_sub:
        pub.publish(Message(data=MyData(5), topic="t", sequence_number=9))
        assert _wait_for(lambda: len(_lines(out)) == 3)
    assert not async_sub.running
    assert _lines(out) == [
        "[AsyncSubscriber] Received value: 5",
        "[AsyncSubscriber] Topic: t",
        "[AsyncSubscriber] Sequence: 9",
    ]


def test_close_stops_worker_and_is_idempotent(endpoints):
    pub, sub = endpoints
    out = io.StringIO()
    async_sub = AsyncSubscriber(sub, out)
    assert async_sub.running
    async_sub.close()
    async_sub.close()
    assert not async_sub.running
    pub.publish(Message(data=MyData(1), topic="t"))
    time.sleep(0.05)
    assert out.getvalue() == ""


def test_main_basic(capsys):
    assert main(["basic"]) == 0
    captured = capsys.readouterr().out.splitlines()
    assert captured[0] == "[Publisher] Publishing value: 42"
    assert "[Subscriber] Topic: my_topic" in captured


def test_main_rejects_unknown_demo():
    with pytest.raises(SystemExit):
        main(["nonexistent"])