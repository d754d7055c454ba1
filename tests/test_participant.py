from minidds.message import Message
from minidds.participant import DomainParticipant
from minidds.pubsub import Publisher, Subscriber
from minidds.topic import Topic
from minidds.transport import MockTransport


def test_created_endpoints_share_transport_and_topic():
    transport = MockTransport()
    participant = DomainParticipant(transport)
    topic = Topic("t", int)
    pub = participant.create_publisher(topic)
    sub = participant.create_subscriber(topic)
    assert isinstance(pub, Publisher) and isinstance(sub, Subscriber)
    assert pub.transport is transport and sub.transport is transport
    assert pub.topic is topic and sub.topic is topic


def test_end_to_end_delivery():
    participant = DomainParticipant(MockTransport())
    topic = Topic("my_topic", int)
    pub = participant.create_publisher(topic)
    sub = participant.create_subscriber(topic)
    received = []
    sub.set_callback(received.append)
    msg = Message(data=42, topic="my_topic", sequence_number=1)
    pub.publish(msg)
    assert received == [msg]


def test_participants_with_separate_transports_are_isolated():
    topic = Topic("t", int)
    a = DomainParticipant(MockTransport())
    b = DomainParticipant(MockTransport())
    received = []
    b.create_subscriber(topic).set_callback(received.append)
    a.create_publisher(topic).publish(Message(data=1))
    assert received == []


def test_participants_sharing_transport_communicate():
    transport = MockTransport()
    topic = Topic("t", str)
    received = []
    DomainParticipant(transport).create_subscriber(topic).set_callback(received.append)
    DomainParticipant(transport).create_publisher(topic).publish(Message(data="hi"))
    assert [m.data for m in received] == ["hi"]