import json

import zmq

import yairc.events as events
from yairc.errors import ProtocolError
from yairc.irc_connection import irc_connection
from yairc.parse import name_entry
from yairc.publisher import event_publisher


ADDRESS = 'inproc://yairc-events'


def receive(ctx, publish, topic=b''):
    """
    pub/sub drops whatever is sent before the subscription arrives, so keep
    publishing until the subscriber gets something
    """
    sub = ctx.socket(zmq.SUB)
    sub.connect(ADDRESS)
    sub.setsockopt(zmq.SUBSCRIBE, topic)
    try:
        for _ in range(50):
            publish()
            if sub.poll(100):
                return sub.recv_multipart()
        raise AssertionError('nothing published')
    finally:
        sub.close(linger=0)


def test_publish_payload():
    ctx = zmq.Context()
    publisher = event_publisher(ADDRESS, ctx)
    try:
        event = events.channel_list('#chan', [name_entry('alice', True, False)])
        topic, payload = receive(ctx, lambda: publisher.publish(event))
    finally:
        publisher.close()
        ctx.term()

    assert topic == b'channel-list'
    assert json.loads(payload.decode('utf8')) == {
        'channel': '#chan',
        'names': [{'nick': 'alice', 'operator': True, 'voice': False}],
    }


def test_attach_to_client():
    ctx = zmq.Context()
    publisher = event_publisher(ADDRESS, ctx)
    client = irc_connection('127.0.0.1', 6667, nick='yairc')
    publisher.attach(client, events.TOPICS)
    try:
        topic, payload = receive(
            ctx,
            lambda: client.on_line(':srv 433 * yairc :Nickname is already in use'),
            b'irc-error')
    finally:
        publisher.close()
        ctx.term()

    assert topic == b'irc-error'
    assert json.loads(payload.decode('utf8')) == {
        'error': str(ProtocolError(433, 'Nickname is already in use'))}


def test_payload_of_raw_message():
    client = irc_connection('127.0.0.1', 6667, nick='yairc')
    seen = []
    client.on('rawMessage:PRIVMSG', seen.append)
    client.on_line(':a!b@c PRIVMSG #chan :hi')
    assert events.payload(seen[0]) == {
        'command': 'PRIVMSG',
        'message': {
            'prefix': ':a!b@c',
            'command': 'PRIVMSG',
            'params': ['#chan'],
            'message': 'hi',
        },
    }


def test_tagged_raw_messages_published():
    ctx = zmq.Context()
    publisher = event_publisher(ADDRESS, ctx)
    client = irc_connection('127.0.0.1', 6667, nick='yairc')
    publisher.attach(client, events.TOPICS)
    try:
        topic, payload = receive(
            ctx,
            lambda: client.on_line(':a!u@h PRIVMSG #c :x'),
            b'rawMessage:')
    finally:
        publisher.close()
        ctx.term()

    assert topic == b'rawMessage:PRIVMSG'
    assert json.loads(payload.decode('utf8'))['command'] == 'PRIVMSG'
