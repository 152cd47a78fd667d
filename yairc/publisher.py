import json
import logging

import zmq

import yairc.constants as const
import yairc.events


class event_publisher:

    """
    publishes client events on a zmq PUB socket so other processes can
    subscribe by topic. every message has two frames:
    [topic, json payload], eg [b'privmsg', b'{"nick": ..., "message": ...}']

    attached to the rawMessage topic, every raw message goes out twice:
    as rawMessage and as rawMessage:<command>. subscribing to b'rawMessage:'
    gets every tagged raw message, to b'rawMessage' gets both.
    """

    def __init__(self, address, zmq_ctx):
        self.logger = logging.getLogger(
            __name__ + '.' + self.__class__.__name__)
        self.address = address
        self.publisher = zmq_ctx.socket(zmq.PUB)
        self.publisher.bind(address)

    def attach(self, client, topics):
        for topic in topics:
            if topic == const.RAW_MESSAGE_TOPIC:
                client.on(topic, self.publish_raw)
            else:
                client.on(topic, self.publish)

    def publish_raw(self, event):
        # rawMessage:<command> topics are open ended, observers can't list them
        self.publish(event)
        self.publish(yairc.events.raw_message_tagged(
            event.message.command, event.message))

    def publish(self, event):
        topic = event.topic.encode('utf8')
        payload = json.dumps(yairc.events.payload(event)).encode('utf8')
        self.logger.debug('publishing %s %s', topic, payload)
        # PUB never blocks, slow subscribers just miss messages
        self.publisher.send_multipart([topic, payload])

    def close(self):
        self.publisher.close(linger=0)
