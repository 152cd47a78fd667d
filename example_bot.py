#!/usr/bin/env python3

import argparse
import logging

# https://hynek.me/articles/waiting-in-asyncio/
# TIP: always await tasks created with create_task (or use add_done_callback) or you'll silently lose exceptions

# third party
import zmq

# local
import yairc.config
import yairc.constants as const
import yairc.events
import yairc.irc_connection
import yairc.publisher
import yairc.util


class bot:

    """
    joins the configured channels once the server welcomes us and logs what
    is said there. with 'publish' set in the config every event also goes
    out on a zmq PUB socket
    """

    def __init__(self, conf):
        self.conf = conf
        self.logger = logging.getLogger(__name__)

        self.client = yairc.irc_connection.irc_client(
            conf['host'],
            conf['port'],
            nick=conf['nick'],
            user=conf['user'],
            realname=conf['realname'],
            encoding=conf['encoding'],
            timeout=conf['timeout'])

        self.client.on(const.WELCOME_TOPIC, self.on_welcome)
        self.client.on(const.JOIN_TOPIC, self.on_join)
        self.client.on(const.MESSAGE_TOPIC, self.on_message)
        self.client.on(const.PRIVMSG_TOPIC, self.on_message)
        self.client.on(const.IRC_ERROR_TOPIC, self.on_irc_error)
        self.client.on(const.ERROR_TOPIC, self.on_irc_error)

        self.publisher = None
        if conf['publish']:
            self.publisher = yairc.publisher.event_publisher(
                conf['publish'], zmq.Context.instance())
            self.publisher.attach(self.client, yairc.events.TOPICS)
            self.logger.info('publishing events on %s', conf['publish'])

    def on_welcome(self, event):
        for channel, password in self.conf['channels']:
            self.client.join(channel, password)

    def on_join(self, event):
        self.logger.info('joined %s', event.channel)

    def on_message(self, event):
        self.logger.info(
            '%s <%s> %s', getattr(event, 'channel', '*'), event.nick,
            event.message)

    def on_irc_error(self, event):
        self.logger.warning('%s', event.error)

    async def run(self):
        client = yairc.util.create_task(
            self.client.main(), logger=self.logger,
            message='irc client for %s', message_args=(self.conf['host'],))
        try:
            await client
        finally:
            if self.publisher is not None:
                self.publisher.close()


def main():

    parser = argparse.ArgumentParser()
    parser.add_argument('CONFIGPATH', type=str, help='path to config.json')
    parser.add_argument(
        '-v', '--verbose', action='store_true', help='log raw traffic')
    args = parser.parse_args()

    logging.basicConfig(
        format = '▸ %(asctime)s.%(msecs)03d %(filename)s:%(lineno)d %(levelname)s %(message)s',
        level = logging.DEBUG if args.verbose else logging.INFO,
        datefmt = '%H:%M:%S',
    )

    conf = yairc.config.load_config(args.CONFIGPATH)
    ioloop = yairc.util.create_loop(debug=args.verbose)
    try:
        ioloop.run_until_complete(bot(conf).run())
    finally:
        ioloop.close()


if __name__ == '__main__':
    main()
