import asyncio
import collections
import logging

import yairc.constants as const
import yairc.dispatch
import yairc.events as events
import yairc.parse
import yairc.unparse
from yairc.errors import ParseError, TransportError


class irc_connection:

    """
    the class is meant to be used as follows:
    - caller creates an instance and registers observers with
    irc_connection.on(topic, callback). callbacks get the event namedtuple
    - caller awaits irc_connection.connect(), then irc_connection.run()
    which reads until the server closes the connection. each complete line
    is parsed, dispatched and its events emitted before the next one
    - caller calls irc_connection.send_raw(line) to send something to the
    irc server. the write is not awaited
    """

    def __init__(
            self,
            host,
            port=const.DEFAULT_PORT,
            nick=None,
            encoding=const.DEFAULT_ENCODING,
            timeout=None):

        self.logger = logging.getLogger(
            __name__ + '.' + self.__class__.__name__)

        """
        recv takes a bufsize argument, we use an arbitrary power of 2.
        kernel pages are often 4k
        """
        self.RECVSIZE = 4096

        self.host = host
        self.port = port
        self.encoding = encoding
        """
        seconds without any data from the server before a timeout event.
        None waits forever
        """
        self.timeout = timeout

        """
        only the nick() command changes it, NICK messages from the server
        don't
        """
        self.current_nick = nick

        self.reader, self.writer = None, None
        self.peer = None

        """
        the socket gives us incomplete irc messages so we queue them
        here until we can pull out a complete one
        """
        self._recv_queue = bytearray()

        self._observers = collections.defaultdict(list)

    def on(self, topic, callback):
        """topic is an event topic, eg 'privmsg' or 'rawMessage:353'"""
        self._observers[topic].append(callback)

    def emit(self, event):
        for callback in list(self._observers[event.topic]):
            callback(event)

    async def connect(self):
        try:
            self.reader, self.writer = await asyncio.open_connection(
                host=self.host,
                port=self.port,
            )
        except OSError as e:
            self.logger.error(
                'cannot connect to %s:%s: %s', self.host, self.port, e)
            error = TransportError('cannot connect to {}:{}: {}'.format(
                self.host, self.port, e))
            self.emit(events.error(error))
            raise error from e

        self._recv_queue = bytearray()
        peername = self.writer.get_extra_info('peername')
        self.peer = '{}:{}'.format(*peername[:2])
        self.logger.info('connected %s', self.peer)

        self.emit(events.connected(self.peer))
        return self

    async def read(self):
        """
        read some data from the socket and yield the complete lines,
        decoded and without the line terminator. returns on eof
        """
        def strip_cr(line):
            # strict ircds end lines with \r\n, lame ones with \n only
            if line.endswith(b'\r'):
                return line[:-1]
            return line

        while True:
            try:
                more = await asyncio.wait_for(
                    self.reader.read(self.RECVSIZE), self.timeout)
            except asyncio.TimeoutError:
                self.logger.info(
                    'nothing from %s for %s sec', self.peer, self.timeout)
                self.emit(events.timed_out(self.timeout))
                continue

            if not len(more):
                if len(self._recv_queue):
                    self.logger.info(
                        'dropping incomplete line %s', bytes(self._recv_queue))
                return

            self._recv_queue += more

            foundpos = self._recv_queue.find(b'\n')
            while foundpos != -1:
                newline = strip_cr(self._recv_queue[:foundpos])
                self._recv_queue = self._recv_queue[foundpos + 1:]

                yield newline.decode(self.encoding, 'replace')
                foundpos = self._recv_queue.find(b'\n')

    async def run(self):
        try:
            async for line in self.read():
                self.on_line(line)
        except OSError as e:
            self.logger.error('connection to %s broken: %s', self.peer, e)
            self.emit(events.error(TransportError(
                'connection to {} broken: {}'.format(self.peer, e))))
        finally:
            # observers may raise too, the writer still has to go
            self.logger.info('connection to %s closed', self.peer)
            self.close()
            self.emit(events.closed())

    async def main(self):
        await self.connect()
        await self.run()

    def on_line(self, line):
        self.logger.debug('received %s', line)

        try:
            message = yairc.parse.irc_message(line)
        except ParseError as e:
            self.logger.warning('malformed line from %s: %s', self.peer, e)
            self.emit(events.error(e))
            return

        result = yairc.dispatch.dispatch(message, self.current_nick)
        for event in result.events:
            self.emit(event)
        for reply in result.replies:
            self.send_raw(reply)

    def send_raw(self, line):
        """line does NOT have \r\n at the end, we add it here"""
        if self.writer is None:
            raise TransportError('not connected, cannot send ' + repr(line))
        if '\r' in line or '\n' in line:
            raise RuntimeError(r"don't add \r or \n yourself, i'll end the line")

        self.logger.info('sending %s', line)
        self.writer.write((line + const.CRLF).encode(self.encoding))

    def close(self):
        if self.writer is not None:
            self.writer.close()
        self.reader, self.writer = None, None


class irc_client(irc_connection):

    """
    irc_connection plus registration: NICK and USER are sent as soon as the
    connection is up, then the after-connect event fires
    """

    def __init__(
            self,
            host,
            port=const.DEFAULT_PORT,
            nick=None,
            user=None,
            realname=None,
            **kwargs):
        if not nick:
            raise ValueError('irc_client needs a nick to register with')
        super().__init__(host, port, nick=nick, **kwargs)
        self.user = user or nick
        self.realname = realname or nick

        self.on(const.CONNECT_TOPIC, self.after_connect)

    def after_connect(self, event):
        self.nick(self.current_nick)
        self.send_raw(yairc.unparse.user(self.user, self.realname))

        self.emit(events.after_connect())

    def nick(self, nickname):
        self.current_nick = nickname
        self.send_raw(yairc.unparse.nick(nickname))

    def join(self, channel, password=None):
        self.send_raw(yairc.unparse.join(channel, password))

    def send(self, channel, message):
        """long messages go out as several privmsgs of at most BUFSIZE bytes"""
        for line in yairc.unparse.make_privmsgs(
                channel, message, const.BUFSIZE, 'multiline'):
            self.send_raw(line)
