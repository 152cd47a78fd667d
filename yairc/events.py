"""
the closed set of events a client emits. each event is a namedtuple with
a class level topic; observers and the publisher key on event.topic.

dispatch.dispatch() produces the protocol events, irc_connection produces
the connection events (connected, after_connect, timed_out, closed,
error).
"""

import collections

import yairc.constants as const


def _event(name, fields, topic):
    cls = collections.namedtuple(name, fields)
    cls.topic = topic
    return cls


# connection
connected = _event('connected', ['peer'], const.CONNECT_TOPIC)
after_connect = _event('after_connect', [], const.AFTER_CONNECT_TOPIC)
timed_out = _event('timed_out', ['timeout'], const.TIMEOUT_TOPIC)
closed = _event('closed', [], const.CLOSE_TOPIC)
error = _event('error', ['error'], const.ERROR_TOPIC)

# protocol
welcome = _event('welcome', [], const.WELCOME_TOPIC)
channel_topic = _event(
    'channel_topic', ['channel', 'topic'], const.CHANNEL_TOPIC_TOPIC)
channel_list = _event(
    'channel_list', ['channel', 'names'], const.CHANNEL_LIST_TOPIC)
nick_change = _event(
    'nick_change', ['oldnick', 'newnick'], const.NICK_CHANGE_TOPIC)
self_join = _event('self_join', ['channel'], const.JOIN_TOPIC)
channel_join = _event(
    'channel_join', ['channel', 'nick'], const.CHANNEL_JOIN_TOPIC)
privmsg = _event('privmsg', ['nick', 'message'], const.PRIVMSG_TOPIC)
channel_message = _event(
    'channel_message', ['nick', 'message', 'channel'], const.MESSAGE_TOPIC)
notice = _event('notice', ['message'], const.NOTICE_TOPIC)
channel_leave = _event(
    'channel_leave', ['channel', 'nick'], const.CHANNEL_LEAVE_TOPIC)
quit = _event('quit', ['nick'], const.QUIT_TOPIC)
channel_modechange = _event(
    'channel_modechange', ['channel', 'mode', 'nick'],
    const.CHANNEL_MODECHANGE_TOPIC)
irc_error = _event('irc_error', ['error'], const.IRC_ERROR_TOPIC)
raw_message = _event('raw_message', ['message'], const.RAW_MESSAGE_TOPIC)


class raw_message_tagged(
        collections.namedtuple('raw_message_tagged', ['command', 'message'])):
    """rawMessage:<command>, lets callers hook commands dispatch ignores"""

    __slots__ = ()

    @property
    def topic(self):
        return raw_topic(self.command)


def raw_topic(command):
    return const.RAW_MESSAGE_TOPIC + const.SUBTOPIC_SEP + str(command)


def payload(event):
    """a json friendly dict of the event fields"""
    return {name: _plain(value) for name, value in event._asdict().items()}


def _plain(value):
    if isinstance(value, BaseException):
        return str(value)
    if isinstance(value, tuple) and hasattr(value, '_asdict'):
        return {k: _plain(v) for k, v in value._asdict().items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


"""
every fixed topic. rawMessage:<command> topics are open ended and not here
"""
TOPICS = [
    cls.topic for cls in (
        connected, after_connect, timed_out, closed, error, welcome,
        channel_topic, channel_list, nick_change, self_join, channel_join,
        privmsg, channel_message, notice, channel_leave, quit,
        channel_modechange, irc_error, raw_message)
]
