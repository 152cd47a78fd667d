import collections
import logging

import yairc.constants as const
import yairc.events as events
import yairc.parse
import yairc.unparse
from yairc.errors import ProtocolError


logger = logging.getLogger(__name__)

dispatch_result = collections.namedtuple(
    'dispatch_result', ['events', 'replies'])


def dispatch(message, current_nick):
    """
    map one parsed_message to the events it produces and the lines we have
    to send back. pure, nothing is sent or emitted here.

    the raw events always come first, whatever the command. unknown
    commands produce nothing else.
    """

    evts = [
        events.raw_message(message),
        events.raw_message_tagged(message.command, message),
    ]
    replies = []

    handler = _handlers.get(message.command)
    if handler is not None:
        handler(message, current_nick, evts, replies)
    elif isinstance(message.command, int) \
            and const.ERR_FIRST <= message.command <= const.ERR_LAST:
        error = ProtocolError(message.command, message.message)
        evts.append(events.irc_error(error))

    return dispatch_result(evts, replies)


def param(message, idx):
    """params[idx] or None when the server sent fewer params"""
    try:
        return message.params[idx]
    except IndexError:
        return None


def sender_nick(message):
    """
    nick of the nick!user@host prefix. None for servername prefixes, the
    caller drops the event then.
    """
    identity = yairc.parse.irc_prefix(message.prefix)
    if identity is None:
        logger.warning(
            'no nick!user@host prefix on %s, prefix=%r, dropping event',
            message.command, message.prefix)
        return None
    return identity.nick


def on_rpl_welcome(message, current_nick, evts, replies):
    evts.append(events.welcome())


def on_ignored(message, current_nick, evts, replies):
    pass


def on_rpl_notopic(message, current_nick, evts, replies):
    evts.append(events.channel_topic(param(message, 1), None))


def on_rpl_topic(message, current_nick, evts, replies):
    evts.append(events.channel_topic(param(message, 1), message.message))


def on_rpl_namreply(message, current_nick, evts, replies):
    # 353 me = #chan :names, or 353 me #chan :names on old servers
    evts.append(events.channel_list(
        param(message, -1), yairc.parse.names_list(message.message)))


def on_PING(message, current_nick, evts, replies):
    payload = message.message
    if payload is None:
        # PING server1 without the trailing marker
        payload = ' '.join(message.params)
    replies.append(yairc.unparse.pong(payload))


def on_NICK(message, current_nick, evts, replies):
    oldnick = sender_nick(message)
    if oldnick is None:
        return
    newnick = message.message
    if newnick is None:
        # NICK newnick without the trailing marker
        newnick = param(message, 0)
    evts.append(events.nick_change(oldnick, newnick))


def on_JOIN(message, current_nick, evts, replies):
    nick = sender_nick(message)
    if nick is None:
        return
    channel = message.message
    if channel is None:
        channel = param(message, 0)
    if param(message, 0) == current_nick:
        evts.append(events.self_join(channel))
    evts.append(events.channel_join(channel, nick))


def on_TOPIC(message, current_nick, evts, replies):
    evts.append(events.channel_topic(param(message, 0), message.message))


def on_PRIVMSG(message, current_nick, evts, replies):
    nick = sender_nick(message)
    if nick is None:
        return
    target = param(message, 0)
    if target == current_nick:
        evts.append(events.privmsg(nick, message.message))
    else:
        evts.append(events.channel_message(nick, message.message, target))


def on_NOTICE(message, current_nick, evts, replies):
    evts.append(events.notice(message.message))


def on_PART(message, current_nick, evts, replies):
    nick = sender_nick(message)
    if nick is None:
        return
    evts.append(events.channel_leave(param(message, 0), nick))


def on_QUIT(message, current_nick, evts, replies):
    nick = sender_nick(message)
    if nick is None:
        return
    evts.append(events.quit(nick))


def on_MODE(message, current_nick, evts, replies):
    nick = param(message, 2)
    if not nick:
        # channel or user mode without a target nick
        return
    evts.append(events.channel_modechange(
        param(message, 0), param(message, 1), nick))


_handlers = {
    const.RPL_WELCOME: on_rpl_welcome,
    const.RPL_BOUNCE: on_ignored,
    const.RPL_NOTOPIC: on_rpl_notopic,
    const.RPL_TOPIC: on_rpl_topic,
    const.RPL_NAMREPLY: on_rpl_namreply,
    const.PING: on_PING,
    const.PONG: on_ignored,
    const.NICK: on_NICK,
    const.JOIN: on_JOIN,
    const.TOPIC: on_TOPIC,
    const.PRIVMSG: on_PRIVMSG,
    const.NOTICE: on_NOTICE,
    const.PART: on_PART,
    const.QUIT: on_QUIT,
    const.MODE: on_MODE,
}
