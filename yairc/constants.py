# numeric replies, see rfc 2812 section 5
RPL_WELCOME = 1
RPL_BOUNCE = 5
RPL_NOTOPIC = 331
RPL_TOPIC = 332
RPL_NAMREPLY = 353

# [ERR_FIRST, ERR_LAST] become irc-error events
ERR_FIRST = 400
ERR_LAST = 600

PING = 'PING'
PONG = 'PONG'
NICK = 'NICK'
USER = 'USER'
JOIN = 'JOIN'
PART = 'PART'
QUIT = 'QUIT'
TOPIC = 'TOPIC'
MODE = 'MODE'
PRIVMSG = 'PRIVMSG'
NOTICE = 'NOTICE'

OPERATOR_FLAG = '@'
VOICE_FLAG = '+'

CRLF = '\r\n'

"""
the max num of bytes for a command is 512, including
the \r\n at the end, thus 510 for command and params only.
"""
BUFSIZE = 510

DEFAULT_PORT = 6667
DEFAULT_ENCODING = 'utf8'

# event topics, what observers and the publisher key on
CONNECT_TOPIC = 'connect'
AFTER_CONNECT_TOPIC = 'after-connect'
WELCOME_TOPIC = 'welcome'
CHANNEL_TOPIC_TOPIC = 'channel-topic'
CHANNEL_LIST_TOPIC = 'channel-list'
NICK_CHANGE_TOPIC = 'nick-change'
JOIN_TOPIC = 'join'
CHANNEL_JOIN_TOPIC = 'channel-join'
PRIVMSG_TOPIC = 'privmsg'
MESSAGE_TOPIC = 'message'
NOTICE_TOPIC = 'notice'
CHANNEL_LEAVE_TOPIC = 'channel-leave'
QUIT_TOPIC = 'quit'
CHANNEL_MODECHANGE_TOPIC = 'channel-modechange'
IRC_ERROR_TOPIC = 'irc-error'
RAW_MESSAGE_TOPIC = 'rawMessage'
TIMEOUT_TOPIC = 'timeout'
CLOSE_TOPIC = 'close'
ERROR_TOPIC = 'error'

# rawMessage:PRIVMSG, rawMessage:353 and so on
SUBTOPIC_SEP = ':'
