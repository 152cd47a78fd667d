import collections
import string

import yairc.constants as const
from yairc.errors import ParseError


parsed_message = collections.namedtuple(
    'parsed_message', ['prefix', 'command', 'params', 'message'])

prefix_identity = collections.namedtuple(
    'prefix_identity', ['nick', 'user', 'host'])

name_entry = collections.namedtuple(
    'name_entry', ['nick', 'operator', 'voice'])


def irc_message(line):
    """
    The line is parsed into the components <prefix>, <command>, the list
    of parameters (<params>) and the trailing text (<message>).

    The Augmented BNF representation for this is:

    message  =  [ ":" prefix SPACE ] command [ params ] crlf
    prefix   =  servername / ( nickname [ [ "!" user ] "@" host ] )
    command  =  1*letter / 3digit
    params   =  *14( SPACE middle ) [ SPACE ":" trailing ]
           =/ 14( SPACE middle ) [ SPACE [ ":" ] trailing ]

    the prefix keeps its leading ':'. the command is an int when it is a
    3digit numeric reply. message is None when there is no ':' trailing
    marker. raises ParseError when there is no command.
    """

    if not line or line.isspace():
        raise ParseError(line, 'empty line')

    prefix = None
    rest = line
    if rest[0] == ':':
        prefix, rest = get_word(rest)
        if len(prefix) < 2:
            raise ParseError(line, 'empty prefix')

    command, args = get_word(rest)
    if not command:
        raise ParseError(line, 'missing command')

    params, message = split_args(args)
    return parsed_message(prefix, numeric(command), params, message)


def split_args(args):
    """
    split the argument segment into (params, trailing message).

    split_args("#chan :hello world") == (["#chan"], "hello world")
    split_args("#chan hello world") == (["#chan", "hello", "world"], None)
    """

    if args.startswith(':'):
        return [], args[1:]
    pos = args.find(' :')
    if pos == -1:
        return split_middle(args), None
    return split_middle(args[:pos]), args[pos + 2:]


def split_middle(middle):
    if not middle:
        return []
    return middle.split(' ')


def numeric(command):
    if len(command) == 3 and all(c in string.digits for c in command):
        return int(command)
    return command


def irc_prefix(prefix):
    """
    nick!user@host -> prefix_identity, anything else (a servername) -> None.
    the leading ':' is optional
    """

    if not prefix:
        return None
    if prefix[0] == ':':
        prefix = prefix[1:]

    userhost, at, host = prefix.rpartition('@')
    if not at or not host:
        return None
    nick, bang, user = userhost.rpartition('!')
    if not bang or not user:
        return None
    return prefix_identity(nick, user, host)


def names_list(rawlist):
    """
    the trailing part of a 353 rpl_namreply, eg '@alice +bob carol'.
    '@' marks a channel operator, '+' a voiced nick
    """

    if not rawlist:
        return []

    names = []
    for nick in rawlist.split():
        operator = voice = False
        if nick[0] == const.OPERATOR_FLAG:
            operator = True
            nick = nick[1:]
        if nick[:1] == const.VOICE_FLAG:
            voice = True
            nick = nick[1:]
        names.append(name_entry(nick, operator, voice))
    return names


def get_word(msg):
    """
    msg is a string of words separated by spaces
    return a tuple of the first word and the remaining of the string without
    the preceding spaces

    get_word("word word2 word3") == ("word", "word2 word3")
    """

    pos = 0
    word = ''
    while pos < len(msg) and not msg[pos].isspace():
        word += msg[pos]
        pos += 1

    while pos < len(msg) and msg[pos].isspace():
        pos += 1
    trailing = msg[pos:]
    return word, trailing
