import yairc.constants as const
from yairc.errors import MessageTooBig


"""
outbound lines, without the \r\n. irc_connection.send_raw() adds it
"""


def nick(nickname):
    return const.NICK + ' ' + nickname


def user(username, realname):
    # the space before ':' is what servers have always been sent, keep it
    return '{} {} 0 * : {}'.format(const.USER, username, realname)


def join(channel, password=None):
    if password:
        return '{} {} :{}'.format(const.JOIN, channel, password)
    return const.JOIN + ' ' + channel


def privmsg(channel, message):
    return '{} {} :{}'.format(const.PRIVMSG, channel, message)


def pong(payload):
    return const.PONG + ': ' + payload


def serialize(message):
    """
    parsed_message back to a line. irc_message(serialize(msg)) == msg as long
    as no param contains a space or starts with ':'
    """

    parts = []
    if message.prefix is not None:
        parts.append(message.prefix)
    if isinstance(message.command, int):
        parts.append('{:03d}'.format(message.command))
    else:
        parts.append(message.command)
    parts.extend(message.params)
    if message.message is not None:
        parts.append(':' + message.message)
    return ' '.join(parts)


def make_privmsgs(target, text, bufsize=const.BUFSIZE, option='truncate'):
    """
    generates privmsgs. they will look like this:
    PRIVMSG target :text

    option is one of 'truncate' (default), 'raise', 'multiline'
    multiline splits the text into multiple lines, each with the
      PRIVMSG header
    truncate will cut the message to bufsize bytes
    raise will throw MessageTooBig when msg > bufsize

    bufsize counts utf8 bytes, a code point is never split
    """

    def make_line_generator(txtbytes, bufsize, header):
        """
        returns correct utf8 encoded lines that fit in bufsize
        """
        # http://en.wikipedia.org/wiki/UTF-8#Description
        msg = bytearray()
        for i, byte in enumerate(txtbytes):
            leader, codesize = codeleader(byte)
            if leader and len(msg) + len(header) + codesize <= bufsize:
                # message so far + next codepoint will fit in BUFSIZE
                msg += txtbytes[i:i + codesize]
            elif leader and len(msg) + len(header) + codesize > bufsize:
                yield header + msg
                msg = bytearray()
                msg += txtbytes[i:i + codesize]
            elif byte >> 6 == 0b10:  # continuation byte
                pass
            else:
                raise RuntimeError("unexpected byte")
        if len(msg) or not len(txtbytes):
            # an empty text still makes one (empty) privmsg
            yield header + msg

    def codeleader(byte):
        """returns (bool, int), where bool is true if the byte is
           a code leader, int is the size of the code in utf-8
        """
        if byte >> 7 == 0b0:
            return True, 1
        if byte >> 5 == 0b110:
            return True, 2
        if byte >> 4 == 0b1110:
            return True, 3
        if byte >> 3 == 0b11110:
            return True, 4
        return False, 1

    header = privmsg(target, '').encode('utf8')
    txtbytes = text.encode('utf8')
    if len(header) >= bufsize:
        raise MessageTooBig(
            'header={} does not fit bufsize={}'.format(header, bufsize))

    if option == 'raise':
        msg = header + txtbytes
        if len(msg) > bufsize:
            raise MessageTooBig(
                'msg={} is larger than bufsize={}'.format(msg, bufsize))
        yield msg.decode('utf8')
    elif option == 'truncate':
        gen = make_line_generator(txtbytes, bufsize, header)
        yield bytes(next(gen, header)).decode('utf8')
    elif option == 'multiline':
        gen = make_line_generator(txtbytes, bufsize, header)
        for line in gen:
            yield bytes(line).decode('utf8')
    else:  # unknown option
        raise RuntimeError("unknown option")
