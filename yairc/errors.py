class ParseError(ValueError):
    """raised for a line that is not [:prefix ]command[ args]"""

    def __init__(self, line, reason):
        super().__init__('{}: {!r}'.format(reason, line))
        self.line = line
        self.reason = reason


class TransportError(OSError):
    pass


class ProtocolError(Exception):
    """
    an error numeric (400-600) sent by the server. not fatal, it only
    travels inside an irc-error event
    """

    def __init__(self, code, message):
        super().__init__('IRC {}: {}'.format(code, message))
        self.code = code
        self.message = message


class MessageTooBig(RuntimeError):
    pass


class ConfigError(RuntimeError):
    pass
