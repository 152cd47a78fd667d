import json
import logging

import yairc.constants as const
from yairc.errors import ConfigError


logger = logging.getLogger(__name__)

"""
the config is a json object, see example_config.json. required keys have
no default
"""
DEFAULTS = {
    'port': const.DEFAULT_PORT,
    'user': None,
    'realname': None,
    'encoding': const.DEFAULT_ENCODING,
    'timeout': None,
    'channels': [],
    'publish': None,
}
REQUIRED = ('host', 'nick')


def load_config(path):
    with open(path) as f:
        try:
            raw = json.loads(f.read())
        except ValueError as e:
            raise ConfigError('{} is not valid json: {}'.format(path, e))
    return make_config(raw)


def make_config(raw):
    if not isinstance(raw, dict):
        raise ConfigError('config must be a json object')

    for key in REQUIRED:
        if not raw.get(key):
            raise ConfigError('missing required key ' + key)

    unknown = set(raw) - set(DEFAULTS) - set(REQUIRED)
    if unknown:
        logger.warning('ignoring unknown config keys %s', sorted(unknown))

    conf = dict(DEFAULTS)
    conf.update((k, v) for k, v in raw.items() if k not in unknown)

    if not isinstance(conf['port'], int):
        raise ConfigError('port must be an int, got {!r}'.format(conf['port']))
    if conf['timeout'] is not None \
            and not isinstance(conf['timeout'], (int, float)):
        raise ConfigError(
            'timeout must be a number, got {!r}'.format(conf['timeout']))
    conf['channels'] = [channel_and_password(c) for c in conf['channels']]
    return conf


def channel_and_password(channel):
    """'#chan' or ['#chan', 'pass'] -> (channel, password or None)"""
    if isinstance(channel, str):
        return channel, None
    if isinstance(channel, list) and len(channel) == 2:
        return channel[0], channel[1]
    raise ConfigError('bad channel entry {!r}'.format(channel))
