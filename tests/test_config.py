import pytest

from yairc.config import load_config, make_config
from yairc.errors import ConfigError


def test_defaults(config_file):
    conf = load_config(config_file({'host': 'irc.example.net', 'nick': 'yairc'}))
    assert conf == {
        'host': 'irc.example.net',
        'nick': 'yairc',
        'port': 6667,
        'user': None,
        'realname': None,
        'encoding': 'utf8',
        'timeout': None,
        'channels': [],
        'publish': None,
    }


def test_channels():
    conf = make_config({
        'host': 'irc.example.net',
        'nick': 'yairc',
        'channels': ['#open', ['#closed', 'secret']],
    })
    assert conf['channels'] == [('#open', None), ('#closed', 'secret')]


@pytest.mark.parametrize('raw', [
    {'nick': 'yairc'},
    {'host': 'irc.example.net'},
    {'host': 'irc.example.net', 'nick': ''},
    {'host': 'irc.example.net', 'nick': 'yairc', 'port': '6667'},
    {'host': 'irc.example.net', 'nick': 'yairc', 'timeout': 'soon'},
    {'host': 'irc.example.net', 'nick': 'yairc', 'channels': [['#a']]},
    ['host', 'nick'],
])
def test_bad_config(raw):
    with pytest.raises(ConfigError):
        make_config(raw)


def test_unknown_keys_ignored(caplog):
    conf = make_config({'host': 'h', 'nick': 'n', 'sasl': True})
    assert 'sasl' not in conf
    assert 'sasl' in caplog.text


def test_not_json(tmp_path):
    path = tmp_path / 'config.json'
    path.write_text('host = irc.example.net')
    with pytest.raises(ConfigError):
        load_config(str(path))
