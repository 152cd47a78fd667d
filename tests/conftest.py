import json
import logging

import pytest


@pytest.fixture
def logger():
    l = logging.getLogger(__name__)
    l.setLevel(logging.DEBUG)
    return l


@pytest.fixture
def config_file(tmp_path):
    def write(conf):
        path = tmp_path / 'config.json'
        path.write_text(json.dumps(conf))
        return str(path)
    return write
