from io import StringIO

import pytest

from solidweb.config import DEFAULT_PROXY_TEMPLATE, DEFAULT_TIMEOUT, WebConfig, load_config
from solidweb.exceptions import ConfigError


def test_defaults():
    config = WebConfig()
    assert config.proxy_template == DEFAULT_PROXY_TEMPLATE == 'https://databox.me/,proxy?uri={uri}'
    assert config.timeout == DEFAULT_TIMEOUT == 5000
    assert config.use_proxy is False
    assert config.ua_string is None
    assert config.server_cert is None


def test_from_mapping():
    config = WebConfig.from_mapping({
        'PROXY_TEMPLATE': 'http://proxy.example.org/?uri={uri}',
        'TIMEOUT': '2500',
        'USE_PROXY': 'yes',
        'UA_STRING': 'solidweb-test/1.0',
        'SERVER_CERT': '/etc/ssl/ca.pem',
    })
    assert config.proxy_template == 'http://proxy.example.org/?uri={uri}'
    assert config.timeout == 2500
    assert config.use_proxy is True
    assert config.ua_string == 'solidweb-test/1.0'
    assert config.server_cert == '/etc/ssl/ca.pem'


def test_from_empty_mapping():
    assert WebConfig.from_mapping({}) == WebConfig()


def test_use_proxy_boolean():
    assert WebConfig.from_mapping({'USE_PROXY': True}).use_proxy is True
    assert WebConfig.from_mapping({'USE_PROXY': 'off'}).use_proxy is False


@pytest.mark.parametrize(
    'config',
    [
        {'TIMEOUT': 'soon'},
        {'TIMEOUT': 0},
        {'USE_PROXY': 'maybe'},
        {'PROXY_TEMPLATE': 'http://proxy.example.org/'},
    ]
)
def test_invalid_values(config):
    with pytest.raises(ConfigError):
        WebConfig.from_mapping(config)


def test_config_is_immutable():
    config = WebConfig()
    with pytest.raises(AttributeError):
        config.timeout = 10  # noqa


def test_load_config(monkeypatch):
    monkeypatch.setenv('SOLIDWEB_TIMEOUT', '3000')
    config = load_config(StringIO('CLIENT:\n  TIMEOUT: ${SOLIDWEB_TIMEOUT}\n'))
    assert config == {'CLIENT': {'TIMEOUT': '3000'}}
    assert WebConfig.from_mapping(config['CLIENT']).timeout == 3000


def test_load_empty_config():
    assert load_config(StringIO('')) == {}


@pytest.mark.parametrize('text', ['- a\n- b\n', 'CLIENT: [unclosed\n'])
def test_load_invalid_config(text):
    with pytest.raises(ConfigError):
        load_config(StringIO(text))
