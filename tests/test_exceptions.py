from unittest.mock import MagicMock

from requests import Response

from solidweb.exceptions import ClientError, ConfigError, FetchError, status_phrase


def test_client_error_str():
    response = MagicMock(spec=Response, status_code=404, reason='Not Found')
    error = ClientError(response)
    assert str(error) == '404 Not Found'
    assert error.status_code == 404
    assert error.response is response


def test_client_error_standard_reason():
    response = MagicMock(spec=Response, status_code=403, reason=None)
    assert ClientError(response).reason == 'Forbidden'


def test_client_error_nonstandard_status():
    response = MagicMock(spec=Response, status_code=599, reason='')
    assert str(ClientError(response)) == '599 Unknown Error'


def test_status_phrase():
    assert status_phrase(404) == 'Not Found'
    assert status_phrase(599) == 'Unknown Error'


def test_client_error_without_response():
    error = ClientError(None, 'Connection error: refused', status_code=0)
    assert error.status_code == 0
    assert error.response is None
    assert str(error) == '0 Connection error: refused'


def test_client_error_without_response_or_message():
    assert str(ClientError(None)) == '0 Unknown Error'


def test_fetch_error_is_client_error():
    response = MagicMock(spec=Response, status_code=500, reason='Internal Server Error')
    error = FetchError(response)
    assert isinstance(error, ClientError)
    assert str(error) == '500 Internal Server Error'


def test_config_error_str():
    assert str(ConfigError('bad value')) == 'bad value'
