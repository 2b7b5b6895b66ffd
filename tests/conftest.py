from typing import Callable, Mapping

import pytest
from requests import Response
from requests.structures import CaseInsensitiveDict

from solidweb.client import Client
from solidweb.config import WebConfig


@pytest.fixture
def web_config() -> WebConfig:
    return WebConfig()


@pytest.fixture
def client(web_config) -> Client:
    return Client(config=web_config)


@pytest.fixture
def make_response() -> Callable[..., Response]:
    """Pytest fixture that builds Requests `Response` objects without
    sending a request."""
    def _make_response(
        status_code: int = 200,
        headers: Mapping[str, str] = None,
        url: str = 'http://example.com/resource',
        body: str = '',
    ) -> Response:
        response = Response()
        response.status_code = status_code
        response.headers = CaseInsensitiveDict(headers or {})
        response.url = url
        response.encoding = 'utf-8'
        response._content = body.encode('utf-8')
        return response
    return _make_response
