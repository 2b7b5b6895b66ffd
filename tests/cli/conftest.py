import pytest

from solidweb.cli.context import WebContext
from solidweb.config import WebConfig


@pytest.fixture
def web_context() -> WebContext:
    return WebContext(config={}, _web_config=WebConfig(ua_string='solidweb-test'))
