from argparse import Namespace
from dataclasses import dataclass
from importlib.metadata import version
from typing import Any, Dict

from solidweb.client import Client
from solidweb.config import WebConfig


@dataclass
class WebContext:
    config: Dict[str, Any] = None
    args: Namespace = None
    _web_config: WebConfig = None
    _client: Client = None

    @property
    def version(self):
        return version('solidweb')

    @property
    def web_config(self) -> WebConfig:
        if self._web_config is None:
            client_config = dict((self.config or {}).get('CLIENT', {}))
            client_config.setdefault('UA_STRING', f'solidweb/{self.version}')
            self._web_config = WebConfig.from_mapping(client_config)
        return self._web_config

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = Client(config=self.web_config)
        return self._client
