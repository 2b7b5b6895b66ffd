from dataclasses import dataclass
from typing import Any, Mapping, Optional, TextIO

import yaml

from solidweb.exceptions import ConfigError
from solidweb.utils import envsubst, strtobool

DEFAULT_PROXY_TEMPLATE = 'https://databox.me/,proxy?uri={uri}'
"""Cross-origin proxy; `{uri}` is replaced with the percent-encoded target"""

DEFAULT_TIMEOUT = 5000
"""Milliseconds to wait for an RDF document when fetching a graph"""


@dataclass(frozen=True)
class WebConfig:
    """Client configuration. Pass an instance to `solidweb.client.Client`;
    there is no process-wide default state."""

    proxy_template: str = DEFAULT_PROXY_TEMPLATE
    """URI template for fetching documents through a proxy. Must contain
    the placeholder `{uri}`."""

    timeout: int = DEFAULT_TIMEOUT
    """Graph fetch timeout, in milliseconds"""

    use_proxy: bool = False
    """Whether graph fetches are routed through `proxy_template`"""

    ua_string: Optional[str] = None
    """`User-Agent` header value"""

    server_cert: Optional[str] = None
    """Path to a CA bundle used to verify the server certificate"""

    def __post_init__(self):
        if '{uri}' not in self.proxy_template:
            raise ConfigError(f'Proxy template "{self.proxy_template}" does not contain "{{uri}}"')
        if self.timeout <= 0:
            raise ConfigError(f'Timeout must be a positive number of milliseconds, not {self.timeout}')

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> 'WebConfig':
        """Build a `WebConfig` from a mapping with the upper-case keys
        `PROXY_TEMPLATE`, `TIMEOUT`, `USE_PROXY`, `UA_STRING`, and
        `SERVER_CERT`, as found in the `CLIENT` section of a configuration
        file. Missing keys take their default values."""
        kwargs = {}
        if 'PROXY_TEMPLATE' in config:
            kwargs['proxy_template'] = str(config['PROXY_TEMPLATE'])
        if 'TIMEOUT' in config:
            try:
                kwargs['timeout'] = int(config['TIMEOUT'])
            except (TypeError, ValueError) as e:
                raise ConfigError(f'Invalid TIMEOUT value: {config["TIMEOUT"]!r}') from e
        if 'USE_PROXY' in config:
            value = config['USE_PROXY']
            if isinstance(value, str):
                try:
                    value = strtobool(value)
                except ValueError as e:
                    raise ConfigError(f'Invalid USE_PROXY value: {value!r}') from e
            kwargs['use_proxy'] = bool(value)
        if config.get('UA_STRING') is not None:
            kwargs['ua_string'] = str(config['UA_STRING'])
        if config.get('SERVER_CERT') is not None:
            kwargs['server_cert'] = str(config['SERVER_CERT'])
        return cls(**kwargs)


def load_config(config_file: TextIO) -> dict[str, Any]:
    """Read a YAML configuration file, substituting `${VAR_NAME}` placeholders
    with environment variable values."""
    try:
        config = yaml.safe_load(config_file)
    except yaml.YAMLError as e:
        raise ConfigError(f'Unable to parse configuration file: {e}') from e
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError('Configuration file must contain a mapping')
    return envsubst(config)
