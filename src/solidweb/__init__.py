"""Client-side access to Linked Data Platform resources on Solid servers."""

from solidweb.client import AsyncClient, Client
from solidweb.config import WebConfig
from solidweb.exceptions import ClientError, FetchError
from solidweb.metadata import ResourceMetadata, parse_response_meta

__all__ = [
    'AsyncClient',
    'Client',
    'ClientError',
    'FetchError',
    'ResourceMetadata',
    'WebConfig',
    'parse_response_meta',
]
