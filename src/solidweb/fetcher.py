import logging
from urllib.parse import quote

from rdflib import Graph
from requests import Response, Session
from requests.exceptions import RequestException

from solidweb.config import DEFAULT_PROXY_TEMPLATE, DEFAULT_TIMEOUT
from solidweb.exceptions import FetchError

logger = logging.getLogger(__name__)

RDF_ACCEPT = ', '.join([
    'text/turtle',
    'application/ld+json;q=0.9',
    'application/rdf+xml;q=0.8',
    'application/n-triples;q=0.7',
    'text/n3;q=0.6',
])

DEFAULT_MEDIA_TYPE = 'text/turtle'


def media_type(response: Response) -> str:
    """The response's `Content-Type` without any parameters, or
    `text/turtle` if the server did not send one."""
    content_type = response.headers.get('Content-Type') or DEFAULT_MEDIA_TYPE
    return content_type.split(';', 1)[0].strip().lower() or DEFAULT_MEDIA_TYPE


class GraphFetcher:
    """Retrieves RDF documents and parses them into `rdflib.Graph` objects."""

    def __init__(
        self,
        session: Session,
        timeout: int = DEFAULT_TIMEOUT,
        proxy_template: str = DEFAULT_PROXY_TEMPLATE,
        use_proxy: bool = False,
    ):
        self.session: Session = session
        self.timeout: int = timeout
        """Fetch timeout, in milliseconds"""
        self.proxy_template: str = proxy_template
        self.use_proxy: bool = use_proxy

    def proxy_uri(self, uri: str) -> str:
        """Return the URL of `uri` as retrieved through the proxy.

        ```pycon
        >>> GraphFetcher(Session()).proxy_uri('https://example.com/card')
        'https://databox.me/,proxy?uri=https%3A%2F%2Fexample.com%2Fcard'
        ```
        """
        return self.proxy_template.replace('{uri}', quote(uri, safe=''))

    def fetch(self, uri: str) -> Graph:
        """Fetch the document at `uri` and parse it. Relative IRIs in the
        document are resolved against `uri`, even when it is retrieved through
        the proxy.

        Raises a `FetchError` if the request fails to complete, if the response
        status is not 2xx, or if the body cannot be parsed."""
        request_url = self.proxy_uri(uri) if self.use_proxy else uri
        logger.debug(f'Fetching {uri} from {request_url}')
        try:
            response = self.session.get(
                request_url,
                headers={'Accept': RDF_ACCEPT},
                timeout=self.timeout / 1000,
            )
        except RequestException as e:
            logger.error(f'Unable to fetch {uri}: {e}')
            raise FetchError(None, f'Unable to fetch {uri}: {e}', status_code=0) from e

        if not 200 <= response.status_code < 300:
            logger.error(f'Unable to fetch {uri}: {response.status_code} {response.reason}')
            raise FetchError(response)

        graph = Graph()
        try:
            graph.parse(data=response.content, format=media_type(response), publicID=uri)
        except Exception as e:
            logger.error(f'Unable to parse {uri} as {media_type(response)}: {e}')
            raise FetchError(response, f'Unable to parse {uri}: {e}') from e
        logger.debug(f'Parsed {len(graph)} triple(s) from {uri}')
        return graph
