import logging
from concurrent.futures import Future, ThreadPoolExecutor
from http import HTTPStatus
from typing import Iterable, Optional

from rdflib import Graph
from requests import Request, Response, Session
from requests.auth import AuthBase
from requests.exceptions import RequestException

from solidweb.builders import (
    Payload,
    delete_request,
    document_uri,
    graph_statements,
    head_request,
    patch_request,
    post_request,
    put_request,
)
from solidweb.config import WebConfig
from solidweb.exceptions import ClientError, status_phrase
from solidweb.fetcher import GraphFetcher
from solidweb.metadata import ResourceMetadata, parse_response_meta

logger = logging.getLogger(__name__)

# statuses counted as success for each operation that can fail
CREATE_STATUSES = frozenset({HTTPStatus.OK, HTTPStatus.CREATED})
UPDATE_STATUSES = frozenset({HTTPStatus.OK})
DELETE_STATUSES = frozenset({HTTPStatus.OK})


class SessionHeaderAttribute:
    """Maps an attribute to a header on the instance's `session`."""

    def __init__(self, header_name: str):
        self.header_name = header_name
        """The HTTP header name"""

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return instance.session.headers.get(self.header_name, None)

    def __set__(self, instance, value):
        if value is not None:
            instance.session.headers.update({self.header_name: str(value)})

    def __delete__(self, instance):
        try:
            del instance.session.headers[self.header_name]
        except KeyError:
            pass


def check_status(response: Response, expected: frozenset[int]) -> Response:
    """Return `response` if its status code is in `expected`, otherwise raise
    a `ClientError`."""
    if response.status_code not in expected:
        raise ClientError(response)
    return response


class Client:
    """HTTP client for reading and writing LDP resources on a Solid server.

    Each operation sends exactly one request, and either returns a result or
    raises a `ClientError`. Every request goes through the same Requests
    `session`, so its cookies and `auth` are always sent."""

    ua_string = SessionHeaderAttribute('User-Agent')
    """`User-Agent` header value"""
    session: Session
    """Underlying Requests library
    [Session object](https://requests.readthedocs.io/en/latest/user/advanced/#session-objects),
    or a subclass thereof"""

    def __init__(self, config: WebConfig = None, auth: AuthBase = None, session: Session = None):
        self.config: WebConfig = config or WebConfig()

        if session is None:
            # defaults to a basic requests.Session object
            self.session = Session()
        else:
            # otherwise, use the session object as is
            self.session = session

        if auth is not None:
            self.session.auth = auth
        if self.config.server_cert is not None:
            self.session.verify = self.config.server_cert

        self.ua_string = self.config.ua_string

        self.fetcher: GraphFetcher = GraphFetcher(
            session=self.session,
            timeout=self.config.timeout,
            proxy_template=self.config.proxy_template,
            use_proxy=self.config.use_proxy,
        )
        """Retrieves and parses graphs for `get()`"""

    def request(self, method: str, url: str, **kwargs) -> Response:
        """Send an HTTP request using the configured `session`. Additional
        keyword arguments are passed to the underlying `session.request()`
        method.

        Raises a `ClientError` with a `status_code` of 0 if no response
        is received."""
        logger.debug(f'{method} {url}')
        try:
            response = self.session.request(method, url, **kwargs)
        except RequestException as e:
            message = ' '.join(str(arg) for arg in e.args)
            logger.error(message)
            raise ClientError(None, f'Request failed: {message}', status_code=0) from e
        reason = response.reason or status_phrase(response.status_code)
        logger.debug(f'{response.status_code} {reason}')
        return response

    def send(self, request: Request) -> Response:
        """Send a request built by one of the `solidweb.builders` functions."""
        return self.request(request.method, request.url, headers=request.headers, data=request.data)

    def head(self, url: str) -> ResourceMetadata:
        """Get the metadata of the resource at `url`. This never raises on
        an HTTP error status; a missing resource has `exists` set to `False`."""
        return parse_response_meta(self.send(head_request(url)))

    def get(self, url: str) -> Graph:
        """Fetch and parse the RDF document containing `url`. A fragment
        identifier in `url` is ignored when choosing which document to fetch.

        Raises a `FetchError` if the document cannot be retrieved or parsed."""
        return self.fetcher.fetch(document_uri(url))

    def post(
            self,
            url: str,
            data: Payload = None,
            slug: str = None,
            is_container: bool = False,
            mime: str = None,
    ) -> ResourceMetadata:
        """Create a new resource in the container at `url`. Returns the
        metadata of the response, whose `url` is the location of the new
        resource."""
        response = self.send(post_request(url, data=data, slug=slug, is_container=is_container, mime=mime))
        return parse_response_meta(check_status(response, CREATE_STATUSES))

    create = post

    def put(self, url: str, data: Payload = None, mime: str = None) -> ResourceMetadata:
        """Create or replace the resource at `url`."""
        response = self.send(put_request(url, data=data, mime=mime))
        return parse_response_meta(check_status(response, CREATE_STATUSES))

    replace = put

    def patch(
            self,
            url: str,
            to_delete: Iterable[str] = None,
            to_insert: Iterable[str] = None,
    ) -> ResourceMetadata:
        """Apply a SPARQL Update to the resource at `url`, deleting and
        inserting the given statements. Only a 200 response counts as
        success."""
        response = self.send(patch_request(url, to_delete=to_delete, to_insert=to_insert))
        return parse_response_meta(check_status(response, UPDATE_STATUSES))

    update = patch

    def delete(self, url: str) -> bool:
        """Delete the resource at `url`. Returns `True` on a 200 response."""
        check_status(self.send(delete_request(url)), DELETE_STATUSES)
        return True

    def put_graph(self, url: str, graph: Graph) -> ResourceMetadata:
        """Replace the resource at `url` with the Turtle serialization of
        `graph`."""
        return self.put(url, data=graph.serialize(format='turtle'), mime='text/turtle')

    def patch_graph(self, url: str, deletes: Optional[Graph] = None, inserts: Optional[Graph] = None) -> ResourceMetadata:
        """Remove the triples in `deletes` from and add the triples in
        `inserts` to the resource at `url`."""
        return self.patch(url, to_delete=graph_statements(deletes), to_insert=graph_statements(inserts))


class AsyncClient:
    """Runs `Client` operations in a thread pool. Each operation returns a
    `concurrent.futures.Future` that resolves with the operation's result, or
    fails with the `ClientError` it raised.

    ```python
    with AsyncClient() as web:
        future = web.head('https://example.com/profile/card')
        metadata = future.result()
    ```
    """

    def __init__(self, client: Client = None, max_workers: int = None, **kwargs):
        self.client: Client = client or Client(**kwargs)
        self.executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix=__name__)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()

    def shutdown(self, wait: bool = True):
        self.executor.shutdown(wait=wait)

    def head(self, url: str) -> Future:
        return self.executor.submit(self.client.head, url)

    def get(self, url: str) -> Future:
        return self.executor.submit(self.client.get, url)

    def post(
            self,
            url: str,
            data: Payload = None,
            slug: str = None,
            is_container: bool = False,
            mime: str = None,
    ) -> Future:
        return self.executor.submit(self.client.post, url, data, slug, is_container, mime)

    create = post

    def put(self, url: str, data: Payload = None, mime: str = None) -> Future:
        return self.executor.submit(self.client.put, url, data, mime)

    replace = put

    def patch(self, url: str, to_delete: Iterable[str] = None, to_insert: Iterable[str] = None) -> Future:
        # snapshot the statement sequences before handing them to another thread
        return self.executor.submit(
            self.client.patch,
            url,
            list(to_delete or []),
            list(to_insert or []),
        )

    update = patch

    def delete(self, url: str) -> Future:
        return self.executor.submit(self.client.delete, url)
