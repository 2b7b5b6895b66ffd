"""Functions that build LDP-conformant `requests.Request` objects for each
operation. Nothing here sends a request; see `solidweb.client.Client`."""

from typing import Iterable, Optional, Union

from rdflib import Graph
from requests import Request
from urlobject import URLObject

from solidweb.metadata import SPARQL_UPDATE
from solidweb.namespaces import ldp

TURTLE = 'text/turtle'

Payload = Optional[Union[str, bytes]]


def build_sparql_update(to_delete: Iterable[str] = None, to_insert: Iterable[str] = None) -> str:
    """Build a SPARQL Update request body from sequences of individual
    statements (in Turtle or N-Triples syntax). Each deleted statement becomes
    a `DELETE DATA { ... }` clause and each inserted statement an
    `INSERT DATA { ... }` clause; all deletions come first, and clauses are
    separated by `" ;\\n"`.

    ```pycon
    >>> print(build_sparql_update(['<a> <b> <c> .'], ['<d> <e> <f> .']))
    DELETE DATA { <a> <b> <c> . } ;
    INSERT DATA { <d> <e> <f> . }
    ```

    If there are neither deletions nor insertions, returns the empty string."""
    clauses = [f'DELETE DATA {{ {statement} }}' for statement in (to_delete or [])]
    clauses.extend(f'INSERT DATA {{ {statement} }}' for statement in (to_insert or []))
    return ' ;\n'.join(clauses)


def graph_statements(graph: Optional[Graph]) -> list[str]:
    """Serialize each triple in `graph` as an N-Triples statement, suitable
    for passing to `build_sparql_update()`."""
    if graph is None or len(graph) == 0:
        return []
    lines = graph.serialize(format='nt').splitlines()
    return [line.strip() for line in lines if line.strip()]


def document_uri(url: str) -> str:
    """Strip any fragment identifier from `url`."""
    if '#' not in url:
        return url
    return str(URLObject(url).without_fragment())


def head_request(url: str) -> Request:
    return Request(method='HEAD', url=url)


def post_request(
        url: str,
        data: Payload = None,
        slug: str = None,
        is_container: bool = False,
        mime: str = None,
) -> Request:
    """Build a request to create a new resource in the container at `url`.

    Containers are always sent as `text/turtle`, regardless of `mime`, with
    a `Link` header declaring the `ldp:BasicContainer` interaction model.
    Other resources default to `text/turtle` and declare `ldp:Resource`. The
    `slug`, if given and non-empty, is sent as the `Slug` header."""
    if is_container:
        resource_type = ldp.BasicContainer
        mime = TURTLE
    else:
        resource_type = ldp.Resource
    headers = {
        'Content-Type': mime or TURTLE,
        'Link': f'<{resource_type}>; rel="type"',
    }
    if slug:
        headers['Slug'] = slug
    return Request(method='POST', url=url, headers=headers, data=data or None)


def put_request(url: str, data: Payload = None, mime: str = None) -> Request:
    return Request(
        method='PUT',
        url=url,
        headers={'Content-Type': mime or TURTLE},
        data=data or None,
    )


def patch_request(url: str, to_delete: Iterable[str] = None, to_insert: Iterable[str] = None) -> Request:
    sparql_update = build_sparql_update(to_delete, to_insert)
    return Request(
        method='PATCH',
        url=url,
        headers={'Content-Type': SPARQL_UPDATE},
        data=sparql_update or None,
    )


def delete_request(url: str) -> Request:
    return Request(method='DELETE', url=url)
