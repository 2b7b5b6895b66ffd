import logging
from http import HTTPStatus
from typing import Mapping, NamedTuple, Optional
from urllib.parse import urljoin

from requests import Response
from requests.utils import parse_header_links

logger = logging.getLogger(__name__)

SPARQL_UPDATE = 'application/sparql-update'

# ordered fallback lists of link relations for each metadata field
ACL_RELATIONS = ('acl',)
META_RELATIONS = ('meta', 'describedby')

# Allow header tokens and the capability each one grants
ALLOW_CAPABILITIES = {
    'PUT': 'put',
    'POST': 'post',
    'DELETE': 'delete',
}


class ResourceMetadata(NamedTuple):
    """Protocol metadata about an LDP resource, extracted from the headers and
    status of a single HTTP response. Use `parse_response_meta()` to build
    one from a Requests `Response`."""

    url: str
    """Location of the resource; the `Location` header if the server sent
    one, otherwise the final URL of the response"""

    acl_link: Optional[str]
    """URL of the access control document (`Link: <...>; rel="acl"`)"""

    meta_link: Optional[str]
    """URL of the description document (`rel="meta"`, or
    `rel="describedby"`)"""

    user: str
    """Identity reported by the server in the `User` header"""

    websocket_endpoint: str
    """Realtime updates endpoint from the `Updates-Via` header"""

    editable_via: frozenset[str]
    """Subset of `{'patch', 'put', 'post', 'delete'}`"""

    exists: bool
    """`True` if and only if the response status was 200"""

    response: Response
    """The underlying Requests `Response`"""

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def __str__(self):
        return self.url


def parse_link_header(value: Optional[str]) -> dict[str, str]:
    """Parse the value of a `Link` header into a dictionary mapping each
    relation type to its target URL.

    ```pycon
    >>> parse_link_header('<foo.acl>; rel="acl", <foo.meta>; rel="meta describedby"')
    {'acl': 'foo.acl', 'meta': 'foo.meta', 'describedby': 'foo.meta'}
    ```

    Relation types are case-insensitive, and are returned in lower case. If a
    relation appears more than once, the last link wins. Links without a
    target or without a `rel` parameter are skipped."""
    relations = {}
    if not value:
        return relations
    for link in parse_header_links(value):
        url = link.get('url')
        rel = link.get('rel')
        if not url or not rel:
            logger.debug(f'Skipping unusable link header segment: {link}')
            continue
        for token in rel.split():
            relations[token.lower()] = url
    return relations


def first_relation(links: Mapping[str, str], relations: tuple[str, ...]) -> Optional[str]:
    """Return the target of the first relation in `relations` that is present
    in `links`, or `None` if none of them are."""
    for rel in relations:
        if rel in links:
            return links[rel]
    return None


def editable_via(headers: Mapping[str, str]) -> frozenset[str]:
    """Determine how a resource may be modified, from its `Accept-Patch` and
    `Allow` headers. Token matching is case-sensitive."""
    editable = set()
    if SPARQL_UPDATE in (headers.get('Accept-Patch') or ''):
        editable.add('patch')
    allow = headers.get('Allow') or ''
    for token, capability in ALLOW_CAPABILITIES.items():
        if token in allow:
            editable.add(capability)
    return frozenset(editable)


def _resolve(base: Optional[str], url: Optional[str]) -> Optional[str]:
    if url is None or not base:
        return url
    return urljoin(base, url)


def parse_response_meta(response: Response) -> ResourceMetadata:
    """Build a `ResourceMetadata` record from a response. Missing or malformed
    headers result in empty or `None` fields, never in an error."""
    headers = response.headers
    base_url = response.url
    links = parse_link_header(headers.get('Link'))
    return ResourceMetadata(
        url=_resolve(base_url, headers.get('Location')) or base_url,
        acl_link=_resolve(base_url, first_relation(links, ACL_RELATIONS)),
        meta_link=_resolve(base_url, first_relation(links, META_RELATIONS)),
        user=headers.get('User') or '',
        websocket_endpoint=headers.get('Updates-Via') or '',
        editable_via=editable_via(headers),
        exists=response.status_code == HTTPStatus.OK,
        response=response,
    )
