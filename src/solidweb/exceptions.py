from http import HTTPStatus
from typing import Optional

from requests import Response


def status_phrase(status_code: int) -> str:
    """Standard reason phrase for `status_code`, or "Unknown Error" if it is
    not a registered HTTP status."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return 'Unknown Error'


class ClientError(Exception):
    """Raised when an operation does not get the response it requires. This
    covers both non-success HTTP responses and transport failures. For a
    transport failure there is no response; `status_code` is then `0`."""
    def __init__(self, response: Optional[Response], *args, status_code: int = None):
        super().__init__(*args)

        self.response: Optional[Response] = response
        """The Requests `Response` object from the failed request, or `None`
        if no response was received."""

        if status_code is None:
            status_code = self.response.status_code if self.response is not None else 0
        self.status_code: int = status_code
        """The numeric HTTP status code (e.g., 404) for the failed request."""

        self.reason: str = self._get_reason()
        """The reason phrase (e.g., "Not Found") for the failed request. If
        the `response` does not have a reason code, use the standard status
        phrase from the built-in `HTTPStatus` enumeration corresponding to the
        `status_code`. With no response at all, this is the first message
        argument, if any."""

    def _get_reason(self) -> str:
        if self.response is not None and self.response.reason:
            return self.response.reason
        if self.response is None and self.args:
            return str(self.args[0])
        return status_phrase(self.status_code)

    def __str__(self):
        return f'{self.status_code} {self.reason}'


class FetchError(ClientError):
    """Raised when an RDF document cannot be retrieved or parsed."""
    pass


class ConfigError(Exception):
    def __init__(self, message):
        self.message = message

    def __str__(self):
        return self.message
