"""Fetch a single document over HTTP.

One GET, no retries. The response is streamed inside a ``with`` block,
so the connection is released once the body has been read, whether or
not the read succeeded.
"""

import logging
import typing

import httpx

from . import errors

if typing.TYPE_CHECKING:
    from typing import Optional, Text

log = logging.getLogger("exemplar.fetch")

EXAMPLE_URL = "http://example.com"


def build_client(transport=None):
    # type: (Optional[httpx.BaseTransport]) -> httpx.Client
    """Create the `httpx.Client` used by `fetch`.

    There is no timeout: a request blocks until the transport yields
    data or an error.
    """
    return httpx.Client(timeout=None, transport=transport)


def fetch(url=EXAMPLE_URL, client=None):
    # type: (Text, Optional[httpx.Client]) -> Text
    """GET ``url`` and return the whole body as text.

    Arguments:
        url (str): The address to request.
        client (httpx.Client, optional): Client to send the request
            with. If omitted, one is created and closed again.

    Raises:
        exemplar.errors.TransportFailed: if the server can't be reached,
            or the body can't be read.

    """
    if client is None:
        with build_client() as own_client:
            return fetch(url, client=own_client)

    log.debug("GET %s", url)
    try:
        with client.stream("GET", url) as response:
            response.read()
    except (httpx.RequestError, httpx.StreamError) as error:
        raise errors.TransportFailed(url, exc=error) from error
    log.debug("%s responded %s", url, response.status_code)
    return response.text
