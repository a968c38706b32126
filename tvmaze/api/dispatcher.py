"""Request dispatcher: URL construction and the single GET call."""

from typing import Any, Optional

import requests
from loguru import logger

from tvmaze.api.exceptions import InvalidArgumentError
from tvmaze.api.options import DEFAULT_OPTIONS, RequestOptions, merge_options
from tvmaze.api.query import encode_query
from tvmaze.config.settings import BASE_HOST


def _url_for(path: str, opts: RequestOptions) -> str:
    # opts must already be merged over DEFAULT_OPTIONS
    if not isinstance(path, str) or not path:
        raise InvalidArgumentError("Request path must be a non-empty string")
    if path.startswith("/"):
        raise InvalidArgumentError(f"Request path must not start with '/': {path!r}")

    scheme = "https" if opts.https else "http"
    url = f"{scheme}://{BASE_HOST}/{path}"

    query_string = encode_query(opts.query)
    if query_string:
        url = f"{url}?{query_string}"
    return url


def build_url(path: str, options: Optional[RequestOptions] = None) -> str:
    """
    Build the full request URL for an API path.

    Args:
        path: Relative API path without leading slash (e.g. 'shows/396/episodes').
        options: Caller options, merged over the defaults.

    Returns:
        Absolute URL including the encoded query string, if any.

    Raises:
        InvalidArgumentError: If the path is empty or starts with a slash.
    """
    return _url_for(path, merge_options(DEFAULT_OPTIONS, options))


def send_request(
    path: str,
    options: Optional[RequestOptions] = None,
    session: Optional[requests.Session] = None
) -> Any:
    """
    Perform one GET request against the API and decode the JSON body.

    Errors from the transport are not caught: connection failures,
    timeouts, non-2xx statuses (``requests.HTTPError``) and undecodable
    bodies reach the caller unchanged.

    Args:
        path: Relative API path without leading slash.
        options: Caller options, merged over the defaults.
        session: Optional requests.Session to reuse connections.

    Returns:
        The decoded JSON payload, exactly as returned by the service.
    """
    opts = merge_options(DEFAULT_OPTIONS, options)
    url = _url_for(path, opts)
    headers = dict(opts.header or {})

    logger.debug(f"GET {url}")
    getter = session.get if session is not None else requests.get
    try:
        response = getter(url, headers=headers, timeout=opts.timeout)
        response.raise_for_status()
        return response.json()
    except requests.RequestException as e:
        logger.warning(f"Request to {url} failed: {e}")
        raise
