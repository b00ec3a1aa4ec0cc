"""
URL Utilities

Helpers for building absolute links and rewriting query string
parameters on request URLs.
"""

import re
from typing import Any, Optional, Union

from fastapi import Request

from paginator.core.constants import DEFAULT_HTTP_PORT


def build_base_url(host: str, port: Union[int, str]) -> str:
    """
    Build the absolute base URL for generated links.

    The port suffix is omitted when the port is the default HTTP port.

    Args:
        host: Server hostname
        port: Server port (int or numeric string)

    Returns:
        Base URL such as "http://localhost:3333"
    """
    try:
        port_number = int(port)
    except (TypeError, ValueError):
        port_number = None

    if port_number == DEFAULT_HTTP_PORT:
        return f"http://{host}"
    return f"http://{host}:{port}"


def update_query_string(uri: str, key: str, value: Any) -> str:
    """
    Add or replace a query string parameter on a URI.

    The key is matched case-insensitively. An existing parameter is
    replaced in place; otherwise it is appended with "?" or "&".

    Examples:
        >>> update_query_string("/visitors?per_page=10&page=2", "page", 3)
        '/visitors?per_page=10&page=3'
        >>> update_query_string("/visitors", "page", 1)
        '/visitors?page=1'
    """
    pattern = re.compile(r"([?&])" + re.escape(key) + r"=.*?(&|$)", re.IGNORECASE)
    if pattern.search(uri):
        return pattern.sub(
            lambda m: f"{m.group(1)}{key}={value}{m.group(2)}", uri, count=1
        )

    separator = "&" if "?" in uri else "?"
    return f"{uri}{separator}{key}={value}"


def get_request_path(request: Optional[Request]) -> str:
    """
    Return the request path including its query string, or "" without a request.

    The path is taken from the raw request target so percent-encoded
    segments are kept as the client sent them.
    """
    if request is None:
        return ""

    raw_path = request.scope.get("raw_path")
    if raw_path:
        path = raw_path.decode("latin-1").split("?", 1)[0]
        root_path = request.scope.get("root_path", "")
        if root_path and not path.startswith(root_path):
            path = root_path + path
    else:
        path = request.url.path

    query = request.url.query
    if query:
        return f"{path}?{query}"
    return path
