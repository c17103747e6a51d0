"""
Core type definitions for fetch-request.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import unquote, urlsplit

from .encoding import encode_pair, stringify

# HTTP Methods
GET = "GET"
HEAD = "HEAD"
DELETE = "DELETE"
PATCH = "PATCH"
POST = "POST"
PUT = "PUT"
MERGE = "MERGE"

HTTP_METHODS = (GET, HEAD, DELETE, PATCH, POST, PUT, MERGE)

DEFAULT_PROTOCOL = "http:"
DEFAULT_HOSTNAME = "localhost"
DEFAULT_PATH = "/"

Content = Union[str, bytes]

# Keys of an options mapping that map onto RequestOptions fields
OPTION_KEYS = frozenset({
    "protocol", "hostname", "host", "port", "auth", "method",
    "pathname", "search", "query", "path", "headers", "content",
})


def _normalize_protocol(protocol: Optional[str]) -> str:
    if not protocol:
        return DEFAULT_PROTOCOL
    protocol = protocol.lower()
    return protocol if protocol.endswith(":") else protocol + ":"


def _userinfo(username: Optional[str], password: Optional[str]) -> Optional[str]:
    """Decode URL credentials into the "user:password" form kept on the options."""
    if username is None and password is None:
        return None
    userinfo = unquote(username or "")
    if password is not None:
        userinfo += ":" + unquote(password)
    return userinfo


@dataclass
class RequestOptions:
    """
    Everything needed to issue one HTTP request.

    ``path`` is derived state: every mutator keeps it equal to
    ``pathname + search`` (or ``pathname`` alone when no query was set).
    """
    protocol: str = DEFAULT_PROTOCOL
    hostname: str = DEFAULT_HOSTNAME
    port: Optional[int] = None
    # "user:password" credentials, sent as Basic authentication
    auth: Optional[str] = None
    method: str = GET
    pathname: str = DEFAULT_PATH
    search: Optional[str] = None
    query: Optional[str] = None
    path: str = DEFAULT_PATH
    headers: Dict[str, str] = field(default_factory=dict)
    content: Optional[Content] = None
    # Unrecognized keys, forwarded unchanged to the transport
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_url(cls, url: str) -> "RequestOptions":
        """Parse a URL string into scheme, host, port, path and query."""
        parts = urlsplit(url)
        options = cls(
            protocol=_normalize_protocol(parts.scheme),
            hostname=parts.hostname or DEFAULT_HOSTNAME,
            port=parts.port,
            auth=_userinfo(parts.username, parts.password),
        )
        options.set_path(parts.path or DEFAULT_PATH)
        if parts.query:
            options.set_search(parts.query)
        return options

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "RequestOptions":
        """
        Build options from a partial mapping such as ``{"hostname": ..., "path": ...}``.

        ``host`` is used when ``hostname`` is missing and may carry a port.
        When only ``path`` is supplied, ``pathname`` and ``search`` are taken from it.
        """
        hostname = mapping.get("hostname")
        port = mapping.get("port")
        if not hostname and mapping.get("host"):
            netloc = urlsplit("//" + str(mapping["host"]))
            hostname = netloc.hostname
            port = port if port is not None else netloc.port

        options = cls(
            protocol=_normalize_protocol(mapping.get("protocol")),
            hostname=hostname or DEFAULT_HOSTNAME,
            port=int(port) if port is not None else None,
            auth=mapping.get("auth"),
            method=mapping.get("method") or GET,
            headers={key: stringify(value) for key, value in (mapping.get("headers") or {}).items()},
            content=mapping.get("content"),
            extra={key: value for key, value in mapping.items() if key not in OPTION_KEYS},
        )

        path = mapping.get("path") or DEFAULT_PATH
        pathname, _, query = path.partition("?")
        pathname = mapping.get("pathname") or pathname or DEFAULT_PATH
        search = mapping.get("search")
        if search is None and mapping.get("query") is not None:
            search = "?" + str(mapping["query"])
        if search is None and query:
            search = "?" + query

        options.set_path(pathname)
        if search and search != "?":
            options.set_search(search.lstrip("?"))
        return options

    @property
    def is_secure(self) -> bool:
        return self.protocol == "https:"

    @property
    def url(self) -> str:
        """Absolute URL the request is sent to; any protocol other than https: goes out as plain http."""
        scheme = "https" if self.is_secure else "http"
        host = f"[{self.hostname}]" if ":" in self.hostname else self.hostname
        port = f":{self.port}" if self.port is not None else ""
        return f"{scheme}://{host}{port}{self.request_target}"

    @property
    def request_target(self) -> str:
        """
        Path as placed after the authority.

        Always starts with a slash so a path can never be read as host or port.
        """
        target = self.path.replace("#", "%23")
        return target if target.startswith("/") else "/" + target

    def credentials(self) -> Optional[Tuple[str, str]]:
        if self.auth is None:
            return None
        username, _, password = self.auth.partition(":")
        return username, password

    def set_path(self, path: str) -> None:
        """Replace the pathname, keeping any existing query string."""
        self.pathname = path
        self.path = path + (self.search or "")

    def set_search(self, query: str) -> None:
        """Replace the whole query string (given without the leading ``?``)."""
        self.query = query
        self.search = "?" + query
        self.path = self.pathname + self.search

    def path_segments(self) -> List[str]:
        return (self.pathname or "").split("/")

    def set_path_section(self, index: int, value: Any) -> None:
        """
        Replace the slash-delimited segment at ``index + 1``.

        Index 0 is the first segment after the leading slash. Positions past the
        end are padded with empty segments; positions before the start leave the
        path unchanged.
        """
        segments = self.path_segments()
        position = index + 1
        if position >= 0:
            if position >= len(segments):
                segments.extend([""] * (position - len(segments) + 1))
            segments[position] = stringify(value)
        self.set_path("/".join(segments))

    def add_query(self, key: Any, value: Any) -> None:
        """Append an encoded ``key=value`` pair to the query string."""
        pair = encode_pair(key, value)
        if self.search:
            self.search += "&" + pair
            self.query = (self.query + "&" + pair) if self.query else pair
        else:
            self.search = "?" + pair
            self.query = pair
        self.path = self.pathname + self.search

    def set_header(self, key: str, value: Any) -> None:
        self.headers[key] = stringify(value)


@dataclass
class Response:
    """Buffered response of a dispatched request."""
    status_code: int
    headers: Dict[str, str]
    body: Any = None  # Parsed JSON or text
    reason_phrase: str = ""
    url: str = ""

    @property
    def is_success(self) -> bool:
        """Check if status code is 2xx."""
        return 200 <= self.status_code <= 299
