"""
Fetch Request - Fluent HTTP request builder
"""

__version__ = "0.1.0"

from .client import delete, get, head, merge, patch, post, put, request
from .config import RequestConfig, TimeoutConfig
from .core.request import RequestBuilder
from .errors import FetchRequestError, ResponseParseError
from .types import HTTP_METHODS, RequestOptions, Response

__all__ = [
    "request", "get", "head", "delete", "post", "put", "patch", "merge",
    "RequestBuilder", "RequestOptions", "Response", "HTTP_METHODS",
    "RequestConfig", "TimeoutConfig",
    "FetchRequestError", "ResponseParseError",
]
