"""
Entry points: request() and the HTTP method shortcuts.
"""
from typing import Any, Mapping, Optional, Union

from .config import RequestConfig
from .core.request import RequestBuilder
from .types import DELETE, GET, HEAD, MERGE, PATCH, POST, PUT, RequestOptions

RequestTarget = Union[str, Mapping[str, Any], RequestOptions]


def request(target: RequestTarget, config: Optional[RequestConfig] = None) -> RequestBuilder:
    """
    Create a builder from a URL string, a partial options mapping or a RequestOptions record.

    A RequestOptions instance is used directly, so the builder mutates it in place.
    """
    if isinstance(target, str):
        options = RequestOptions.from_url(target)
    elif isinstance(target, RequestOptions):
        options = target
    else:
        options = RequestOptions.from_mapping(target)
    return RequestBuilder(options, config)


def get(target: RequestTarget, config: Optional[RequestConfig] = None) -> RequestBuilder:
    return request(target, config).with_method(GET)


def head(target: RequestTarget, config: Optional[RequestConfig] = None) -> RequestBuilder:
    return request(target, config).with_method(HEAD)


def delete(target: RequestTarget, config: Optional[RequestConfig] = None) -> RequestBuilder:
    return request(target, config).with_method(DELETE)


def post(target: RequestTarget, config: Optional[RequestConfig] = None) -> RequestBuilder:
    return request(target, config).with_method(POST)


def put(target: RequestTarget, config: Optional[RequestConfig] = None) -> RequestBuilder:
    return request(target, config).with_method(PUT)


def patch(target: RequestTarget, config: Optional[RequestConfig] = None) -> RequestBuilder:
    return request(target, config).with_method(PATCH)


def merge(target: RequestTarget, config: Optional[RequestConfig] = None) -> RequestBuilder:
    return request(target, config).with_method(MERGE)
