"""
Request builder helper.
"""
from typing import Any, Generator, Mapping, Optional

from ..config import RequestConfig
from ..encoding import FORM_CONTENT_TYPE, JSON_CONTENT_TYPE, encode_form, serialize_json
from ..types import Content, RequestOptions, Response
from .dispatch import dispatch, dispatch_sync


class RequestBuilder:
    """
    Fluent builder over a single RequestOptions record.

    Every ``with_*`` call mutates the shared record and returns the builder.
    Nothing is sent until :meth:`send` / :meth:`send_sync` is called or the
    builder itself is awaited.
    """

    def __init__(self, options: RequestOptions, config: Optional[RequestConfig] = None):
        self._options = options
        self._config = config

    @property
    def options(self) -> RequestOptions:
        return self._options

    def with_method(self, method: str) -> "RequestBuilder":
        self._options.method = method
        return self

    def with_path(self, path: str) -> "RequestBuilder":
        self._options.set_path(path)
        return self

    def with_path_section(self, index: int, value: Any) -> "RequestBuilder":
        self._options.set_path_section(index, value)
        return self

    def with_query(self, key: Any, value: Any) -> "RequestBuilder":
        self._options.add_query(key, value)
        return self

    def with_header(self, key: str, value: Any) -> "RequestBuilder":
        self._options.set_header(key, value)
        return self

    def with_headers(self, headers: Mapping[str, Any]) -> "RequestBuilder":
        for key, value in headers.items():
            self._options.set_header(key, value)
        return self

    def with_content_type(self, value: str) -> "RequestBuilder":
        return self.with_header("Content-Type", value)

    def with_user_agent(self, value: str) -> "RequestBuilder":
        return self.with_header("User-Agent", value)

    def with_content(self, content: Optional[Content]) -> "RequestBuilder":
        self._options.content = content
        return self

    def with_form(self, form: Mapping[Any, Any]) -> "RequestBuilder":
        return (
            self.with_content_type(FORM_CONTENT_TYPE)
            .with_content(encode_form(form))
        )

    def with_json(self, value: Any) -> "RequestBuilder":
        return (
            self.with_content_type(JSON_CONTENT_TYPE)
            .with_content(serialize_json(value))
        )

    async def send(self) -> Response:
        """Dispatch the configured request and wait for the buffered response."""
        return await dispatch(self._options, self._config)

    def send_sync(self) -> Response:
        """Dispatch the configured request, blocking until the response is read."""
        return dispatch_sync(self._options, self._config)

    def __await__(self) -> Generator[Any, None, Response]:
        return self.send().__await__()

    def __repr__(self) -> str:
        return f"<RequestBuilder {self._options.method} {self._options.url}>"
