"""
Request dispatch based on httpx.
"""
import json
import logging
from typing import Any, Dict, Optional

import httpx

from ..config import RequestConfig, resolve_client_kwargs
from ..encoding import is_json_content_type
from ..errors import ResponseParseError
from ..types import RequestOptions, Response

logger = logging.getLogger(__name__)

# Constants
LOG_PREFIX = "[FetchRequest]"
MAX_LOGGED_BODY = 5000


def _format_body(body: Any) -> str:
    """
    Format body for logging safeguards against binary data.
    """
    if body is None:
        return "<empty>"
    if isinstance(body, (bytes, bytearray)):
        return f"<binary data: {len(body)} bytes>"
    if len(body) > MAX_LOGGED_BODY:
        return body[:MAX_LOGGED_BODY] + "... (truncated)"
    return body


def _build_request(client: Any, options: RequestOptions) -> httpx.Request:
    """Read the options record once and turn it into an outgoing request."""
    return client.build_request(
        method=options.method,
        url=options.url,
        headers=options.headers,
        content=options.content or None,
    )


def _send_kwargs(options: RequestOptions) -> Dict[str, Any]:
    """Basic auth from the URL credentials, unless an Authorization header was set."""
    credentials = options.credentials()
    if credentials is None or any(key.lower() == "authorization" for key in options.headers):
        return {}
    return {"auth": httpx.BasicAuth(*credentials)}


def format_response(response: httpx.Response) -> Response:
    """
    Decode the buffered body as UTF-8 and parse it when the content type mentions JSON.
    """
    content_type = response.headers.get("content-type", "")
    body: Any = response.content.decode("utf-8", errors="replace")

    if is_json_content_type(content_type):
        try:
            body = json.loads(body)
        except json.JSONDecodeError as e:
            raise ResponseParseError(content_type, body, e) from e

    return Response(
        status_code=response.status_code,
        headers=dict(response.headers),
        body=body,
        reason_phrase=response.reason_phrase,
        url=str(response.url),
    )


def _log_request(options: RequestOptions) -> None:
    logger.debug(f"{LOG_PREFIX} Request: {options.method} {options.url}")
    if options.content is not None:
        logger.debug(f"{LOG_PREFIX} Request body: {_format_body(options.content)}")


def _log_response(options: RequestOptions, response: httpx.Response) -> None:
    logger.debug(f"{LOG_PREFIX} Response: {response.status_code} {options.method} {options.url}")


async def dispatch(options: RequestOptions, config: Optional[RequestConfig] = None) -> Response:
    """
    Perform one asynchronous exchange for the options record.

    Any received status resolves; transport errors propagate unchanged.
    """
    injected = config.httpx_async_client if config is not None else None
    client = injected or httpx.AsyncClient(**resolve_client_kwargs(config, options.extra))

    _log_request(options)
    try:
        request = _build_request(client, options)
        response = await client.send(request, **_send_kwargs(options))
        _log_response(options, response)
        return format_response(response)
    except httpx.RequestError as e:
        logger.error(f"{LOG_PREFIX} Request failed: {options.method} {options.url}: {e!r}")
        raise
    finally:
        if injected is None:
            await client.aclose()


def dispatch_sync(options: RequestOptions, config: Optional[RequestConfig] = None) -> Response:
    """Blocking counterpart of :func:`dispatch`."""
    injected = config.httpx_client if config is not None else None
    client = injected or httpx.Client(**resolve_client_kwargs(config, options.extra))

    _log_request(options)
    try:
        request = _build_request(client, options)
        response = client.send(request, **_send_kwargs(options))
        _log_response(options, response)
        return format_response(response)
    except httpx.RequestError as e:
        logger.error(f"{LOG_PREFIX} Request failed: {options.method} {options.url}: {e!r}")
        raise
    finally:
        if injected is None:
            client.close()
