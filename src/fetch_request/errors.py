from typing import Optional


class FetchRequestError(Exception):
    """Base exception for fetch-request errors."""
    pass


class ResponseParseError(FetchRequestError, ValueError):
    def __init__(self, content_type: str, body: str, cause: Optional[Exception] = None):
        msg = f"Failed to parse response body as JSON (content-type '{content_type}'): {cause}"
        super().__init__(msg)
        self.content_type = content_type
        self.body = body
        self.cause = cause
