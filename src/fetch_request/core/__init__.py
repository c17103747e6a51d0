"""
Request construction and dispatch.
"""
from .request import RequestBuilder
from .dispatch import dispatch, dispatch_sync, format_response

__all__ = ["RequestBuilder", "dispatch", "dispatch_sync", "format_response"]
