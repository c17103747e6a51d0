"""
Transport configuration for fetch-request.
"""
import os
from typing import Any, Dict, Optional, Union

import httpx
from pydantic import BaseModel, field_validator

# Environment variables
ENV_TIMEOUT = "FETCH_REQUEST_TIMEOUT"
ENV_VERIFY_SSL = "FETCH_REQUEST_VERIFY_SSL"
ENV_FOLLOW_REDIRECTS = "FETCH_REQUEST_FOLLOW_REDIRECTS"

TRUTHY = ("1", "true", "yes", "on")


class TimeoutConfig(BaseModel):
    """Timeout configuration, in seconds."""
    connect: Optional[float] = None
    read: Optional[float] = None
    write: Optional[float] = None
    pool: Optional[float] = None


class RequestConfig(BaseModel):
    """
    Transport settings applied when a request is dispatched.

    Fields left as ``None`` fall back to httpx's own defaults.
    """
    model_config = {"arbitrary_types_allowed": True}

    timeout: Optional[Union[float, TimeoutConfig]] = None
    verify_ssl: Optional[bool] = None
    follow_redirects: bool = False
    trust_env: Optional[bool] = None

    # Optional pre-configured clients (httpx); never closed by the dispatcher
    httpx_client: Any = None
    httpx_async_client: Any = None

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: Optional[Union[float, TimeoutConfig]]) -> Optional[Union[float, TimeoutConfig]]:
        if isinstance(v, (int, float)) and v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @classmethod
    def from_env(cls) -> "RequestConfig":
        """Build a config from FETCH_REQUEST_* environment variables."""
        values: Dict[str, Any] = {}

        timeout = os.getenv(ENV_TIMEOUT)
        if timeout:
            values["timeout"] = float(timeout)

        verify = os.getenv(ENV_VERIFY_SSL)
        if verify:
            values["verify_ssl"] = verify.lower() in TRUTHY

        follow = os.getenv(ENV_FOLLOW_REDIRECTS)
        if follow:
            values["follow_redirects"] = follow.lower() in TRUTHY

        return cls(**values)


def normalize_timeout(timeout: Optional[Union[float, TimeoutConfig]]) -> Any:
    """Convert a timeout setting into the value httpx expects."""
    if isinstance(timeout, TimeoutConfig):
        return httpx.Timeout(
            connect=timeout.connect,
            read=timeout.read,
            write=timeout.write,
            pool=timeout.pool,
        )
    return float(timeout)


def resolve_client_kwargs(config: Optional[RequestConfig], extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Build keyword arguments for httpx.Client / httpx.AsyncClient.

    Passthrough keys from the request options are applied last and are not
    validated here; httpx rejects the ones it does not know.
    """
    kwargs: Dict[str, Any] = {}

    if config is not None:
        if config.timeout is not None:
            kwargs["timeout"] = normalize_timeout(config.timeout)
        if config.verify_ssl is not None:
            kwargs["verify"] = config.verify_ssl
        if config.trust_env is not None:
            kwargs["trust_env"] = config.trust_env
        kwargs["follow_redirects"] = config.follow_redirects

    if extra:
        kwargs.update(extra)

    return kwargs
