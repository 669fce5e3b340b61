"""Pydantic models for jrpc client configuration."""

from typing import Literal
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

ProtocolVersion = Literal["1.0", "2.0"]


class ClientConfig(BaseModel):
    """Configuration for a JSON-RPC client.

    Example config.json:
        {
            "url": "http://localhost:8080/rpc",
            "protocol_version": "1.0",
            "timeout": 10,
            "headers": {"Authorization": "Bearer ..."}
        }
    """

    model_config = ConfigDict(extra="forbid")

    url: str
    """Remote JSON-RPC service URL (http or https)."""

    protocol_version: ProtocolVersion = "1.0"
    """JSON-RPC version spoken with the service."""

    timeout: float = Field(default=30.0, gt=0)
    """HTTP request timeout in seconds."""

    headers: dict[str, str] = Field(default_factory=dict)
    """Extra HTTP headers sent with every request."""

    verbose: bool = False
    """Log request and reply bodies at DEBUG level."""

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"url must be an http:// or https:// URL, got: {v!r}")
        return v
