"""
Client Settings
Transport configuration: proxy, TLS trust, redirects and timeouts.
"""

import os
from typing import Mapping, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field

_TRUE = ("1", "true", "yes", "on")


class ProxySettings(BaseModel):
    """HTTP proxy."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1)
    port: int = Field(ge=1, le=65535)
    secure: bool = False

    @property
    def url(self) -> str:
        scheme = "https" if self.secure else "http"
        return f"{scheme}://{self.host}:{self.port}"


class Settings(BaseModel):
    """
    Settings for client slices.

    Timeouts are in seconds; 0 disables the timeout.
    """

    model_config = ConfigDict(frozen=True)

    proxy: Optional[ProxySettings] = None
    trust_all: bool = False
    follow_redirects: bool = False
    connect_timeout: float = Field(default=15.0, ge=0)
    idle_timeout: float = Field(default=0.0, ge=0)

    def httpx_timeout(self) -> httpx.Timeout:
        idle = self.idle_timeout or None
        return httpx.Timeout(idle, connect=self.connect_timeout or None)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, prefix: str = "AUTHSLICE_") -> "Settings":
        """
        Load settings from environment variables.

        Recognized (with prefix): PROXY_HOST, PROXY_PORT, PROXY_SECURE,
        TRUST_ALL, FOLLOW_REDIRECTS, CONNECT_TIMEOUT, IDLE_TIMEOUT.
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            value = env.get(prefix + name)
            if value is None or not value.strip():
                return None
            return value.strip()

        values = {}
        proxy_host = get("PROXY_HOST")
        if proxy_host:
            values["proxy"] = ProxySettings(
                host=proxy_host,
                port=int(get("PROXY_PORT") or 8080),
                secure=(get("PROXY_SECURE") or "").lower() in _TRUE,
            )
        for name in ("TRUST_ALL", "FOLLOW_REDIRECTS"):
            raw = get(name)
            if raw is not None:
                values[name.lower()] = raw.lower() in _TRUE
        for name in ("CONNECT_TIMEOUT", "IDLE_TIMEOUT"):
            raw = get(name)
            if raw is not None:
                values[name.lower()] = float(raw)
        return cls(**values)
