"""
Client transport: httpx-backed slices, settings and path rewriting.
"""

from .settings import ProxySettings, Settings
from .httpx_slices import HttpxClientSlice, HttpxClientSlices
from .path_prefix import PathPrefixSlice

__all__ = [
    "Settings",
    "ProxySettings",
    "HttpxClientSlices",
    "HttpxClientSlice",
    "PathPrefixSlice",
]
