"""
authslice - HTTP client slices with transparent authentication.
Sends requests with pre-emptive credentials and retries once on 401.
"""

from .version import __version__

# HTTP primitives
from .http import (
    Headers,
    RequestLine,
    Content,
    Response,
    Slice,
    ClientSlices,
    read_bytes,
)

# Authentication
from .auth import (
    Authenticator,
    AnonymousAuthenticator,
    ANONYMOUS,
    StaticHeadersAuthenticator,
    BasicAuthenticator,
    BearerAuthenticator,
    TokenFormat,
    OAuthTokenFormat,
    FormTokenFormat,
    AuthClientSlice,
)

# Transport
from .client import (
    Settings,
    ProxySettings,
    HttpxClientSlices,
    PathPrefixSlice,
)

__all__ = [
    # Version
    '__version__',

    # HTTP
    'Headers',
    'RequestLine',
    'Content',
    'Response',
    'Slice',
    'ClientSlices',
    'read_bytes',

    # Authentication
    'Authenticator',
    'AnonymousAuthenticator',
    'ANONYMOUS',
    'StaticHeadersAuthenticator',
    'BasicAuthenticator',
    'BearerAuthenticator',
    'TokenFormat',
    'OAuthTokenFormat',
    'FormTokenFormat',
    'AuthClientSlice',

    # Transport
    'Settings',
    'ProxySettings',
    'HttpxClientSlices',
    'PathPrefixSlice',
]
