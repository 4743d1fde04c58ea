#!/usr/bin/env python3
"""
Fetch a manifest from a Docker registry with Bearer token authentication.

Run:
  python registry_example.py library/ubuntu latest

Optional env vars:
  REGISTRY_USERNAME / REGISTRY_PASSWORD   credentials for the token service
  AUTHSLICE_PROXY_HOST / AUTHSLICE_PROXY_PORT   outbound proxy
"""

import asyncio
import logging
import os
import sys

from authslice import (
    ANONYMOUS,
    AuthClientSlice,
    BasicAuthenticator,
    BearerAuthenticator,
    Headers,
    HttpxClientSlices,
    OAuthTokenFormat,
    PathPrefixSlice,
    Settings,
)

REGISTRY = "registry-1.docker.io"


async def main(image: str, tag: str) -> int:
    username = os.getenv("REGISTRY_USERNAME")
    password = os.getenv("REGISTRY_PASSWORD")
    credentials = BasicAuthenticator(username, password) if username and password else ANONYMOUS

    async with HttpxClientSlices(Settings.from_env()) as slices:
        auth = BearerAuthenticator(
            slices,
            OAuthTokenFormat(field="token"),
            fallback=ANONYMOUS,
            realm_authenticator=credentials,
        )
        registry = AuthClientSlice(PathPrefixSlice(slices.https(REGISTRY), "/v2"), auth)

        response = await registry.respond(
            f"GET /{image}/manifests/{tag} HTTP/1.1",
            Headers.of("Accept", "application/vnd.docker.distribution.manifest.list.v2+json"),
        )
        body = await response.read()
        print(f"Status: {response.status}")
        print(body.decode("utf-8", errors="replace")[:2000])
        return 0 if response.status == 200 else 1


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if os.getenv("VERBOSE") else logging.INFO)
    name = sys.argv[1] if len(sys.argv) > 1 else "library/ubuntu"
    reference = sys.argv[2] if len(sys.argv) > 2 else "latest"
    sys.exit(asyncio.run(main(name, reference)))
