# This file limits the cross-origin policy to routes under the API prefix.

from __future__ import annotations

from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send


class PrefixedCORSMiddleware(CORSMiddleware):
    """`CORSMiddleware` that only acts on HTTP paths under `path_prefix`."""

    def __init__(self, app: ASGIApp, *, path_prefix: str, **kwargs) -> None:
        super().__init__(app, **kwargs)
        self.path_prefix = path_prefix.rstrip("/")

    def _matches(self, path: str) -> bool:
        return path == self.path_prefix or path.startswith(f"{self.path_prefix}/")

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and not self._matches(scope["path"]):
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)
