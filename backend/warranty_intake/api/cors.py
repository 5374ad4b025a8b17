"""CORS handling for the intake form.

Preflight requests echo the browser's requested method and headers, and the
allow-origin header is the caller's exact origin when allow-listed.
"""

from collections.abc import Collection

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp


class EchoCORSMiddleware(BaseHTTPMiddleware):
    """Answers every OPTIONS request and decorates all other responses with CORS headers."""

    def __init__(self, app: ASGIApp, allowed_origins: Collection[str], dev_fallback_star: bool = False) -> None:
        super().__init__(app)
        self.allowed_origins = frozenset(allowed_origins)
        self.dev_fallback_star = dev_fallback_star

    def allow_origin(self, origin: str) -> str:
        """Exact origin if allow-listed, "*" in dev fallback mode, otherwise empty (header omitted)."""
        if origin and origin in self.allowed_origins:
            return origin
        return "*" if self.dev_fallback_star else ""

    def _headers(self, request: Request, allow_methods: str) -> dict[str, str]:
        headers = {
            "Access-Control-Allow-Methods": allow_methods,
            "Access-Control-Allow-Headers": request.headers.get("Access-Control-Request-Headers") or "content-type",
            "Access-Control-Max-Age": "86400",
            "Vary": "Origin",
        }
        allow_origin = self.allow_origin(request.headers.get("Origin", ""))
        if allow_origin:
            headers["Access-Control-Allow-Origin"] = allow_origin
        return headers

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method == "OPTIONS":
            requested_method = request.headers.get("Access-Control-Request-Method") or "POST"
            return Response(status_code=204, headers=self._headers(request, requested_method))

        response = await call_next(request)
        response.headers.update(self._headers(request, "POST, OPTIONS"))
        return response
