"""
CORS gate.

Stamps the same three CORS headers on every response and answers every
OPTIONS request with an empty 200, whatever the path. Only the single
configured origin is ever advertised; the request's Origin header is not
inspected.

Usage:
    app.add_middleware(CORSGateMiddleware, allow_origin="http://localhost:5173")
"""

from typing import Callable, Dict

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization"


class CORSGateMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, allow_origin: str):
        super().__init__(app)
        self.allow_origin = allow_origin

    def cors_headers(self) -> Dict[str, str]:
        return {
            "Access-Control-Allow-Origin": self.allow_origin,
            "Access-Control-Allow-Methods": ALLOW_METHODS,
            "Access-Control-Allow-Headers": ALLOW_HEADERS,
        }

    async def dispatch(self, request: Request, call_next: Callable):
        # Preflight never reaches the routers
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=self.cors_headers())

        response = await call_next(request)
        response.headers.update(self.cors_headers())
        return response
