from fastapi import Request
import logging
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("bloglist")

WRITE_METHODS = {"POST", "DELETE"}

class AuthLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        auth_header = request.headers.get("Authorization")
        path = request.url.path

        # Post creation and deletion need a bearer token
        if not auth_header and request.method in WRITE_METHODS and "/posts" in path:
            logger.warning(f"{request.method} {path} without auth header")

        response = await call_next(request)

        if response.status_code in [401, 403]:
            logger.warning(f"Auth error: {response.status_code} on {request.method} {path}")

        return response
