"""
CORS middleware for browser clients on any origin.
"""
from fastapi import Request, status
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware

from utils.constants import CORS_HEADERS


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Answers preflight requests and stamps CORS headers on every response.
    """

    HEADERS: dict = CORS_HEADERS

    async def dispatch(self, request: Request, call_next):
        """
        Process each request and attach CORS headers.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            Empty preflight response, or the handler's response with CORS headers
        """
        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_200_OK, headers=self.HEADERS)

        response = await call_next(request)
        response.headers.update(self.HEADERS)
        return response
