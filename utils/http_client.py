"""
HTTP client utilities with connection pooling.
Provides reusable httpx clients for the search and completion providers.
"""
import httpx


class HTTPClientManager:
    """Manages shared httpx clients with connection pooling."""

    _search_client: httpx.AsyncClient | None = None
    _completion_client: httpx.AsyncClient | None = None

    @classmethod
    def get_search_client(cls) -> httpx.AsyncClient:
        """
        Get or create a shared httpx client for search operations.

        Timeouts are supplied per request from the application config.

        Returns:
            Configured httpx.AsyncClient for search operations
        """
        if cls._search_client is None:
            limits = httpx.Limits(
                max_connections=20,
                max_keepalive_connections=5,
                keepalive_expiry=30.0
            )

            cls._search_client = httpx.AsyncClient(
                follow_redirects=True,
                limits=limits,
                http2=True
            )

        return cls._search_client

    @classmethod
    def get_completion_client(cls) -> httpx.AsyncClient:
        """
        Get or create a shared httpx client for completion requests.

        Returns:
            Configured httpx.AsyncClient for the completion API
        """
        if cls._completion_client is None:
            limits = httpx.Limits(
                max_connections=50,
                max_keepalive_connections=10,
                keepalive_expiry=60.0
            )

            cls._completion_client = httpx.AsyncClient(
                limits=limits,
                http2=True
            )

        return cls._completion_client

    @classmethod
    async def close_all(cls) -> None:
        """
        Close all managed clients and clean up connections.
        """
        if cls._search_client is not None:
            await cls._search_client.aclose()
            cls._search_client = None

        if cls._completion_client is not None:
            await cls._completion_client.aclose()
            cls._completion_client = None
