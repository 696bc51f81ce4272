# ============================================================================
# CLAUDE CONTEXT - DIRECTUS HTTP CLIENT
# ============================================================================
# STATUS: Service Layer - Directus REST client for content queries
# PURPOSE: HTTP client for Directus item queries, singletons and item creation
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: DirectusClient, DirectusResponse, DirectusError
# DEPENDENCIES: httpx (sync)
# PORTABLE: Yes - no config imports, accepts base_url or DIRECTUS_URL env var
# LOGGING: util_logger CLIENT component, transport failures at WARNING
# ============================================================================
"""
Directus HTTP Client Service (SYNC VERSION).

Provides sync HTTP client for the Directus REST query contract:
- GET /items/{collection}  - list query (fields, filter, sort, limit)
- GET /items/{singleton}   - singleton fetch
- POST /items/{collection} - item creation
- GET /server/ping         - liveness probe

The client holds configuration only (origin, timeout) plus one pooled
httpx.Client, so a single instance can be shared by concurrent requests.

PORTABILITY:
    Does NOT import from config - accepts base_url as constructor param
    or falls back to DIRECTUS_URL environment variable.
"""

import os
import json
import httpx
import logging
from typing import Dict, Any, List, Optional, Union
from dataclasses import dataclass

from util_logger import LoggerFactory, ComponentType


class DirectusError(Exception):
    """Raised when a Directus request fails or returns an unusable payload."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class DirectusResponse:
    """Response wrapper for Directus API calls."""
    success: bool
    status_code: int
    data: Optional[Union[Dict, List]] = None
    content_type: Optional[str] = None
    error: Optional[str] = None


class DirectusClient:
    """
    Sync HTTP client for a Directus instance.

    Usage:
        # Option 1: Explicit base_url
        client = DirectusClient(base_url="https://cms.example.org")

        # Option 2: From environment variable DIRECTUS_URL
        client = DirectusClient()

        slides = client.read_items(
            "hero_slides",
            fields=["id", "title"],
            filter={"status": {"_eq": "published"}},
            sort=["sort", "date_created"]
        )

        client.close()
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize Directus client.

        Args:
            base_url: Directus origin. If not provided, uses DIRECTUS_URL env var.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (tests pass httpx.MockTransport).
            logger: Logger for transport failures.

        Raises:
            ValueError: If no base_url provided and DIRECTUS_URL not set.
        """
        self.base_url = (base_url or os.getenv("DIRECTUS_URL", "")).rstrip('/')
        if not self.base_url:
            raise ValueError(
                "DirectusClient requires base_url parameter or DIRECTUS_URL environment variable"
            )
        self.timeout = timeout
        self.logger = logger or LoggerFactory.create_logger(
            ComponentType.CLIENT, "DirectusClient"
        )
        # One pooled connection set per instance, shared by all requests
        self._client = httpx.Client(
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
            transport=transport
        )

    def close(self):
        """Close the HTTP client."""
        if not self._client.is_closed:
            self._client.close()

    def _failure(self, method: str, endpoint: str, status_code: int, error: str) -> DirectusResponse:
        self.logger.warning(
            f"Directus {method} {endpoint} failed: {error}",
            extra={'custom_dimensions': {
                'method': method,
                'endpoint': endpoint,
                'status_code': status_code
            }}
        )
        return DirectusResponse(success=False, status_code=status_code, error=error)

    def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict] = None,
        json_body: Optional[Dict] = None
    ) -> DirectusResponse:
        """
        Make HTTP request to Directus.

        Args:
            method: HTTP method (GET, POST)
            endpoint: API endpoint path
            params: Query parameters
            json_body: JSON body for POST requests

        Returns:
            DirectusResponse with result or error
        """
        url = f"{self.base_url}{endpoint}"

        try:
            if method == "GET":
                response = self._client.get(url, params=params)
            elif method == "POST":
                response = self._client.post(url, params=params, json=json_body)
            else:
                return DirectusResponse(
                    success=False,
                    status_code=400,
                    error=f"Unsupported HTTP method: {method}"
                )

            if response.status_code >= 400:
                return self._failure(
                    method, endpoint, response.status_code,
                    f"Directus error: {self._error_text(response)}"
                )

            content_type = response.headers.get("content-type", "")

            if response.status_code == 204 or not response.content:
                data = None
            elif "json" in content_type:
                data = response.json()
            else:
                data = {"raw": response.text}

            return DirectusResponse(
                success=True,
                status_code=response.status_code,
                data=data,
                content_type=content_type
            )

        except httpx.TimeoutException:
            return self._failure(
                method, endpoint, 504,
                f"Directus request timeout after {self.timeout}s"
            )
        except httpx.RequestError as e:
            return self._failure(
                method, endpoint, 502,
                f"Directus request error: {str(e)}"
            )
        except ValueError as e:
            return self._failure(
                method, endpoint, 502,
                f"Directus returned invalid JSON: {str(e)}"
            )

    @staticmethod
    def _error_text(response: httpx.Response) -> str:
        """Pull the first error message out of a Directus error envelope."""
        try:
            errors = response.json().get("errors") or []
            if errors and errors[0].get("message"):
                return errors[0]["message"]
        except (ValueError, AttributeError):
            pass
        return response.text[:500] if response.text else "Unknown error"

    def _unwrap(self, response: DirectusResponse, what: str) -> Any:
        """Return the `data` member of a successful envelope or raise DirectusError."""
        if not response.success:
            raise DirectusError(response.error or f"{what} failed", response.status_code)
        if response.data is None:
            return None
        if not isinstance(response.data, dict) or "data" not in response.data:
            raise DirectusError(f"{what}: response has no 'data' member", 502)
        return response.data["data"]

    @staticmethod
    def _query_params(
        fields: Optional[List[str]] = None,
        filter: Optional[Dict[str, Any]] = None,
        sort: Optional[List[str]] = None,
        limit: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Encode a Directus query.

        Sort keys are ascending unless prefixed with '-'.
        """
        params: Dict[str, Any] = {}
        if fields:
            params["fields"] = ",".join(fields)
        if filter:
            params["filter"] = json.dumps(filter, separators=(",", ":"))
        if sort:
            params["sort"] = ",".join(sort)
        if limit is not None:
            params["limit"] = limit
        return params

    # =========================================================================
    # Item Endpoints
    # =========================================================================

    def read_items(
        self,
        collection: str,
        fields: Optional[List[str]] = None,
        filter: Optional[Dict[str, Any]] = None,
        sort: Optional[List[str]] = None,
        limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """
        Query a collection.

        Args:
            collection: Collection name
            fields: Fields to select
            filter: Directus filter object, e.g. {"status": {"_eq": "published"}}
            sort: Sort keys, '-' prefix for descending
            limit: Maximum number of items

        Returns:
            List of raw item dicts

        Raises:
            DirectusError: On transport failure, error status or malformed payload
        """
        params = self._query_params(fields, filter, sort, limit)
        response = self._request("GET", f"/items/{collection}", params=params)
        items = self._unwrap(response, f"read_items({collection})")
        if not isinstance(items, list):
            raise DirectusError(f"read_items({collection}): expected a list", 502)
        return items

    def read_singleton(
        self,
        collection: str,
        fields: Optional[List[str]] = None
    ) -> Optional[Dict[str, Any]]:
        """
        Fetch a singleton collection.

        Returns:
            The raw singleton dict, or None when Directus returns no data

        Raises:
            DirectusError: On transport failure, error status or malformed payload
        """
        params = self._query_params(fields)
        response = self._request("GET", f"/items/{collection}", params=params)
        item = self._unwrap(response, f"read_singleton({collection})")
        if item is not None and not isinstance(item, dict):
            raise DirectusError(f"read_singleton({collection}): expected an object", 502)
        return item

    def create_item(self, collection: str, item: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Create one item in a collection.

        Returns:
            The created item as returned by Directus (None on 204 No Content)

        Raises:
            DirectusError: On transport failure, error status or malformed payload
        """
        response = self._request("POST", f"/items/{collection}", json_body=item)
        return self._unwrap(response, f"create_item({collection})")

    # =========================================================================
    # Health Check
    # =========================================================================

    def ping(self) -> DirectusResponse:
        """Check Directus server liveness."""
        return self._request("GET", "/server/ping")
