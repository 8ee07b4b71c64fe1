"""
Shopify API client for making REST Admin API calls.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional, Tuple

import httpx
from loguru import logger

from .core.config import settings
from .exceptions import (
    ShopifyError,
    ShopifyResponseDecodingError,
    ShopifyTimeoutError,
    ShopifyConnectionError,
    shopify_error_from_response,
)
from .models import ShopifyConfig
from .options import OptionsLike, build_query_params
from .pagination import Pagination, parse_link_header

MYSHOPIFY_SUFFIX = ".myshopify.com"
CALL_LIMIT_HEADER = "X-Shopify-Shop-Api-Call-Limit"
API_VERSION_HEADER = "X-Shopify-Api-Version"


@dataclass
class RateLimitInfo:
    """Call limit state reported by the last response."""
    request_count: int = 0
    bucket_size: int = 0

    @property
    def remaining(self) -> int:
        return self.bucket_size - self.request_count


def normalize_shop_domain(shop_domain: str) -> str:
    """Turn `fooshop`, `fooshop.myshopify.com` or a full URL into a host name."""
    domain = shop_domain.strip()
    for scheme in ("https://", "http://"):
        if domain.startswith(scheme):
            domain = domain[len(scheme):]
    domain = domain.split("/", 1)[0].strip()
    if domain and "." not in domain:
        domain = f"{domain}{MYSHOPIFY_SUFFIX}"
    return domain


class ShopifyClient:
    """Client for interacting with Shopify's REST Admin API."""

    def __init__(self,
                 config: Optional[ShopifyConfig] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize the Shopify client."""
        self.config = config or ShopifyConfig(
            shop_domain=settings.SHOPIFY_SHOP_DOMAIN,
            access_token=settings.SHOPIFY_ACCESS_TOKEN,
            api_version=settings.SHOPIFY_API_VERSION,
            app_name=settings.SHOPIFY_APP_NAME or None,
            timeout=settings.SHOPIFY_TIMEOUT,
        )

        # Validate configuration
        self.shop_domain = normalize_shop_domain(self.config.shop_domain)
        if not self.shop_domain:
            raise ShopifyError("Shop domain is required")
        if not self.config.access_token:
            raise ShopifyError("Access token is required")

        # Base URL and path prefix
        self.base_url = f"https://{self.shop_domain}"
        if self.config.api_version:
            self.path_prefix = f"admin/api/{self.config.api_version}"
        else:
            self.path_prefix = "admin"

        user_agent = "shopify-admin-client/0.1.0"
        if self.config.app_name:
            user_agent = f"{self.config.app_name} {user_agent}"

        # HTTP client configuration
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "X-Shopify-Access-Token": self.config.access_token,
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": user_agent,
            },
            timeout=self.config.timeout,
            transport=transport,
        )

        # Informational only, updated from response headers
        self.rate_limits = RateLimitInfo()
        self.response_api_version: Optional[str] = None

        logger.info(f"Initialized Shopify client for domain: {self.shop_domain}")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    def resolve_path(self, path: str) -> str:
        """Place a resource path under the API prefix unless it already has one."""
        path = path.lstrip("/")
        if path.startswith("admin/"):
            return path
        return f"{self.path_prefix}/{path}"

    def resolve_url(self, path: str) -> str:
        """Absolute URL for a resource path."""
        return f"{self.base_url}/{self.resolve_path(path)}"

    def _update_rate_limit(self, headers: httpx.Headers):
        """Update rate limit information from response headers."""
        if API_VERSION_HEADER in headers:
            self.response_api_version = headers[API_VERSION_HEADER]

        if CALL_LIMIT_HEADER not in headers:
            return

        try:
            current, max_limit = map(int, headers[CALL_LIMIT_HEADER].split("/"))
        except ValueError as e:
            logger.warning(f"Failed to parse rate limit headers: {e}")
            return

        self.rate_limits = RateLimitInfo(request_count=current, bucket_size=max_limit)

        # Log when rate limit is getting low
        if self.rate_limits.remaining <= 5:
            logger.warning(f"Rate limit running low: {self.rate_limits.remaining} requests remaining")

    @staticmethod
    def _retry_after(response: httpx.Response) -> Optional[float]:
        value = response.headers.get("Retry-After")
        if not value:
            return None
        try:
            return float(value)
        except ValueError:
            return None

    async def request(self,
                      method: str,
                      path: str,
                      data: Optional[Dict[str, Any]] = None,
                      options: OptionsLike = None) -> httpx.Response:
        """
        Make a REST API request to Shopify and check its status.

        Args:
            method: HTTP method
            path: Resource path, relative to the API prefix
            data: JSON body
            options: Query options

        Returns:
            The successful httpx response

        Raises:
            ShopifyError: On invalid options, transport failure or non-2xx status
        """
        params = build_query_params(options)
        url = self.resolve_url(path)

        try:
            logger.debug(f"Making {method} request to {url}")
            response = await self.client.request(method, url, json=data, params=params or None)
        except httpx.TimeoutException as e:
            logger.error(f"Timeout during REST request: {e}")
            raise ShopifyTimeoutError(f"Request timeout: {str(e)}", timeout=self.config.timeout) from e
        except httpx.ConnectError as e:
            logger.error(f"Connection error during REST request: {e}")
            raise ShopifyConnectionError(f"Connection failed: {str(e)}") from e
        except httpx.RequestError as e:
            logger.error(f"Network error during REST request: {e}")
            raise ShopifyError(f"Network error: {str(e)}") from e

        self._update_rate_limit(response.headers)

        if response.is_success:
            return response

        error_text = response.text
        logger.error(f"REST request failed: {response.status_code} - {error_text}")

        # Try to parse JSON for better error handling
        try:
            error_data = response.json()
        except ValueError:
            error_data = {}
        if not isinstance(error_data, dict):
            error_data = {"errors": error_data}

        raise shopify_error_from_response(
            response.status_code,
            error_data,
            reason=response.reason_phrase,
            retry_after=self._retry_after(response),
        )

    @staticmethod
    def decode(response: httpx.Response) -> Dict[str, Any]:
        """Decode a successful response body into a JSON object."""
        if response.status_code == 204 or not response.content.strip():
            return {}
        try:
            data = response.json()
        except ValueError as e:
            raise ShopifyResponseDecodingError(
                f"Invalid JSON in response: {e}",
                body=response.text,
                status_code=response.status_code,
            ) from e
        if not isinstance(data, dict):
            raise ShopifyResponseDecodingError(
                "Expected a JSON object in response",
                body=response.text,
                status_code=response.status_code,
            )
        return data

    async def get(self, path: str, options: OptionsLike = None) -> Dict[str, Any]:
        """GET request."""
        response = await self.request("GET", path, options=options)
        return self.decode(response)

    async def post(self, path: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """POST request."""
        response = await self.request("POST", path, data=data)
        return self.decode(response)

    async def put(self, path: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """PUT request."""
        response = await self.request("PUT", path, data=data)
        return self.decode(response)

    async def delete(self, path: str, options: OptionsLike = None) -> None:
        """DELETE request."""
        await self.request("DELETE", path, options=options)

    async def count(self, path: str, options: OptionsLike = None) -> int:
        """Read the `count` member of a `count.json` endpoint."""
        response = await self.request("GET", path, options=options)
        data = self.decode(response)
        count = data.get("count")
        if not isinstance(count, int) or isinstance(count, bool):
            raise ShopifyResponseDecodingError(
                f"Missing count in response from {path}",
                body=str(data),
                status_code=response.status_code,
            )
        return count

    async def list_with_pagination(self,
                                   path: str,
                                   options: OptionsLike = None) -> Tuple[Dict[str, Any], Optional[Pagination]]:
        """GET a list endpoint, returning the body and the pagination from its Link header."""
        response = await self.request("GET", path, options=options)
        data = self.decode(response)
        pagination = parse_link_header(response.headers.get("Link"))
        return data, pagination
