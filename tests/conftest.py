"""
Pytest configuration and shared fixtures for the Shopify admin client tests.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import httpx
import pytest

from shopify_admin import ShopifyAdmin, ShopifyConfig


FIXTURES_DIR = Path(__file__).parent / "fixtures"

SHOP_URL = "https://fooshop.myshopify.com"
API_VERSION = "2024-01"
PATH_PREFIX = f"admin/api/{API_VERSION}"


class MockShopify:
    """
    Registry of canned responses served through httpx.MockTransport.

    A responder registered with `params` only answers requests whose query
    matches exactly; one registered without `params` answers any query not
    claimed by a more specific responder.
    """

    def __init__(self):
        self.responders: List[Dict[str, Any]] = []
        self.requests: List[httpx.Request] = []

    def register(self,
                 method: str,
                 url: str,
                 status_code: int = 200,
                 body: Union[str, bytes, Dict[str, Any], None] = None,
                 headers: Optional[Dict[str, str]] = None,
                 params: Optional[Dict[str, str]] = None):
        """Register a response for METHOD url (absolute, without query)."""
        if isinstance(body, dict):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.responders.append({
            "method": method.upper(),
            "url": url,
            "params": params,
            "status_code": status_code,
            "body": body or b"",
            "headers": headers or {},
        })

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        query = dict(request.url.params)

        candidates = [
            r for r in self.responders
            if r["method"] == request.method and r["url"] == url
        ]
        exact = [r for r in candidates if r["params"] is not None and r["params"] == query]
        fallback = [r for r in candidates if r["params"] is None]
        matches = exact or fallback
        if not matches:
            raise AssertionError(f"No responder registered for {request.method} {request.url}")

        responder = matches[-1]
        return httpx.Response(
            responder["status_code"],
            content=responder["body"],
            headers=responder["headers"],
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Dict[str, Any]:
        """Decoded JSON body of the last request sent."""
        return json.loads(self.last_request.content)


@pytest.fixture
def load_fixture() -> Callable[[str], bytes]:
    """Load a JSON fixture file as bytes."""
    def _load(name: str) -> bytes:
        return (FIXTURES_DIR / name).read_bytes()
    return _load


@pytest.fixture
def api_url() -> Callable[[str], str]:
    """Build an absolute URL under the versioned API prefix."""
    def _url(path: str) -> str:
        return f"{SHOP_URL}/{PATH_PREFIX}/{path}"
    return _url


@pytest.fixture
def mock_shopify() -> MockShopify:
    return MockShopify()


@pytest.fixture
def shopify_config() -> ShopifyConfig:
    return ShopifyConfig(
        shop_domain="fooshop",
        access_token="abcd",
        api_version=API_VERSION,
        app_name="fooapp",
    )


@pytest.fixture
def shopify(shopify_config, mock_shopify) -> ShopifyAdmin:
    """ShopifyAdmin whose requests are served by mock_shopify."""
    return ShopifyAdmin(shopify_config, transport=httpx.MockTransport(mock_shopify.handler))
