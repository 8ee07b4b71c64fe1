"""
Entry point bundling one client with every resource service.
"""

from typing import Optional

import httpx

from .client import ShopifyClient
from .models import ShopifyConfig
from .resources import (
    AccessScopes,
    Customers,
    Locations,
    Metafields,
    Products,
    ShopResource,
    Webhooks,
)


class ShopifyAdmin:
    """
    Access to the Shopify REST Admin API, one attribute per resource.

    Usage:
        async with ShopifyAdmin(config) as shopify:
            locations = await shopify.locations.list()
    """

    def __init__(self,
                 config: Optional[ShopifyConfig] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize the client and bind the resource services to it."""
        self.client = ShopifyClient(config, transport=transport)

        self.access_scopes = AccessScopes(self.client)
        self.customers = Customers(self.client)
        self.locations = Locations(self.client)
        self.metafields = Metafields(self.client)
        self.products = Products(self.client)
        self.shop = ShopResource(self.client)
        self.webhooks = Webhooks(self.client)

    async def __aenter__(self):
        """Async context manager entry."""
        await self.client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.client.__aexit__(exc_type, exc_val, exc_tb)

    async def close(self):
        """Close the underlying client."""
        await self.client.close()
