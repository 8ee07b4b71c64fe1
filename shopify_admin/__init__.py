"""
Async client for the Shopify REST Admin API.
"""

from .admin import ShopifyAdmin
from .client import ShopifyClient, RateLimitInfo
from .models import (
    AccessScope,
    Customer,
    CustomerAddress,
    Location,
    Metafield,
    MetafieldType,
    Product,
    ProductImage,
    ProductOption,
    ProductVariant,
    Shop,
    ShopifyConfig,
    Webhook,
)
from .options import (
    CountOptions,
    CustomerSearchOptions,
    ListOptions,
    ProductListOptions,
    WebhookOptions,
)
from .pagination import Pagination
from .exceptions import (
    ShopifyError,
    ShopifyAuthenticationError,
    ShopifyConnectionError,
    ShopifyInvalidOptionsError,
    ShopifyNotFoundError,
    ShopifyPaginationError,
    ShopifyPermissionError,
    ShopifyRateLimitError,
    ShopifyResponseDecodingError,
    ShopifyServerError,
    ShopifyTimeoutError,
    ShopifyValidationError,
)

__all__ = [
    "ShopifyAdmin",
    "ShopifyClient",
    "RateLimitInfo",
    "AccessScope",
    "Customer",
    "CustomerAddress",
    "Location",
    "Metafield",
    "MetafieldType",
    "Product",
    "ProductImage",
    "ProductOption",
    "ProductVariant",
    "Shop",
    "ShopifyConfig",
    "Webhook",
    "CountOptions",
    "CustomerSearchOptions",
    "ListOptions",
    "ProductListOptions",
    "WebhookOptions",
    "Pagination",
    "ShopifyError",
    "ShopifyAuthenticationError",
    "ShopifyConnectionError",
    "ShopifyInvalidOptionsError",
    "ShopifyNotFoundError",
    "ShopifyPaginationError",
    "ShopifyPermissionError",
    "ShopifyRateLimitError",
    "ShopifyResponseDecodingError",
    "ShopifyServerError",
    "ShopifyTimeoutError",
    "ShopifyValidationError",
]
