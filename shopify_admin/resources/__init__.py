"""
Resource services, one per REST endpoint family.
"""

from .access_scopes import AccessScopes
from .customers import Customers
from .locations import Locations
from .metafields import Metafields
from .products import Products
from .shop import ShopResource
from .webhooks import Webhooks

__all__ = [
    "AccessScopes",
    "Customers",
    "Locations",
    "Metafields",
    "Products",
    "ShopResource",
    "Webhooks",
]
