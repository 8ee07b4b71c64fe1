"""
Products.
"""

from typing import List, Optional, Tuple

from loguru import logger

from ..models import Product
from ..options import OptionsLike
from ..pagination import Pagination
from .base import MetafieldsMixin, ResourceService, decode_many, decode_one, require_id


class Products(MetafieldsMixin, ResourceService):
    """CRUD operations on products, with cursor pagination."""

    resource_path = "products"

    async def list(self, options: OptionsLike = None) -> List[Product]:
        """List products (one page)."""
        products, _ = await self.list_with_pagination(options)
        return products

    async def list_with_pagination(self, options: OptionsLike = None) -> Tuple[List[Product], Optional[Pagination]]:
        """
        List one page of products.

        Args:
            options: ProductListOptions, ListOptions or a mapping

        Returns:
            Tuple of (products, pagination); pagination is None when the
            response carried no Link header
        """
        data, pagination = await self.client.list_with_pagination(self._path(), options)
        return decode_many(data, "products", Product), pagination

    async def list_all(self, options: OptionsLike = None) -> List[Product]:
        """List every product by following the next-page cursors."""
        products: List[Product] = []
        while True:
            page, pagination = await self.list_with_pagination(options)
            products.extend(page)
            if pagination is None or pagination.next_page_options is None:
                break
            options = pagination.next_page_options

        logger.debug(f"Fetched {len(products)} products")
        return products

    async def count(self, options: OptionsLike = None) -> int:
        """Count products."""
        return await self.client.count(self._path("count"), options)

    async def get(self, product_id: int, options: OptionsLike = None) -> Product:
        """Get a product by ID."""
        data = await self.client.get(self._path(product_id), options)
        return decode_one(data, "product", Product)

    async def create(self, product: Product) -> Product:
        """Create a product."""
        logger.info(f"Creating product: {product.title}")
        data = await self.client.post(self._path(), {"product": product.to_payload()})
        return decode_one(data, "product", Product)

    async def update(self, product: Product) -> Product:
        """Update an existing product."""
        product_id = require_id(product, "Product")
        data = await self.client.put(self._path(product_id), {"product": product.to_payload()})
        return decode_one(data, "product", Product)

    async def delete(self, product_id: int) -> None:
        """Delete a product."""
        logger.info(f"Deleting product {product_id}")
        await self.client.delete(self._path(product_id))
