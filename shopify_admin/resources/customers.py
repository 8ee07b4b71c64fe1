"""
Customers.
"""

from typing import List, Optional, Tuple

from loguru import logger

from ..models import Customer
from ..options import OptionsLike
from ..pagination import Pagination
from .base import MetafieldsMixin, ResourceService, decode_many, decode_one, require_id


class Customers(MetafieldsMixin, ResourceService):
    """CRUD and search operations on customers, with cursor pagination."""

    resource_path = "customers"

    async def list(self, options: OptionsLike = None) -> List[Customer]:
        """List customers (one page)."""
        customers, _ = await self.list_with_pagination(options)
        return customers

    async def list_with_pagination(self, options: OptionsLike = None) -> Tuple[List[Customer], Optional[Pagination]]:
        """List one page of customers together with the adjacent page options."""
        data, pagination = await self.client.list_with_pagination(self._path(), options)
        return decode_many(data, "customers", Customer), pagination

    async def list_all(self, options: OptionsLike = None) -> List[Customer]:
        """List every customer by following the next-page cursors."""
        customers: List[Customer] = []
        while True:
            page, pagination = await self.list_with_pagination(options)
            customers.extend(page)
            if pagination is None or pagination.next_page_options is None:
                break
            options = pagination.next_page_options

        logger.debug(f"Fetched {len(customers)} customers")
        return customers

    async def count(self, options: OptionsLike = None) -> int:
        """Count customers."""
        return await self.client.count(self._path("count"), options)

    async def get(self, customer_id: int, options: OptionsLike = None) -> Customer:
        """Get a customer by ID."""
        data = await self.client.get(self._path(customer_id), options)
        return decode_one(data, "customer", Customer)

    async def search(self, options: OptionsLike = None) -> List[Customer]:
        """Search customers; pass the search string as the `query` option."""
        data = await self.client.get(self._path("search"), options)
        return decode_many(data, "customers", Customer)

    async def create(self, customer: Customer) -> Customer:
        """Create a customer."""
        data = await self.client.post(self._path(), {"customer": customer.to_payload()})
        return decode_one(data, "customer", Customer)

    async def update(self, customer: Customer) -> Customer:
        """Update an existing customer."""
        customer_id = require_id(customer, "Customer")
        data = await self.client.put(self._path(customer_id), {"customer": customer.to_payload()})
        return decode_one(data, "customer", Customer)

    async def delete(self, customer_id: int) -> None:
        """Delete a customer."""
        logger.info(f"Deleting customer {customer_id}")
        await self.client.delete(self._path(customer_id))
