"""
Shop-level metafields.

Metafields owned by other resources are reached through the owning
resource service (see `MetafieldsMixin`).
"""

from typing import List

from loguru import logger

from ..models import Metafield
from ..options import OptionsLike
from .base import ResourceService, decode_many, decode_one, require_id


class Metafields(ResourceService):
    """CRUD operations on metafields attached to the shop itself."""

    resource_path = "metafields"

    async def list(self, options: OptionsLike = None) -> List[Metafield]:
        """List shop metafields."""
        data = await self.client.get(self._path(), options)
        return decode_many(data, "metafields", Metafield)

    async def count(self, options: OptionsLike = None) -> int:
        """Count shop metafields."""
        return await self.client.count(self._path("count"), options)

    async def get(self, metafield_id: int, options: OptionsLike = None) -> Metafield:
        """Get a shop metafield by ID."""
        data = await self.client.get(self._path(metafield_id), options)
        return decode_one(data, "metafield", Metafield)

    async def create(self, metafield: Metafield) -> Metafield:
        """Create a shop metafield."""
        logger.info(f"Creating shop metafield {metafield.namespace}.{metafield.key}")
        data = await self.client.post(self._path(), {"metafield": metafield.to_payload()})
        return decode_one(data, "metafield", Metafield)

    async def update(self, metafield: Metafield) -> Metafield:
        """Update a shop metafield."""
        metafield_id = require_id(metafield, "Metafield")
        data = await self.client.put(self._path(metafield_id), {"metafield": metafield.to_payload()})
        return decode_one(data, "metafield", Metafield)

    async def delete(self, metafield_id: int) -> None:
        """Delete a shop metafield."""
        logger.info(f"Deleting shop metafield {metafield_id}")
        await self.client.delete(self._path(metafield_id))
