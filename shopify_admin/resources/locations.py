"""
Store locations.
"""

from typing import List

from ..models import Location
from ..options import OptionsLike
from .base import MetafieldsMixin, ResourceService, decode_many, decode_one


class Locations(MetafieldsMixin, ResourceService):
    """Read-only access to the shop's locations and their metafields."""

    resource_path = "locations"

    async def list(self, options: OptionsLike = None) -> List[Location]:
        """List all locations."""
        data = await self.client.get(self._path(), options)
        return decode_many(data, "locations", Location)

    async def get(self, location_id: int, options: OptionsLike = None) -> Location:
        """Get a location by ID."""
        data = await self.client.get(self._path(location_id), options)
        return decode_one(data, "location", Location)

    async def count(self, options: OptionsLike = None) -> int:
        """Count locations."""
        return await self.client.count(self._path("count"), options)
