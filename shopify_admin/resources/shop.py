"""
Shop information.
"""

from ..models import Shop
from ..options import OptionsLike
from .base import ResourceService, decode_one


class ShopResource(ResourceService):
    resource_path = "shop"

    async def get(self, options: OptionsLike = None) -> Shop:
        """Get general shop information."""
        data = await self.client.get(self._path(), options)
        return decode_one(data, "shop", Shop)
