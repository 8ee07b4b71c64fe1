"""
Access scopes granted to the app installation.
"""

from typing import List

from ..models import AccessScope
from ..options import OptionsLike
from .base import ResourceService, decode_many


class AccessScopes(ResourceService):
    """Read the OAuth access scopes of the current access token."""

    # Lives outside the versioned API prefix
    resource_path = "admin/oauth/access_scopes"

    async def list(self, options: OptionsLike = None) -> List[AccessScope]:
        """List the access scopes granted to the app."""
        data = await self.client.get(f"{self.resource_path}.json", options)
        return decode_many(data, "access_scopes", AccessScope)
