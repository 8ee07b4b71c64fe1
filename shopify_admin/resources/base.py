"""
Shared plumbing for resource services.
"""

from typing import Any, Dict, List, Type, TypeVar

from pydantic import ValidationError

from ..client import ShopifyClient
from ..exceptions import ShopifyError, ShopifyResponseDecodingError
from ..models import Metafield, ShopifyModel
from ..options import OptionsLike

M = TypeVar("M", bound=ShopifyModel)


def decode_one(data: Dict[str, Any], key: str, model: Type[M]) -> M:
    """Decode the single record held under `key` in a response envelope."""
    if not isinstance(data.get(key), dict):
        raise ShopifyResponseDecodingError(f"Missing '{key}' in response", body=str(data))
    try:
        return model.model_validate(data[key])
    except ValidationError as e:
        raise ShopifyResponseDecodingError(f"Invalid '{key}' in response: {e}", body=str(data)) from e


def decode_many(data: Dict[str, Any], key: str, model: Type[M]) -> List[M]:
    """Decode the list of records held under `key` in a response envelope."""
    if not isinstance(data.get(key), list):
        raise ShopifyResponseDecodingError(f"Missing '{key}' in response", body=str(data))
    try:
        return [model.model_validate(item) for item in data[key]]
    except ValidationError as e:
        raise ShopifyResponseDecodingError(f"Invalid '{key}' in response: {e}", body=str(data)) from e


def require_id(record: ShopifyModel, name: str) -> int:
    record_id = getattr(record, "id", None)
    if record_id is None:
        raise ShopifyError(f"{name} id is required for update")
    return record_id


class ResourceService:
    """Base for services bound to one endpoint family."""

    resource_path: str = ""

    def __init__(self, client: ShopifyClient):
        self.client = client

    def _path(self, *parts: Any) -> str:
        """`{resource_path}/{part}/.../{last}.json`."""
        segments = [self.resource_path] + [str(part) for part in parts]
        return "/".join(segments) + ".json"


class MetafieldsMixin:
    """Metafield sub-resource operations for a resource that owns metafields."""

    client: ShopifyClient
    resource_path: str

    def _metafield_path(self, owner_id: int, *parts: Any) -> str:
        segments = [self.resource_path, str(owner_id), "metafields"] + [str(part) for part in parts]
        return "/".join(segments) + ".json"

    async def list_metafields(self, owner_id: int, options: OptionsLike = None) -> List[Metafield]:
        """List the metafields attached to a resource."""
        data = await self.client.get(self._metafield_path(owner_id), options)
        return decode_many(data, "metafields", Metafield)

    async def count_metafields(self, owner_id: int, options: OptionsLike = None) -> int:
        """Count the metafields attached to a resource."""
        return await self.client.count(self._metafield_path(owner_id, "count"), options)

    async def get_metafield(self, owner_id: int, metafield_id: int, options: OptionsLike = None) -> Metafield:
        """Get one metafield of a resource."""
        data = await self.client.get(self._metafield_path(owner_id, metafield_id), options)
        return decode_one(data, "metafield", Metafield)

    async def create_metafield(self, owner_id: int, metafield: Metafield) -> Metafield:
        """Attach a new metafield to a resource."""
        data = await self.client.post(
            self._metafield_path(owner_id),
            {"metafield": metafield.to_payload()},
        )
        return decode_one(data, "metafield", Metafield)

    async def update_metafield(self, owner_id: int, metafield: Metafield) -> Metafield:
        """Update an existing metafield of a resource."""
        metafield_id = require_id(metafield, "Metafield")
        data = await self.client.put(
            self._metafield_path(owner_id, metafield_id),
            {"metafield": metafield.to_payload()},
        )
        return decode_one(data, "metafield", Metafield)

    async def delete_metafield(self, owner_id: int, metafield_id: int) -> None:
        """Delete a metafield of a resource."""
        await self.client.delete(self._metafield_path(owner_id, metafield_id))
