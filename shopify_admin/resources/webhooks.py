"""
Webhook subscriptions.
"""

from typing import List

from loguru import logger

from ..models import Webhook
from ..options import OptionsLike
from .base import ResourceService, decode_many, decode_one, require_id


class Webhooks(ResourceService):
    resource_path = "webhooks"

    async def list(self, options: OptionsLike = None) -> List[Webhook]:
        """List webhook subscriptions."""
        data = await self.client.get(self._path(), options)
        return decode_many(data, "webhooks", Webhook)

    async def count(self, options: OptionsLike = None) -> int:
        """Count webhook subscriptions."""
        return await self.client.count(self._path("count"), options)

    async def get(self, webhook_id: int, options: OptionsLike = None) -> Webhook:
        """Get a webhook subscription by ID."""
        data = await self.client.get(self._path(webhook_id), options)
        return decode_one(data, "webhook", Webhook)

    async def create(self, webhook: Webhook) -> Webhook:
        """Subscribe to a webhook topic."""
        logger.info(f"Creating webhook for topic {webhook.topic} -> {webhook.address}")
        data = await self.client.post(self._path(), {"webhook": webhook.to_payload()})
        return decode_one(data, "webhook", Webhook)

    async def update(self, webhook: Webhook) -> Webhook:
        """Update a webhook subscription."""
        webhook_id = require_id(webhook, "Webhook")
        data = await self.client.put(self._path(webhook_id), {"webhook": webhook.to_payload()})
        return decode_one(data, "webhook", Webhook)

    async def delete(self, webhook_id: int) -> None:
        """Delete a webhook subscription."""
        await self.client.delete(self._path(webhook_id))
