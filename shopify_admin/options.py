"""
Query options accepted by list and count operations, and their encoding
into query-string parameters.
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel

from .exceptions import ShopifyInvalidOptionsError


class QueryOptions(BaseModel):
    """Base class for option records encoded into the query string."""

    def to_params(self) -> Dict[str, str]:
        """Encode the set options as query parameters."""
        return encode_params(self.model_dump(exclude_none=True))


class CountOptions(QueryOptions):
    """Options for `count.json` endpoints."""
    created_at_min: Optional[datetime] = None
    created_at_max: Optional[datetime] = None
    updated_at_min: Optional[datetime] = None
    updated_at_max: Optional[datetime] = None


class ListOptions(CountOptions):
    """Options for list endpoints."""
    page_info: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None
    since_id: Optional[int] = None
    order: Optional[str] = None
    fields: Optional[Union[str, List[str]]] = None
    ids: Optional[List[int]] = None


class ProductListOptions(ListOptions):
    """Options for listing and counting products."""
    collection_id: Optional[int] = None
    product_type: Optional[str] = None
    vendor: Optional[str] = None
    handle: Optional[str] = None
    status: Optional[str] = None
    title: Optional[str] = None
    published_status: Optional[str] = None
    published_at_min: Optional[datetime] = None
    published_at_max: Optional[datetime] = None


class CustomerSearchOptions(QueryOptions):
    """Options for the customer search endpoint."""
    query: Optional[str] = None
    order: Optional[str] = None
    limit: Optional[int] = None
    page_info: Optional[str] = None
    fields: Optional[Union[str, List[str]]] = None


class WebhookOptions(ListOptions):
    """Options for listing and counting webhooks."""
    address: Optional[str] = None
    topic: Optional[str] = None


OptionsLike = Union[QueryOptions, Mapping[str, Any], None]


def format_datetime(value: datetime) -> str:
    """Render a datetime as RFC 3339, using `Z` for UTC. Naive values are taken as UTC."""
    if value.tzinfo is None or value.utcoffset() == timedelta(0):
        return value.replace(tzinfo=None).isoformat() + "Z"
    return value.isoformat()


def encode_value(value: Any) -> str:
    """Encode a single option value as a query-string value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, Enum):
        return encode_value(value.value)
    if isinstance(value, (list, tuple, set)):
        return ",".join(encode_value(item) for item in value)
    return str(value)


def encode_params(values: Mapping[str, Any]) -> Dict[str, str]:
    """Encode a mapping of option values, dropping unset entries."""
    return {
        str(key): encode_value(value)
        for key, value in values.items()
        if value is not None
    }


def build_query_params(options: OptionsLike) -> Dict[str, str]:
    """
    Build query parameters from an options value.

    Args:
        options: None, a QueryOptions record or a plain mapping

    Returns:
        Query parameters as strings

    Raises:
        ShopifyInvalidOptionsError: If options is of any other type
    """
    if options is None:
        return {}
    if isinstance(options, QueryOptions):
        return options.to_params()
    if isinstance(options, Mapping):
        return encode_params(options)
    raise ShopifyInvalidOptionsError(
        f"Query options must be a QueryOptions record or a mapping, got {type(options).__name__}"
    )
