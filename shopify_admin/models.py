"""
Shopify data models.

Every field is optional: Shopify omits fields depending on API version,
access scopes and the `fields` query option, and payloads built for
create/update calls carry only what the caller sets.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional, Dict, Any

from pydantic import BaseModel, field_validator


class ShopifyConfig(BaseModel):
    """Shopify configuration settings."""
    shop_domain: str
    access_token: str
    api_version: str = "2024-01"
    app_name: Optional[str] = None
    timeout: float = 30.0


class ShopifyModel(BaseModel):
    """Base class for records mirroring Shopify REST JSON objects."""

    model_config = {"extra": "ignore"}

    def to_payload(self) -> Dict[str, Any]:
        """Serialize the record for a create/update request body."""
        return self.model_dump(mode="json", exclude_none=True)


class AccessScope(ShopifyModel):
    """OAuth access scope granted to the app."""
    handle: Optional[str] = None


class MetafieldType(str, Enum):
    """Metafield content types."""
    BOOLEAN = "boolean"
    COLOR = "color"
    DATE = "date"
    DATE_TIME = "date_time"
    DIMENSION = "dimension"
    JSON = "json"
    MONEY = "money"
    MULTI_LINE_TEXT_FIELD = "multi_line_text_field"
    NUMBER_DECIMAL = "number_decimal"
    NUMBER_INTEGER = "number_integer"
    RATING = "rating"
    RICH_TEXT_FIELD = "rich_text_field"
    SINGLE_LINE_TEXT_FIELD = "single_line_text_field"
    URL = "url"
    VOLUME = "volume"
    WEIGHT = "weight"


class Metafield(ShopifyModel):
    """Generic key/value extension attached to a Shopify resource."""
    id: Optional[int] = None
    namespace: Optional[str] = None
    key: Optional[str] = None
    value: Optional[Any] = None
    type: Optional[str] = None
    description: Optional[str] = None
    owner_id: Optional[int] = None
    owner_resource: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None

    @field_validator('type', mode='before')
    @classmethod
    def parse_type(cls, v):
        if isinstance(v, Enum):
            return v.value
        return v


class Location(ShopifyModel):
    """Store location."""
    id: Optional[int] = None
    name: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None
    province: Optional[str] = None
    province_code: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    legacy: Optional[bool] = None
    active: Optional[bool] = None
    localized_country_name: Optional[str] = None
    localized_province_name: Optional[str] = None
    admin_graphql_api_id: Optional[str] = None


class ProductImage(ShopifyModel):
    """Product image."""
    id: Optional[int] = None
    product_id: Optional[int] = None
    position: Optional[int] = None
    src: Optional[str] = None
    alt: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    variant_ids: Optional[List[int]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None


class ProductOption(ShopifyModel):
    """Product option (like Size, Color, etc.)."""
    id: Optional[int] = None
    product_id: Optional[int] = None
    name: Optional[str] = None
    position: Optional[int] = None
    values: Optional[List[str]] = None


class ProductVariant(ShopifyModel):
    """Product variant information."""
    id: Optional[int] = None
    product_id: Optional[int] = None
    title: Optional[str] = None
    price: Optional[str] = None  # Decimal amounts are strings in the REST API
    compare_at_price: Optional[str] = None
    sku: Optional[str] = None
    barcode: Optional[str] = None
    position: Optional[int] = None
    grams: Optional[int] = None
    weight: Optional[float] = None
    weight_unit: Optional[str] = None
    inventory_item_id: Optional[int] = None
    inventory_quantity: Optional[int] = None
    inventory_management: Optional[str] = None
    inventory_policy: Optional[str] = None
    fulfillment_service: Optional[str] = None
    requires_shipping: Optional[bool] = None
    taxable: Optional[bool] = None
    option1: Optional[str] = None
    option2: Optional[str] = None
    option3: Optional[str] = None
    image_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None


class Product(ShopifyModel):
    """Product information."""
    id: Optional[int] = None
    title: Optional[str] = None
    handle: Optional[str] = None
    body_html: Optional[str] = None
    vendor: Optional[str] = None
    product_type: Optional[str] = None
    status: Optional[str] = None  # active, archived, draft
    tags: Optional[str] = None  # comma-separated in the REST API
    template_suffix: Optional[str] = None
    published_scope: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    images: Optional[List[ProductImage]] = None
    image: Optional[ProductImage] = None
    variants: Optional[List[ProductVariant]] = None
    options: Optional[List[ProductOption]] = None
    metafields: Optional[List[Metafield]] = None
    admin_graphql_api_id: Optional[str] = None

    @property
    def tag_list(self) -> List[str]:
        """Get tags as a list."""
        if not self.tags:
            return []
        return [tag.strip() for tag in self.tags.split(',') if tag.strip()]


class CustomerAddress(ShopifyModel):
    """Customer address."""
    id: Optional[int] = None
    customer_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    country: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None
    name: Optional[str] = None
    province_code: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None
    default: Optional[bool] = None


class Customer(ShopifyModel):
    """Customer information."""
    id: Optional[int] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    state: Optional[str] = None
    note: Optional[str] = None
    tags: Optional[str] = None
    currency: Optional[str] = None
    verified_email: Optional[bool] = None
    tax_exempt: Optional[bool] = None
    orders_count: Optional[int] = None
    total_spent: Optional[str] = None
    last_order_id: Optional[int] = None
    last_order_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    addresses: Optional[List[CustomerAddress]] = None
    default_address: Optional[CustomerAddress] = None
    metafields: Optional[List[Metafield]] = None
    admin_graphql_api_id: Optional[str] = None

    @property
    def full_name(self) -> str:
        """Get customer's full name."""
        parts = [part for part in (self.first_name, self.last_name) if part]
        return " ".join(parts)


class Webhook(ShopifyModel):
    """Webhook subscription."""
    id: Optional[int] = None
    address: Optional[str] = None
    topic: Optional[str] = None
    format: Optional[str] = None
    fields: Optional[List[str]] = None
    metafield_namespaces: Optional[List[str]] = None
    private_metafield_namespaces: Optional[List[str]] = None
    api_version: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Shop(ShopifyModel):
    """Shop information."""
    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    domain: Optional[str] = None
    myshopify_domain: Optional[str] = None
    shop_owner: Optional[str] = None
    phone: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    province_code: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None
    zip: Optional[str] = None
    currency: Optional[str] = None
    money_format: Optional[str] = None
    timezone: Optional[str] = None
    iana_timezone: Optional[str] = None
    plan_name: Optional[str] = None
    plan_display_name: Optional[str] = None
    primary_locale: Optional[str] = None
    weight_unit: Optional[str] = None
    taxes_included: Optional[bool] = None
    password_enabled: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
