"""
Tests for the products resource.
"""

from datetime import datetime, timedelta, timezone

import pytest

from shopify_admin import (
    ListOptions,
    Metafield,
    Product,
    ProductListOptions,
    ProductVariant,
    ShopifyError,
    ShopifyNotFoundError,
    ShopifyValidationError,
)


def link(url: str, rel: str) -> str:
    return f'<{url}>; rel="{rel}"'


@pytest.mark.asyncio
async def test_list_products(shopify, mock_shopify, load_fixture, api_url):
    """Test listing one page of products."""
    mock_shopify.register("GET", api_url("products.json"), body=load_fixture("products.json"))

    products = await shopify.products.list()

    assert [p.id for p in products] == [632910392, 921728736]
    assert products[0].tag_list == ["Emotive", "Flash Memory", "MP3", "Music"]
    assert products[1].tag_list == []


@pytest.mark.asyncio
async def test_list_products_with_options(shopify, mock_shopify, load_fixture, api_url):
    """Test that product filters reach the query string."""
    mock_shopify.register("GET", api_url("products.json"), body=load_fixture("products.json"),
                          params={"vendor": "Apple", "status": "active", "ids": "632910392,921728736"})

    options = ProductListOptions(vendor="Apple", status="active", ids=[632910392, 921728736])
    products = await shopify.products.list(options)

    assert len(products) == 2


@pytest.mark.asyncio
async def test_list_products_with_pagination(shopify, mock_shopify, api_url):
    """Test that the Link header becomes next/previous page options."""
    header = ", ".join([
        link(api_url("products.json?page_info=prev123&limit=1"), "previous"),
        link(api_url("products.json?page_info=next456&limit=1"), "next"),
    ])
    mock_shopify.register("GET", api_url("products.json"), body='{"products": [{"id": 1}]}',
                          headers={"Link": header})

    products, pagination = await shopify.products.list_with_pagination(ListOptions(limit=1))

    assert products == [Product(id=1)]
    assert pagination.next_page_options == ListOptions(page_info="next456", limit=1)
    assert pagination.previous_page_options == ListOptions(page_info="prev123", limit=1)


@pytest.mark.asyncio
async def test_list_products_without_link_header(shopify, mock_shopify, api_url):
    """Test that a response without a Link header has no pagination."""
    mock_shopify.register("GET", api_url("products.json"), body='{"products": []}')

    products, pagination = await shopify.products.list_with_pagination()

    assert products == []
    assert pagination is None


@pytest.mark.asyncio
async def test_list_all_products(shopify, mock_shopify, api_url):
    """Test following next-page cursors until the last page."""
    mock_shopify.register("GET", api_url("products.json"), body='{"products": [{"id": 1}]}',
                          params={"limit": "1"},
                          headers={"Link": link(api_url("products.json?page_info=pg2&limit=1"), "next")})
    mock_shopify.register("GET", api_url("products.json"), body='{"products": [{"id": 2}]}',
                          params={"page_info": "pg2", "limit": "1"},
                          headers={"Link": ", ".join([
                              link(api_url("products.json?page_info=pg1&limit=1"), "previous"),
                              link(api_url("products.json?page_info=pg3&limit=1"), "next"),
                          ])})
    mock_shopify.register("GET", api_url("products.json"), body='{"products": [{"id": 3}]}',
                          params={"page_info": "pg3", "limit": "1"},
                          headers={"Link": link(api_url("products.json?page_info=pg2&limit=1"), "previous")})

    products = await shopify.products.list_all(ListOptions(limit=1))

    assert [p.id for p in products] == [1, 2, 3]
    assert len(mock_shopify.requests) == 3


@pytest.mark.asyncio
async def test_count_products(shopify, mock_shopify, api_url):
    """Test counting products with a filter."""
    mock_shopify.register("GET", api_url("products/count.json"), body='{"count": 12}',
                          params={"vendor": "Apple"})

    assert await shopify.products.count(ProductListOptions(vendor="Apple")) == 12


@pytest.mark.asyncio
async def test_get_product(shopify, mock_shopify, load_fixture, api_url):
    """Test decoding a full product."""
    mock_shopify.register("GET", api_url("products/632910392.json"), body=load_fixture("product.json"))

    product = await shopify.products.get(632910392)

    assert product.title == "IPod Nano - 8GB"
    assert product.published_at == datetime(2007, 12, 31, 19, 0, tzinfo=timezone(timedelta(hours=-5)))
    assert product.options[0].values == ["Pink", "Red", "Green", "Black"]
    assert product.images[0].variant_ids == []
    assert product.variants == [
        ProductVariant(
            id=808950810,
            product_id=632910392,
            title="Pink",
            price="199.00",
            sku="IPOD2008PINK",
            position=1,
            inventory_policy="continue",
            fulfillment_service="manual",
            inventory_management="shopify",
            option1="Pink",
            created_at=datetime(2023, 10, 3, 13, 23, 57, tzinfo=timezone(timedelta(hours=-4))),
            updated_at=datetime(2023, 10, 3, 13, 23, 57, tzinfo=timezone(timedelta(hours=-4))),
            taxable=True,
            barcode="1234_pink",
            grams=567,
            image_id=562641783,
            weight=1.25,
            weight_unit="lb",
            inventory_item_id=808950810,
            inventory_quantity=10,
            requires_shipping=True,
            admin_graphql_api_id="gid://shopify/ProductVariant/808950810",
        )
    ]


@pytest.mark.asyncio
async def test_get_missing_product(shopify, mock_shopify, api_url):
    """Test that a 404 surfaces as ShopifyNotFoundError."""
    mock_shopify.register("GET", api_url("products/1.json"), status_code=404, body='{"errors": "Not Found"}')

    with pytest.raises(ShopifyNotFoundError) as exc_info:
        await shopify.products.get(1)

    assert exc_info.value.status_code == 404
    assert str(exc_info.value) == "Not Found"


@pytest.mark.asyncio
async def test_create_product(shopify, mock_shopify, load_fixture, api_url):
    """Test creating a product with variants and metafields."""
    mock_shopify.register("POST", api_url("products.json"), status_code=201, body=load_fixture("product.json"))

    product = Product(
        title="IPod Nano - 8GB",
        vendor="Apple",
        variants=[ProductVariant(option1="Pink", price="199.00")],
        metafields=[Metafield(namespace="global", key="color", value="pink", type="single_line_text_field")],
    )
    returned = await shopify.products.create(product)

    assert returned.id == 632910392
    assert mock_shopify.last_json() == {
        "product": {
            "title": "IPod Nano - 8GB",
            "vendor": "Apple",
            "variants": [{"option1": "Pink", "price": "199.00"}],
            "metafields": [
                {"namespace": "global", "key": "color", "value": "pink", "type": "single_line_text_field"}
            ],
        }
    }


@pytest.mark.asyncio
async def test_create_product_validation_error(shopify, mock_shopify, api_url):
    """Test that a 422 carries the field errors."""
    mock_shopify.register("POST", api_url("products.json"), status_code=422,
                          body='{"errors": {"title": ["can\'t be blank"]}}')

    with pytest.raises(ShopifyValidationError) as exc_info:
        await shopify.products.create(Product(body_html="<p>no title</p>"))

    assert exc_info.value.validation_errors == {"title": ["can't be blank"]}
    assert exc_info.value.errors == ["title: can't be blank"]


@pytest.mark.asyncio
async def test_update_product(shopify, mock_shopify, load_fixture, api_url):
    """Test updating a product."""
    mock_shopify.register("PUT", api_url("products/632910392.json"), body=load_fixture("product.json"))

    returned = await shopify.products.update(Product(id=632910392, status="active"))

    assert returned.status == "active"
    assert mock_shopify.last_json() == {"product": {"id": 632910392, "status": "active"}}


@pytest.mark.asyncio
async def test_delete_product(shopify, mock_shopify, api_url):
    """Test deleting a product."""
    mock_shopify.register("DELETE", api_url("products/632910392.json"), body="{}")

    await shopify.products.delete(632910392)

    assert mock_shopify.last_request.method == "DELETE"


@pytest.mark.asyncio
async def test_product_metafields(shopify, mock_shopify, api_url):
    """Test the metafield sub-resource paths of products."""
    mock_shopify.register("GET", api_url("products/632910392/metafields.json"),
                          body='{"metafields": [{"id": 1}]}')
    mock_shopify.register("GET", api_url("products/632910392/metafields/count.json"), body='{"count": 1}')

    assert await shopify.products.list_metafields(632910392) == [Metafield(id=1)]
    assert await shopify.products.count_metafields(632910392) == 1


@pytest.mark.asyncio
async def test_update_product_requires_id(shopify, mock_shopify):
    """Test that updating a product without an ID sends nothing."""
    with pytest.raises(ShopifyError, match="Product id"):
        await shopify.products.update(Product(title="no id"))

    assert mock_shopify.requests == []
