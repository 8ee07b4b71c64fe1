"""
Cursor pagination through the `Link` response header.

Shopify returns `<url>; rel="next"` and `<url>; rel="previous"` entries
whose URLs carry an opaque `page_info` cursor.
"""

import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse, parse_qs

from .exceptions import ShopifyPaginationError
from .options import ListOptions

LINK_PATTERN = re.compile(r'^<(.*)>;\s*rel="(previous|next)"$')
LINK_SEPARATOR = re.compile(r",\s*(?=<)")


@dataclass
class Pagination:
    """Options for fetching the pages adjacent to a response."""
    next_page_options: Optional[ListOptions] = None
    previous_page_options: Optional[ListOptions] = None

    @property
    def has_next(self) -> bool:
        return self.next_page_options is not None

    @property
    def has_previous(self) -> bool:
        return self.previous_page_options is not None


def _options_from_url(url: str) -> ListOptions:
    query = parse_qs(urlparse(url).query)

    page_info = query.get("page_info")
    if not page_info or not page_info[0]:
        raise ShopifyPaginationError(f"No page_info in pagination link: {url}")

    limit = None
    if query.get("limit"):
        try:
            limit = int(query["limit"][0])
        except ValueError:
            raise ShopifyPaginationError(f"Invalid limit in pagination link: {url}")

    return ListOptions(page_info=page_info[0], limit=limit)


def parse_link_header(link_header: Optional[str]) -> Optional[Pagination]:
    """
    Parse a `Link` header into pagination options.

    Args:
        link_header: Raw header value, may be empty or None

    Returns:
        Pagination, or None when the header is absent

    Raises:
        ShopifyPaginationError: If an entry is malformed
    """
    if not link_header:
        return None

    pagination = Pagination()
    for part in LINK_SEPARATOR.split(link_header.strip()):
        match = LINK_PATTERN.match(part.strip())
        if not match:
            raise ShopifyPaginationError(f"Could not extract pagination link header: {part.strip()}")

        url, rel = match.groups()
        options = _options_from_url(url)
        if rel == "next":
            pagination.next_page_options = options
        else:
            pagination.previous_page_options = options

    return pagination
