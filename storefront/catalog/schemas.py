"""
Pydantic schema definitions for the catalog module.

``PaginatedProducts`` bundles one page of products with the pagination
metadata a client needs to draw its page selector.
"""

from typing import List

from typing_extensions import Literal

from pydantic import BaseModel

from ..models import Product


SortField = Literal["name", "price"]
SortOrder = Literal["asc", "desc"]


class PaginatedProducts(BaseModel):
    """A wrapper for paginated results returned from ``/products``."""

    page: int
    page_size: int
    total: int
    total_pages: int
    items: List[Product]
