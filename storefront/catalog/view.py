"""
Client-side catalogue view.

The view fetches the full product collection once and then derives
the page to display locally: filter by name and price range, sort by
a single field, and slice out one fixed-size page. The pure functions
below do the work; ``CatalogView`` only holds the state and resets the
page whenever a criterion changes.
"""

from __future__ import annotations

import logging
import math
import unicodedata
from operator import attrgetter
from typing import List, Optional, Sequence

from .. import config
from ..client import CatalogClient
from ..models import Product
from .draft import ProductDraft
from .schemas import SortField, SortOrder


logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

LOADING = "loading"
READY = "ready"


def parse_price_bound(text: Optional[str]) -> Optional[float]:
    """Turn a price bound typed by the user into a number.

    Empty, non-numeric and non-finite input all give ``None`` so the
    bound imposes no constraint.
    """
    if text is None:
        return None
    text = str(text).strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def _name_key(product: Product):
    # Accents and case only matter when the base letters are equal
    name = product.name
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    # Lower case before upper case on otherwise equal names
    return (base.casefold(), name.casefold(), name.swapcase())


def filter_products(
    products: Sequence[Product],
    name_filter: str = "",
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
) -> List[Product]:
    needle = (name_filter or "").lower()
    return [
        p for p in products
        if needle in p.name.lower()
        and (min_price is None or p.price >= min_price)
        and (max_price is None or p.price <= max_price)
    ]


def sort_products(
    products: Sequence[Product],
    field: SortField = "name",
    order: SortOrder = "asc",
) -> List[Product]:
    """Stable sort by ``name`` or ``price``.

    ``reverse=True`` keeps equal elements in their original order, so
    ties stay in filtered order for both directions.
    """
    if field == "name":
        key = _name_key
    elif field == "price":
        key = attrgetter("price")
    else:
        raise ValueError(f"unknown sort field: {field!r}")
    if order not in ("asc", "desc"):
        raise ValueError(f"unknown sort order: {order!r}")
    return sorted(products, key=key, reverse=(order == "desc"))


def paginate(products: Sequence[Product], page: int, page_size: int = config.PAGE_SIZE) -> List[Product]:
    """Return the ``page``-th slice (1-indexed). Out of range gives ``[]``."""
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(products[start:start + page_size])


def page_count(total: int, page_size: int = config.PAGE_SIZE) -> int:
    return math.ceil(total / page_size)


class CatalogView:
    """State of the catalogue screen.

    ``status`` moves from ``loading`` to ``ready`` once the initial
    fetch succeeds and never changes after that. Filters, sort and page
    are independent fields; changing a filter or the sort puts the view
    back on page 1. ``load`` and ``submit`` go through ``client``, a
    ``CatalogClient`` pointed at ``config.API_URL`` unless one is given.
    """

    def __init__(self, client: Optional[CatalogClient] = None, page_size: int = config.PAGE_SIZE) -> None:
        self.client = client if client is not None else CatalogClient()
        self.page_size = page_size
        self.status = LOADING
        self.products: List[Product] = []
        self.draft = ProductDraft()
        self._name_filter = ""
        self._min_price: Optional[float] = None
        self._max_price: Optional[float] = None
        self._sort_field: SortField = "name"
        self._sort_order: SortOrder = "asc"
        self.page = 1

    # Loading -----------------------------------------------------------

    def load(self, client: Optional[CatalogClient] = None) -> bool:
        """Fetch the collection once. Failures are logged, not raised."""
        try:
            data = (client or self.client).list_products()
        except Exception:
            logger.exception("Could not load products")
            return False
        self.products = list(data)
        self.status = READY
        return True

    # Criteria ----------------------------------------------------------

    @property
    def name_filter(self) -> str:
        return self._name_filter

    @property
    def min_price(self) -> Optional[float]:
        return self._min_price

    @property
    def max_price(self) -> Optional[float]:
        return self._max_price

    @property
    def sort_field(self) -> SortField:
        return self._sort_field

    @property
    def sort_order(self) -> SortOrder:
        return self._sort_order

    def set_name_filter(self, text: str) -> None:
        self._name_filter = text or ""
        self.page = 1

    def set_min_price(self, text: Optional[str]) -> None:
        self._min_price = parse_price_bound(text)
        self.page = 1

    def set_max_price(self, text: Optional[str]) -> None:
        self._max_price = parse_price_bound(text)
        self.page = 1

    def set_sort(self, field: Optional[SortField] = None, order: Optional[SortOrder] = None) -> None:
        if field is not None:
            if field not in ("name", "price"):
                raise ValueError(f"unknown sort field: {field!r}")
            self._sort_field = field
        if order is not None:
            if order not in ("asc", "desc"):
                raise ValueError(f"unknown sort order: {order!r}")
            self._sort_order = order
        self.page = 1

    def set_page(self, page: int) -> None:
        # Not clamped; an out-of-range page just shows nothing
        self.page = page

    # Derived -----------------------------------------------------------

    @property
    def filtered(self) -> List[Product]:
        """Filtered and sorted products, before pagination."""
        matches = filter_products(
            self.products, self._name_filter, self._min_price, self._max_price
        )
        return sort_products(matches, self._sort_field, self._sort_order)

    @property
    def visible(self) -> List[Product]:
        return paginate(self.filtered, self.page, self.page_size)

    @property
    def total_pages(self) -> int:
        return page_count(len(self.filtered), self.page_size)

    # Submission --------------------------------------------------------

    def submit(self, client: Optional[CatalogClient] = None) -> Product:
        """Send the draft to the store and add the result to the list.

        Errors from the client propagate and the draft keeps its
        values so the user can try again.
        """
        created = (client or self.client).create_product(self.draft.to_payload())
        self.products.append(created)
        self.draft.reset()
        return created
