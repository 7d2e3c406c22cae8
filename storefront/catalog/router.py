"""
Route definitions for the product API.

Endpoints:
- GET  /api/products            : full collection, insertion order
- POST /api/products            : append one product (201)
- GET  /api/catalog/products    : filtered, sorted, paginated view
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from .. import config
from ..models import CreateProductRequest, Product
from ..storage import CatalogStore, StoreError
from .schemas import PaginatedProducts, SortField, SortOrder
from .view import filter_products, page_count, paginate, parse_price_bound, sort_products


logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

router = APIRouter(prefix="/api", tags=["products"])


def get_store(request: Request) -> CatalogStore:
    return request.app.state.store


def _load_all(store: CatalogStore) -> List[Product]:
    try:
        return store.list_products()
    except StoreError as exc:
        logger.error("Product store unavailable: %s", exc)
        raise HTTPException(status_code=500, detail="Product store unavailable")


@router.get("/products", response_model=List[Product])
def list_products(store: CatalogStore = Depends(get_store)) -> List[Product]:
    return _load_all(store)


@router.post("/products", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    req: CreateProductRequest,
    store: CatalogStore = Depends(get_store),
) -> Product:
    try:
        return store.append_product(req)
    except StoreError as exc:
        logger.error("Could not append product %r: %s", req.name, exc)
        raise HTTPException(status_code=500, detail="Product store unavailable")


@router.get("/catalog/products", response_model=PaginatedProducts)
def browse_products(
    q: str = Query(default="", description="Case-insensitive name search"),
    min_price: Optional[str] = Query(default=None, description="Lower price bound (inclusive)"),
    max_price: Optional[str] = Query(default=None, description="Upper price bound (inclusive)"),
    sort: SortField = Query(default="name", description="Sort field"),
    order: SortOrder = Query(default="asc", description="Sort direction"),
    page: int = Query(default=1, ge=1, description="Current page (1-indexed)"),
    page_size: int = Query(default=config.PAGE_SIZE, ge=1, le=200, description="Page size"),
    store: CatalogStore = Depends(get_store),
) -> PaginatedProducts:
    """
    Server-side rendition of the catalogue pipeline.

    Bounds are taken as text so that an empty or non-numeric value
    means "no bound", the same as in the client view. The page is not
    clamped: asking past the end returns an empty ``items`` list.
    """
    products = filter_products(
        _load_all(store),
        q,
        parse_price_bound(min_price),
        parse_price_bound(max_price),
    )
    products = sort_products(products, sort, order)

    return PaginatedProducts(
        page=page,
        page_size=page_size,
        total=len(products),
        total_pages=page_count(len(products), page_size),
        items=paginate(products, page, page_size),
    )
