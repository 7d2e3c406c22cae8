"""
Catalog package for the storefront.

The router exposes the product list/append endpoints plus a paginated
browse endpoint. ``view`` holds the filter/sort/paginate pipeline used
both by that endpoint and by the client-side ``CatalogView``; ``draft``
covers the composition of a new product, image included.
"""

from .router import router as catalog_router  # noqa: F401
