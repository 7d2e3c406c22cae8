"""
HTTP client for the product endpoints.

``CatalogView`` talks to the store through this client: one GET to
fetch the whole collection, one POST per submitted draft. Only the
standard library is used for HTTP. Any network, HTTP or decoding
failure is raised as ``CatalogClientError``; the caller decides
whether to log it or let it propagate.
"""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from typing import List, Optional

from pydantic import ValidationError

from . import config
from .models import Product


logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class CatalogClientError(Exception):
    """A request to the product API failed or returned something unusable."""


class CatalogClient:
    def __init__(self, base_url: Optional[str] = None, timeout: float = config.HTTP_TIMEOUT) -> None:
        self.base_url = (base_url or config.API_URL).rstrip("/")
        self.timeout = timeout

    def _open(self, request: urllib.request.Request) -> bytes:
        with urllib.request.urlopen(request, timeout=self.timeout) as response:
            return response.read()

    def _request(self, method: str, path: str, body: Optional[dict] = None):
        url = f"{self.base_url}{path}"
        headers = {"Accept": "application/json"}
        data = None
        if body is not None:
            headers["Content-Type"] = "application/json"
            data = json.dumps(body).encode("utf-8")
        request = urllib.request.Request(url, data=data, headers=headers, method=method)
        try:
            payload = self._open(request)
        except (urllib.error.URLError, OSError) as exc:
            raise CatalogClientError(f"{method} {url} failed: {exc}") from exc
        try:
            return json.loads(payload)
        except ValueError as exc:
            raise CatalogClientError(f"{method} {url} returned invalid JSON") from exc

    def list_products(self) -> List[Product]:
        raw = self._request("GET", "/api/products")
        if not isinstance(raw, list):
            raise CatalogClientError("product list is not a JSON array")
        try:
            return [Product.model_validate(entry) for entry in raw]
        except ValidationError as exc:
            raise CatalogClientError(f"malformed product in list: {exc}") from exc

    def create_product(self, payload: dict) -> Product:
        raw = self._request("POST", "/api/products", payload)
        try:
            product = Product.model_validate(raw)
        except ValidationError as exc:
            raise CatalogClientError(f"malformed product in response: {exc}") from exc
        logger.info("Created product %s (%s)", product.id, product.name)
        return product
