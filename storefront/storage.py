"""
Persistence boundary for products.

Two stores share the same contract: ``list_products()`` returns the
whole collection in insertion order and ``append_product()`` stores a
new record with a fresh identifier. ``JsonFileStore`` keeps the data in
a single JSON document that is read in full and rewritten in full on
every append; ``InMemoryStore`` keeps it in a list and is what the
tests use when the file format is not under test.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
import time
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError
from typing_extensions import Protocol

from .models import CreateProductRequest, Product


logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class StoreError(OSError):
    """The backing store could not be read, parsed or rewritten."""


class CatalogStore(Protocol):
    def list_products(self) -> List[Product]:
        ...

    def append_product(self, req: CreateProductRequest) -> Product:
        ...


def _now_ms() -> int:
    return int(time.time() * 1000)


def _next_id(products: List[Product]) -> int:
    """Clock-based identifier that never collides with a stored one.

    Two appends in the same millisecond (or a clock that went
    backwards) still get strictly increasing ids.
    """
    last_id = max((p.id for p in products), default=0)
    return max(_now_ms(), last_id + 1)


def _build_product(products: List[Product], req: CreateProductRequest) -> Product:
    return Product(id=_next_id(products), **req.model_dump())


class InMemoryStore:
    def __init__(self, products: Optional[List[Product]] = None) -> None:
        self._products: List[Product] = list(products or [])
        self._lock = threading.Lock()

    def list_products(self) -> List[Product]:
        return list(self._products)

    def append_product(self, req: CreateProductRequest) -> Product:
        with self._lock:
            product = _build_product(self._products, req)
            self._products.append(product)
        return product


class JsonFileStore:
    """Flat-file store backed by ``{"products": [...]}``.

    Parameters
    ----------
    path : Path
        Location of the JSON document. A missing file reads as an empty
        collection and is created (parent directories included) by the
        first append. A file that exists but cannot be parsed is
        reported as an error and left untouched.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        # Serialises read-modify-write cycles within this process
        self._lock = threading.Lock()

    def _read_document(self) -> dict:
        if not self.path.exists():
            return {"products": []}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise StoreError(f"cannot read product store {self.path}: {exc}") from exc
        if not isinstance(data, dict) or not isinstance(data.get("products"), list):
            raise StoreError(f"product store {self.path} has no 'products' list")
        return data

    def _write_document(self, data: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise StoreError(f"cannot write product store {self.path}: {exc}") from exc

    def _parse(self, raw: list) -> List[Product]:
        try:
            return [Product.model_validate(entry) for entry in raw]
        except ValidationError as exc:
            raise StoreError(f"malformed product record in {self.path}: {exc}") from exc

    def list_products(self) -> List[Product]:
        return self._parse(self._read_document()["products"])

    def append_product(self, req: CreateProductRequest) -> Product:
        with self._lock:
            data = self._read_document()
            product = _build_product(self._parse(data["products"]), req)
            data["products"].append(product.model_dump())
            self._write_document(data)
        logger.info("Stored product %s (%s) in %s", product.id, product.name, self.path)
        return product
