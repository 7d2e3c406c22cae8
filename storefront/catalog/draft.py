"""
Composition of a new product before it is sent to the store.

A draft keeps the raw form values (the price stays as text until
submit) and at most one image. Picking a file and dropping one go
through the same ``select_image`` call; anything that is not an image
is ignored.
"""

from __future__ import annotations

import base64
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "price", "description")


class DraftError(ValueError):
    """The draft is missing a required field."""


@dataclass
class ImageSelection:
    filename: str
    content_type: str
    data: bytes

    def to_data_uri(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.content_type};base64,{encoded}"


def parse_price(text: str) -> float:
    """Parse the price field. Non-numeric text gives NaN, not an error."""
    try:
        return float(text.strip())
    except ValueError:
        return float("nan")


@dataclass
class ProductDraft:
    name: str = ""
    price: str = ""
    description: str = ""
    image: Optional[ImageSelection] = None

    def select_image(self, filename: str, content_type: Optional[str], data: bytes) -> bool:
        """Keep the file if it is an image; returns whether it was kept."""
        if not content_type or not content_type.startswith("image/"):
            logger.debug("Ignoring non-image selection %s (%s)", filename, content_type)
            return False
        self.image = ImageSelection(filename=filename, content_type=content_type, data=data)
        return True

    def select_image_file(self, path) -> bool:
        path = Path(path)
        content_type, _ = mimetypes.guess_type(path.name)
        if not content_type or not content_type.startswith("image/"):
            logger.debug("Ignoring non-image file %s", path)
            return False
        return self.select_image(path.name, content_type, path.read_bytes())

    def missing_fields(self) -> List[str]:
        return [f for f in REQUIRED_FIELDS if not str(getattr(self, f)).strip()]

    def to_payload(self) -> dict:
        missing = self.missing_fields()
        if missing:
            raise DraftError(f"missing required fields: {', '.join(missing)}")
        return {
            "name": self.name,
            "price": parse_price(self.price),
            "description": self.description,
            "imageUrl": self.image.to_data_uri() if self.image else "",
            "category": "",
        }

    def reset(self) -> None:
        self.name = ""
        self.price = ""
        self.description = ""
        self.image = None
