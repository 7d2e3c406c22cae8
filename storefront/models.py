# storefront/models.py
from pydantic import BaseModel, ConfigDict, Field


class CreateProductRequest(BaseModel):
    name: str = Field(min_length=1)
    price: float = Field(ge=0, allow_inf_nan=False)
    description: str = Field(min_length=1)
    imageUrl: str = Field(
        default="",
        description="Vide, ou une image embarquée sous forme d'URI data:.",
    )
    category: str = ""


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    category: str = ""
    price: float
    description: str = ""
    imageUrl: str = ""
