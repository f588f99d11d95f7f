"""Pydantic models for product payloads. Prices are integer cents."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from backoffice.domain.slugs import slugify
from backoffice.schemas.common import MAX_INT32, CamelModel


class ProductBody(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255, examples=["Ração Premium 10kg"])
    description: Optional[str] = None
    slug: Optional[str] = Field(None, description="Gerado automaticamente a partir do nome")
    price: int = Field(..., gt=0, le=MAX_INT32, description="Preço em centavos", examples=[15990])
    stock: int = Field(..., ge=0, le=MAX_INT32, examples=[12])
    sku: str = Field(..., min_length=1, max_length=64, examples=["RAC-PREM-10"])

    @field_validator("description")
    @classmethod
    def blank_description_to_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @model_validator(mode="after")
    def derive_slug(self) -> "ProductBody":
        slug = slugify(self.name)
        if not slug:
            raise ValueError("O nome deve conter ao menos uma letra ou número")
        self.slug = slug
        return self

    def to_values(self) -> dict:
        return {
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
            "price": self.price,
            "stock": self.stock,
            "sku": self.sku,
        }


class ProductRead(CamelModel):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    price: int
    stock: int
    sku: str
    created_at: datetime
    updated_at: datetime
    trashed: bool
    trashed_at: Optional[datetime] = None
