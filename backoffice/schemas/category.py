"""
Pydantic models for category payloads.

CategoryBody serves both create and update (update is a full replacement).
The slug is always derived from ``name``; a client-sent slug is ignored.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from backoffice.db.models import CategoryStatus
from backoffice.domain.slugs import slugify
from backoffice.schemas.common import CamelModel


class CategoryBody(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255, examples=["Ração Seca"])
    description: Optional[str] = Field(None, examples=["Rações secas para cães e gatos"])
    slug: Optional[str] = Field(None, description="Gerado automaticamente a partir do nome")
    status: CategoryStatus = CategoryStatus.ACTIVE

    @field_validator("description")
    @classmethod
    def blank_description_to_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @model_validator(mode="after")
    def derive_slug(self) -> "CategoryBody":
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
            "status": self.status,
        }


class CategoryRead(CamelModel):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    status: CategoryStatus
    created_at: datetime
    updated_at: datetime
    trashed: bool
    trashed_at: Optional[datetime] = None
