"""Shared response shapes (camelCase JSON, error body, pagination)."""

from __future__ import annotations

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# largest value an INTEGER column holds on every supported backend
MAX_INT32 = 2**31 - 1


class CamelModel(BaseModel):
    """Base for response bodies: snake_case attributes, camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ErrorBody(BaseModel):
    message: str = Field(..., examples=["Esta categoria não foi encontrada."])
    code: int = Field(..., examples=[404])
    cause: str = Field(..., examples=["CATEGORY_NOT_FOUND"])


class MessageBody(BaseModel):
    message: str


class PageMetaRead(CamelModel):
    total: int
    per_page: int
    current_page: int
    last_page: int
    first_page: int


class Paginated(CamelModel, Generic[T]):
    data: List[T]
    meta: PageMetaRead


ERROR_RESPONSES = {
    400: {"model": ErrorBody, "description": "Parâmetros inválidos"},
    401: {"model": ErrorBody, "description": "Autenticação necessária"},
    403: {"model": ErrorBody, "description": "Acesso negado"},
    500: {"model": ErrorBody, "description": "Erro interno do servidor"},
}


def paginated(page, item_schema: type[CamelModel]) -> Paginated:
    """Convert a domain Page into its response model."""
    return Paginated[item_schema](
        data=[item_schema.model_validate(item) for item in page.data],
        meta=PageMetaRead.model_validate(page.meta),
    )
