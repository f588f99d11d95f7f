from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from backoffice.core.errors import ApplicationError, error_response
from backoffice.domain.pagination import MAX_PAGE
from backoffice.schemas.common import ERROR_RESPONSES, ErrorBody, MessageBody, Paginated, paginated
from backoffice.schemas.product import ProductBody, ProductRead
from backoffice.services.product_service import ProductService
from backoffice.services.token_service import require_user

router = APIRouter(
    prefix="/products",
    tags=["Products"],
    dependencies=[Depends(require_user)],
    responses=ERROR_RESPONSES,
)
product_service = ProductService()

_NOT_FOUND = {404: {"model": ErrorBody, "description": "Produto não encontrado"}}
_CONFLICT = {409: {"model": ErrorBody, "description": "Produto já existe"}}


@router.get("/paginated", response_model=Paginated[ProductRead], summary="Listar produtos paginados")
def list_products(
    page: int = Query(1, ge=1, le=MAX_PAGE),
    per_page: int = Query(50, ge=1, le=100, alias="perPage"),
    search: Optional[str] = Query(None, max_length=255, description="Busca por nome, descrição ou SKU"),
):
    result = product_service.list_paginated(page, per_page, (search or "").strip() or None)
    if isinstance(result, ApplicationError):
        return error_response(result)
    return paginated(result, ProductRead)


@router.post("", status_code=201, response_model=ProductRead, responses=_CONFLICT, summary="Criar produto")
def create_product(payload: ProductBody):
    result = product_service.create(payload)
    if isinstance(result, ApplicationError):
        return error_response(result)
    return ProductRead.model_validate(result)


@router.get("/{product_id}", response_model=ProductRead, responses=_NOT_FOUND, summary="Exibir produto")
def show_product(product_id: UUID):
    result = product_service.show(str(product_id))
    if isinstance(result, ApplicationError):
        return error_response(result)
    return ProductRead.model_validate(result)


@router.put(
    "/{product_id}",
    response_model=ProductRead,
    responses={**_NOT_FOUND, **_CONFLICT},
    summary="Atualizar produto",
)
def update_product(product_id: UUID, payload: ProductBody):
    result = product_service.update(str(product_id), payload)
    if isinstance(result, ApplicationError):
        return error_response(result)
    return ProductRead.model_validate(result)


@router.delete("/{product_id}", response_model=MessageBody, responses=_NOT_FOUND, summary="Remover produto (soft delete)")
def delete_product(product_id: UUID):
    result = product_service.delete(str(product_id))
    if isinstance(result, ApplicationError):
        return error_response(result)
    return {"message": "Produto deletado com sucesso"}
