from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from backoffice.core.errors import ApplicationError, error_response
from backoffice.domain.pagination import MAX_PAGE
from backoffice.schemas.category import CategoryBody, CategoryRead
from backoffice.schemas.common import ERROR_RESPONSES, ErrorBody, MessageBody, Paginated, paginated
from backoffice.services.category_service import CategoryService
from backoffice.services.token_service import require_user

router = APIRouter(
    prefix="/categories",
    tags=["Categories"],
    dependencies=[Depends(require_user)],
    responses=ERROR_RESPONSES,
)
category_service = CategoryService()

_NOT_FOUND = {404: {"model": ErrorBody, "description": "Categoria não encontrada"}}
_CONFLICT = {409: {"model": ErrorBody, "description": "Categoria já está em uso"}}


@router.get("/paginated", response_model=Paginated[CategoryRead], summary="Listar categorias paginadas")
def list_categories(
    page: int = Query(1, ge=1, le=MAX_PAGE),
    per_page: int = Query(50, ge=1, le=100, alias="perPage"),
    search: Optional[str] = Query(None, max_length=255),
):
    result = category_service.list_paginated(page, per_page, (search or "").strip() or None)
    if isinstance(result, ApplicationError):
        return error_response(result)
    return paginated(result, CategoryRead)


@router.post("", status_code=201, response_model=CategoryRead, responses=_CONFLICT, summary="Criar categoria")
def create_category(payload: CategoryBody):
    result = category_service.create(payload)
    if isinstance(result, ApplicationError):
        return error_response(result)
    return CategoryRead.model_validate(result)


@router.get("/{category_id}", response_model=CategoryRead, responses=_NOT_FOUND, summary="Exibir categoria")
def show_category(category_id: UUID):
    result = category_service.show(str(category_id))
    if isinstance(result, ApplicationError):
        return error_response(result)
    return CategoryRead.model_validate(result)


@router.put(
    "/{category_id}",
    response_model=CategoryRead,
    responses={**_NOT_FOUND, **_CONFLICT},
    summary="Atualizar categoria",
)
def update_category(category_id: UUID, payload: CategoryBody):
    result = category_service.update(str(category_id), payload)
    if isinstance(result, ApplicationError):
        return error_response(result)
    return CategoryRead.model_validate(result)


@router.delete("/{category_id}", response_model=MessageBody, responses=_NOT_FOUND, summary="Remover categoria (soft delete)")
def delete_category(category_id: UUID):
    result = category_service.delete(str(category_id))
    if isinstance(result, ApplicationError):
        return error_response(result)
    return {"message": "Categoria deletada com sucesso"}
