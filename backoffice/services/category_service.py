"""Category use cases: create, show, update, soft delete and paginated listing."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from backoffice.core.errors import ApplicationError
from backoffice.db.models import Category
from backoffice.domain.pagination import Page, build_meta, offset_for
from backoffice.repositories.sql_repository import SQLRepository
from backoffice.schemas.category import CategoryBody

logger = logging.getLogger(__name__)

CATEGORY_IN_USE = ApplicationError.conflict("Esta categoria já está em uso.", "CATEGORY_IN_USE")
CATEGORY_NOT_FOUND = ApplicationError.not_found("Esta categoria não foi encontrada.", "CATEGORY_NOT_FOUND")


class CategoryService:
    """Soft-delete aware CRUD over categories."""

    def __init__(self) -> None:
        self.repository = SQLRepository()

    def create(self, payload: CategoryBody) -> Category | ApplicationError:
        try:
            if self.repository.active_category_slug_exists(payload.slug):
                return CATEGORY_IN_USE
            category = self.repository.create_category(**payload.to_values())
        except IntegrityError:
            return CATEGORY_IN_USE
        except SQLAlchemyError:
            logger.exception("Failed to create category %r", payload.name)
            return ApplicationError.internal("CATEGORY_CREATE_ERROR")
        logger.info("Category %s created (slug=%s)", category.id, category.slug)
        return category

    def show(self, category_id: str) -> Category | ApplicationError:
        try:
            category = self.repository.get_active_category(category_id)
        except SQLAlchemyError:
            logger.exception("Failed to load category %s", category_id)
            return ApplicationError.internal("CATEGORY_SHOW_ERROR")
        return category or CATEGORY_NOT_FOUND

    def update(self, category_id: str, payload: CategoryBody) -> Category | ApplicationError:
        try:
            current = self.repository.get_active_category(category_id)
            if not current:
                return CATEGORY_NOT_FOUND
            if current.slug != payload.slug and self.repository.active_category_slug_exists(
                payload.slug, exclude_id=category_id
            ):
                return CATEGORY_IN_USE
            updated = self.repository.update_category(category_id, **payload.to_values())
        except IntegrityError:
            return CATEGORY_IN_USE
        except SQLAlchemyError:
            logger.exception("Failed to update category %s", category_id)
            return ApplicationError.internal("CATEGORY_UPDATE_ERROR")
        if not updated:
            return CATEGORY_NOT_FOUND
        logger.info("Category %s updated", category_id)
        return updated

    def delete(self, category_id: str) -> None | ApplicationError:
        try:
            trashed = self.repository.trash_category(category_id)
        except SQLAlchemyError:
            logger.exception("Failed to delete category %s", category_id)
            return ApplicationError.internal("CATEGORY_DELETE_ERROR")
        if not trashed:
            return CATEGORY_NOT_FOUND
        logger.info("Category %s moved to trash", category_id)
        return None

    def list_paginated(self, page: int, per_page: int, search: str | None = None) -> Page[Category] | ApplicationError:
        try:
            rows, total = self.repository.paginate_categories(offset_for(page, per_page), per_page, search)
        except SQLAlchemyError:
            logger.exception("Failed to list categories")
            return ApplicationError.internal("LIST_CATEGORY_PAGINATED_ERROR")
        return Page(data=rows, meta=build_meta(total, page, per_page))
