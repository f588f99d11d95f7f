"""Product use cases. Same shape as categories; search also covers the SKU."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from backoffice.core.errors import ApplicationError
from backoffice.db.models import Product
from backoffice.domain.pagination import Page, build_meta, offset_for
from backoffice.repositories.sql_repository import SQLRepository
from backoffice.schemas.product import ProductBody

logger = logging.getLogger(__name__)

PRODUCT_ALREADY_EXISTS = ApplicationError.conflict("Este produto já existe.", "PRODUCT_ALREADY_EXISTS")
PRODUCT_NOT_FOUND = ApplicationError.not_found("Este produto não foi encontrado.", "PRODUCT_NOT_FOUND")


class ProductService:
    def __init__(self) -> None:
        self.repository = SQLRepository()

    def create(self, payload: ProductBody) -> Product | ApplicationError:
        try:
            if self.repository.active_product_slug_exists(payload.slug):
                return PRODUCT_ALREADY_EXISTS
            product = self.repository.create_product(**payload.to_values())
        except IntegrityError:
            return PRODUCT_ALREADY_EXISTS
        except SQLAlchemyError:
            logger.exception("Failed to create product %r", payload.name)
            return ApplicationError.internal("PRODUCT_CREATE_ERROR")
        logger.info("Product %s created (sku=%s)", product.id, product.sku)
        return product

    def show(self, product_id: str) -> Product | ApplicationError:
        try:
            product = self.repository.get_active_product(product_id)
        except SQLAlchemyError:
            logger.exception("Failed to load product %s", product_id)
            return ApplicationError.internal("PRODUCT_SHOW_ERROR")
        return product or PRODUCT_NOT_FOUND

    def update(self, product_id: str, payload: ProductBody) -> Product | ApplicationError:
        try:
            current = self.repository.get_active_product(product_id)
            if not current:
                return PRODUCT_NOT_FOUND
            if current.slug != payload.slug and self.repository.active_product_slug_exists(
                payload.slug, exclude_id=product_id
            ):
                return PRODUCT_ALREADY_EXISTS
            updated = self.repository.update_product(product_id, **payload.to_values())
        except IntegrityError:
            return PRODUCT_ALREADY_EXISTS
        except SQLAlchemyError:
            logger.exception("Failed to update product %s", product_id)
            return ApplicationError.internal("PRODUCT_UPDATE_ERROR")
        if not updated:
            return PRODUCT_NOT_FOUND
        logger.info("Product %s updated", product_id)
        return updated

    def delete(self, product_id: str) -> None | ApplicationError:
        try:
            trashed = self.repository.trash_product(product_id)
        except SQLAlchemyError:
            logger.exception("Failed to delete product %s", product_id)
            return ApplicationError.internal("PRODUCT_DELETE_ERROR")
        if not trashed:
            return PRODUCT_NOT_FOUND
        logger.info("Product %s moved to trash", product_id)
        return None

    def list_paginated(self, page: int, per_page: int, search: str | None = None) -> Page[Product] | ApplicationError:
        try:
            rows, total = self.repository.paginate_products(offset_for(page, per_page), per_page, search)
        except SQLAlchemyError:
            logger.exception("Failed to list products")
            return ApplicationError.internal("LIST_PRODUCT_PAGINATED_ERROR")
        return Page(data=rows, meta=build_meta(total, page, per_page))
