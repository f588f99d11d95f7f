"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional, Sequence, TypeVar

from sqlalchemy import func, or_, select, update

from backoffice.db.models import Category, Product, User
from backoffice.db.session import get_session

M = TypeVar("M", Category, Product)

CATEGORY_SEARCH_COLUMNS = (Category.name, Category.description)
PRODUCT_SEARCH_COLUMNS = (Product.name, Product.description, Product.sku)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    # -------------------------- users --------------------------
    def get_user(self, user_id: str) -> Optional[User]:
        with get_session() as session:
            return session.get(User, user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        with get_session() as session:
            stmt = select(User).where(User.email == email)
            return session.execute(stmt).scalar_one_or_none()

    def create_user(self, name: str, email: str, password_hash: str) -> User:
        now = _now()
        entity = User(name=name, email=email, password=password_hash, created_at=now, updated_at=now)
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def update_user_password(self, email: str, password_hash: str) -> bool:
        with get_session() as session:
            stmt = (
                update(User)
                .where(User.email == email)
                .values(password=password_hash, updated_at=_now())
            )
            result = session.execute(stmt)
            session.commit()
            return result.rowcount > 0

    # -------------------------- categories --------------------------
    def get_active_category(self, category_id: str) -> Optional[Category]:
        return self._get_active(Category, category_id)

    def active_category_slug_exists(self, slug: str, exclude_id: str | None = None) -> bool:
        return self._active_slug_exists(Category, slug, exclude_id)

    def create_category(self, **values: Any) -> Category:
        return self._create(Category, values)

    def update_category(self, category_id: str, **values: Any) -> Optional[Category]:
        return self._update(Category, category_id, values)

    def trash_category(self, category_id: str) -> bool:
        return self._trash(Category, category_id)

    def paginate_categories(self, offset: int, limit: int, search: str | None = None) -> tuple[list[Category], int]:
        return self._paginate(Category, CATEGORY_SEARCH_COLUMNS, offset, limit, search)

    # -------------------------- products --------------------------
    def get_active_product(self, product_id: str) -> Optional[Product]:
        return self._get_active(Product, product_id)

    def active_product_slug_exists(self, slug: str, exclude_id: str | None = None) -> bool:
        return self._active_slug_exists(Product, slug, exclude_id)

    def create_product(self, **values: Any) -> Product:
        return self._create(Product, values)

    def update_product(self, product_id: str, **values: Any) -> Optional[Product]:
        return self._update(Product, product_id, values)

    def trash_product(self, product_id: str) -> bool:
        return self._trash(Product, product_id)

    def paginate_products(self, offset: int, limit: int, search: str | None = None) -> tuple[list[Product], int]:
        return self._paginate(Product, PRODUCT_SEARCH_COLUMNS, offset, limit, search)

    # -------------------------- soft-deletable helpers --------------------------
    def _get_active(self, model: type[M], entity_id: str) -> Optional[M]:
        with get_session() as session:
            stmt = select(model).where(model.id == entity_id, model.trashed.is_(False))
            return session.execute(stmt).scalar_one_or_none()

    def _active_slug_exists(self, model: type[M], slug: str, exclude_id: str | None) -> bool:
        slug_value = (slug or "").strip()
        if not slug_value:
            return False
        with get_session() as session:
            stmt = select(model.id).where(model.slug == slug_value, model.trashed.is_(False))
            if exclude_id:
                stmt = stmt.where(model.id != exclude_id)
            return session.execute(stmt.limit(1)).first() is not None

    def _create(self, model: type[M], values: dict[str, Any]) -> M:
        now = _now()
        entity = model(**values, created_at=now, updated_at=now, trashed=False, trashed_at=None)
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def _update(self, model: type[M], entity_id: str, values: dict[str, Any]) -> Optional[M]:
        with get_session() as session:
            stmt = select(model).where(model.id == entity_id, model.trashed.is_(False))
            entity = session.execute(stmt).scalar_one_or_none()
            if not entity:
                return None
            for key, value in values.items():
                setattr(entity, key, value)
            entity.updated_at = _now()
            session.commit()
            session.refresh(entity)
            return entity

    def _trash(self, model: type[M], entity_id: str) -> bool:
        now = _now()
        with get_session() as session:
            stmt = (
                update(model)
                .where(model.id == entity_id, model.trashed.is_(False))
                .values(trashed=True, trashed_at=now, updated_at=now)
            )
            result = session.execute(stmt)
            session.commit()
            return result.rowcount > 0

    def _paginate(
        self,
        model: type[M],
        search_columns: Sequence[Any],
        offset: int,
        limit: int,
        search: str | None,
    ) -> tuple[list[M], int]:
        conditions = [model.trashed.is_(False)]
        term = (search or "").strip()
        if term:
            conditions.append(or_(*(column.icontains(term, autoescape=True) for column in search_columns)))
        with get_session() as session:
            total = session.execute(select(func.count()).select_from(model).where(*conditions)).scalar_one()
            stmt = select(model).where(*conditions).order_by(model.name.asc(), model.id.asc()).offset(offset).limit(limit)
            rows = session.execute(stmt).scalars().all()
            return list(rows), int(total)
