"""
Smoke tests for the SQLRepository against a temporary SQLite database.
"""
from __future__ import annotations

from datetime import timedelta

import pytest
from sqlalchemy.exc import IntegrityError

from backoffice.db.models import Category, CategoryStatus
from backoffice.db.session import get_session
from backoffice.repositories.sql_repository import SQLRepository


def _category(repo: SQLRepository, name: str, slug: str, description: str | None = None):
    return repo.create_category(name=name, slug=slug, description=description, status=CategoryStatus.ACTIVE)


def test_user_lookup_by_email(db_env):
    repo = SQLRepository()
    user = repo.create_user("Alice", "alice@example.com", "argon2$hash")
    assert repo.get_user(user.id).email == "alice@example.com"
    assert repo.get_user_by_email("alice@example.com").id == user.id
    assert repo.get_user_by_email("bob@example.com") is None
    assert repo.update_user_password("alice@example.com", "argon2$other")
    assert not repo.update_user_password("bob@example.com", "argon2$other")


def test_slug_unique_only_among_active_rows(db_env):
    repo = SQLRepository()
    first = _category(repo, "Brinquedos", "brinquedos")
    assert repo.active_category_slug_exists("brinquedos")
    assert not repo.active_category_slug_exists("brinquedos", exclude_id=first.id)

    with pytest.raises(IntegrityError):
        _category(repo, "Brinquedos", "brinquedos")

    assert repo.trash_category(first.id)
    assert not repo.active_category_slug_exists("brinquedos")
    second = _category(repo, "Brinquedos", "brinquedos")
    assert second.id != first.id


def test_trash_hides_record_and_is_not_repeatable(db_env):
    repo = SQLRepository()
    category = _category(repo, "Higiene", "higiene")
    assert repo.trash_category(category.id)
    assert repo.get_active_category(category.id) is None
    assert not repo.trash_category(category.id)
    assert repo.update_category(category.id, name="Outra") is None


def test_paginate_filters_search_and_trash(db_env):
    repo = SQLRepository()
    _category(repo, "Ração Seca", "racao-seca", "Alimento para cães")
    _category(repo, "Ração Úmida", "racao-umida")
    trashed = _category(repo, "Areia", "areia", "Areia sanitária para gatos")
    _category(repo, "Coleiras", "coleiras", "Acessórios de passeio")
    repo.trash_category(trashed.id)

    rows, total = repo.paginate_categories(0, 10)
    assert total == 3
    assert [row.slug for row in rows] == ["coleiras", "racao-seca", "racao-umida"]

    rows, total = repo.paginate_categories(0, 10, "ALIMENTO")
    assert total == 1
    assert rows[0].slug == "racao-seca"

    rows, total = repo.paginate_categories(0, 10, "passeio")
    assert total == 1
    assert rows[0].slug == "coleiras"

    rows, total = repo.paginate_categories(0, 10, "gatos")
    assert total == 0

    rows, total = repo.paginate_categories(0, 1)
    assert total == 3
    assert len(rows) == 1


def test_product_search_covers_sku(db_env):
    repo = SQLRepository()
    repo.create_product(name="Ração Premium", slug="racao-premium", description=None, price=15990, stock=3, sku="RAC-PREM-10")
    repo.create_product(name="Bolinha", slug="bolinha", description="Borracha", price=990, stock=0, sku="BRQ-001")

    rows, total = repo.paginate_products(0, 50, "prem-10")
    assert total == 1
    assert rows[0].slug == "racao-premium"

    rows, total = repo.paginate_products(0, 50, "100%")
    assert total == 0


def test_timestamps_read_back_as_utc(db_env):
    repo = SQLRepository()
    category = _category(repo, "Aves", "aves")
    assert category.created_at.utcoffset() == timedelta(0)
    assert repo.trash_category(category.id)

    rows, _ = repo.paginate_categories(0, 10)
    assert rows == []
    with get_session() as session:
        stored = session.get(Category, category.id)
    assert stored.trashed_at.tzinfo is not None
    assert stored.trashed_at.utcoffset() == timedelta(0)
    assert stored.updated_at >= stored.created_at
