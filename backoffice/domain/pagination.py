"""Pagination arithmetic shared by the catalog listings."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

# keeps (page - 1) * per_page well inside a signed 64-bit OFFSET
MAX_PAGE = 2**31 - 1


@dataclass(frozen=True)
class PageMeta:
    total: int
    per_page: int
    current_page: int
    last_page: int
    first_page: int


@dataclass(frozen=True)
class Page(Generic[T]):
    data: Sequence[T]
    meta: PageMeta


def offset_for(page: int, per_page: int) -> int:
    return (page - 1) * per_page


def build_meta(total: int, page: int, per_page: int) -> PageMeta:
    return PageMeta(
        total=total,
        per_page=per_page,
        current_page=page,
        last_page=math.ceil(total / per_page),
        first_page=1 if total > 0 else 0,
    )
