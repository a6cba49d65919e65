"""Search contract translated to SQLAlchemy statements."""

from typing import Any

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.common.pagination import SearchInput, SearchOrder

LIKE_ESCAPE = "\\"


def _escape_like(value: str) -> str:
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


def name_filters(model: Any, search_input: SearchInput) -> list[ColumnElement[bool]]:
    """Case-insensitive containment filter on name; none when the search text is blank."""
    if not search_input.has_search:
        return []
    pattern = f"%{_escape_like(search_input.search)}%"
    return [model.name.ilike(pattern, escape=LIKE_ESCAPE)]


def order_clauses(model: Any, search_input: SearchInput) -> list[ColumnElement[Any]]:
    """
    Order by name, id or createdAt.

    Name and createdAt ties are broken by id in the same direction.
    Unknown or empty fields fall back to name ascending, then id ascending.
    """
    descending = search_input.order == SearchOrder.DESC

    def direction(column: Any) -> ColumnElement[Any]:
        return column.desc() if descending else column.asc()

    order_by = search_input.order_by.lower().replace("_", "")
    if order_by == "name":
        return [direction(model.name), direction(model.id)]
    if order_by == "id":
        return [direction(model.id)]
    if order_by == "createdat":
        return [direction(model.created_at), direction(model.id)]
    return [model.name.asc(), model.id.asc()]


async def load_page(
    db: AsyncSession, model: Any, search_input: SearchInput
) -> tuple[list[Any], int]:
    """
    Run the count and page queries of a search.

    Returns:
        Tuple of (ORM rows of the requested page, total matching rows)
    """
    filters = name_filters(model, search_input)

    total_stmt = select(func.count()).select_from(model).where(*filters)
    total = (await db.execute(total_stmt)).scalar() or 0

    page_stmt: Select[Any] = (
        select(model)
        .where(*filters)
        .order_by(*order_clauses(model, search_input))
        .offset(search_input.offset)
        .limit(search_input.limit)
    )
    rows = (await db.execute(page_stmt)).scalars().all()
    return list(rows), total
