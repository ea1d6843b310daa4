"""
Listing query builder for the product, booking and user list endpoints.

A listing request becomes a `ListingQuery` plan:
- predicates: exact or case-insensitive substring matches on `doc` fields,
  combined with AND; empty parameters add nothing
- order: fixed, newest first (`id DESC`)
- window: OFFSET/LIMIT from `page` and `size`; no `size` means no window
- enrichment: optional inner join that embeds a projection of the user
  whose email matches the document's email reference; documents without a
  matching user are dropped

`compile_items` / `compile_count` render a plan to parameterized SQL. Field
and table names come from code, never from the request, and are still
checked before they are interpolated.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping

from . import documents
from .db import Database
from .errors import InvalidArgument

MATCH_EXACT = "exact"
MATCH_CONTAINS = "contains"

MAX_PAGE_SIZE = 500

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class Predicate:
    field: str
    value: str
    mode: str = MATCH_EXACT


@dataclass(frozen=True)
class PageWindow:
    page: int = 0
    size: int | None = None

    @property
    def bounded(self) -> bool:
        return self.size is not None

    @property
    def offset(self) -> int:
        if self.size is None:
            return 0
        return self.page * self.size


@dataclass(frozen=True)
class Enrichment:
    """
    Embed `fields` of the `users` document whose `foreign_field` equals the
    listed document's `local_field`, under `as_field`.
    """

    as_field: str
    local_field: str
    foreign_field: str
    fields: tuple[str, ...]
    collection: str = "users"


@dataclass(frozen=True)
class ListingQuery:
    collection: str
    predicates: tuple[Predicate, ...] = ()
    window: PageWindow = PageWindow()
    enrichment: Enrichment | None = None


def page_window(page: int | None = None, size: int | None = None) -> PageWindow:
    if page is not None and page < 0:
        raise InvalidArgument("page must be >= 0.")
    if size is not None and not 1 <= size <= MAX_PAGE_SIZE:
        raise InvalidArgument(f"size must be between 1 and {MAX_PAGE_SIZE}.")
    return PageWindow(page=page or 0, size=size)


def build_listing(
    collection: str,
    *,
    exact: Mapping[str, str | None] | None = None,
    contains: Mapping[str, str | None] | None = None,
    page: int | None = None,
    size: int | None = None,
    enrichment: Enrichment | None = None,
) -> ListingQuery:
    predicates: list[Predicate] = []
    for field, value in (exact or {}).items():
        if value:
            predicates.append(Predicate(field=field, value=value, mode=MATCH_EXACT))
    for field, value in (contains or {}).items():
        if value:
            predicates.append(Predicate(field=field, value=value, mode=MATCH_CONTAINS))

    return ListingQuery(
        collection=collection,
        predicates=tuple(predicates),
        window=page_window(page, size),
        enrichment=enrichment,
    )


def escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _ident(name: str) -> str:
    if not _IDENTIFIER_RE.match(name):
        raise ValueError(f"Unsafe identifier: {name!r}")
    return name


def _doc_text(alias: str, field: str) -> str:
    return f"{alias}.doc->>'{_ident(field)}'"


def _projection(enrichment: Enrichment, alias: str) -> str:
    pairs: list[str] = []
    for field in enrichment.fields:
        if field == "_id":
            pairs.append(f"'_id', {alias}.id::text")
        else:
            pairs.append(f"'{_ident(field)}', {alias}.doc->'{_ident(field)}'")
    return f"jsonb_strip_nulls(jsonb_build_object({', '.join(pairs)}))"


def _from_clause(plan: ListingQuery) -> str:
    sql = f"FROM {_ident(plan.collection)} AS t"
    enrichment = plan.enrichment
    if enrichment is not None:
        sql += (
            f"\nJOIN {_ident(enrichment.collection)} AS j"
            f" ON {_doc_text('j', enrichment.foreign_field)} = {_doc_text('t', enrichment.local_field)}"
        )
    return sql


def _where_clause(plan: ListingQuery, args: list[Any]) -> str:
    conditions: list[str] = []
    for predicate in plan.predicates:
        column = _doc_text("t", predicate.field)
        if predicate.mode == MATCH_EXACT:
            args.append(predicate.value)
            conditions.append(f"{column} = ${len(args)}")
        elif predicate.mode == MATCH_CONTAINS:
            args.append(f"%{escape_like(predicate.value)}%")
            conditions.append(f"{column} ILIKE ${len(args)}")
        else:
            raise ValueError(f"Unknown match mode: {predicate.mode!r}")
    if not conditions:
        return ""
    return "\nWHERE " + "\n  AND ".join(conditions)


def compile_items(plan: ListingQuery) -> tuple[str, list[Any]]:
    args: list[Any] = []
    columns = "t.id, t.doc"
    if plan.enrichment is not None:
        columns += f", {_projection(plan.enrichment, 'j')} AS enrichment"

    sql = f"SELECT {columns}\n{_from_clause(plan)}{_where_clause(plan, args)}\nORDER BY t.id DESC"
    if plan.window.bounded:
        args.append(plan.window.offset)
        args.append(plan.window.size)
        sql += f"\nOFFSET ${len(args) - 1} LIMIT ${len(args)}"
    return sql, args


def compile_count(plan: ListingQuery) -> tuple[str, list[Any]]:
    """
    Count of everything the plan matches, ignoring the window.
    """
    args: list[Any] = []
    sql = f"SELECT count(*) AS count\n{_from_clause(plan)}{_where_clause(plan, args)}"
    return sql, args


def row_to_item(row: dict[str, Any], plan: ListingQuery) -> dict[str, Any]:
    item = documents.to_document(row)
    if plan.enrichment is not None:
        item[plan.enrichment.as_field] = row.get("enrichment")
    return item


async def fetch_items(database: Database, plan: ListingQuery) -> list[dict[str, Any]]:
    sql, args = compile_items(plan)
    rows = await database.fetch_all(sql, *args)
    return [row_to_item(row, plan) for row in rows]


async def count_items(database: Database, plan: ListingQuery) -> int:
    sql, args = compile_count(plan)
    return int(await database.fetch_value(sql, *args) or 0)
