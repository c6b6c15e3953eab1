from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from themekit.services.data_store import DataStore

logger = logging.getLogger(__name__)

ALLOWED_COMPARE = ("=", "!=", ">", ">=", "<", "<=", "LIKE", "NOT LIKE")
ORDER_DIRECTIONS = ("ASC", "DESC")
RANDOM_ORDER = "RAND"
IDENTITY_FIELD = "ID"

# Columns stored on the users table itself; everything else lives in usermeta.
USER_FIELDS = (
    "ID",
    "user_login",
    "user_nicename",
    "user_email",
    "user_url",
    "user_registered",
    "user_status",
    "display_name",
)


@dataclass(frozen=True)
class SelectColumn:
    expression: str
    alias: str

    def render(self) -> str:
        return f"{self.expression} AS {self.alias}"


@dataclass(frozen=True)
class MetaJoin:
    alias: str
    meta_key: str
    usermeta_table: str
    users_id: str
    user_id_column: str
    meta_key_column: str
    meta_value_column: str

    def render(self) -> str:
        return (
            f"INNER JOIN (SELECT {self.user_id_column}, {self.meta_value_column} "
            f"FROM {self.usermeta_table} WHERE {self.meta_key_column} = '{self.meta_key}') AS {self.alias} "
            f"ON {self.users_id} = {self.alias}.{self.user_id_column}"
        )


@dataclass(frozen=True)
class Predicate:
    column: str
    operator: str
    literal: str

    def render(self) -> str:
        return f"WHERE {self.column} {self.operator} '{self.literal}'"


@dataclass(frozen=True)
class OrderClause:
    expression: str
    direction: str | None = None

    @property
    def is_random(self) -> bool:
        return self.direction is None

    def render(self) -> str:
        if self.direction is None:
            return f"ORDER BY {self.expression}"
        return f"ORDER BY {self.expression} {self.direction}"


@dataclass
class UserQuery:
    """Composed users/usermeta query.

    Every string held by the nodes is already escaped or quoted by the data store,
    so ``render`` only concatenates.
    """

    users_table: str
    fields: list[str]
    columns: list[SelectColumn]
    joins: list[MetaJoin]
    predicate: Predicate
    order: OrderClause
    subquery_alias: str = ""

    def render(self) -> str:
        parts = ["SELECT DISTINCT " + ", ".join(column.render() for column in self.columns)]
        parts.append(f"FROM {self.users_table}")
        parts.extend(join.render() for join in self.joins)
        parts.append(self.predicate.render())
        if self.order.is_random:
            # DISTINCT plus ORDER BY on an expression outside the select list is rejected by
            # some backends, so random ordering is applied to the finished row set.
            return f"SELECT * FROM ({' '.join(parts)}) AS {self.subquery_alias} {self.order.render()}"
        parts.append(self.order.render())
        return " ".join(parts)


def _unique(names: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for name in names:
        name = str(name)
        if name in seen:
            continue
        seen.add(name)
        result.append(name)
    return result


def resolve_fields(fields: Iterable[str], key: str, orderby: str = IDENTITY_FIELD) -> list[str]:
    """Requested fields plus the filter key and sort column, each once, in request order."""
    resolved = _unique(fields)
    if key not in resolved:
        resolved.append(key)
    if orderby != RANDOM_ORDER and orderby not in resolved:
        resolved.append(orderby)
    return resolved


def is_user_field(name: str) -> bool:
    return name in USER_FIELDS


class UserQueryBuilder:
    def __init__(self, store: DataStore):
        self.store = store

    def _column_expression(self, name: str, meta_aliases: dict[str, str]) -> str:
        quote = self.store.quote_identifier
        if is_user_field(name):
            return f"{quote(self.store.users_table)}.{quote(name)}"
        return f"{meta_aliases[name]}.{quote('meta_value')}"

    def build(
        self,
        fields: Iterable[str],
        key: str,
        compare: str,
        value: Any,
        orderby: str = IDENTITY_FIELD,
        order: str = "ASC",
    ) -> UserQuery | None:
        if compare not in ALLOWED_COMPARE:
            logger.warning("user query rejected: unsupported comparison operator %r", compare)
            return None
        direction = str(order or "").strip().upper()
        if orderby != RANDOM_ORDER and direction not in ORDER_DIRECTIONS:
            logger.warning("user query rejected: unsupported sort direction %r", order)
            return None

        quote = self.store.quote_identifier
        escape = self.store.escape
        users_table = quote(self.store.users_table)
        usermeta_table = quote(self.store.usermeta_table)
        users_id = f"{users_table}.{quote(IDENTITY_FIELD)}"

        resolved = resolve_fields(fields, key, orderby)
        # Join aliases are positional: meta keys may differ only by case or exceed identifier limits.
        meta_aliases = {
            name: quote(f"meta_{position}")
            for position, name in enumerate(name for name in resolved if not is_user_field(name))
        }
        columns = [SelectColumn(users_id, quote(IDENTITY_FIELD))]
        joins: list[MetaJoin] = []
        for name in resolved:
            if name == IDENTITY_FIELD:
                continue
            columns.append(SelectColumn(self._column_expression(name, meta_aliases), quote(name)))
            if name in meta_aliases:
                joins.append(
                    MetaJoin(
                        alias=meta_aliases[name],
                        meta_key=escape(name),
                        usermeta_table=usermeta_table,
                        users_id=users_id,
                        user_id_column=quote("user_id"),
                        meta_key_column=quote("meta_key"),
                        meta_value_column=quote("meta_value"),
                    )
                )

        predicate = Predicate(self._column_expression(key, meta_aliases), compare, escape(value))
        if orderby == RANDOM_ORDER:
            order_clause = OrderClause(self.store.random_function)
        else:
            order_clause = OrderClause(self._column_expression(orderby, meta_aliases), escape(direction))

        return UserQuery(
            users_table=users_table,
            fields=resolved,
            columns=columns,
            joins=joins,
            predicate=predicate,
            order=order_clause,
            subquery_alias=quote("found_users"),
        )

    def fetch(
        self,
        fields: Iterable[str],
        key: str,
        compare: str,
        value: Any,
        orderby: str = IDENTITY_FIELD,
        order: str = "ASC",
    ) -> list[dict[str, Any]] | None:
        query = self.build(fields, key, compare, value, orderby, order)
        if query is None:
            return None
        sql = query.render()
        logger.debug("user query: %s", sql)
        return [dict(row) for row in self.store.execute_query(sql)]
