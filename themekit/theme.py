from __future__ import annotations

import sys
from typing import Any, Iterable, TextIO

from themekit.core.config import settings
from themekit.core.request_context import RequestContext, parse_segments
from themekit.services.content_filters import FilterRegistry, content_filters
from themekit.services.data_store import DataStore
from themekit.services.field_options import FieldProvider, field_choices
from themekit.services.lookup_cache import LookupCache
from themekit.services.option_markup import render_option
from themekit.services.user_query import IDENTITY_FIELD, UserQueryBuilder


class ThemeBase:
    """Reusable helpers for theme objects.

    One instance serves one request: lookups memoized in ``cache`` are never
    refreshed for the life of the instance.
    """

    def __init__(
        self,
        request: RequestContext | None = None,
        *,
        store: DataStore | None = None,
        fields: FieldProvider | None = None,
        filters: FilterRegistry | None = None,
    ):
        self.request = request or RequestContext()
        self.store = store
        self.fields = fields
        self.filters = filters if filters is not None else content_filters
        self.cache = LookupCache()

    def get_acf_select_field(self, field_id: str) -> dict[str, Any]:
        """Selectable choices of a custom field; empty for unknown fields."""
        if self.fields is None:
            raise RuntimeError("ThemeBase was created without a field provider")
        provider = self.fields
        return self.cache.get_or_compute("acf_fields", field_id, lambda: field_choices(provider, field_id))

    def get_option(self, value: Any, text: Any, current: Any) -> str:
        return render_option(value, text, current)

    def print_option(self, value: Any, text: Any, current: Any, stream: TextIO | None = None) -> None:
        (stream or sys.stdout).write(self.get_option(value, text, current))

    def get_userdata(
        self,
        fields: Iterable[str],
        key: str,
        compare: str,
        value: Any,
        orderby: str = IDENTITY_FIELD,
        order: str = "ASC",
    ) -> list[dict[str, Any]] | None:
        """Users matching ``key <compare> value`` with the requested core and meta fields.

        Returns ``None`` without querying when the operator or sort direction is not
        supported. Results are not cached.
        """
        if self.store is None:
            raise RuntimeError("ThemeBase was created without a data store")
        return UserQueryBuilder(self.store).fetch(fields, key, compare, value, orderby, order)

    def jetpack_sharing_links_override(self) -> None:
        self.filters.subscribe("the_content", "theme_base.filter_the_content", self.filter_the_content, 10)
        self.filters.subscribe("the_excerpt", "theme_base.filter_the_excerpt", self.filter_the_excerpt, 10)

    def filter_the_content(self, content: str) -> str:
        self.filters.unsubscribe("the_content", settings.SHARING_CALLBACK_ID, settings.SHARING_CALLBACK_PRIORITY)
        return content

    def filter_the_excerpt(self, excerpt: str) -> str:
        self.filters.unsubscribe("the_excerpt", settings.SHARING_CALLBACK_ID, settings.SHARING_CALLBACK_PRIORITY)
        return excerpt

    def segments(self, num: int | None = None) -> list[str] | str | bool:
        """All path segments of the request URI, or the 0-based ``num``-th one (False if absent)."""
        path = self.request.path
        segments = self.cache.get_or_compute("segments", path, lambda: parse_segments(path))
        if num is None:
            return segments
        if 0 <= num < len(segments):
            return segments[num]
        return False

    def use_wrapper(self) -> bool:
        return self.request.query_params.get("ajax") != "true"
