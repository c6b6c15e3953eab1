from __future__ import annotations

import html
import re
from numbers import Number
from typing import Any

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, Number):
        return float(value)
    if isinstance(value, str) and _NUMERIC_RE.match(value):
        return float(value)
    return None


def _truthy(value: Any) -> bool:
    if isinstance(value, str):
        return value not in {"", "0"}
    return bool(value)


def loose_equals(left: Any, right: Any) -> bool:
    """Coercive comparison for form values: "1" == 1, "01" == "1", None == "" and so on."""
    if left is None and right is None:
        return True
    if left is None or right is None:
        other = right if left is None else left
        if isinstance(other, str):
            return other == ""
        return not other
    if isinstance(left, bool) or isinstance(right, bool):
        return _truthy(left) == _truthy(right)
    left_number = _as_number(left)
    right_number = _as_number(right)
    if left_number is not None and right_number is not None:
        return left_number == right_number
    return _text(left) == _text(right)


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_option(value: Any, text: Any, current: Any) -> str:
    selected = ' selected="selected"' if loose_equals(value, current) else ""
    return f'<option value="{html.escape(_text(value), quote=True)}"{selected}>{html.escape(_text(text), quote=False)}</option>'


def render_select(name: str, options_html: str) -> str:
    return f'<select name="{html.escape(name, quote=True)}">{options_html}</select>'
