"""
Template Compiler - placeholder substitution for pattern SQL.

Two output modes share one placeholder grammar (`:name`):

- compile_template(): renders values as SQL literals inline (single quotes
  doubled for escaping). Kept for compatibility with callers that submit
  plain query text.
- bind_template(): emits engine-native positional `?` markers and a separate
  list of bound values, so no escaping is involved at all.

Placeholders without a supplied value are never silently dropped: both modes
leave them verbatim and report them in `unresolved`.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# `:name` token not preceded by another colon or identifier character,
# which excludes `::float` casts and `12:30`-style literals
PLACEHOLDER_PATTERN = re.compile(r"(?<![:\w]):([A-Za-z_][A-Za-z0-9_]*)")


@dataclass(frozen=True)
class CompiledTemplate:
    """Result of inline literal substitution."""

    sql: str
    unresolved: list[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.unresolved


@dataclass(frozen=True)
class BoundQuery:
    """Query text with native positional markers plus its bound values."""

    sql: str
    parameters: list[Any] = field(default_factory=list)
    unresolved: list[str] = field(default_factory=list)


def find_placeholders(template: str) -> list[str]:
    """
    Return distinct placeholder names in order of first appearance.

    Args:
        template: SQL template text

    Returns:
        Placeholder names without the leading colon

    Example:
        >>> find_placeholders("WHERE (:geography_type = 'state' AND state IN (:geography_codes))")
        ['geography_type', 'geography_codes']
    """
    seen: dict[str, None] = {}
    for match in PLACEHOLDER_PATTERN.finditer(template):
        seen.setdefault(match.group(1), None)
    return list(seen)


def escape_literal(value: str) -> str:
    """Double single quotes so the value can sit inside a SQL string literal."""
    return value.replace("'", "''")


def quote_literal(value: Any) -> str:
    """Render a value as a single-quoted SQL string literal."""
    return f"'{escape_literal(str(value))}'"


def render_value(value: Any) -> str:
    """
    Serialize a parameter value as SQL text.

    - list/tuple: each element quoted, joined with ", " (for IN (...) lists)
    - str: quoted
    - bool: true / false
    - None: NULL
    - anything else (numbers): str(value), unquoted
    """
    if isinstance(value, (list, tuple)):
        return ", ".join(quote_literal(item) for item in value)
    if isinstance(value, str):
        return quote_literal(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "NULL"
    return str(value)


def compile_template(template: str, parameters: Mapping[str, Any]) -> CompiledTemplate:
    """
    Substitute parameter values into every `:name` occurrence of a template.

    Substitution is a single pass over the template, so text introduced by a
    rendered value is never itself treated as a placeholder.

    Args:
        template: SQL template text
        parameters: Flat parameter mapping (string, number, boolean, or array of strings)

    Returns:
        CompiledTemplate with the substituted SQL and any unresolved placeholder names

    Example:
        >>> compile_template("state IN (:codes)", {"codes": ["California", "Texas"]}).sql
        "state IN ('California', 'Texas')"
    """
    unresolved: dict[str, None] = {}

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in parameters:
            unresolved.setdefault(name, None)
            return match.group(0)
        return render_value(parameters[name])

    sql = PLACEHOLDER_PATTERN.sub(_substitute, template)
    return CompiledTemplate(sql=sql, unresolved=list(unresolved))


def bind_template(template: str, parameters: Mapping[str, Any]) -> BoundQuery:
    """
    Rewrite `:name` placeholders to positional `?` markers with bound values.

    Array values expand to one marker per element (`?, ?, ?`). An empty array
    binds a single NULL so `IN (...)` stays syntactically valid and matches nothing.

    Args:
        template: SQL template text
        parameters: Flat parameter mapping

    Returns:
        BoundQuery with marker SQL, values in marker order, and unresolved names
    """
    values: list[Any] = []
    unresolved: dict[str, None] = {}

    def _bind(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in parameters:
            unresolved.setdefault(name, None)
            return match.group(0)
        value = parameters[name]
        if isinstance(value, (list, tuple)):
            if not value:
                values.append(None)
                return "?"
            values.extend(value)
            return ", ".join("?" for _ in value)
        values.append(value)
        return "?"

    sql = PLACEHOLDER_PATTERN.sub(_bind, template)
    return BoundQuery(sql=sql, parameters=values, unresolved=list(unresolved))
