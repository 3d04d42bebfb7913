"""
Optimization hint pipeline.

Hints are named, idempotent text transforms applied in declaration order to
compiled SQL. The vocabulary is open: identifiers without a registered
transform pass the SQL through unchanged so provider definitions can reference
hints before the pipeline implements them.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

import structlog

logger = structlog.get_logger()


@dataclass(frozen=True)
class HintOptions:
    """Tunables consumed by the built-in hints."""

    row_limit: int = 1000
    index_table: str = "demographics"
    index_name: str = "idx_demographics_geography"


HintTransform = Callable[[str, HintOptions], str]

_HINTS: dict[str, HintTransform] = {}


def register_hint(name: str) -> Callable[[HintTransform], HintTransform]:
    """
    Register a transform under a hint identifier.

    Example:
        >>> @register_hint("strip_whitespace")
        ... def _strip(sql: str, options: HintOptions) -> str:
        ...     return sql.strip()
    """

    def decorator(func: HintTransform) -> HintTransform:
        _HINTS[name] = func
        return func

    return decorator


def known_hints() -> list[str]:
    """Hint identifiers with a registered transform."""
    return list(_HINTS)


@register_hint("add_limit")
def add_limit(sql: str, options: HintOptions) -> str:
    """Append a row limit unless the query already mentions one (case-insensitive)."""
    if "limit" in sql.lower():
        return sql
    return f"{sql} LIMIT {options.row_limit}"


@register_hint("force_index_scan")
def force_index_scan(sql: str, options: HintOptions) -> str:
    """Attach an inline index directive to the first reference of the indexed table."""
    directive = f"/*+ INDEX({options.index_name}) */"
    if directive in sql:
        return sql
    table_ref = f"FROM {options.index_table}"
    return sql.replace(table_ref, f"{table_ref} {directive}", 1)


@register_hint("optimize_joins")
def optimize_joins(sql: str, options: HintOptions) -> str:
    """Recognized identifier reserved for join reordering; leaves SQL unchanged."""
    return sql


def apply_hints(sql: str, hints: Iterable[str], options: HintOptions | None = None) -> str:
    """
    Apply hints to compiled SQL in list order.

    Args:
        sql: Compiled query text
        hints: Ordered hint identifiers
        options: Hint tunables (defaults to HintOptions())

    Returns:
        Transformed query text
    """
    options = options or HintOptions()
    for hint in hints:
        transform = _HINTS.get(hint)
        if transform is None:
            logger.debug("hint_ignored", hint=hint)
            continue
        sql = transform(sql, options)
    return sql


KNOWN_HINTS: tuple[str, ...] = ("add_limit", "force_index_scan", "optimize_joins")
