"""SQL expression builders for PostgreSQL full-text search.

These helpers only build SQLAlchemy Core expressions; nothing here touches a
connection. Function names (tsquery functions, ranking functions) and weight
labels are passed through unvalidated, so a bad value surfaces as a SQL
error when the statement runs.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping
from typing import Any

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql
from sqlalchemy.sql.elements import ColumnElement

TSQUERY_FUNCTIONS = (
    "plainto_tsquery",
    "phraseto_tsquery",
    "to_tsquery",
    "websearch_to_tsquery",
)
RANK_FUNCTIONS = ("ts_rank", "ts_rank_cd")


def ts_config(config: str | None) -> ColumnElement[Any] | None:
    """``CAST(:config AS REGCONFIG)``, or None to use the server default."""
    if config is None:
        return None
    return sa.cast(sa.literal(config), postgresql.REGCONFIG)


def to_tsvector(value: Any, config: str | None = None) -> ColumnElement[Any]:
    """``to_tsvector([config,] value)``; None becomes an empty document."""
    text = "" if value is None else str(value)
    regconfig = ts_config(config)
    if regconfig is None:
        return sa.func.to_tsvector(sa.literal(text))
    return sa.func.to_tsvector(regconfig, sa.literal(text))


def weighted(vector: ColumnElement[Any], label: str) -> ColumnElement[Any]:
    """``setweight(vector, 'label')``."""
    return sa.func.setweight(vector, sa.literal(label, literal_execute=True))


def document_vector(
    fields: Mapping[str, Any],
    weights: Mapping[str, str],
    config: str | None = None,
    include_unweighted: bool = False,
) -> ColumnElement[Any]:
    """Concatenate the vectors of a record's fields into one tsvector expression.

    The first field is always part of the document. Every other field is
    included only when it has a weight label, or when ``include_unweighted``
    is set.

    Args:
        fields: Field name to raw value, in document order.
        weights: Field name to weight label (A-D).
        config: Text search configuration.
        include_unweighted: Keep secondary fields that have no weight.

    Returns:
        ``to_tsvector(...) || setweight(to_tsvector(...), 'B') ...``

    Raises:
        ValueError: If ``fields`` is empty.
    """
    parts: list[ColumnElement[Any]] = []
    for position, (name, value) in enumerate(fields.items()):
        label = weights.get(name)
        if not label and position > 0 and not include_unweighted:
            continue
        vector = to_tsvector(value, config)
        parts.append(weighted(vector, label) if label else vector)

    if not parts:
        raise ValueError("A searchable record must expose at least one field")

    return functools.reduce(lambda left, right: left.op("||")(right), parts)


def tsquery(query: str, function: str = "plainto_tsquery", config: str | None = None) -> sa.FunctionElement[Any]:
    """``<function>([config,] query)``, e.g. ``plainto_tsquery('english', 'solar power')``."""
    fn = getattr(sa.func, function)
    regconfig = ts_config(config)
    if regconfig is None:
        return fn(sa.literal(query))
    return fn(regconfig, sa.literal(query))


def rank(
    column: ColumnElement[Any],
    query: ColumnElement[Any],
    function: str = "ts_rank",
    weights: list[float] | None = None,
    normalization: int | None = None,
) -> ColumnElement[Any]:
    """``<function>([weights,] column, query[, normalization])``."""
    args: list[Any] = []
    if weights:
        args.append(sa.cast(postgresql.array(weights), postgresql.ARRAY(sa.REAL)))
    args.extend([column, query])
    if normalization:
        args.append(sa.literal(normalization))
    return getattr(sa.func, function)(*args)
