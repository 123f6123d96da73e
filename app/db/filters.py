"""
Filter expressions for the ``events`` collection.

Queries are described with a small set of typed clauses and turned into a
MongoDB filter document by ``compile_filter``::

    expr = And(TextMatch("title", "jazz"), CategoryMatch(category_id))
    collection.find(compile_filter(expr))

``CategoryMatch(None)`` stands for a category that could not be resolved and
matches no document at all.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class TextMatch:
    field: str
    text: str


@dataclass(frozen=True)
class CategoryMatch:
    category_id: Optional[str]


@dataclass(frozen=True)
class ExcludeId:
    event_id: str


@dataclass(frozen=True, init=False)
class And:
    clauses: Tuple["FilterExpression", ...]

    def __init__(self, *clauses: "FilterExpression"):
        object.__setattr__(self, "clauses", tuple(clauses))


FilterExpression = Union[TextMatch, CategoryMatch, ExcludeId, And]


def compile_filter(expr: FilterExpression) -> Dict[str, Any]:
    if isinstance(expr, TextMatch):
        return {expr.field: {"$regex": re.escape(expr.text), "$options": "i"}}

    if isinstance(expr, CategoryMatch):
        if expr.category_id is None:
            return {"category": {"$in": []}}
        return {"category": expr.category_id}

    if isinstance(expr, ExcludeId):
        return {"_id": {"$ne": expr.event_id}}

    if isinstance(expr, And):
        compiled = [compile_filter(clause) for clause in expr.clauses]
        if not compiled:
            return {}
        if len(compiled) == 1:
            return compiled[0]
        return {"$and": compiled}

    raise TypeError(f"Unsupported filter expression: {expr!r}")


def title_and_category(query: Optional[str], category: Optional[CategoryMatch]) -> And:
    """Listing filter: optional title substring AND optional category."""
    clauses = []
    if query:
        clauses.append(TextMatch("title", query))
    if category is not None:
        clauses.append(category)
    return And(*clauses)


def related_to(category_id: str, event_id: str) -> And:
    return And(CategoryMatch(category_id), ExcludeId(event_id))
