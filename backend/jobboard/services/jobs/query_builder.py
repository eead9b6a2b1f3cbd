"""Translate listing query-string parameters into SQLAlchemy filter clauses and sort keys.

All parameters are optional; an absent (or empty) parameter contributes no clause.
The returned clauses are meant to be AND-ed together (``select(...).where(*clauses)``).

Experience ranges are widened by one on each side ("2-4" matches 1..5). Range
components are coerced the way a loosely typed client would send them: an empty
component counts as 0, a missing or non-numeric one becomes NaN, and a NaN
bound turns the clause into one that matches nothing.
"""
from __future__ import annotations

import logging
import math
import re
from typing import Optional

from sqlalchemy import and_, false, or_
from sqlalchemy.sql import ColumnElement

from jobboard.models.job import JobPosting

logger = logging.getLogger("jobs.query")

_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_INFINITY_RE = re.compile(r"^([+-]?)Infinity$")
# Prefixed integer literals take no sign
_RADIX_RE = re.compile(r"^0([xXoObB])([0-9a-fA-F]+)$")
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}

SORT_OPTIONS = {
    "Newest": (JobPosting.created_at.desc(),),
    "Oldest": (JobPosting.created_at.asc(),),
    "A-Z": (JobPosting.job_title.asc(),),
    "Z-A": (JobPosting.job_title.desc(),),
}
DEFAULT_SORT = "Newest"

# Newest first with a stable tie-break on the id
SIMILAR_ORDER = (JobPosting.created_at.desc(), JobPosting.id.desc())


def to_number(raw: Optional[str]) -> float:
    """Numeric coercion of a query-string fragment: '' -> 0, junk or missing -> NaN.

    Accepts decimal and exponent forms, `Infinity` with an optional sign, and
    unsigned 0x / 0o / 0b integer literals.
    """
    if raw is None:
        return math.nan
    text = raw.strip()
    if not text:
        return 0.0
    if _NUMBER_RE.match(text):
        return float(text)
    m = _INFINITY_RE.match(text)
    if m:
        return -math.inf if m.group(1) == "-" else math.inf
    m = _RADIX_RE.match(text)
    if m:
        try:
            return float(int(m.group(2), _RADIX_BASES[m.group(1).lower()]))
        except ValueError:
            return math.nan
    return math.nan


def parse_experience_range(exp: str) -> tuple[float, float]:
    """Return the widened (lo - 1, hi + 1) bounds for an "lo-hi" string."""
    parts = exp.split("-")
    lo = to_number(parts[0]) - 1
    hi = to_number(parts[1] if len(parts) > 1 else None) + 1
    return lo, hi


def experience_clause(exp: str) -> ColumnElement[bool]:
    lo, hi = parse_experience_range(exp)
    if math.isnan(lo) or math.isnan(hi):
        logger.debug("Experience range %r has a non-numeric bound; matching nothing", exp)
        return false()
    # Infinite bounds are left out of the SQL; NULL experience never matches
    bounds = [JobPosting.experience.is_not(None)]
    if not math.isinf(lo):
        bounds.append(JobPosting.experience >= lo)
    if not math.isinf(hi):
        bounds.append(JobPosting.experience <= hi)
    return and_(*bounds)


def text_match_clause(title: str, job_type: str) -> ColumnElement[bool]:
    """Case-insensitive substring match on the title OR the type."""
    return or_(
        JobPosting.job_title.icontains(title, autoescape=True),
        JobPosting.job_type.icontains(job_type, autoescape=True),
    )


def build_job_filters(
    *,
    search: Optional[str] = None,
    location: Optional[str] = None,
    jtype: Optional[str] = None,
    exp: Optional[str] = None,
) -> list[ColumnElement[bool]]:
    clauses: list[ColumnElement[bool]] = []

    if location:
        clauses.append(JobPosting.location.icontains(location, autoescape=True))

    if jtype:
        clauses.append(JobPosting.job_type.in_(jtype.split(",")))

    if exp:
        clauses.append(experience_clause(exp))

    if search:
        clauses.append(text_match_clause(search, search))

    return clauses


def resolve_sort(sort: Optional[str]) -> tuple:
    """Map a sort key to ORDER BY terms; unknown or missing keys fall back to Newest."""
    return SORT_OPTIONS.get(sort or DEFAULT_SORT, SORT_OPTIONS[DEFAULT_SORT])
