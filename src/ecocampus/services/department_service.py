"""Department derivation from free-text course affiliations."""

from __future__ import annotations

from typing import Any

OTHER_DEPARTMENT = "OTHER"
COHORT_PREFIX_LENGTH = 2


def extract_department(affiliation: Any) -> str:
    """Derive a department key from a course code such as ``"SYBAF"``.

    Course codes are expected to start with a two-character cohort/year code
    (``FY``, ``SY``, ``TY``) followed by the department, so ``"SYBAF"`` maps
    to ``"BAF"``. Codes of two characters or fewer are returned upper-cased
    as they are, and blank or missing affiliations map to ``"OTHER"``.

    This is a best-effort categorization: affiliations that do not follow the
    cohort-prefix convention are still truncated and may be misclassified.
    """

    if affiliation is None:
        return OTHER_DEPARTMENT

    trimmed = str(affiliation).strip()
    if not trimmed:
        return OTHER_DEPARTMENT
    if len(trimmed) <= COHORT_PREFIX_LENGTH:
        return trimmed.upper()
    return trimmed[COHORT_PREFIX_LENGTH:].upper()
