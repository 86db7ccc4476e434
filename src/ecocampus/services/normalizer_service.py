"""Roster normalization into canonical leaderboard records."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ValidationError

from ..schemas.leaderboard import NormalizedUser, RosterEntry, SkippedRecord
from .department_service import extract_department

logger = logging.getLogger(__name__)

PLACEHOLDER_NAME = ".."
MAX_INITIALS = 2

SKIP_MISSING_ID = "missing_id"
SKIP_INVALID_RECORD = "invalid_record"
SKIP_DUPLICATE_ID = "duplicate_id"


class RosterContractError(TypeError):
    """Raised when the roster argument is not a sequence of records."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class NormalizationResult(NamedTuple):
    users: Tuple[NormalizedUser, ...]
    skipped: Tuple[SkippedRecord, ...]


def initials_for(display_name: Optional[str]) -> str:
    """Return up to two upper-case initials for a display name."""

    name = display_name if display_name and display_name.strip() else PLACEHOLDER_NAME
    return "".join(token[0] for token in name.split()).upper()[:MAX_INITIALS]


def _coerce_entry(raw: Any) -> RosterEntry:
    if isinstance(raw, RosterEntry):
        return raw
    if isinstance(raw, Mapping):
        return RosterEntry.model_validate(dict(raw))
    raise TypeError(f"unsupported roster record type {type(raw).__name__}")


def _ensure_iterable(entries: Any) -> Iterable[Any]:
    if entries is None:
        raise RosterContractError("Roster must be a sequence of records, got None.")
    if isinstance(entries, (str, bytes, Mapping, BaseModel)) or not isinstance(entries, Iterable):
        raise RosterContractError(
            f"Roster must be a sequence of records, got {type(entries).__name__}."
        )
    return entries


def normalize(entries: Iterable[Any], current_user_id: Optional[str] = None) -> NormalizationResult:
    """Map raw roster entries into ``NormalizedUser`` records.

    Output order matches input order. Other fields are coerced leniently, so
    only entries without an id, non-record items and repeated ids are skipped;
    they are reported instead of aborting the batch.
    """

    users: list[NormalizedUser] = []
    skipped: list[SkippedRecord] = []
    seen_ids: set[str] = set()

    for index, raw in enumerate(_ensure_iterable(entries)):
        try:
            entry = _coerce_entry(raw)
        except (TypeError, ValidationError) as exc:
            logger.warning("skipping roster record %d: %s", index, exc)
            skipped.append(SkippedRecord(index=index, reason=SKIP_INVALID_RECORD))
            continue

        record_id = entry.id.strip() if entry.id else ""
        if not record_id:
            logger.warning("skipping roster record %d: missing id", index)
            skipped.append(SkippedRecord(index=index, reason=SKIP_MISSING_ID))
            continue
        if record_id in seen_ids:
            logger.warning("skipping roster record %d: duplicate id %s", index, record_id)
            skipped.append(SkippedRecord(index=index, record_id=record_id, reason=SKIP_DUPLICATE_ID))
            continue
        seen_ids.add(record_id)

        users.append(
            NormalizedUser(
                id=record_id,
                display_name=entry.display_name or "",
                initials=initials_for(entry.display_name),
                department=extract_department(entry.affiliation),
                lifetime_points=max(entry.lifetime_points or 0, 0),
                is_current_user=current_user_id is not None and record_id == current_user_id,
                avatar_url=entry.avatar_url,
            )
        )

    return NormalizationResult(users=tuple(users), skipped=tuple(skipped))
