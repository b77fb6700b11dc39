"""Session and record identity.

``canonicalize_kind`` is the only place raw session-kind tags are interpreted.
Everything downstream of the normalizer compares ``SessionKind`` members.
"""

from __future__ import annotations

import re

from f1results.exceptions import AmbiguousSessionKindError
from f1results.models.session import SessionIdentifier, SessionKind

RECORD_ID_SEPARATOR = "|"

_SEPARATORS_RE = re.compile(r"[\s_\-]+")

_KIND_SYNONYMS: dict[str, SessionKind] = {
    "sprint": SessionKind.SPRINT,
    "sprint race": SessionKind.SPRINT,
    "sprint results": SessionKind.SPRINT,
    "sr": SessionKind.SPRINT,
    "race": SessionKind.RACE,
    "race results": SessionKind.RACE,
    "main race": SessionKind.RACE,
    "feature race": SessionKind.RACE,
    "grand prix": SessionKind.RACE,
    "gp": SessionKind.RACE,
    "r": SessionKind.RACE,
}


def canonicalize_kind(
    raw: str | SessionKind | None, *, strict: bool = False,
) -> SessionKind:
    """Map a raw session tag to its canonical ``SessionKind``.

    Matching ignores case, surrounding whitespace and ``_``/``-`` separators.
    Unrecognised or missing tags map to ``SessionKind.RACE`` unless *strict*
    is set, in which case ``AmbiguousSessionKindError`` is raised.
    """
    if isinstance(raw, SessionKind):
        return raw
    token = _SEPARATORS_RE.sub(" ", raw).strip().lower() if isinstance(raw, str) else ""
    kind = _KIND_SYNONYMS.get(token)
    if kind is not None:
        return kind
    if strict:
        raise AmbiguousSessionKindError(raw)
    return SessionKind.RACE


def make_session_id(season: int, round: int, kind: SessionKind) -> SessionIdentifier:
    """Build the composite identifier for one session."""
    if round < 1:
        raise ValueError(f"round must be >= 1, got {round}")
    return SessionIdentifier(season=season, round=round, kind=kind)


def _escape(component: str) -> str:
    return component.replace("\\", "\\\\").replace(RECORD_ID_SEPARATOR, "\\" + RECORD_ID_SEPARATOR)


def make_record_id(session_id: SessionIdentifier, driver_name: str) -> str:
    """Return the upsert key for a driver's result in a session.

    Format: ``season|round|Kind|driver``. Backslashes and separators in the
    driver name are backslash-escaped so distinct pairs never collide.
    """
    return RECORD_ID_SEPARATOR.join(
        (str(session_id.season), str(session_id.round), session_id.kind.value, _escape(driver_name)),
    )
