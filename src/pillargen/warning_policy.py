"""Coded warnings for recoverable geometry problems.

Each code has a stable name that the CLI also accepts:

    W01  DegenerateGeometry      fewer than 3 points; the pillar mesh is empty
    W02  DuplicateRuleSymbol     a later rule for a symbol is ignored
    W03  OriginPoint             a point at the origin; its wall has no thickness
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass

from pillargen.errors import PromotedWarningError

WARNING_NAMES: dict[str, str] = {
    "W01": "DegenerateGeometry",
    "W02": "DuplicateRuleSymbol",
    "W03": "OriginPoint",
}
KNOWN_CODES: frozenset[str] = frozenset(WARNING_NAMES)
_CODES_BY_NAME = {name.lower(): code for code, name in WARNING_NAMES.items()}


class PillarWarning(UserWarning):
    """A recoverable pillar geometry problem, tagged with its W-code."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.name = WARNING_NAMES[code]
        super().__init__(f"[{code}] {message}")


@dataclass(frozen=True)
class WarningPolicy:
    """Per-code handling: escalate to an error, drop, or warn (the default)."""

    warn_as_error: frozenset[str] = frozenset()
    suppress: frozenset[str] = frozenset()


def emit_warning(code: str, message: str, *, policy: WarningPolicy | None = None) -> None:
    """Report a coded warning under the active policy.

    Suppressed codes are dropped. Codes in ``warn_as_error`` raise
    ``PromotedWarningError``. Anything else becomes a ``PillarWarning``.
    """
    if code not in KNOWN_CODES:
        raise KeyError(f"Unregistered warning code: {code!r}")
    if policy is not None:
        if code in policy.suppress:
            return
        if code in policy.warn_as_error:
            raise PromotedWarningError(code, message)

    warnings.warn(PillarWarning(code, message), stacklevel=2)


def parse_code_list(raw: str) -> frozenset[str]:
    """Parse a comma-separated list of W-codes or warning names into codes.

    ``"W01,DuplicateRuleSymbol"`` gives ``{"W01", "W02"}``; names are matched
    case-insensitively. Raises ``ValueError`` for anything unrecognized.
    """
    codes: set[str] = set()
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        if token in KNOWN_CODES:
            codes.add(token)
        elif token.lower() in _CODES_BY_NAME:
            codes.add(_CODES_BY_NAME[token.lower()])
        else:
            raise ValueError(
                f"Unknown warning code: {token!r} "
                f"(known: {', '.join(f'{c} ({n})' for c, n in sorted(WARNING_NAMES.items()))})"
            )
    return frozenset(codes)
