"""L-system string rewriting."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from pillargen.models import Rule
from pillargen.warning_policy import WarningPolicy, emit_warning


def build_rule_map(
    rules: Iterable[Rule], *, warning_policy: WarningPolicy | None = None
) -> dict[str, str]:
    """Build a symbol -> replacement table from an ordered rule list.

    The first rule for a symbol wins. Later rules for the same symbol are
    dropped with a W02 warning.
    """
    rule_map: dict[str, str] = {}
    for rule in rules:
        if rule.symbol in rule_map:
            emit_warning(
                "W02",
                f"Duplicate rule for symbol {rule.symbol!r} ignored "
                f"(keeping {rule_map[rule.symbol]!r}, dropping {rule.replacement!r})",
                policy=warning_policy,
            )
            continue
        rule_map[rule.symbol] = rule.replacement
    return rule_map


def expand(axiom: str, rules: Mapping[str, str], iterations: int) -> str:
    """Rewrite ``axiom`` ``iterations`` times under ``rules``.

    Every character is replaced in parallel by its rule, or kept as-is when it
    has none. There is no cap on the result length: a rule that contains its
    own symbol grows the string geometrically, and bounding ``iterations`` is
    the caller's job.

    Raises:
        ValueError: If ``iterations`` is negative.
    """
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")

    current = axiom
    for _ in range(iterations):
        current = "".join(rules.get(c, c) for c in current)
    return current


def expansion_lengths(axiom: str, rules: Mapping[str, str], iterations: int) -> list[int]:
    """Predict the expanded string length after each iteration.

    Returns ``iterations + 1`` entries, starting with ``len(axiom)``. Works on
    symbol counts only, so it stays cheap where ``expand`` would not.
    """
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")

    counts: dict[str, int] = {}
    for c in axiom:
        counts[c] = counts.get(c, 0) + 1

    lengths = [len(axiom)]
    for _ in range(iterations):
        next_counts: dict[str, int] = {}
        for symbol, n in counts.items():
            for c in rules.get(symbol, symbol):
                next_counts[c] = next_counts.get(c, 0) + n
        counts = next_counts
        lengths.append(sum(counts.values()))
    return lengths
