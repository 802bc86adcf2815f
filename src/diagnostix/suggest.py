"""Did-you-mean suggestions for invalid input values.

Ranks candidate values against what the user typed by Levenshtein
distance and phrases the result as a help annotation:

    = help: did you mean: 'json'?

    = help: did you mean any of these?
            - yaml
            - yml

    = help: available values:
            - json
            - toml
            - yaml

Ranking rules:
    - Empty input: list every candidate, sorted, as "available values".
    - Candidates whose distance is >= len(input) share no meaningful
      structure with the input and are dropped.
    - No survivors: fall back to listing every candidate, sorted.
    - Survivors are ordered by ascending distance; equal distances keep the
      order in which candidates were given (stable sort).
    - Exactly one survivor: the single-line "did you mean" form. The
      "available values" block is always a list, even of one value.
    - Duplicate candidates are ranked once, at their first position. The
      "available values" block lists candidates exactly as given.

Python 3.13+.
"""

from collections.abc import Iterable

__all__ = ["levenshtein_distance", "rank_candidates", "suggest_values"]

_AVAILABLE_HEADER = "available values:"
_SUGGESTED_HEADER = "did you mean any of these?"
_ITEM_PREFIX = "\n- "


def levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate the Levenshtein (edit) distance between two strings.

    The minimum number of single-character insertions, deletions, or
    substitutions needed to turn s1 into s2. Operates on code points.

    Args:
        s1: First string
        s2: Second string

    Returns:
        Edit distance (0 when equal)

    Examples:
        >>> levenshtein_distance("kitten", "sitting")
        3
        >>> levenshtein_distance("", "abc")
        3
    """
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)
    if not s2:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def rank_candidates(value: str, candidates: Iterable[str]) -> list[str]:
    """Return the candidates close enough to value, best first.

    Args:
        value: User input (must be non-empty to match anything)
        candidates: Allowed values

    Returns:
        Candidates with distance < len(value), ordered by distance, ties in
        input order. Empty list when nothing is close.
    """
    threshold = len(value)
    distances: dict[str, int] = {}
    for candidate in candidates:
        if candidate in distances:
            continue
        distances[candidate] = levenshtein_distance(value, candidate)

    survivors = [item for item, dist in distances.items() if dist < threshold]
    # dict preserves first-seen order and sorted() is stable
    return sorted(survivors, key=distances.__getitem__)


def suggest_values(value: str, candidates: Iterable[str]) -> str | None:
    """Build a help text suggesting valid values for value.

    Args:
        value: User input; empty means "show everything"
        candidates: Allowed values

    Returns:
        Help text, or None when there are no candidates at all

    Examples:
        >>> suggest_values("fo", ["foo", "bar", "foobar"])
        "did you mean: 'foo'?"
        >>> print(suggest_values("", ["b", "a"]))
        available values:
        - a
        - b
    """
    available = list(candidates)
    if not available:
        return None

    if value:
        suggested = rank_candidates(value, available)
        if len(suggested) == 1:
            return f"did you mean: '{suggested[0]}'?"
        if suggested:
            return _format_block(_SUGGESTED_HEADER, suggested)

    return _format_block(_AVAILABLE_HEADER, sorted(available))


def _format_block(header: str, values: list[str]) -> str:
    return header + _ITEM_PREFIX + _ITEM_PREFIX.join(values)
