"""Regular expression matching for entry names."""

import re
from collections.abc import Iterable

from cleanpath.cleaner.errors import InvalidPatternError

# Commas outside a {m,n} quantifier separate patterns in a list value
_LIST_SEPARATOR = re.compile(r",(?![^{}]*\})")


def compile_patterns(sources: Iterable[str]) -> tuple[re.Pattern[str], ...]:
    """Compile pattern sources, failing on the first invalid one.

    Args:
        sources: Regular expression source strings.

    Returns:
        Compiled patterns in the given order.

    Raises:
        InvalidPatternError: If any source is not a valid regular expression.
    """
    compiled: list[re.Pattern[str]] = []
    for source in sources:
        try:
            compiled.append(re.compile(source))
        except re.error as e:
            msg = f"Invalid regular expression {source!r}: {e}"
            raise InvalidPatternError(msg) from e
    return tuple(compiled)


def matches(name: str, patterns: Iterable[re.Pattern[str]] | None) -> bool:
    """Check whether any pattern matches anywhere in ``name``.

    Returns False when ``patterns`` is empty or None.
    """
    if not patterns:
        return False
    return any(pattern.search(name) for pattern in patterns)


def split_pattern_list(values: Iterable[str]) -> list[str]:
    """Split command-line pattern values on commas.

    Commas inside ``{m,n}`` quantifiers are kept, so ``\\d{1,3}`` stays
    a single pattern. Empty pieces are dropped.

    Args:
        values: Raw option values, each possibly holding several patterns.

    Returns:
        Flat list of pattern sources.
    """
    result: list[str] = []
    for value in values:
        result.extend(part for part in _LIST_SEPARATOR.split(value) if part)
    return result


class PatternMatcher:
    """A compiled, ordered set of name patterns.

    Matching uses search semantics: a pattern may match anywhere in the
    name unless it anchors itself with ``^`` or ``$``.

    Args:
        sources: Regular expression source strings (possibly empty).

    Raises:
        InvalidPatternError: If any source is not a valid regular expression.
    """

    def __init__(self, sources: Iterable[str] = ()) -> None:
        self._sources = tuple(sources)
        self._patterns = compile_patterns(self._sources)

    @property
    def sources(self) -> tuple[str, ...]:
        """Pattern sources in configuration order."""
        return self._sources

    def __bool__(self) -> bool:
        return bool(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def matches(self, name: str) -> bool:
        """Check whether ``name`` matches at least one pattern."""
        return matches(name, self._patterns)
