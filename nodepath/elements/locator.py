"""
XPath locator algebra for nodepath.

Pure string functions used to build the locators of derived elements:
union detection, union splitting, and prefixing a relative locator with
the locator of the element it is searched from.
"""

from __future__ import annotations

from typing import Optional

_OPENERS = "[("
_CLOSERS = "])"
_QUOTES = "'\""


def _scan_pipes(locator: str, track_literals: bool) -> Optional[list[int]]:
    depth = 0
    quote = None
    pipes = []
    i = 0
    length = len(locator)

    while i < length:
        char = locator[i]
        if quote is not None:
            if char == quote:
                if i + 1 < length and locator[i + 1] == quote:
                    i += 2
                    continue
                quote = None
        elif track_literals and char in _QUOTES:
            quote = char
        elif char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(depth - 1, 0)
        elif char == "|" and depth == 0:
            pipes.append(i)
        i += 1

    if quote is not None:
        return None
    return pipes


def _top_level_pipes(locator: str) -> list[int]:
    """Return the index of every ``|`` that separates union alternatives.

    Pipes inside predicates, parenthesised groups and string literals are
    skipped. A doubled quote inside a literal is an escaped quote. When a
    literal is left unterminated, only bracket nesting is considered.
    """
    if "|" not in locator:
        return []
    pipes = _scan_pipes(locator, track_literals=True)
    if pipes is None:
        pipes = _scan_pipes(locator, track_literals=False)
    return pipes


class Locator:
    """Locator helpers.

    Examples:
        >>> Locator.is_union("a | b")
        True
        >>> Locator.is_union("a[b|c]")
        False
        >>> Locator.compose("a | b", "t1 | t2")
        '(a | b)/t1 | (a | b)/t2'
    """

    @staticmethod
    def is_union(locator: str) -> bool:
        """Check whether a locator is a top-level union of alternatives.

        Args:
            locator: XPath expression.

        Returns:
            True if a ``|`` occurs outside brackets and string literals.
        """
        return bool(_top_level_pipes(locator))

    @staticmethod
    def split_union(locator: str) -> list[str]:
        """Split a locator into its union alternatives.

        Args:
            locator: XPath expression.

        Returns:
            Alternatives with surrounding whitespace stripped. A simple
            locator yields a single-element list.
        """
        parts = []
        start = 0
        for index in _top_level_pipes(locator):
            parts.append(locator[start:index].strip())
            start = index + 1
        parts.append(locator[start:].strip())
        return parts

    @classmethod
    def compose(cls, base: str, relative: str) -> str:
        """Build the locator of ``relative`` evaluated under ``base``.

        Each relative alternative is prefixed with the base locator. A
        union base is parenthesised first so that every alternative is
        scoped to all base alternatives.

        Args:
            base: Locator of the element the search starts from.
            relative: Relative locator, possibly a union.

        Returns:
            Composed locator.
        """
        prefix = f"({base})" if cls.is_union(base) else base
        return " | ".join(
            f"{prefix}/{alternative}" for alternative in cls.split_union(relative)
        )

    @staticmethod
    def literal(text: str) -> str:
        """Render text as an XPath string literal.

        Args:
            text: Text to escape.

        Returns:
            Quoted literal, or a ``concat()`` call when the text holds
            both quote characters.
        """
        if "'" not in text:
            return f"'{text}'"
        if '"' not in text:
            return f'"{text}"'
        parts = text.split("'")
        return "concat('" + "', \"'\", '".join(parts) + "')"


is_union = Locator.is_union
split_union = Locator.split_union
compose = Locator.compose
literal = Locator.literal


__all__ = [
    "Locator",
    "is_union",
    "split_union",
    "compose",
    "literal",
]
