"""Character cursor that hides intra-line whitespace."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from rs274.config import DEFAULT_CONFIG, ParserConfig


class Reader:
    """Whitespace-filtered view over a character source.

    Spaces and tabs are skipped on construction and after every
    :meth:`advance`, so the lexer never sees them. Newlines are passed
    through unchanged.

    Parameters
    ----------
    source:
        Any iterable of single characters; a ``str`` or a lazy iterator.
    config:
        Lexical settings; only ``whitespace`` is used here.
    """

    def __init__(
        self,
        source: Iterable[str],
        config: ParserConfig = DEFAULT_CONFIG,
    ) -> None:
        self._input: Iterator[str] = iter(source)
        self._whitespace = frozenset(config.whitespace)
        self._current: str | None = self._next_significant()

    def _next_significant(self) -> str | None:
        for c in self._input:
            if c not in self._whitespace:
                return c
        return None

    def peek(self) -> str | None:
        """Return the current character, or ``None`` when exhausted."""
        return self._current

    def advance(self) -> str:
        """Return the current character and move to the next one.

        Raises
        ------
        EOFError
            If the reader is already exhausted.
        """
        current = self._current
        if current is None:
            raise EOFError("advance() called after end of input")
        self._current = self._next_significant()
        return current
