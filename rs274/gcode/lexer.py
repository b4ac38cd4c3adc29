"""G-code lexer.

Turns a stream of characters into :mod:`~rs274.gcode.tokens`. Whitespace
is removed by the underlying :class:`~rs274.gcode.reader.Reader`, which is
what makes the RS274NGC whitespace-permissive number rule work: the input
``"x +0. 1234"`` lexes to ``Letter('X'), Number(0.1234)``.

Comments are dropped here and never reach the parser.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

from rs274.config import DEFAULT_CONFIG, ParserConfig
from rs274.errors import IllegalSymbol, InvalidNumber
from rs274.gcode.reader import Reader
from rs274.gcode.tokens import BLOCK_DELETE, DEMARCATION, Letter, Number, Token

_DIGITS = frozenset("0123456789")
_NUMBER_CHARS = _DIGITS | frozenset("+-.")


def _is_ascii_letter(c: str) -> bool:
    return c.isascii() and c.isalpha()


class Lexer:
    """Pull-based tokenizer over a character source.

    Call :meth:`next_token` repeatedly, or iterate the lexer directly.
    Both stop at the end of input; malformed input raises a
    :class:`~rs274.errors.LexerError`.
    """

    def __init__(
        self,
        source: Iterable[str],
        config: ParserConfig = DEFAULT_CONFIG,
    ) -> None:
        self.config = config
        self._reader = Reader(source, config)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def next_token(self) -> Token | None:
        """Return the next token, or ``None`` at end of input.

        Raises
        ------
        IllegalSymbol
            If the next significant character starts no token.
        InvalidNumber
            If a numeric literal cannot be converted to a finite float.
        """
        self._skip_comments()

        c = self._reader.peek()
        if c is None:
            return None
        if c == "/":
            self._reader.advance()
            return BLOCK_DELETE
        if c == "%":
            self._reader.advance()
            return DEMARCATION
        if _is_ascii_letter(c):
            self._reader.advance()
            return Letter(c.upper())
        if c in _NUMBER_CHARS:
            return self._scan_number()
        raise IllegalSymbol(c)

    # ------------------------------------------------------------------
    # Scanners (private)
    # ------------------------------------------------------------------

    def _skip_comments(self) -> None:
        """Drop any run of line and block comments at the cursor."""
        reader = self._reader
        config = self.config
        while True:
            c = reader.peek()
            if c == config.line_comment:
                # Stops before the newline so line structure survives
                while reader.peek() not in (None, "\n"):
                    reader.advance()
            elif c == config.comment_open:
                # An unterminated comment runs to end of input
                while reader.peek() is not None:
                    if reader.advance() == config.comment_close:
                        break
            else:
                return

    def _scan_number(self) -> Number:
        """Accumulate ``[0-9+-.]`` characters into a bounded buffer."""
        limit = self.config.max_number_length
        buffer: list[str] = []
        overflow = False

        while True:
            c = self._reader.peek()
            if c is None or c not in _NUMBER_CHARS:
                break
            self._reader.advance()
            if len(buffer) < limit:
                buffer.append(c)
            else:
                overflow = True

        text = "".join(buffer)
        if overflow:
            raise InvalidNumber(text, f"longer than {limit} characters")

        try:
            value = float(text)
        except ValueError:
            raise InvalidNumber(text) from None
        if not math.isfinite(value):
            raise InvalidNumber(text, "not finite")
        return Number(value)
