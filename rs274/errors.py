"""Exception classes raised while lexing and parsing G-code.

Two families exist: :class:`LexerError` for characters that cannot form a
token, and :class:`ParserError` for token sequences that cannot form a
block. The parser wraps every lexer failure in :class:`GCodeSyntaxError`,
so callers of :class:`~rs274.gcode.parser.GCodeParser` only need to catch
:class:`ParserError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rs274.gcode.tokens import Token


class GCodeError(Exception):
    """Base exception for all rs274 errors."""

    pass


# ---------------------------------------------------------------------------
# Lexer errors
# ---------------------------------------------------------------------------


class LexerError(GCodeError):
    """A character sequence that fits no token rule."""

    pass


class IllegalSymbol(LexerError):
    """A character that cannot start any token (e.g. ``@``, ``#``, ``*``)."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"illegal symbol {symbol!r}")


class InvalidNumber(LexerError):
    """A numeric literal that does not parse as a finite number."""

    def __init__(self, text: str, reason: str = "") -> None:
        self.text = text
        self.reason = reason
        message = f"invalid number {text!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


# ---------------------------------------------------------------------------
# Parser errors
# ---------------------------------------------------------------------------


class ParserError(GCodeError):
    """A line that cannot be turned into a block.

    Attributes
    ----------
    lineno:
        1-based position of the line in the parsed sequence, or ``None``
        when a single line was parsed on its own.
    line:
        The stripped source line, when known.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        self.lineno: int | None = None
        self.line: str | None = None
        super().__init__(message)

    def locate(self, line: str, lineno: int | None = None) -> ParserError:
        """Attach source location and return ``self`` for re-raising."""
        self.line = line
        self.lineno = lineno
        return self

    def __str__(self) -> str:
        if self.lineno is not None:
            return f"line {self.lineno}: {self.message}"
        return self.message


class GCodeSyntaxError(ParserError):
    """A lexer error surfaced while parsing a line.

    The wrapped :class:`LexerError` is kept on :attr:`error`.
    """

    def __init__(self, error: LexerError) -> None:
        self.error = error
        super().__init__(f"syntax error: {error}")


class UnexpectedToken(ParserError):
    """A token that is not allowed at its position in the block."""

    def __init__(self, token: Token) -> None:
        self.token = token
        super().__init__(f"unexpected {token}")


class MissingValue(ParserError):
    """A word letter followed by the end of the line instead of a number."""

    def __init__(self, letter: str) -> None:
        self.letter = letter
        super().__init__(f"missing value after letter {letter!r}")
