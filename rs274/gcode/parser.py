"""G-code block parser.

Parses G-code lines into :class:`Block` records. Each line becomes exactly
one block: an optional block-delete flag, an optional line number and the
ordered words of the line.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

import numpy as np

from rs274.config import DEFAULT_CONFIG, ParserConfig
from rs274.errors import (
    GCodeSyntaxError,
    LexerError,
    MissingValue,
    ParserError,
    UnexpectedToken,
)
from rs274.gcode.lexer import Lexer
from rs274.gcode.tokens import BlockDelete, Demarcation, Letter, Number, Token
from rs274.utils.logger import get_logger

logger = get_logger(__name__)

_LINE_NUMBER = "N"


def _format_value(value: float, limit: int = DEFAULT_CONFIG.max_number_length) -> str:
    """Return the shortest positional text the lexer reads back as *value*.

    The lexer has no exponent syntax and rejects literals longer than
    *limit*, so values at that bound need a tighter spelling than
    ``numpy.format_float_positional`` gives.
    """
    text = np.format_float_positional(value, trim="-")
    if len(text) <= limit:
        return text

    # -0.001 -> -.001
    if text.startswith("0.") or text.startswith("-0."):
        text = text.replace("0.", ".", 1)
        if len(text) <= limit:
            return text

    # 1e32 is also the nearest double to 32 nines
    sign = "-" if value < 0 else ""
    candidate = sign + "9" * (limit - len(sign))
    if float(candidate) == value:
        return candidate
    return text


@dataclass
class Word:
    """A single letter/number pair, e.g. ``X12.34``."""

    mnemonic: str  # upper-case letter, never "N"
    value: float

    def __str__(self) -> str:
        return f"{self.mnemonic}{_format_value(self.value)}"


@dataclass
class Block:
    """One parsed line of a G-code program."""

    line_number: float | None = None
    deleted: bool = False
    words: list[Word] = field(default_factory=list)
    # Stripped source text, kept for diagnostics only
    line: str = field(default="", compare=False)

    @property
    def is_empty(self) -> bool:
        return not self.words and self.line_number is None

    def get(self, mnemonic: str, default: float | None = None) -> float | None:
        """Return the value of the first word with *mnemonic*."""
        mnemonic = mnemonic.upper()
        for word in self.words:
            if word.mnemonic == mnemonic:
                return word.value
        return default

    def to_gcode(self) -> str:
        """Render the block back to canonical G-code text (comments lost).

        Every value the lexer accepted is written so that it fits
        ``max_number_length`` again, so the text re-parses to an equal block.
        """
        parts: list[str] = []
        if self.deleted:
            parts.append("/")
        if self.line_number is not None:
            parts.append(f"{_LINE_NUMBER}{_format_value(self.line_number)}")
        parts.extend(str(word) for word in self.words)
        return " ".join(parts)


class _State(enum.Enum):
    START = enum.auto()
    AFTER_DELETE = enum.auto()
    AWAIT_NUMBER = enum.auto()
    AFTER_WORD = enum.auto()


class GCodeParser:
    """Stateless parser that converts G-code lines into Block objects.

    The caller splits the program into lines; newlines never reach the
    lexer. Any error aborts the line and no partial block is returned.
    """

    def __init__(self, config: ParserConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, line: str) -> Block:
        """Parse a single line of G-code.

        Parameters
        ----------
        line:
            One source line, without its line terminator. Surrounding
            whitespace is ignored.

        Returns
        -------
        The parsed Block. Blank and comment-only lines give an empty block.

        Raises
        ------
        ParserError
            ``GCodeSyntaxError``, ``UnexpectedToken`` or ``MissingValue``.
        """
        line = line.strip()
        try:
            return self._parse_tokens(Lexer(line, self.config), line)
        except ParserError as exc:
            raise exc.locate(line)

    def parse_all(self, lines: Iterable[str]) -> list[Block]:
        """Parse every line, stopping at the first error.

        Parameters
        ----------
        lines:
            Iterable of source lines (e.g. an open text file).

        Returns
        -------
        List of Block objects, one per input line.
        """
        return list(self.iter_blocks(lines))

    def iter_blocks(self, lines: Iterable[str]) -> Iterator[Block]:
        """Lazily parse *lines*, yielding one Block per line.

        Errors carry the 1-based index of the failing line in ``lineno``.
        """
        for lineno, line in enumerate(lines, start=1):
            try:
                block = self.parse(line)
            except ParserError as exc:
                exc.lineno = lineno
                logger.debug("line %d rejected: %s", lineno, exc.message)
                raise
            yield block

    def parse_file(self, gcode_text: str) -> list[Block]:
        """Parse a complete G-code program held in a string.

        Parameters
        ----------
        gcode_text:
            Multi-line string containing the full G-code program.
        """
        return self.parse_all(gcode_text.splitlines())

    # ------------------------------------------------------------------
    # State machine (private)
    # ------------------------------------------------------------------

    def _parse_tokens(self, lexer: Lexer, line: str) -> Block:
        block = Block(line=line)
        state = _State.START
        letter = ""

        while True:
            try:
                token = lexer.next_token()
            except LexerError as exc:
                raise GCodeSyntaxError(exc) from exc

            if token is None:
                if state is _State.AWAIT_NUMBER:
                    raise MissingValue(letter)
                return block

            if isinstance(token, Demarcation):
                self._handle_demarcation(token, block)
                continue

            if state is _State.AWAIT_NUMBER:
                if isinstance(token, Letter):
                    raise MissingValue(letter)
                if not isinstance(token, Number):
                    raise UnexpectedToken(token)
                self._add_word(block, letter, token.value)
                state = _State.AFTER_WORD
            elif isinstance(token, Letter):
                letter = token.letter
                state = _State.AWAIT_NUMBER
            elif isinstance(token, BlockDelete) and state is _State.START:
                block.deleted = True
                state = _State.AFTER_DELETE
            else:
                raise UnexpectedToken(token)

    def _add_word(self, block: Block, letter: str, value: float) -> None:
        if letter != _LINE_NUMBER:
            block.words.append(Word(mnemonic=letter, value=value))
            return
        if block.line_number is not None:
            logger.debug(
                "line number N%s replaced by N%s in %r",
                _format_value(block.line_number),
                _format_value(value),
                block.line,
            )
        block.line_number = value

    def _handle_demarcation(self, token: Token, block: Block) -> None:
        """Handle ``%`` inside a line.

        Program brackets are not interpreted yet, so ``%`` is rejected.
        """
        # TODO: accept lines holding only "%" as program start/end markers
        raise UnexpectedToken(token)
