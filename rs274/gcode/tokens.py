"""Token types produced by the lexer.

Tokens are small immutable values. The alphabet is closed: every token is
one of :class:`BlockDelete`, :class:`Demarcation`, :class:`Letter` or
:class:`Number`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class BlockDelete:
    """The ``/`` that marks a block as optionally skippable."""

    def __str__(self) -> str:
        return "block delete '/'"


@dataclass(frozen=True)
class Demarcation:
    """The ``%`` that brackets a program."""

    def __str__(self) -> str:
        return "demarcation '%'"


@dataclass(frozen=True)
class Letter:
    """A word letter, always upper case."""

    letter: str

    def __str__(self) -> str:
        return f"letter {self.letter!r}"


@dataclass(frozen=True)
class Number:
    """A numeric literal."""

    value: float

    def __str__(self) -> str:
        return f"number {self.value!r}"


Token = Union[BlockDelete, Demarcation, Letter, Number]

BLOCK_DELETE = BlockDelete()
DEMARCATION = Demarcation()
