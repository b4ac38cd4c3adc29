"""Tabulation helpers for parsed programs.

Converts a sequence of :class:`~rs274.gcode.parser.Block` objects into
numpy arrays for quick inspection and plotting.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from rs274.gcode.parser import Block


def word_table(blocks: Sequence[Block], mnemonics: Sequence[str]) -> np.ndarray:
    """Build a ``(len(blocks), len(mnemonics))`` float64 array of word values.

    Cell ``[i, j]`` holds the value of the first word ``mnemonics[j]`` in
    ``blocks[i]``, or NaN when the block has no such word. Mnemonics are
    matched case-insensitively.
    """
    letters = [m.upper() for m in mnemonics]
    table = np.full((len(blocks), len(letters)), np.nan, dtype=np.float64)

    for i, block in enumerate(blocks):
        for j, letter in enumerate(letters):
            value = block.get(letter)
            if value is not None:
                table[i, j] = value

    return table


def word_extents(
    blocks: Sequence[Block],
    mnemonics: Sequence[str] = ("X", "Y", "Z"),
) -> dict[str, tuple[float, float]]:
    """Return ``{mnemonic: (min, max)}`` over every block that sets it.

    Mnemonics that never appear are left out of the result.
    """
    table = word_table(blocks, mnemonics)
    extents: dict[str, tuple[float, float]] = {}
    for j, mnemonic in enumerate(mnemonics):
        column = table[:, j]
        column = column[~np.isnan(column)]
        if column.size:
            extents[mnemonic.upper()] = (float(column.min()), float(column.max()))
    return extents
