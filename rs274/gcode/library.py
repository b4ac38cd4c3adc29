"""Sample G-code programs.

Provides functions that return ready-to-parse G-code strings in the
RS274NGC style. Useful for benchmarks and tests without requiring
external .gcode files.
"""

from __future__ import annotations

import numpy as np

from rs274.config import DEFAULT_CONFIG


def _coordinate(value: float) -> str:
    # Zero-padded like N0010 programs when integral, exact otherwise
    if float(value).is_integer():
        return f"{value:03.0f}"
    return np.format_float_positional(value, trim="-")


def square_path_gcode(
    size: float = 100.0,
    step: int = 10,
    feedrate: float = 600.0,
) -> str:
    """Generate the classic numbered square path.

    Every block carries a zero-padded line number (``N0010``, ``N0020``,
    ...) and a linear move along one side of a square starting at the
    origin. Integral coordinates are zero-padded (``X000``); fractional
    ones are written exactly.

    Parameters
    ----------
    size:
        Side length of the square.
    step:
        Increment between consecutive line numbers.
    feedrate:
        Feed rate written on the first move.

    Returns
    -------
    Multi-line G-code string (one block per line, trailing newline).
    """
    corners = [
        (0.0, 0.0),
        (size, 0.0),
        (size, size),
        (0.0, size),
        (0.0, 0.0),  # back to start
    ]

    lines: list[str] = []
    for idx, (x, y) in enumerate(corners, start=1):
        line = f"N{idx * step:04d} G1 X{_coordinate(x)} Y{_coordinate(y)}"
        if idx == 1:
            line += f" F{feedrate:.0f}"
        lines.append(line)

    return "\n".join(lines) + "\n"


def circle_path_gcode(
    radius: float = 10.0,
    segments: int = 36,
    center: tuple[float, float] = (0.0, 0.0),
    depth: float = -1.0,
) -> str:
    """Generate a polygonal approximation of a circle.

    The vertices are laid out evenly with ``numpy.linspace`` and the path
    closes on its starting point, so the program has ``segments + 1``
    linear moves.

    Parameters
    ----------
    radius:
        Circle radius. Every coordinate, written with four decimals, must
        fit ``DEFAULT_CONFIG.max_number_length`` characters.
    segments:
        Number of polygon edges (at least 3).
    center:
        ``(x, y)`` of the circle centre.
    depth:
        Z height of the cut.

    Returns
    -------
    Multi-line G-code string.
    """
    if segments < 3:
        raise ValueError(f"segments must be >= 3, got {segments}")

    cx, cy = center
    limit = DEFAULT_CONFIG.max_number_length
    widest = max(abs(cx), abs(cy)) + abs(radius)
    if len(f"-{widest:.4f}") > limit:
        raise ValueError(
            f"radius {radius:g} around {center} gives coordinates longer "
            f"than {limit} characters"
        )

    theta = np.linspace(0.0, 2.0 * np.pi, segments + 1)
    xs = cx + radius * np.cos(theta)
    ys = cy + radius * np.sin(theta)

    lines: list[str] = [
        f"(circle r={radius:g} segments={segments})",
        "G21 G90 ; mm, absolute",
        f"G0 X{xs[0]:.4f} Y{ys[0]:.4f}",
        f"G1 Z{depth:.4f} F100",
    ]
    for x, y in zip(xs, ys):
        lines.append(f"G1 X{x:.4f} Y{y:.4f} F300")
    lines.append("G0 Z5")
    lines.append("M2 ; end of program")

    return "\n".join(lines) + "\n"


def block_delete_gcode() -> str:
    """Return a short program exercising the lexical corner cases.

    Contains block-delete lines, both comment styles, lower-case letters,
    whitespace inside numbers and blank lines.
    """
    lines: list[str] = [
        "; lexical corner cases",
        "N1 G21 (millimetres) G90",
        "",
        "/ N2 G0 X10 Y10",
        "n3 g1 x +0. 1234 y 7 f 1 2 0 0",
        "/N4 M8 ; coolant only when block delete is off",
        "   (comment-only line)   ",
        "N5 G0 Z- 5 . 5",
        "N6 M2",
    ]
    return "\n".join(lines) + "\n"
