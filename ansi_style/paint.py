"""
Painting text with styles.

Wraps text in style prefixes and suffixes, and joins runs of differently
styled text with the minimal transition between neighbours, so a line of
many runs does not reset the terminal after each one.
"""

from collections.abc import Iterable, Sequence

import numpy as np

from .color import Color, Rgb
from .encoder import EncodingMode, write_infix, write_prefix, write_suffix
from .sink import BytesSink, Sink, StringSink
from .style import Style

Run = tuple[str, Style]


def _as_style(style: Style | Color) -> Style:
    # A bare color paints as that foreground
    return style if isinstance(style, Style) else style.normal()


def paint(
    text: str,
    style: Style | Color,
    mode: EncodingMode = EncodingMode.STANDARD,
) -> str:
    """
    Wrap text in the codes for a style.

    Args:
        text: Text to paint.
        style: Style to paint it in, or a color for a plain foreground.
        mode: Attribute code formatting.

    Returns:
        Prefix, text and suffix. A plain style returns ``text`` unchanged.
    """
    style = _as_style(style)
    sink = StringSink()
    write_prefix(style, sink, mode)
    sink.write_literal(text)
    write_suffix(style, sink, mode)
    return sink.getvalue()


def paint_bytes(
    data: bytes,
    style: Style | Color,
    mode: EncodingMode = EncodingMode.STANDARD,
) -> bytes:
    """Like ``paint`` for raw bytes, which are copied through untouched."""
    style = _as_style(style)
    sink = BytesSink()
    write_prefix(style, sink, mode)
    sink.write_bytes(data)
    write_suffix(style, sink, mode)
    return sink.getvalue()


def write_painted(
    runs: Iterable[Run],
    sink: Sink,
    mode: EncodingMode = EncodingMode.STANDARD,
) -> None:
    """
    Write styled runs, joined by the transition between each pair.

    The first run gets its full prefix, later runs only the infix from the
    run before, and the last run's suffix closes the output.
    """
    previous = None
    for text, style in runs:
        if previous is None:
            write_prefix(style, sink, mode)
        else:
            write_infix(previous, style, sink, mode)
        sink.write_literal(text)
        previous = style

    if previous is not None:
        write_suffix(previous, sink, mode)


def paint_runs(
    runs: Iterable[Run],
    mode: EncodingMode = EncodingMode.STANDARD,
) -> str:
    """Return styled runs as a single string. See ``write_painted``."""
    sink = StringSink()
    write_painted(runs, sink, mode)
    return sink.getvalue()


def colorize_line(
    chars: Sequence[str],
    colors: Sequence[tuple[int, int, int]] | np.ndarray,
    background: bool = False,
) -> str:
    """
    Colorize a line of characters, one true color per character.

    Consecutive characters of the same color share a single color code.

    Args:
        chars: Characters to paint.
        colors: (r, g, b) per character, as tuples or an (N, 3) array, 0-255.
        background: Paint the colors as background instead of foreground.

    Returns:
        String with ANSI color codes.

    Raises:
        ValueError: If the lengths differ or a channel is out of range.
    """
    if len(colors) != len(chars):
        raise ValueError(f"Got {len(chars)} characters but {len(colors)} colors")
    if not len(chars):
        return ""

    rgb = np.rint(np.asarray(colors)).astype(int)
    if rgb.shape != (len(chars), 3):
        raise ValueError(
            f"Expected {len(chars)} colors of shape (3,), got array of shape {rgb.shape}"
        )

    runs = []
    for char, channels in zip(chars, rgb.tolist()):
        color = Rgb(*channels)
        style = Style(background=color) if background else Style(foreground=color)
        runs.append((char, style))
    return paint_runs(runs)


def gradient(start: Rgb, end: Rgb, steps: int) -> list[Rgb]:
    """
    Linearly interpolate between two colors.

    Args:
        start: First color.
        end: Last color.
        steps: Number of colors to return, including both ends (>= 2).

    Returns:
        List of ``steps`` colors from ``start`` to ``end``.
    """
    if steps < 2:
        raise ValueError(f"steps must be >= 2, got {steps}")

    points = np.linspace(
        [start.r, start.g, start.b],
        [end.r, end.g, end.b],
        num=steps,
    )
    return [Rgb(*row) for row in np.rint(points).astype(int).tolist()]


def paint_gradient(
    text: str,
    start: Rgb,
    end: Rgb,
    background: bool = False,
) -> str:
    """Paint each character of ``text`` along a gradient from start to end."""
    if not text:
        return ""
    if len(text) == 1:
        return colorize_line(text, [(start.r, start.g, start.b)], background)

    colors = gradient(start, end, len(text))
    return colorize_line(text, [(c.r, c.g, c.b) for c in colors], background)
