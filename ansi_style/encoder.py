"""
Escape code encoding for styles.

Three operations, all writing into a ``Sink``:

1. ``write_prefix``: codes that switch the terminal into a style
2. ``write_suffix``: the reset that switches it back
3. ``write_infix``: the shortest codes that move from one style to another

``write_infix`` picks one of three outcomes. Equal styles need nothing.
If the next style only adds attributes or changes colors, only the new
codes are written. If it drops an attribute or a color, there is no
portable way to turn that single thing off, so the terminal is reset and
the next style is written in full.
"""

import logging
from dataclasses import replace
from enum import Enum

from .color import background_code, foreground_code
from .sink import BytesSink, Sink, StringSink
from .style import ATTRIBUTES, Style

logger = logging.getLogger(__name__)

# Code that resets all attributes and colors
RESET = "\x1b[0m"


class EncodingMode(Enum):
    """How attribute codes are written."""
    STANDARD = "standard"  # 1;4;34
    GNU_LEGACY = "gnu_legacy"  # 01;04;34, for older GNU tools

    @property
    def attribute_template(self) -> str:
        return "{:02d}" if self is EncodingMode.GNU_LEGACY else "{}"


def write_prefix(
    style: Style,
    sink: Sink,
    mode: EncodingMode = EncodingMode.STANDARD,
) -> None:
    """
    Write the codes that go before text painted in ``style``.

    A plain style writes nothing at all, not even an empty ``ESC[m``.

    Args:
        style: Style to switch to.
        sink: Destination; its write errors propagate.
        mode: Attribute code formatting.
    """
    if style.is_plain:
        return

    if style.prefix_with_reset:
        sink.write_literal(RESET)

    sink.write_literal("\x1b[")
    written_anything = False

    for name, code in ATTRIBUTES:
        if getattr(style, name):
            if written_anything:
                sink.write_literal(";")
            sink.write_formatted(mode.attribute_template, code)
            written_anything = True

    # Background goes before foreground
    if style.background is not None:
        if written_anything:
            sink.write_literal(";")
        sink.write_literal(background_code(style.background))
        written_anything = True

    if style.foreground is not None:
        if written_anything:
            sink.write_literal(";")
        sink.write_literal(foreground_code(style.foreground))

    sink.write_literal("m")


def write_suffix(
    style: Style,
    sink: Sink,
    mode: EncodingMode = EncodingMode.STANDARD,
) -> None:
    """Write the codes that go after text painted in ``style``."""
    if not style.is_plain:
        sink.write_literal(RESET)


def compute_update(current: Style, next: Style) -> Style | None:
    """
    Work out what has to be written to go from ``current`` to ``next``.

    Returns:
        None if the styles are equal. Otherwise a ``Style`` to write with
        ``write_prefix``: either the delta of new attributes and changed
        colors, or ``next`` itself with ``prefix_with_reset`` set when
        something has to be turned off.
    """
    if current == next:
        return None

    removes_attribute = any(
        was_on and not is_on
        for was_on, is_on in zip(current.attributes(), next.attributes())
    )
    removes_color = (
        (current.foreground is not None and next.foreground is None)
        or (current.background is not None and next.background is None)
    )

    if removes_attribute or removes_color or next.prefix_with_reset:
        logger.debug(
            "Full reset from %r to %r (attribute removed: %s, color removed: %s)",
            current, next, removes_attribute, removes_color,
        )
        return replace(next, prefix_with_reset=True)

    added = {
        name: getattr(next, name) and not getattr(current, name)
        for name, _ in ATTRIBUTES
    }
    return Style(
        **added,
        foreground=next.foreground if next.foreground != current.foreground else None,
        background=next.background if next.background != current.background else None,
    )


def write_infix(
    current: Style,
    next: Style,
    sink: Sink,
    mode: EncodingMode = EncodingMode.STANDARD,
) -> None:
    """
    Write the minimal codes that turn ``current`` into ``next``.

    After this, the terminal looks as if ``write_prefix(next)`` had been
    written from a clean state.
    """
    update = compute_update(current, next)
    if update is None:
        return

    if update.prefix_with_reset:
        # Written by hand so a plain ``next`` still gets its reset
        sink.write_literal(RESET)
        write_prefix(replace(update, prefix_with_reset=False), sink, mode)
    else:
        write_prefix(update, sink, mode)


def prefix(style: Style, mode: EncodingMode = EncodingMode.STANDARD) -> str:
    """Return the prefix of ``style`` as a string."""
    sink = StringSink()
    write_prefix(style, sink, mode)
    return sink.getvalue()


def suffix(style: Style, mode: EncodingMode = EncodingMode.STANDARD) -> str:
    """Return the suffix of ``style`` as a string."""
    sink = StringSink()
    write_suffix(style, sink, mode)
    return sink.getvalue()


def infix(
    current: Style,
    next: Style,
    mode: EncodingMode = EncodingMode.STANDARD,
) -> str:
    """Return the transition from ``current`` to ``next`` as a string."""
    sink = StringSink()
    write_infix(current, next, sink, mode)
    return sink.getvalue()


def prefix_bytes(style: Style, mode: EncodingMode = EncodingMode.STANDARD) -> bytes:
    sink = BytesSink()
    write_prefix(style, sink, mode)
    return sink.getvalue()


def suffix_bytes(style: Style, mode: EncodingMode = EncodingMode.STANDARD) -> bytes:
    sink = BytesSink()
    write_suffix(style, sink, mode)
    return sink.getvalue()


def infix_bytes(
    current: Style,
    next: Style,
    mode: EncodingMode = EncodingMode.STANDARD,
) -> bytes:
    sink = BytesSink()
    write_infix(current, next, sink, mode)
    return sink.getvalue()
