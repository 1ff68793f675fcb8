"""
Text style: attribute flags plus optional foreground and background colors.
"""

from dataclasses import dataclass, fields, replace

from .color import Color

# Attribute fields in canonical order with their SGR codes (6 is unused)
ATTRIBUTES = (
    ("is_bold", 1),
    ("is_dimmed", 2),
    ("is_italic", 3),
    ("is_underline", 4),
    ("is_blink", 5),
    ("is_reverse", 7),
    ("is_hidden", 8),
    ("is_strikethrough", 9),
)


@dataclass(frozen=True)
class Style:
    """
    An immutable set of text attributes and colors.

    Build styles fluently; every builder returns a new ``Style``::

        Style().bold().fg(Named.BLUE)
        Named.BLUE.bold()  # same thing
    """
    is_bold: bool = False
    is_dimmed: bool = False
    is_italic: bool = False
    is_underline: bool = False
    is_blink: bool = False
    is_reverse: bool = False
    is_hidden: bool = False
    is_strikethrough: bool = False
    foreground: Color | None = None
    background: Color | None = None
    prefix_with_reset: bool = False  # Emit a full reset before the prefix

    @property
    def is_plain(self) -> bool:
        """True if no attribute is set and neither color is present."""
        return (
            not any(self.attributes())
            and self.foreground is None
            and self.background is None
        )

    def attributes(self) -> list[bool]:
        """Attribute flags in canonical order."""
        return [getattr(self, name) for name, _ in ATTRIBUTES]

    def bold(self) -> "Style":
        return replace(self, is_bold=True)

    def dimmed(self) -> "Style":
        return replace(self, is_dimmed=True)

    def italic(self) -> "Style":
        return replace(self, is_italic=True)

    def underline(self) -> "Style":
        return replace(self, is_underline=True)

    def blink(self) -> "Style":
        return replace(self, is_blink=True)

    def reverse(self) -> "Style":
        return replace(self, is_reverse=True)

    def hidden(self) -> "Style":
        return replace(self, is_hidden=True)

    def strikethrough(self) -> "Style":
        return replace(self, is_strikethrough=True)

    def fg(self, color: Color) -> "Style":
        """Return a copy with ``color`` as the foreground."""
        return replace(self, foreground=color)

    def on(self, color: Color) -> "Style":
        """Return a copy with ``color`` as the background."""
        return replace(self, background=color)

    def reset_before(self) -> "Style":
        """Return a copy whose prefix starts with a full reset."""
        return replace(self, prefix_with_reset=True)

    def __repr__(self) -> str:
        # Only show what differs from the default, e.g. Style(is_bold=True)
        changed = [
            f"{f.name}={getattr(self, f.name)!r}"
            for f in fields(self)
            if getattr(self, f.name) != f.default
        ]
        return f"Style({', '.join(changed)})"
