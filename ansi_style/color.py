"""
Terminal color model.

A color is one of three variants:

- ``Named``: the 16 classic terminal colors plus ``DEFAULT``
- ``Fixed``: an index into the 256-color palette
- ``Rgb``: a 24-bit true color

Each variant maps to the numeric fragment of an SGR sequence, e.g. ``34``
for a blue foreground or ``48;2;70;130;180`` for a true-color background.
"""

import numbers
import string
from dataclasses import dataclass
from enum import Enum


class _StyleShortcuts:
    """Shortcuts that turn a color into a foreground ``Style``."""

    def normal(self):
        """Return a ``Style`` with this color as foreground and nothing else."""
        from .style import Style
        return Style(foreground=self)

    def bold(self):
        return self.normal().bold()

    def dimmed(self):
        return self.normal().dimmed()

    def italic(self):
        return self.normal().italic()

    def underline(self):
        return self.normal().underline()

    def blink(self):
        return self.normal().blink()

    def reverse(self):
        return self.normal().reverse()

    def hidden(self):
        return self.normal().hidden()

    def strikethrough(self):
        return self.normal().strikethrough()

    def on(self, background: "Color"):
        """Return a ``Style`` with this foreground over ``background``."""
        return self.normal().on(background)

    def prefix(self) -> str:
        """Return the codes that switch the foreground to this color."""
        from .encoder import prefix
        return prefix(self.normal())

    def infix(self, next: "Color") -> str:
        """Return the codes that switch from this color to ``next``.

        Empty if the two colors are equal.
        """
        from .encoder import infix
        return infix(self.normal(), next.normal())

    def suffix(self) -> str:
        from .encoder import suffix
        return suffix(self.normal())

    def paint(self, text: str) -> str:
        """Return ``text`` painted in this foreground color."""
        from .paint import paint
        return paint(text, self.normal())


class Named(_StyleShortcuts, Enum):
    """The named terminal colors.

    PURPLE and MAGENTA are the same terminal color under two names, as are
    LIGHT_PURPLE and LIGHT_MAGENTA. They stay distinct members but encode
    to identical codes.
    """

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    PURPLE = "purple"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    DEFAULT = "default"
    DARK_GRAY = "dark_gray"
    LIGHT_RED = "light_red"
    LIGHT_GREEN = "light_green"
    LIGHT_YELLOW = "light_yellow"
    LIGHT_BLUE = "light_blue"
    LIGHT_PURPLE = "light_purple"
    LIGHT_MAGENTA = "light_magenta"
    LIGHT_CYAN = "light_cyan"
    LIGHT_GRAY = "light_gray"


# Foreground codes; background codes are these plus 10
_NAMED_FOREGROUND = {
    Named.BLACK: 30,
    Named.RED: 31,
    Named.GREEN: 32,
    Named.YELLOW: 33,
    Named.BLUE: 34,
    Named.PURPLE: 35,
    Named.MAGENTA: 35,
    Named.CYAN: 36,
    Named.WHITE: 37,
    Named.DEFAULT: 39,
    Named.DARK_GRAY: 90,
    Named.LIGHT_RED: 91,
    Named.LIGHT_GREEN: 92,
    Named.LIGHT_YELLOW: 93,
    Named.LIGHT_BLUE: 94,
    Named.LIGHT_PURPLE: 95,
    Named.LIGHT_MAGENTA: 95,
    Named.LIGHT_CYAN: 96,
    Named.LIGHT_GRAY: 97,
}


def _check_byte(name: str, value: int) -> int:
    """Return ``value`` as a plain int, or raise if it is not a byte."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} must be an int, got {value!r}")
    value = int(value)
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be 0-255, got {value}")
    return value


@dataclass(frozen=True)
class Fixed(_StyleShortcuts):
    """A color from the 256-color palette."""
    index: int

    def __post_init__(self):
        # Frozen, so normalise numpy integers through object.__setattr__
        object.__setattr__(self, "index", _check_byte("index", self.index))


@dataclass(frozen=True)
class Rgb(_StyleShortcuts):
    """A 24-bit true color."""
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ("r", "g", "b"):
            object.__setattr__(self, name, _check_byte(name, getattr(self, name)))

    @classmethod
    def from_hex(cls, value: str) -> "Rgb":
        """
        Parse a hex color such as ``"#4682b4"`` or ``"4682B4"``.

        Raises:
            ValueError: If the string is not six hex digits.
        """
        digits = value[1:] if value.startswith("#") else value
        if len(digits) != 6 or not all(c in string.hexdigits for c in digits):
            raise ValueError(f"Expected 6 hex digits, got {value!r}")
        return cls(*(int(digits[i:i + 2], 16) for i in (0, 2, 4)))


Color = Named | Fixed | Rgb


def foreground_code(color: Color) -> str:
    """
    Return the SGR fragment that sets ``color`` as the foreground.

    Args:
        color: Any color variant.

    Returns:
        Code fragment without the ``ESC[`` and ``m`` delimiters.
    """
    if isinstance(color, Named):
        return str(_NAMED_FOREGROUND[color])
    if isinstance(color, Fixed):
        return f"38;5;{color.index}"
    if isinstance(color, Rgb):
        return f"38;2;{color.r};{color.g};{color.b}"
    raise TypeError(f"Not a color: {color!r}")


def background_code(color: Color) -> str:
    """Return the SGR fragment that sets ``color`` as the background."""
    if isinstance(color, Named):
        return str(_NAMED_FOREGROUND[color] + 10)
    if isinstance(color, Fixed):
        return f"48;5;{color.index}"
    if isinstance(color, Rgb):
        return f"48;2;{color.r};{color.g};{color.b}"
    raise TypeError(f"Not a color: {color!r}")
