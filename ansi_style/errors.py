"""Exceptions raised by ansi_style."""


class AnsiStyleError(Exception):
    """Base class for ansi_style errors."""


class SinkFullError(AnsiStyleError):
    """A bounded sink has no room for the fragment being written."""

    def __init__(self, capacity: int, attempted: int):
        self.capacity = capacity
        self.attempted = attempted
        super().__init__(
            f"Sink capacity of {capacity} bytes exceeded "
            f"(would hold {attempted} bytes)"
        )
