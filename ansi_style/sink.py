"""
Output sinks for the encoders.

The encoders are written once against the ``Sink`` protocol and can write
into a character buffer (``StringSink``), a byte buffer (``BytesSink``) or an
open file object (``StreamSink``). A failing write raises; whatever was
written before the failure stays in the sink.
"""

import io
import logging
from typing import IO, Protocol

from .errors import SinkFullError

logger = logging.getLogger(__name__)


class Sink(Protocol):
    """Anything the encoders can write escape codes into."""

    def write_literal(self, text: str) -> None:
        """Write ``text`` as-is."""

    def write_formatted(self, template: str, *values: object) -> None:
        """Write ``template.format(*values)``."""


class StringSink:
    """Character buffer sink."""

    def __init__(self):
        self._buffer = io.StringIO()

    def write_literal(self, text: str) -> None:
        self._buffer.write(text)

    def write_formatted(self, template: str, *values: object) -> None:
        self._buffer.write(template.format(*values))

    def getvalue(self) -> str:
        return self._buffer.getvalue()


class BytesSink:
    """
    Byte buffer sink, optionally bounded. Text is stored UTF-8 encoded.

    Args:
        capacity: Maximum number of bytes held, or None for unbounded.
    """

    def __init__(self, capacity: int | None = None):
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self.capacity = capacity
        self._buffer = bytearray()

    def write_literal(self, text: str) -> None:
        self.write_bytes(text.encode("utf-8"))

    def write_formatted(self, template: str, *values: object) -> None:
        self.write_literal(template.format(*values))

    def write_bytes(self, data: bytes) -> None:
        """
        Append raw bytes.

        Raises:
            SinkFullError: If ``data`` does not fit; nothing of it is stored.
        """
        attempted = len(self._buffer) + len(data)
        if self.capacity is not None and attempted > self.capacity:
            logger.debug(
                "BytesSink full: %d of %d bytes used, %d more requested",
                len(self._buffer), self.capacity, len(data),
            )
            raise SinkFullError(self.capacity, attempted)
        self._buffer.extend(data)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)


class StreamSink:
    """
    Sink over an open text or binary stream.

    Binary streams receive UTF-8 bytes. Stream errors propagate unchanged.
    """

    def __init__(self, stream: IO):
        self.stream = stream
        self._binary = not isinstance(stream, io.TextIOBase)

    def write_literal(self, text: str) -> None:
        if self._binary:
            self.stream.write(text.encode("utf-8"))
        else:
            self.stream.write(text)

    def write_formatted(self, template: str, *values: object) -> None:
        self.write_literal(template.format(*values))
