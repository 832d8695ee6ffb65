from __future__ import annotations
from typing import MutableMapping, Protocol, runtime_checkable

@runtime_checkable
class ByteSink(Protocol):
    """Anything that accepts raw bytes: files, BytesIO, sockets wrapped in a writer."""

    def write(self, data: bytes) -> object:
        """Write one chunk of body bytes."""
        ...

@runtime_checkable
class TransportSink(Protocol):
    """
    A ByteSink that is also an HTTP response: it carries a header map and
    can emit the status line. Both must be used before the first write().
    """

    headers: MutableMapping[str, str]

    def write_header(self, status_code: int) -> None:
        """Send the status line (and the headers set so far)."""
        ...

    def write(self, data: bytes) -> object:
        ...
