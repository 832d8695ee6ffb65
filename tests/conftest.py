"""Shared test fixtures for httpenvelope tests."""

from __future__ import annotations

import io
import json
from typing import Any

import pytest


class HeaderMap(dict):
    """Header dict that logs each assignment to the owning writer's events."""

    def __init__(self, events: list[str]) -> None:
        super().__init__()
        self._events = events

    def __setitem__(self, key: str, value: str) -> None:
        super().__setitem__(key, value)
        self._events.append("header")


class StackWriter:
    """HTTP-response-like sink that remembers everything done to it, in order."""

    def __init__(self) -> None:
        self.events: list[str] = []
        self.headers: dict[str, str] = HeaderMap(self.events)
        self.status: int | None = None
        self.stack: list[bytes] = []

    def write_header(self, status_code: int) -> None:
        self.status = status_code
        self.events.append("status")

    def write(self, data: bytes) -> int:
        self.stack.append(bytes(data))
        self.events.append("body")
        return len(data)

    def peek(self) -> Any:
        """Decode the last body written, or None if nothing was written."""
        if not self.stack:
            return None
        return json.loads(self.stack[-1])


@pytest.fixture
def stack_writer() -> StackWriter:
    return StackWriter()


@pytest.fixture
def byte_sink() -> io.BytesIO:
    """A plain byte sink with no header or status capability."""
    return io.BytesIO()
