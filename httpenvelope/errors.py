"""Failures raised at the serialize and parse boundaries."""

from __future__ import annotations


class EnvelopeError(Exception):
    """Base class for every error raised by httpenvelope."""


class SerializationFailure(EnvelopeError):
    """A field (usually `result`) has no JSON representation."""


class DeserializationFailure(EnvelopeError):
    """Input is not JSON, or does not have the envelope's shape and types."""


class MissingSink(EnvelopeError):
    """output() was called on a Response that has nowhere to write."""
