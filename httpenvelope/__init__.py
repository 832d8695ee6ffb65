"""
Public API:
- Response: status code/text, optional error details and a result; output() writes it to a sink
- parse: read a stream and rebuild the Response it carries
- pack, unpack: Response <-> bytes, without a sink or stream
- ByteSink, TransportSink: what output() writes to (the latter also gets header + status)
- Codec, JSONCodec: body encoding
- status_text, STATUS_TEXT: canonical reason phrases
- EnvelopeError, SerializationFailure, DeserializationFailure, MissingSink
"""

# Core type
from .envelope import Response

# Wire helpers
from .wire import pack, unpack, parse

# Sink contracts
from .transport import ByteSink, TransportSink

# Encoding
from .codecs import Codec, JSONCodec

# Status phrases
from .status import STATUS_TEXT, status_text

# Errors
from .errors import EnvelopeError, SerializationFailure, DeserializationFailure, MissingSink

__all__ = [
    "Response",
    "pack",
    "unpack",
    "parse",
    "ByteSink",
    "TransportSink",
    "Codec",
    "JSONCodec",
    "STATUS_TEXT",
    "status_text",
    "EnvelopeError",
    "SerializationFailure",
    "DeserializationFailure",
    "MissingSink",
]

__version__ = "0.1.0"
