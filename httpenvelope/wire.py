from __future__ import annotations
from typing import IO, Optional, Union
import logging

from .codecs import Codec, JSONCodec
from .envelope import Response
from .errors import DeserializationFailure, SerializationFailure

log = logging.getLogger(__name__)

def pack(resp: Response, codec: Optional[Codec] = None) -> bytes:
    """Encode the four wire fields. Raises SerializationFailure."""
    codec = codec or JSONCodec()
    try:
        return codec.dumps(resp.to_dict())
    except (TypeError, ValueError, RecursionError) as e:
        log.debug("cannot encode response %d: %s", resp.status_code, e)
        raise SerializationFailure(f"unable to encode response as {codec.name}: {e}") from e

def unpack(data: Union[bytes, str], codec: Optional[Codec] = None) -> Response:
    """Decode one complete body into a sinkless Response. Raises DeserializationFailure."""
    codec = codec or JSONCodec()
    if isinstance(data, str):
        data = data.encode("utf-8")
    try:
        obj = codec.loads(data)
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        log.debug("cannot decode response body: %s", e)
        raise DeserializationFailure(f"invalid {codec.name} body: {e}") from e
    try:
        return Response.from_dict(obj)
    except DeserializationFailure as e:
        log.debug("response body has the wrong shape: %s", e)
        raise

def parse(stream: IO, codec: Optional[Codec] = None) -> Response:
    """Read `stream` to the end, then unpack it."""
    return unpack(stream.read(), codec)
