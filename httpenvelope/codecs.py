from __future__ import annotations
from typing import Any, Protocol as TypingProtocol

import json

class Codec(TypingProtocol):
    name: str
    def dumps(self, obj: Any) -> bytes: ...
    def loads(self, data: bytes) -> Any: ...

def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not valid JSON")

def _check_keys(obj: Any) -> None:
    # json.dumps turns 1, 2.5, True and None keys into strings; refuse them instead
    if isinstance(obj, dict):
        for k, v in obj.items():
            if not isinstance(k, str):
                raise TypeError(f"keys must be str, not {type(k).__name__}: {k!r}")
            _check_keys(v)
    elif isinstance(obj, (list, tuple)):
        for v in obj:
            _check_keys(v)

class JSONCodec:
    """
    Strict JSON: NaN/Infinity are refused in both directions,
    cycles, non-JSON types and non-str keys raise instead of being coerced.
    """
    name = "json"

    def __init__(self, *, separators: tuple[str, str] = (",", ":")):
        self.separators = separators

    def dumps(self, obj: Any) -> bytes:
        data = json.dumps(obj, separators=self.separators, allow_nan=False)
        # only reached once dumps has ruled out cycles
        _check_keys(obj)
        return data.encode("utf-8")

    def loads(self, data: bytes) -> Any:
        return json.loads(data.decode("utf-8"), parse_constant=_reject_constant)
