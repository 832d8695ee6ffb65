from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional
import logging

from .codecs import Codec, JSONCodec
from .errors import DeserializationFailure, MissingSink
from .status import INTERNAL_SERVER_ERROR, status_text
from .transport import ByteSink, TransportSink

log = logging.getLogger(__name__)

# Wire keys, in output order
FIELDS = ("status_code", "status_text", "error_details", "result")

CONTENT_TYPE = "application/json"

@dataclass
class Response:
    """
    Standard response body: status code and text, optional error details,
    and whatever the handler produced as `result`.

    `sink` and `codec` only drive output(); they are never serialized and
    take no part in equality.
    """
    status_code: int = 0
    status_text: str = ""
    error_details: Optional[str] = None
    result: Any = None
    sink: Optional[ByteSink] = field(default=None, repr=False, compare=False)
    codec: Codec = field(default_factory=JSONCodec, repr=False, compare=False)

    @staticmethod
    def new(sink: Optional[ByteSink], *, codec: Optional[Codec] = None) -> "Response":
        """
        Start a response in the 500 state. Anything that reaches output()
        without set_result() reports Internal Server Error rather than success.
        """
        return Response(
            status_code=INTERNAL_SERVER_ERROR,
            status_text=status_text(INTERNAL_SERVER_ERROR),
            sink=sink,
            codec=codec or JSONCodec(),
        )

    def with_error_details(self, error_details: str) -> "Response":
        """
        Attach a human-readable explanation beyond the status code. Most
        useful for vague codes such as 400; chain it onto set_result():

            resp.set_result(400, None).with_error_details("Missing parameter 'name'")
        """
        self.error_details = error_details
        return self

    def set_result(self, status_code: int, result: Any) -> "Response":
        """Set the status (text follows the code, "" if unknown) and the payload."""
        self.status_code = status_code
        self.status_text = status_text(status_code)
        self.result = result
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "status_code":   self.status_code,
            "status_text":   self.status_text,
            "error_details": self.error_details,
            "result":        self.result,
        }

    @staticmethod
    def from_dict(obj: Optional[Mapping[str, Any]]) -> "Response":
        """
        Build a Response from a decoded wire mapping. Missing keys and nulls
        keep the zero value; unknown keys are ignored; wrong types raise.
        """
        if obj is None:
            return Response()
        if not isinstance(obj, Mapping):
            raise DeserializationFailure(
                f"expected a JSON object, got {type(obj).__name__}")

        code = obj.get("status_code")
        if code is None:
            code = 0
        elif isinstance(code, bool) or not isinstance(code, int):
            raise DeserializationFailure(
                f"status_code: expected integer, got {_json_type(code)}")

        text = obj.get("status_text")
        if text is None:
            text = ""
        elif not isinstance(text, str):
            raise DeserializationFailure(
                f"status_text: expected string, got {_json_type(text)}")

        details = obj.get("error_details")
        if details is not None and not isinstance(details, str):
            raise DeserializationFailure(
                f"error_details: expected string, got {_json_type(details)}")

        return Response(
            status_code=code,
            status_text=text,
            error_details=details,
            result=obj.get("result"),
        )

    def output(self) -> None:
        """
        Write the response to the sink as a single body write.

        A TransportSink first gets the Content-Type header and the status
        line. Raises SerializationFailure if the body can't be encoded;
        the header is not taken back in that case.
        """
        from .wire import pack

        sink = self.sink
        if sink is None:
            raise MissingSink("Response has no sink to write to")

        if isinstance(sink, TransportSink):
            sink.headers["Content-Type"] = CONTENT_TYPE
            sink.write_header(self.status_code)

        body = pack(self, self.codec)
        log.debug("writing %d %s (%d bytes)", self.status_code, self.status_text, len(body))
        sink.write(body)

def _json_type(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__
