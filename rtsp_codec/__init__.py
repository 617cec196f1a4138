from rtsp_codec.errors import (
    RTSPError,
    ReadError,
    MalformedRequestLine,
    MalformedStatusLine,
    UnknownMethod,
    UnknownStatus,
    MalformedHeader,
    MalformedContentLength,
    IncompleteBody,
    WriteError,
)
from rtsp_codec.method import Method, parse_method
from rtsp_codec.status import Status, parse_status
from rtsp_codec.message import Message, Request, Response
from rtsp_codec.reader import read_request, read_response
from rtsp_codec.writer import (
    encode_request,
    encode_response,
    write_request,
    write_response,
)

__all__ = [
    "RTSPError",
    "ReadError",
    "MalformedRequestLine",
    "MalformedStatusLine",
    "UnknownMethod",
    "UnknownStatus",
    "MalformedHeader",
    "MalformedContentLength",
    "IncompleteBody",
    "WriteError",
    "Method",
    "parse_method",
    "Status",
    "parse_status",
    "Message",
    "Request",
    "Response",
    "read_request",
    "read_response",
    "encode_request",
    "encode_response",
    "write_request",
    "write_response",
]
