import logging

from rtsp_codec.errors import (
    ReadError,
    MalformedRequestLine,
    MalformedStatusLine,
    MalformedHeader,
    MalformedContentLength,
    IncompleteBody,
)
from rtsp_codec.message import Request, Response, CONTENT_LENGTH
from rtsp_codec.method import parse_method
from rtsp_codec.status import parse_status

from typing import BinaryIO, Dict, Optional, Type

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
LINE_TERMINATORS = "\r\n"


def _read_line(stream: BinaryIO, error: Type[ReadError]) -> Optional[str]:
    """
    Read a single line and strip its terminator.
    Returns None if the stream ended before a line-feed was found.
    """
    raw_line = stream.readline()
    if not raw_line.endswith(b"\n"):
        return None

    try:
        line = raw_line.decode(ENCODING)
    except UnicodeDecodeError as e:
        raise error(f"Line is not valid {ENCODING}: {raw_line!r}") from e

    return line.rstrip(LINE_TERMINATORS)


def _read_headers(stream: BinaryIO) -> Dict[str, str]:
    # Read lines until we hit the empty line, which indicates
    # all the headers have been processed
    headers: Dict[str, str] = {}
    while True:
        header_field = _read_line(stream, MalformedHeader)
        if header_field is None:
            raise ReadError("Stream ended before the end of the headers")

        if not header_field:
            break

        name, colon, value = header_field.partition(":")
        if not colon:
            raise MalformedHeader(f"Improper header: {header_field}")

        headers[name.strip()] = value.strip()

    return headers


def _read_body(stream: BinaryIO, length: int) -> bytes:
    # A single read may return less than asked for on raw streams and sockets
    chunks = []
    remaining = length
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break

        chunks.append(chunk)
        remaining -= len(chunk)

    return b"".join(chunks)


def _parse_int(value: str) -> int:
    # Plain ASCII digits only; int() would also take signs and underscores
    if not (value.isascii() and value.isdigit()):
        raise ValueError(f"Not a non-negative integer: {value}")
    return int(value)


# https://tools.ietf.org/html/rfc2326#page-19
def read_request(stream: BinaryIO) -> Request:
    """
    Read a single RTSP request from a binary stream.

    The body is read on a best-effort basis: a malformed `Content-Length` is
    treated as zero, and a body cut short by the end of the stream is returned
    as is.
    """
    request_line = _read_line(stream, MalformedRequestLine)
    if request_line is None:
        raise MalformedRequestLine("Stream ended before the request line was read")

    request_line_parts = request_line.split(" ")
    if len(request_line_parts) != 3:
        raise MalformedRequestLine(f"Improperly formatted request line: {request_line}")

    method_token, uri, protocol = request_line_parts
    request = Request(method=parse_method(method_token), uri=uri, protocol=protocol)
    logger.debug(f"Request line: {request.method.as_string()} {uri} {protocol}")

    request.headers = _read_headers(stream)
    if CONTENT_LENGTH not in request.headers:
        return request

    content_length = request.headers[CONTENT_LENGTH]
    try:
        length = _parse_int(content_length)
    except ValueError:
        logger.warning(f"Ignoring malformed {CONTENT_LENGTH}: {content_length}")
        length = 0

    request.body = _read_body(stream, length)
    if len(request.body) < length:
        logger.warning(
            f"Request body is short by {length - len(request.body)} bytes; Keeping what was read"
        )

    logger.debug(f"Read request body of {len(request.body)} bytes")
    return request


def read_response(stream: BinaryIO) -> Response:
    """
    Read a single RTSP response from a binary stream.

    Unlike `read_request`, the body is read strictly: a malformed
    `Content-Length` raises `MalformedContentLength`, and a body cut short by
    the end of the stream raises `IncompleteBody` holding the partial response.
    """
    status_line = _read_line(stream, MalformedStatusLine)
    if status_line is None:
        raise MalformedStatusLine("Stream ended before the status line was read")

    # The reason phrase may contain spaces, so it takes the rest of the line
    status_line_parts = status_line.split(" ", 2)
    if len(status_line_parts) != 3:
        raise MalformedStatusLine(f"Improperly formatted status line: {status_line}")

    protocol, status_str, _ = status_line_parts
    try:
        status_num = _parse_int(status_str)
    except ValueError as e:
        raise MalformedStatusLine(f"Status not a valid integer: {status_str}") from e

    response = Response(status=parse_status(status_num), protocol=protocol)
    logger.debug(f"Status line: {protocol} {response.status.code}")

    response.headers = _read_headers(stream)
    if CONTENT_LENGTH not in response.headers:
        return response

    content_length = response.headers[CONTENT_LENGTH]
    try:
        length = _parse_int(content_length)
    except ValueError as e:
        raise MalformedContentLength(
            f"Unable to parse header '{CONTENT_LENGTH}' (string: {content_length})"
        ) from e

    response.body = _read_body(stream, length)
    if len(response.body) < length:
        raise IncompleteBody(
            f"Error reading body; Got {len(response.body)} of {length} bytes",
            response,
        )

    logger.debug(f"Read response body of {len(response.body)} bytes")
    return response
