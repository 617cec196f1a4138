import logging

from rtsp_codec.errors import WriteError
from rtsp_codec.message import Message, Request, Response, CONTENT_LENGTH

from typing import BinaryIO, List

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
CRLF = "\r\n"
LINE_BREAKS = "\r\n"


def _check_field(
    value: str, what: str, forbidden: str = LINE_BREAKS, allow_empty: bool = True
) -> str:
    # Anything rejected here would not read back as the same message
    if not value and not allow_empty:
        raise WriteError(f"Empty {what}")
    if any(char in value for char in forbidden):
        raise WriteError(f"Invalid character in {what}: {value!r}")
    return value


def _encode(first_line: str, message: Message) -> bytes:
    lines: List[str] = [first_line]
    for header, value in message.headers.items():
        # Always recomputed from the body below
        if header.casefold() == CONTENT_LENGTH.casefold():
            continue
        _check_field(header, "header name", LINE_BREAKS + ":")
        _check_field(value, f"header {header}")
        lines.append(f"{header}: {value}")

    if message.body:
        lines.append(f"{CONTENT_LENGTH}: {len(message.body)}")

    head = CRLF.join(lines) + CRLF * 2
    return head.encode(ENCODING) + message.body


def encode_request(request: Request) -> bytes:
    """
    Encode a request into wire bytes.
    Raises `WriteError` if a field could not be read back as written: line
    breaks anywhere, a colon in a header name, or a space in (or an empty)
    URI or protocol.
    """
    uri = _check_field(request.uri, "request URI", LINE_BREAKS + " ", False)
    protocol = _check_field(request.protocol, "protocol", LINE_BREAKS + " ", False)
    return _encode(f"{request.method.as_string().upper()} {uri} {protocol}", request)


def encode_response(response: Response) -> bytes:
    """Same as `encode_request`; only the protocol and headers are checked."""
    protocol = _check_field(response.protocol, "protocol", LINE_BREAKS + " ")
    return _encode(
        f"{protocol} {response.status.code} {response.status.reason_phrase()}",
        response,
    )


def _write(stream: BinaryIO, buffer: bytes) -> int:
    try:
        written = stream.write(buffer)
        stream.flush()
    except (OSError, ValueError) as e:
        # A closed file raises ValueError rather than OSError
        raise WriteError(f"Error writing message: {e}") from e

    # Some writers do not report how much they wrote
    if written is None:
        written = len(buffer)

    logger.debug(f"Wrote message of {written} bytes")
    return written


def write_request(stream: BinaryIO, request: Request) -> int:
    return _write(stream, encode_request(request))


def write_response(stream: BinaryIO, response: Response) -> int:
    return _write(stream, encode_response(response))
