from io import BytesIO

import pytest

from rtsp_codec.errors import (
    ReadError,
    MalformedRequestLine,
    MalformedStatusLine,
    UnknownMethod,
    UnknownStatus,
    MalformedHeader,
    MalformedContentLength,
    IncompleteBody,
)
from rtsp_codec.method import Method
from rtsp_codec.reader import read_request, read_response
from rtsp_codec.status import Status


class ChunkedStream(BytesIO):
    """Returns at most `chunk_size` bytes per read, like a socket would."""

    def __init__(self, data: bytes, chunk_size: int):
        super().__init__(data)
        self.chunk_size = chunk_size

    def read(self, size=-1):
        if size < 0 or size > self.chunk_size:
            size = self.chunk_size
        return super().read(size)


class BrokenStream:
    def readline(self):
        raise ConnectionResetError("connection reset")


def test_read_request():
    stream = BytesIO(
        b"SETUP rtsp://example.com/stream/track1 RTSP/1.0\r\n"
        b"CSeq: 3\r\n"
        b"Transport: RTP/AVP;unicast;client_port=8000-8001\r\n"
        b"\r\n"
    )
    request = read_request(stream)
    assert request.method is Method.SETUP
    assert request.uri == "rtsp://example.com/stream/track1"
    assert request.protocol == "RTSP/1.0"
    assert request.headers == {
        "CSeq": "3",
        "Transport": "RTP/AVP;unicast;client_port=8000-8001",
    }
    assert request.body == b""


def test_read_request_line_feed_only():
    request = read_request(BytesIO(b"PLAY rtsp://x RTSP/1.0\nCSeq: 4\n\n"))
    assert request.method is Method.PLAY
    assert request.headers == {"CSeq": "4"}


def test_body_exactness():
    stream = BytesIO(
        b"OPTIONS rtsp://x RTSP/1.0\r\nContent-Length: 5\r\n\r\nhelloPLAY"
    )
    request = read_request(stream)
    assert request.body == b"hello"
    assert stream.read() == b"PLAY"


def test_reads_consecutive_requests():
    stream = BytesIO(
        b"OPTIONS rtsp://x RTSP/1.0\r\nCSeq: 1\r\n\r\n"
        b"DESCRIBE rtsp://x RTSP/1.0\r\nCSeq: 2\r\n\r\n"
    )
    assert read_request(stream).headers["CSeq"] == "1"
    second = read_request(stream)
    assert second.method is Method.DESCRIBE
    assert second.headers["CSeq"] == "2"


def test_body_over_short_reads():
    stream = ChunkedStream(
        b"ANNOUNCE rtsp://x RTSP/1.0\r\nContent-Length: 11\r\n\r\nhello world",
        chunk_size=2,
    )
    assert read_request(stream).body == b"hello world"


def test_header_values_keep_colons():
    request = read_request(
        BytesIO(b"DESCRIBE rtsp://x RTSP/1.0\r\nContent-Base: rtsp://x/  \r\n\r\n")
    )
    assert request.headers == {"Content-Base": "rtsp://x/"}


def test_header_whitespace_trimmed():
    request = read_request(BytesIO(b"PLAY rtsp://x RTSP/1.0\r\n  Range :npt=0-\r\n\r\n"))
    assert request.headers == {"Range": "npt=0-"}


def test_duplicate_header_last_wins():
    request = read_request(
        BytesIO(b"PLAY rtsp://x RTSP/1.0\r\nCSeq: 1\r\nSession: a\r\nCSeq: 2\r\n\r\n")
    )
    assert request.headers == {"CSeq": "2", "Session": "a"}


def test_header_names_case_preserved():
    request = read_request(BytesIO(b"PLAY rtsp://x RTSP/1.0\r\ncseq: 1\r\n\r\n"))
    assert request.headers == {"cseq": "1"}
    assert request.get_header("CSeq") == "1"


def test_protocol_not_validated():
    request = read_request(BytesIO(b"PLAY rtsp://x RTSP/2.0\r\n\r\n"))
    assert request.protocol == "RTSP/2.0"


def test_unknown_method():
    with pytest.raises(UnknownMethod):
        read_request(BytesIO(b"FOO /stream RTSP/1.0\r\n\r\n"))


@pytest.mark.parametrize(
    "data",
    [
        b"PLAY rtsp://x\r\n\r\n",
        b"PLAY rtsp://x RTSP/1.0 extra\r\n\r\n",
        b"PLAY  rtsp://x RTSP/1.0\r\n\r\n",
        b"\r\n\r\n",
        b"PLAY rtsp://x RTSP/1.0",
        b"",
        b"PLAY \xff\xfe RTSP/1.0\r\n\r\n",
    ],
)
def test_malformed_request_line(data):
    with pytest.raises(MalformedRequestLine):
        read_request(BytesIO(data))


def test_malformed_header():
    with pytest.raises(MalformedHeader):
        read_request(BytesIO(b"PLAY rtsp://x RTSP/1.0\r\nBadHeaderNoColon\r\n\r\n"))


def test_non_utf8_header():
    with pytest.raises(MalformedHeader):
        read_request(BytesIO(b"PLAY rtsp://x RTSP/1.0\r\nSession: \xff\xfe\r\n\r\n"))


def test_response_non_utf8_header():
    with pytest.raises(MalformedHeader):
        read_response(BytesIO(b"RTSP/1.0 200 OK\r\nSession: \xff\xfe\r\n\r\n"))


def test_headers_cut_short():
    with pytest.raises(ReadError):
        read_request(BytesIO(b"PLAY rtsp://x RTSP/1.0\r\nCSeq: 1\r\n"))


def test_stream_errors_propagate():
    with pytest.raises(ConnectionResetError):
        read_request(BrokenStream())


def test_request_short_body_is_kept():
    request = read_request(
        BytesIO(b"ANNOUNCE rtsp://x RTSP/1.0\r\nContent-Length: 10\r\n\r\nabc")
    )
    assert request.body == b"abc"


@pytest.mark.parametrize("length", [b"abc", b"-5", b"", b"1_0"])
def test_request_malformed_content_length_reads_nothing(length):
    stream = BytesIO(
        b"ANNOUNCE rtsp://x RTSP/1.0\r\nContent-Length: " + length + b"\r\n\r\nabc"
    )
    request = read_request(stream)
    assert request.body == b""
    assert stream.read() == b"abc"


def test_read_response():
    stream = BytesIO(
        b"RTSP/1.0 200 OK\r\n"
        b"CSeq: 2\r\n"
        b"Content-Type: application/sdp\r\n"
        b"Content-Length: 9\r\n"
        b"\r\n"
        b"v=0\r\no=- "
    )
    response = read_response(stream)
    assert response.status is Status.OK
    assert response.protocol == "RTSP/1.0"
    assert response.headers == {
        "CSeq": "2",
        "Content-Type": "application/sdp",
        "Content-Length": "9",
    }
    assert response.body == b"v=0\r\no=- "


def test_reason_phrase_with_spaces():
    response = read_response(BytesIO(b"RTSP/1.0 454 Session Not Found\r\n\r\n"))
    assert response.status is Status.SESSION_NOT_FOUND


def test_reason_phrase_on_wire_is_not_checked():
    response = read_response(BytesIO(b"RTSP/1.0 404 Missing\n\n"))
    assert response.status is Status.NOT_FOUND
    assert response.status.reason_phrase() == "Not Found"


def test_unknown_status():
    with pytest.raises(UnknownStatus):
        read_response(BytesIO(b"RTSP/1.0 999 Nope\r\n\r\n"))


@pytest.mark.parametrize(
    "data",
    [
        b"RTSP/1.0 abc OK\r\n\r\n",
        b"RTSP/1.0 2_00 OK\r\n\r\n",
        b"RTSP/1.0 +200 OK\r\n\r\n",
        "RTSP/1.0 ٢٠٠ OK\r\n\r\n".encode("utf-8"),
        b"RTSP/1.0 200 \xff\xfe\r\n\r\n",
        b"RTSP/1.0 200\r\n\r\n",
        b"RTSP/1.0\r\n\r\n",
        b"RTSP/1.0 200 OK",
        b"",
    ],
)
def test_malformed_status_line(data):
    with pytest.raises(MalformedStatusLine):
        read_response(BytesIO(data))


def test_response_malformed_header():
    with pytest.raises(MalformedHeader):
        read_response(BytesIO(b"RTSP/1.0 200 OK\r\nBadHeaderNoColon\r\n\r\n"))


@pytest.mark.parametrize("length", [b"abc", b"-5", b"3.0"])
def test_response_malformed_content_length(length):
    with pytest.raises(MalformedContentLength):
        read_response(
            BytesIO(b"RTSP/1.0 200 OK\r\nContent-Length: " + length + b"\r\n\r\nabc")
        )


def test_response_short_body_is_an_error():
    with pytest.raises(IncompleteBody) as exc_info:
        read_response(BytesIO(b"RTSP/1.0 200 OK\r\nContent-Length: 10\r\n\r\nabc"))

    response = exc_info.value.response
    assert response.status is Status.OK
    assert response.headers == {"Content-Length": "10"}
    assert response.body == b"abc"


def test_every_read_error_is_a_read_error():
    for error in (
        MalformedRequestLine,
        MalformedStatusLine,
        UnknownMethod,
        UnknownStatus,
        MalformedHeader,
        MalformedContentLength,
        IncompleteBody,
    ):
        assert issubclass(error, ReadError)
