from dataclasses import dataclass, field

from dpkt.http import Request as DpktRequest, Response as DpktResponse

from rtsp_codec.method import Method, parse_method
from rtsp_codec.status import Status, parse_status

from typing import Dict, Optional, Union

DEFAULT_PROTOCOL = "RTSP/1.0"
CONTENT_LENGTH = "Content-Length"


def _headers_from_dpkt(headers: Dict[str, Union[str, list]]) -> Dict[str, str]:
    # dpkt gathers repeated headers into a list; keep the last one
    return {
        name: value[-1] if isinstance(value, list) else value
        for name, value in headers.items()
    }


@dataclass(kw_only=True)
class Message:
    protocol: str = DEFAULT_PROTOCOL
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Case insensitive lookup, headers are stored as received."""
        if name in self.headers:
            return self.headers[name]

        name = name.casefold()
        for header, value in self.headers.items():
            if header.casefold() == name:
                return value
        return default


@dataclass(kw_only=True)
class Request(Message):
    method: Method = Method.OPTIONS
    uri: str = "*"

    @classmethod
    def from_dpkt(cls, request: DpktRequest, proto: str = "RTSP") -> "Request":
        return cls(
            method=parse_method(request.method),
            uri=request.uri,
            protocol=f"{proto}/{request.version}",
            headers=_headers_from_dpkt(request.headers),
            body=request.body,
        )


@dataclass(kw_only=True)
class Response(Message):
    status: Status = Status.OK

    @classmethod
    def from_dpkt(cls, response: DpktResponse, proto: str = "RTSP") -> "Response":
        return cls(
            status=parse_status(int(response.status)),
            protocol=f"{proto}/{response.version}",
            headers=_headers_from_dpkt(response.headers),
            body=response.body,
        )
