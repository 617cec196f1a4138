from enum import Enum

from rtsp_codec.errors import UnknownMethod


# From RFC 2326 Section 10
class Method(Enum):
    OPTIONS = "OPTIONS"
    DESCRIBE = "DESCRIBE"
    ANNOUNCE = "ANNOUNCE"
    SETUP = "SETUP"
    PLAY = "PLAY"
    PAUSE = "PAUSE"
    TEARDOWN = "TEARDOWN"
    GET_PARAMETER = "GET_PARAMETER"
    SET_PARAMETER = "SET_PARAMETER"
    REDIRECT = "REDIRECT"
    RECORD = "RECORD"

    def as_string(self) -> str:
        return self.value


def parse_method(token: str) -> Method:
    # Case sensitive on purpose; `play` is not a method
    try:
        return Method(token)
    except ValueError:
        raise UnknownMethod(f"Method does not exist in RTSP protocol: {token}")
