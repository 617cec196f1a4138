from dpkt.http import Request, Response

from rtsp_codec.method import Method

PROTO = "RTSP"
METHODS = dict.fromkeys(method.as_string() for method in Method)


# This is a bit of a hack which depends on the internal
# implementation of Request and Response, but it works
class RTSPRequest(Request):
    _Request__proto = PROTO
    _Request__methods = METHODS


class RTSPResponse(Response):
    _Response__proto = PROTO
