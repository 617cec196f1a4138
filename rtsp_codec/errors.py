class RTSPError(Exception):
    ...


class ReadError(RTSPError):
    """
    Raised when a message could not be read from a stream.
    Every reader failure derives from this one, so callers that do not care
    about the details can catch it alone.
    """


class MalformedRequestLine(ReadError):
    ...


class MalformedStatusLine(ReadError):
    ...


class UnknownMethod(ReadError):
    ...


class UnknownStatus(ReadError):
    ...


class MalformedHeader(ReadError):
    ...


class MalformedContentLength(ReadError):
    ...


class IncompleteBody(ReadError):
    """
    The stream ended before the body announced by `Content-Length` was read.
    The partially filled response is kept in `response`.
    """

    def __init__(self, message: str, response=None):
        super().__init__(message)
        self.response = response


class WriteError(RTSPError):
    ...
