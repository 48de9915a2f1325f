class RestClientError(Exception):
    """Base class for failures raised by the dispatcher itself."""

    message: str = "rest client error"

    def __init__(self, cause: BaseException | str | None = None):
        self.cause = cause
        if cause is None or cause == "":
            super().__init__(self.message)
        else:
            super().__init__(f"{self.message}: {cause}")


class RequestPathError(RestClientError):
    message = "invalid request path"


class RequestEncodeError(RestClientError):
    message = "invalid request encode"


class HTTPRequestError(RestClientError):
    message = "invalid http request"


class NoContentTypeError(RestClientError):
    message = "no content-type found in response"


class ResponseDecodeError(RestClientError):
    message = "invalid response decode"


class StreamRecordTooLongError(RestClientError):
    message = "stream record exceeds buffer size"
