import enum


class RequestError(Exception):
    """Base class for errors raised while sending a request"""


class SerializationError(RequestError):
    """JSON payload cannot be serialized"""


class BodyReadError(RequestError):
    """Response body cannot be read or has already been consumed"""


class DeserializationError(RequestError):
    """Response content cannot be decoded"""


class UnexpectedContentTypeError(DeserializationError):
    """ContentType is unexpected"""


class TransportErrorKind(enum.Enum):
    CONNECT = enum.auto()
    TIMEOUT = enum.auto()
    NETWORK = enum.auto()
    PROTOCOL = enum.auto()
    INVALID_REQUEST = enum.auto()
    OTHER = enum.auto()


class TransportError(RequestError):
    """Request has failed before a response was received"""

    def __init__(self, message: str, *, kind: TransportErrorKind, method: str, url: str, cause: Exception) -> None:
        super().__init__(message)
        self.kind = kind
        self.method = method
        self.url = url
        self.cause = cause
