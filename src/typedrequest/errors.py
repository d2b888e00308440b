from dataclasses import dataclass


class TypedRequestError(Exception):
    pass


@dataclass
class TransportError(TypedRequestError):
    inner: Exception


@dataclass
class EncodingError(TypedRequestError):
    inner: Exception


@dataclass
class DecodingError(TypedRequestError):
    inner: Exception
    body: bytes


@dataclass
class InvalidMethod(TypedRequestError):
    method: str


@dataclass
class UnexpectedBody(TypedRequestError):
    """
    A body was passed to a call that declares no body, or to a GET request.
    Raised before anything is sent.
    """

    method: str
    endpoint: str


@dataclass
class UnexpectedStatus(TypedRequestError):
    status: int
    body: bytes
