from .client import Client, request
from .errors import (
    DecodingError,
    EncodingError,
    InvalidMethod,
    TransportError,
    TypedRequestError,
    UnexpectedBody,
    UnexpectedStatus,
)
from .http.types import HttpImplementation, Request, RequestFailed, Response
from .types import BASE_URL, Descriptor, HttpMethod

__all__ = [
    "BASE_URL",
    "Client",
    "DecodingError",
    "Descriptor",
    "EncodingError",
    "HttpImplementation",
    "HttpMethod",
    "InvalidMethod",
    "Request",
    "RequestFailed",
    "Response",
    "TransportError",
    "TypedRequestError",
    "UnexpectedBody",
    "UnexpectedStatus",
    "request",
]
