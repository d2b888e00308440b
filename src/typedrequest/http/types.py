from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from ..types import HttpMethod


@dataclass(frozen=True)
class Request:
    method: HttpMethod
    url: str
    headers: dict[str, str] | None
    body: bytes | None


@dataclass(frozen=True)
class Response:
    status: int
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


@dataclass
class RequestFailed(Exception):
    inner: Exception


HttpImplementation = Callable[[Request], Awaitable[Response]]
