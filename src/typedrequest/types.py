from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

BASE_URL = "https://api.com/v1"

HttpMethod = Literal["GET", "POST"]
METHODS: frozenset[str] = frozenset({"GET", "POST"})

JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

BodyT = TypeVar("BodyT")
ResponseT = TypeVar("ResponseT")

NOTHING: Any = object()

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class Descriptor(Generic[BodyT, ResponseT]):
    """
    Binds the body and response types of a single call site.

    ``body=None`` declares that the call takes no body. The types are only
    used for static checking and for the body-presence rule; the response
    is never checked against ``response`` at runtime.
    """

    response: type[ResponseT]
    body: type[BodyT] | None = None

    @property
    def accepts_body(self) -> bool:
        return self.body is not None
