from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, cast

from .errors import (
    DecodingError,
    EncodingError,
    InvalidMethod,
    TransportError,
    UnexpectedBody,
    UnexpectedStatus,
)
from .http.types import HttpImplementation, Request, RequestFailed, Response
from .types import (
    BASE_URL,
    JSON_HEADERS,
    METHODS,
    NOTHING,
    BodyT,
    Descriptor,
    HttpMethod,
    ResponseT,
)

logger = logging.getLogger(__name__)


def encode_body(body: Any) -> bytes:
    try:
        return json.dumps(body, separators=(",", ":"), allow_nan=False).encode(
            "utf-8"
        )
    except (TypeError, ValueError, RecursionError) as exc:
        raise EncodingError(exc) from exc


def decode_body(body: bytes) -> Any:
    try:
        return json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise DecodingError(exc, body) from exc


async def request(
    http: HttpImplementation,
    descriptor: Descriptor[BodyT, ResponseT],
    method: HttpMethod,
    endpoint: str,
    body: BodyT = NOTHING,
    *,
    base_url: str = BASE_URL,
    raise_for_status: bool = False,
) -> ResponseT:
    """
    Sends one request to ``base_url + endpoint`` and returns the decoded JSON
    response typed as the descriptor's response type.

    The decoded value is not checked against that type. If the server sends
    a different shape, the mismatch shows up when the caller accesses the
    value, not here.
    """
    if method not in METHODS:
        raise InvalidMethod(method)
    if body is not NOTHING and (not descriptor.accepts_body or method == "GET"):
        raise UnexpectedBody(method, endpoint)

    payload: bytes | None = None
    headers: dict[str, str] | None = None
    if body is not NOTHING:
        payload = encode_body(body)
        headers = dict(JSON_HEADERS)

    url = f"{base_url}{endpoint}"
    logger.debug(
        "%s %s (%d bytes)", method, url, len(payload) if payload is not None else 0
    )
    try:
        response: Response = await http(Request(method, url, headers, payload))
    except (RequestFailed, OSError) as exc:
        raise TransportError(exc) from exc
    logger.debug(
        "%s %s -> %d (%d bytes)", method, url, response.status, len(response.body)
    )

    if not response.ok:
        if raise_for_status:
            raise UnexpectedStatus(response.status, response.body)
        logger.warning(
            "%s %s returned status %d, decoding response anyway",
            method,
            url,
            response.status,
        )

    return cast(ResponseT, decode_body(response.body))


@dataclass(frozen=True)
class Client:
    http: HttpImplementation
    base_url: str = BASE_URL
    raise_for_status: bool = False

    async def request(
        self,
        descriptor: Descriptor[BodyT, ResponseT],
        method: HttpMethod,
        endpoint: str,
        body: BodyT = NOTHING,
    ) -> ResponseT:
        return await request(
            self.http,
            descriptor,
            method,
            endpoint,
            body,
            base_url=self.base_url,
            raise_for_status=self.raise_for_status,
        )

    async def get(self, endpoint: str, response: type[ResponseT]) -> ResponseT:
        return await self.request(Descriptor(response=response), "GET", endpoint)

    async def post(
        self, endpoint: str, body: BodyT, response: type[ResponseT]
    ) -> ResponseT:
        return await self.request(
            Descriptor(response=response, body=type(body)), "POST", endpoint, body
        )
