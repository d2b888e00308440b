from dataclasses import dataclass

from httpx import AsyncClient, HTTPError

from .types import Request, RequestFailed, Response


@dataclass(frozen=True)
class HTTPX:
    """
    Transport backed by an ``httpx.AsyncClient``. Timeouts, pooling and
    default headers are configured on the client itself.
    """

    client: AsyncClient

    async def __call__(self, request: Request) -> Response:
        try:
            response = await self.client.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                content=request.body,
            )
            return Response(response.status_code, await response.aread())
        except HTTPError as exc:
            raise RequestFailed(exc) from exc
