import pytest

from typedrequest.http.types import RequestFailed

from .stubs import StubHttp


@pytest.fixture
def http() -> StubHttp:
    return StubHttp()


@pytest.fixture
def failing_http() -> StubHttp:
    return StubHttp(fail=RequestFailed(ConnectionError("connection refused")))
