from typing import Callable, Dict, List, Union

import httpx
import pytest

import emaillistverify.client as client_module
from emaillistverify import EmailListVerify

API_KEY = "test_api_key_12345"

Reply = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class FakeApi:
    """Routes requests by endpoint name and remembers every request seen."""

    def __init__(self) -> None:
        self.routes: Dict[str, List[Reply]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, endpoint: str, *replies: Reply) -> None:
        self.routes.setdefault(endpoint, []).extend(replies)

    def calls(self, endpoint: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path.rsplit("/", 1)[-1] == endpoint]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        endpoint = request.url.path.rsplit("/", 1)[-1]
        replies = self.routes.get(endpoint)
        if not replies:
            raise AssertionError(f"unexpected request to {endpoint}")
        # The last reply for an endpoint repeats.
        reply = replies.pop(0) if len(replies) > 1 else replies[0]
        if callable(reply):
            return reply(request)
        return reply


class FakeClock:
    """Stands in for time.time/time.sleep; sleeping advances the clock."""

    def __init__(self) -> None:
        self.now = 1_000_000.0
        self.sleeps: List[float] = []

    def time(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def client(api: FakeApi):
    with EmailListVerify(API_KEY, transport=httpx.MockTransport(api)) as c:
        yield c


@pytest.fixture
def clock(monkeypatch) -> FakeClock:
    fake = FakeClock()
    monkeypatch.setattr(client_module.time, "time", fake.time)
    monkeypatch.setattr(client_module.time, "sleep", fake.sleep)
    return fake
