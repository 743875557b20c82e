"""Shared fixtures: a client wired to an in-memory transport."""

import io
from collections.abc import Iterator

import httpx
import pytest
import structlog

from elastic_builder.client import ElasticClient
from elastic_builder.config import reset_settings


class RecordingTransport:
    """Answers every request with a canned response and keeps what it saw."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: object = {"count": 0}
        self.content: bytes | None = None
        self.error: Exception | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in (
        "ELASTIC_URL",
        "ELASTIC_TIMEOUT",
        "ELASTIC_DEBUG",
        "ELASTIC_PRETTY",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "SERVICE_NAME",
    ):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()
    structlog.reset_defaults()


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def trace() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def http_client(transport: RecordingTransport) -> Iterator[httpx.Client]:
    with httpx.Client(transport=httpx.MockTransport(transport)) as http:
        yield http


@pytest.fixture
def client(http_client: httpx.Client, trace: io.StringIO) -> Iterator[ElasticClient]:
    with ElasticClient(
        "http://es.test:9200", http_client=http_client, trace_stream=trace
    ) as elastic:
        yield elastic
