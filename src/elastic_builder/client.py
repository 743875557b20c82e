"""elastic-builder client."""

import json
import os
import sys
from typing import TYPE_CHECKING, Any, Mapping, TextIO

import httpx

from .exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    RateLimitError,
    RequestError,
    ResponseError,
    ServerError,
    TransportError,
    ValidationError,
)

if TYPE_CHECKING:
    from .config import Settings
    from .count import CountService

_STATUS_ERRORS: dict[int, type[ResponseError]] = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthenticationError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def _error_message(body: Any) -> str | None:
    """Pull a readable message out of an Elasticsearch error envelope."""
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, str):
        return error
    if isinstance(error, dict):
        error_type = error.get("type")
        reason = error.get("reason")
        if error_type and reason:
            return f"{error_type}: {reason}"
        return reason or error_type
    return None


class ElasticClient:
    """
    Synchronous client for an Elasticsearch compatible HTTP API.

    The client owns the connection settings and the httpx transport. Request
    builders such as CountService borrow it; they never close it.

    Usage:
        with ElasticClient("http://localhost:9200") as client:
            total = client.count("logs-2024").query(TermQuery("level", "error")).do()

        # Sharing an existing httpx client (it will not be closed for you)
        client = ElasticClient(http_client=httpx.Client(base_url=..., timeout=5))
    """

    DEFAULT_URL = "http://localhost:9200"

    def __init__(
        self,
        url: str | None = None,
        *,
        timeout: float = 30.0,
        http_client: httpx.Client | None = None,
        trace_stream: TextIO | None = None,
    ):
        """
        Initialize the client.

        Args:
            url: Base URL of the cluster. Falls back to ELASTIC_URL env var, then default.
            timeout: Request timeout in seconds, used when we create the httpx client.
            http_client: Optional custom httpx.Client instance.
            trace_stream: Where debug dumps are written (default stderr).
        """
        self._url = (url or os.environ.get("ELASTIC_URL") or self.DEFAULT_URL).rstrip("/")
        self._timeout = timeout
        self._owns_http_client = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=timeout)
        self._trace_stream = trace_stream

    @classmethod
    def from_settings(cls, settings: "Settings", **kwargs) -> "ElasticClient":
        return cls(settings.url, timeout=settings.timeout, **kwargs)

    @property
    def url(self) -> str:
        return self._url

    @property
    def trace_stream(self) -> TextIO:
        # resolved late so redirected stderr is honoured
        return self._trace_stream or sys.stderr

    def count(self, *indices: str) -> "CountService":
        """Start a count request, optionally restricted to ``indices``."""
        from .count import CountService

        return CountService(self).indices(*indices)

    def new_request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> httpx.Request:
        """
        Build a request against the cluster.

        Args:
            method: HTTP method.
            path: Absolute, already encoded path, e.g. ``/logs/_count``.
            params: Query string parameters.
            body: JSON-serializable request body, or None for no body.

        Raises:
            RequestError: If the body cannot be serialized or the URL is invalid.
        """
        headers = {"Accept": "application/json"}
        content = None
        if body is not None:
            try:
                content = json.dumps(body).encode("utf-8")
            except (TypeError, ValueError) as exc:
                raise RequestError(f"Cannot serialize request body: {exc}") from exc
            headers["Content-Type"] = "application/json"

        try:
            return self._http.build_request(
                method,
                f"{self._url}{path}",
                params=dict(params) if params else None,
                headers=headers,
                content=content,
            )
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise RequestError(f"Cannot build {method} {path}: {exc}") from exc

    def perform(self, request: httpx.Request) -> httpx.Response:
        """Send a request, wrapping transport failures in TransportError."""
        try:
            response = self._http.send(request)
        except httpx.HTTPError as exc:
            raise TransportError(f"{request.method} {request.url} failed: {exc}") from exc

        return response

    def check_response(self, response: httpx.Response) -> None:
        """Raise the matching ResponseError unless the status is 2xx."""
        status_code = response.status_code
        if 200 <= status_code < 300:
            return

        try:
            body = response.json()
        except ValueError:
            body = None

        message = _error_message(body) or response.text or f"HTTP {status_code}"
        error_class = _STATUS_ERRORS.get(status_code)
        if error_class is None:
            error_class = ServerError if status_code >= 500 else ResponseError

        raise error_class(message, status_code, body)

    def dump_request(self, request: httpx.Request) -> str:
        """Render a request as HTTP/1.1 text, body included."""
        target = request.url.raw_path.decode("ascii")
        lines = [f"{request.method} {target} HTTP/1.1"]
        lines.extend(f"{key}: {value}" for key, value in request.headers.items())
        body = request.content.decode("utf-8", errors="replace")
        return "\r\n".join(lines) + "\r\n\r\n" + body

    def dump_response(self, response: httpx.Response) -> str:
        """Render a response as HTTP/1.1 text, body included."""
        lines = [f"{response.http_version} {response.status_code} {response.reason_phrase}"]
        lines.extend(f"{key}: {value}" for key, value in response.headers.items())
        return "\r\n".join(lines) + "\r\n\r\n" + response.text

    def trace(self, text: str) -> None:
        """Write a diagnostic dump to the trace stream."""
        stream = self.trace_stream
        stream.write(text + "\n")
        stream.flush()

    def close(self) -> None:
        """Close the HTTP client if we created it."""
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> "ElasticClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
