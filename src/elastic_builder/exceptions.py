"""elastic-builder exceptions."""

from typing import Any


class ElasticError(Exception):
    """Base exception for elastic-builder."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UriTemplateError(ElasticError):
    """Raised when a URI template cannot be expanded."""

    pass


class RequestError(ElasticError):
    """Raised when a request cannot be built."""

    pass


class TransportError(ElasticError):
    """Raised when the request never got a response."""

    pass


class ResponseError(ElasticError):
    """Raised when the server answers with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ):
        super().__init__(message, status_code)
        self.body = body


class ValidationError(ResponseError):
    """Raised when the server rejects the request (400)."""

    pass


class AuthenticationError(ResponseError):
    """Raised when credentials are missing or insufficient (401/403)."""

    pass


class NotFoundError(ResponseError):
    """Raised when an index or type does not exist."""

    pass


class ConflictError(ResponseError):
    """Raised on version conflicts (409)."""

    pass


class RateLimitError(ResponseError):
    """Raised when the cluster rejects work (429)."""

    pass


class ServerError(ResponseError):
    """Raised when the server returns an error."""

    pass


class DecodeError(ElasticError):
    """Raised when a response body cannot be decoded."""

    pass
