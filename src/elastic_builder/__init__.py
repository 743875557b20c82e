"""
elastic-builder.

Request builders for an Elasticsearch compatible HTTP API.

Usage:
    from elastic_builder import ElasticClient, FetchSourceContext, TermQuery

    with ElasticClient("http://localhost:9200") as client:
        total = client.count("tweets").type("tweet").query(TermQuery("user", "olivere")).do()

    source = FetchSourceContext(True).include("title", "user.*").source()
"""

from .client import ElasticClient
from .count import CountService
from .exceptions import (
    AuthenticationError,
    ConflictError,
    DecodeError,
    ElasticError,
    NotFoundError,
    RateLimitError,
    RequestError,
    ResponseError,
    ServerError,
    TransportError,
    UriTemplateError,
    ValidationError,
)
from .fetch_source_context import FetchSourceContext
from .models import CountResult, ShardsInfo
from .query import MatchAllQuery, Query, QueryStringQuery, RawQuery, TermQuery

__version__ = "0.1.0"

__all__ = [
    # Client and services
    "ElasticClient",
    "CountService",
    "FetchSourceContext",
    # Queries
    "Query",
    "MatchAllQuery",
    "TermQuery",
    "QueryStringQuery",
    "RawQuery",
    # Models
    "CountResult",
    "ShardsInfo",
    # Exceptions
    "ElasticError",
    "UriTemplateError",
    "RequestError",
    "TransportError",
    "ResponseError",
    "ValidationError",
    "AuthenticationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "DecodeError",
]
