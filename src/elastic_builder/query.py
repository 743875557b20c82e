"""Query objects understood by the request builders."""

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class Query(Protocol):
    """Anything that can render itself as a query DSL fragment."""

    def source(self) -> Any: ...


class MatchAllQuery:
    """Matches every document."""

    def __init__(self, boost: float | None = None):
        self._boost = boost

    def source(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if self._boost is not None:
            params["boost"] = self._boost
        return {"match_all": params}


class TermQuery:
    """Exact match on a single (not analyzed) field."""

    def __init__(self, field: str, value: Any):
        self._field = field
        self._value = value

    def source(self) -> dict[str, Any]:
        return {"term": {self._field: self._value}}


class QueryStringQuery:
    """Lucene query string, e.g. ``status:active AND owner:bob``."""

    def __init__(self, query: str, default_field: str | None = None):
        self._query = query
        self._default_field = default_field

    def source(self) -> dict[str, Any]:
        params: dict[str, Any] = {"query": self._query}
        if self._default_field:
            params["default_field"] = self._default_field
        return {"query_string": params}


class RawQuery:
    """A pre-built query body, passed through unchanged."""

    def __init__(self, body: Mapping[str, Any]):
        self._body = dict(body)

    def source(self) -> dict[str, Any]:
        return self._body
