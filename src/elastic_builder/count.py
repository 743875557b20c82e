"""Count API request builder."""

from typing import TYPE_CHECKING, Any

import pydantic

from .exceptions import DecodeError
from .models import CountResult
from .query import Query
from .uritemplates import expand

if TYPE_CHECKING:
    from .client import ElasticClient


class CountService:
    """
    Counts the documents matching an optional query.

    Setters return the service so calls can be chained; ``do()`` sends the
    request and can be called again to re-issue it. A CountService holds
    mutable state and must not be shared between threads. Share the client
    instead and build one service per call site.

    Usage:
        total = (
            CountService(client)
            .index("tweets")
            .type("tweet")
            .query(TermQuery("user", "olivere"))
            .do()
        )
    """

    def __init__(self, client: "ElasticClient"):
        self._client = client
        self._indices: list[str] | None = None
        self._types: list[str] | None = None
        self._query: Query | None = None
        self._debug = False
        self._pretty = False

    def index(self, index: str) -> "CountService":
        if self._indices is None:
            self._indices = []
        self._indices.append(index)
        return self

    def indices(self, *indices: str) -> "CountService":
        if self._indices is None:
            self._indices = []
        self._indices.extend(indices)
        return self

    def type(self, typ: str) -> "CountService":
        if self._types is None:
            self._types = []
        self._types.append(typ)
        return self

    def types(self, *types: str) -> "CountService":
        if self._types is None:
            self._types = []
        self._types.extend(types)
        return self

    def query(self, query: Query | None) -> "CountService":
        self._query = query
        return self

    def pretty(self, pretty: bool) -> "CountService":
        self._pretty = pretty
        return self

    def debug(self, debug: bool) -> "CountService":
        self._debug = debug
        return self

    def build_path(self) -> str:
        """
        Build the request path, e.g. ``/idx1,idx2/type1/_count``.

        Each name is expanded as a single path segment, so reserved
        characters are percent-encoded rather than splitting the path.

        Raises:
            UriTemplateError: If a name cannot be expanded.
        """
        index_part = [expand("{index}", {"index": index}) for index in self._indices or []]
        type_part = [expand("{type}", {"type": typ}) for typ in self._types or []]

        if not index_part and not type_part:
            return "/_count"

        # an empty index list leaves its segment empty: //type/_count
        path = "/" + ",".join(index_part)
        if type_part:
            path += "/" + ",".join(type_part)
        return path + "/_count"

    def build_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self._pretty:
            params["pretty"] = "true"
        return params

    def build_body(self) -> dict[str, Any] | None:
        if self._query is None:
            return None
        return {"query": self._query.source()}

    def do(self) -> int:
        """
        Execute the count request.

        Returns:
            Number of matching documents.

        Raises:
            UriTemplateError: An index or type name could not be expanded.
            RequestError: The request could not be built.
            TransportError: The request never got a response.
            ResponseError: The server answered with a non-2xx status.
            DecodeError: The response body is not a count result.
        """
        client = self._client
        path = self.build_path()
        request = client.new_request(
            "POST", path, params=self.build_params(), body=self.build_body()
        )

        if self._debug:
            client.trace(client.dump_request(request))

        response = client.perform(request)

        if self._debug:
            client.trace(client.dump_response(response))

        client.check_response(response)

        try:
            result = CountResult.model_validate(response.json())
        except (ValueError, pydantic.ValidationError) as exc:
            raise DecodeError(
                f"Cannot decode count response: {exc}", response.status_code
            ) from exc

        return result.count
