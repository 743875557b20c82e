"""Control over which ``_source`` fields come back with a document."""

from typing import Any


class FetchSourceContext:
    """
    Describes whether a document's ``_source`` is returned, and which fields.

    Usage:
        ctx = FetchSourceContext(True).include("user.*", "title").exclude("user.password")
        body["_source"] = ctx.source()
    """

    def __init__(self, fetch_source: bool):
        self._fetch_source = fetch_source
        self._transform_source = False
        self._includes: list[str] = []
        self._excludes: list[str] = []

    def fetch_source(self) -> bool:
        return self._fetch_source

    def set_fetch_source(self, fetch_source: bool) -> None:
        self._fetch_source = fetch_source

    def include(self, *includes: str) -> "FetchSourceContext":
        self._includes.extend(includes)
        return self

    def exclude(self, *excludes: str) -> "FetchSourceContext":
        self._excludes.extend(excludes)
        return self

    def transform_source(self, transform_source: bool) -> "FetchSourceContext":
        self._transform_source = transform_source
        return self

    def is_transform_source(self) -> bool:
        return self._transform_source

    @property
    def includes(self) -> list[str]:
        return list(self._includes)

    @property
    def excludes(self) -> list[str]:
        return list(self._excludes)

    def source(self) -> bool | dict[str, Any]:
        """
        Render the ``_source`` parameter.

        Returns ``False`` when source fetching is disabled, whatever the
        include/exclude lists hold. Otherwise both lists are returned, empty
        or not.
        """
        if not self._fetch_source:
            return False
        return {
            "includes": list(self._includes),
            "excludes": list(self._excludes),
        }
