"""View data mapping shared between a page and the partials it renders."""

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any, Optional


class ViewDataDictionary(MutableMapping[str, Any]):
    """Ordered key/value store passed into a render, plus the view model.

    A dictionary built with ``source=`` is a scope over the source: it shares
    the source's entries in place (writes are visible to both) but carries
    its own model.
    """

    _entries: dict[str, Any]

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        *,
        model: Any = None,
        source: Optional["ViewDataDictionary"] = None,
    ):
        if source is not None:
            if data:
                raise ValueError("Pass either data or source, not both")
            self._entries = source._entries
            self.model = source.model if model is None else model
        else:
            self._entries = dict(data or {})
            self.model = model

    def scoped(self, model: Any = None) -> "ViewDataDictionary":
        """Create a scope sharing these entries, with ``model`` overriding the model when given."""
        return ViewDataDictionary(source=self, model=model)

    def __getitem__(self, key: str) -> Any:
        return self._entries[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._entries[key] = value

    def __delitem__(self, key: str) -> None:
        del self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ViewDataDictionary({self._entries!r}, model={self.model!r})"
