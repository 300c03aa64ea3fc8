"""Outcome of a view lookup."""

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from partial_views.protocols import ViewProtocol


class ViewEngineResult:
    """Either a found view or the list of locations that were searched."""

    def __init__(
        self,
        view_name: str,
        view: "ViewProtocol | None" = None,
        searched_locations: Iterable[str] = (),
    ):
        self.view_name = view_name
        self.view = view
        self.searched_locations = list(searched_locations)

    @classmethod
    def found(cls, view_name: str, view: "ViewProtocol") -> "ViewEngineResult":
        if view is None:
            raise ValueError("A found result requires a view")
        return cls(view_name, view=view)

    @classmethod
    def not_found(cls, view_name: str, searched_locations: Iterable[str]) -> "ViewEngineResult":
        return cls(view_name, searched_locations=searched_locations)

    @property
    def success(self) -> bool:
        return self.view is not None

    def __repr__(self) -> str:
        if self.success:
            return f"ViewEngineResult.found({self.view_name!r})"
        return f"ViewEngineResult.not_found({self.view_name!r}, {self.searched_locations!r})"
