"""Rendering context handed to views."""

import io
from typing import TYPE_CHECKING, Any, TextIO

from partial_views.models.view_data import ViewDataDictionary

if TYPE_CHECKING:
    from partial_views.protocols import ViewProtocol


class ViewContext:
    """State of one render invocation.

    Carries the view data, the output writer, the path of the view being
    executed and the route values used when probing view locations.
    """

    def __init__(
        self,
        view_data: ViewDataDictionary | None = None,
        writer: TextIO | None = None,
        executing_file_path: str | None = None,
        view: "ViewProtocol | None" = None,
        route_values: dict[str, Any] | None = None,
    ):
        self.view_data = view_data if view_data is not None else ViewDataDictionary()
        self.writer = writer if writer is not None else io.StringIO()
        self.executing_file_path = executing_file_path
        self.view = view
        self.route_values = route_values or {}

    @property
    def model(self) -> Any:
        return self.view_data.model

    def for_partial(self, view: "ViewProtocol", view_data: ViewDataDictionary, writer: TextIO) -> "ViewContext":
        """Derive the context for rendering ``view`` from within this one.

        Route values are shared; the executing file path becomes the partial's own path.

        Args:
            view: The resolved partial view
            view_data: Effective view data for the partial
            writer: Sink the partial writes into

        Returns:
            Child ViewContext
        """
        return ViewContext(
            view_data=view_data,
            writer=writer,
            executing_file_path=getattr(view, "path", None) or self.executing_file_path,
            view=view,
            route_values=self.route_values,
        )
