"""Protocol definitions for view lookup and rendering collaborators."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from partial_views.models.view_context import ViewContext
    from partial_views.models.view_engine_result import ViewEngineResult


class ViewProtocol(Protocol):
    """Protocol for a renderable view.

    A view writes its output into ``context.writer``. Views that hold
    resources also implement ``Closeable``.
    """

    path: str

    async def render(self, context: "ViewContext") -> None:
        """Render the view.

        Args:
            context: Rendering context carrying view data and the output writer
        """
        ...


class ViewEngineProtocol(Protocol):
    """Protocol for view lookup services.

    Allows swapping the template backend and substituting doubles in tests.
    """

    def get_view(self, executing_file_path: str | None, view_path: str, is_main_page: bool) -> "ViewEngineResult":
        """Look up a view by exact path, without probing.

        Args:
            executing_file_path: Path of the view currently being rendered, if any
            view_path: Path or name of the view
            is_main_page: Whether the view is a top-level page

        Returns:
            Found or not-found lookup result
        """
        ...

    def find_view(self, context: "ViewContext", view_name: str, is_main_page: bool) -> "ViewEngineResult":
        """Find a view by name, probing the engine's conventional locations.

        Args:
            context: Ambient rendering context
            view_name: Name of the view
            is_main_page: Whether the view is a top-level page

        Returns:
            Found or not-found lookup result
        """
        ...


@runtime_checkable
class Closeable(Protocol):
    """Disposal contract for views that hold resources."""

    def close(self) -> None: ...
