"""View engine that delegates to an ordered list of engines."""

from collections.abc import Callable, Iterable

from partial_views.models.view_context import ViewContext
from partial_views.models.view_engine_result import ViewEngineResult
from partial_views.protocols import ViewEngineProtocol


class CompositeViewEngine:
    """Asks each engine in turn; the first found result wins.

    When no engine finds the view, the searched locations of all engines
    are concatenated in engine order.
    """

    def __init__(self, view_engines: Iterable[ViewEngineProtocol]):
        self.view_engines = list(view_engines)

    def get_view(self, executing_file_path: str | None, view_path: str, is_main_page: bool) -> ViewEngineResult:
        return self._first_found(view_path, lambda engine: engine.get_view(executing_file_path, view_path, is_main_page))

    def find_view(self, context: ViewContext, view_name: str, is_main_page: bool) -> ViewEngineResult:
        return self._first_found(view_name, lambda engine: engine.find_view(context, view_name, is_main_page))

    def _first_found(
        self,
        view_name: str,
        lookup: Callable[[ViewEngineProtocol], ViewEngineResult],
    ) -> ViewEngineResult:
        searched: list[str] = []
        for engine in self.view_engines:
            result = lookup(engine)
            if result.success:
                return result
            searched.extend(result.searched_locations)
        return ViewEngineResult.not_found(view_name, searched)
