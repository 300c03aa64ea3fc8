"""Partial view rendering."""

import io
from collections.abc import Mapping
from contextlib import closing, nullcontext
from typing import Any

from markupsafe import Markup

from partial_views.exceptions import InvalidViewNameException, ViewNotFoundException
from partial_views.logging_config import get_logger, log_with_context
from partial_views.models.view_context import ViewContext
from partial_views.models.view_data import ViewDataDictionary
from partial_views.models.view_engine_result import ViewEngineResult
from partial_views.protocols import Closeable, ViewEngineProtocol, ViewProtocol

logger = get_logger(__name__)


class PartialViewRenderer:
    """Resolves named views through a view engine and renders them to markup."""

    def __init__(self, view_engine: ViewEngineProtocol):
        self.view_engine = view_engine

    async def render_partial(
        self,
        name: str,
        view_context: ViewContext,
        model: Any = None,
        view_data: ViewDataDictionary | Mapping[str, Any] | None = None,
        fallback_name: str | None = None,
        optional: bool = False,
    ) -> Markup:
        """Render a partial view from within an ambient render.

        The view is looked up by exact path first, then by probing the
        engine's locations. Explicit ``view_data`` replaces the ambient view
        data for this render; otherwise the ambient entries are shared in
        place. ``model`` overrides the model only when given.

        Args:
            name: Partial view name or path
            view_context: Context of the enclosing render
            model: Model for the partial; None keeps the ambient model
            view_data: Explicit view data; None uses the ambient view data
            fallback_name: View to try when ``name`` cannot be found; blank means no fallback
            optional: Render nothing instead of raising when no view is found

        Returns:
            Rendered markup

        Raises:
            InvalidViewNameException: If name is blank
            ViewNotFoundException: If neither name nor fallback resolves and optional is False
        """
        _validate_view_name(name)
        if fallback_name is not None and not fallback_name.strip():
            fallback_name = None

        result, searched_locations = self._locate(name, view_context, is_main_page=False)

        fallback_searched_locations: list[str] = []
        if not result.success and fallback_name:
            log_with_context(
                logger,
                "debug",
                "Partial view not found, trying fallback",
                view_name=name,
                fallback_name=fallback_name,
                event_type="partial_fallback",
            )
            result, fallback_searched_locations = self._locate(fallback_name, view_context, is_main_page=False)

        if not result.success:
            if optional:
                log_with_context(
                    logger,
                    "debug",
                    "Optional partial view not found, rendering nothing",
                    view_name=name,
                    searched_locations=searched_locations + fallback_searched_locations,
                    event_type="partial_skipped",
                )
                return Markup("")

            exc = ViewNotFoundException(name, searched_locations, fallback_name, fallback_searched_locations)
            log_with_context(
                logger,
                "warning",
                "Partial view not found",
                error_code=exc.code.value,
                **exc.details,
                event_type="view_not_found",
            )
            raise exc

        if view_data is None:
            base_view_data = view_context.view_data
        elif isinstance(view_data, ViewDataDictionary):
            base_view_data = view_data
        else:
            base_view_data = ViewDataDictionary(view_data)

        return await self._render(result.view, view_context, base_view_data.scoped(model))

    async def render_page(
        self,
        name: str,
        model: Any = None,
        view_data: Mapping[str, Any] | None = None,
        route_values: dict[str, Any] | None = None,
    ) -> Markup:
        """Render a top-level view; partials it invokes share its context.

        Args:
            name: View name or path
            model: Page model
            view_data: Initial view data entries
            route_values: Values used by location formats (e.g. controller)

        Returns:
            Rendered markup

        Raises:
            ViewNotFoundException: If the view cannot be found
        """
        _validate_view_name(name)

        page_view_data = ViewDataDictionary(view_data, model=model)
        page_context = ViewContext(view_data=page_view_data, route_values=route_values)

        result, searched_locations = self._locate(name, page_context, is_main_page=True)
        if not result.success:
            exc = ViewNotFoundException(name, searched_locations, kind="view")
            log_with_context(
                logger,
                "warning",
                "View not found",
                error_code=exc.code.value,
                **exc.details,
                event_type="view_not_found",
            )
            raise exc

        return await self._render(result.view, page_context, page_view_data)

    def _locate(
        self,
        name: str,
        view_context: ViewContext,
        is_main_page: bool,
    ) -> tuple[ViewEngineResult, list[str]]:
        result = self.view_engine.get_view(view_context.executing_file_path, name, is_main_page)
        searched_locations = list(result.searched_locations)

        if not result.success:
            result = self.view_engine.find_view(view_context, name, is_main_page)
            searched_locations.extend(result.searched_locations)

        return result, searched_locations

    async def _render(
        self,
        view: ViewProtocol,
        view_context: ViewContext,
        view_data: ViewDataDictionary,
    ) -> Markup:
        buffer = io.StringIO()
        partial_context = view_context.for_partial(view, view_data, buffer)
        view_path = getattr(view, "path", None)

        # Disposal runs exactly once whether or not render raises
        disposer = closing(view) if isinstance(view, Closeable) else nullcontext()
        try:
            with disposer:
                await view.render(partial_context)
        except Exception as e:
            log_with_context(
                logger,
                "error",
                "Partial view render failed",
                view_path=view_path,
                error=str(e),
                error_type=type(e).__name__,
                event_type="partial_render_failed",
            )
            raise

        content = buffer.getvalue()
        log_with_context(
            logger,
            "debug",
            "Partial view rendered",
            view_path=view_path,
            length=len(content),
            event_type="partial_rendered",
        )
        return Markup(content)


def _validate_view_name(name: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise InvalidViewNameException(details={"view_name": name})
