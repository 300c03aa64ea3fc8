"""Jinja2-backed view engine."""

import posixpath
from typing import Any

from jinja2 import Environment, FileSystemLoader, Template, TemplateNotFound, select_autoescape

from partial_views.config import Settings, get_settings
from partial_views.exceptions import ConfigurationException, ErrorCode
from partial_views.logging_config import get_logger, log_with_context
from partial_views.models.view_context import ViewContext
from partial_views.models.view_engine_result import ViewEngineResult

logger = get_logger(__name__)


class JinjaView:
    """A compiled Jinja2 template exposed as a view."""

    def __init__(self, path: str, template: Template):
        self.path = path
        self.template = template

    async def render(self, context: ViewContext) -> None:
        """Render the template into ``context.writer``.

        View data entries become template variables, alongside ``model``,
        ``view_data`` and ``view_context``.
        """
        variables: dict[str, Any] = dict(context.view_data)
        variables.update(
            model=context.model,
            view_data=context.view_data,
            view_context=context,
        )
        output = await self.template.render_async(variables)
        context.writer.write(output)

    def __repr__(self) -> str:
        return f"JinjaView({self.path!r})"


class JinjaViewEngine:
    """Locates Jinja2 templates under the configured views directory.

    ``get_view`` handles path-like names (ending in the view extension),
    resolved against the executing view or the views root. ``find_view``
    probes the configured location formats for plain names.
    """

    def __init__(self, settings: Settings | None = None, environment: Environment | None = None):
        self.settings = settings or get_settings()
        self.extension = self.settings.view_extension

        if environment is None:
            views_dir = self.settings.views_dir
            if not views_dir.is_dir():
                raise ConfigurationException(
                    f"Views directory does not exist: {views_dir}",
                    code=ErrorCode.CONFIG_INVALID,
                    details={"views_dir": str(views_dir)},
                )
            autoescape = (
                select_autoescape(enabled_extensions=("html", "htm", "xml", self.extension.lstrip(".")))
                if self.settings.autoescape
                else False
            )
            environment = Environment(
                loader=FileSystemLoader(str(views_dir)),
                autoescape=autoescape,
                auto_reload=self.settings.auto_reload,
                enable_async=True,
            )
        elif not environment.is_async:
            raise ConfigurationException(
                "Jinja2 environment must be created with enable_async=True",
                code=ErrorCode.CONFIG_INVALID,
            )

        self.environment = environment

    def is_path_like(self, name: str) -> bool:
        return name.startswith(("/", "~/")) or name.endswith(self.extension)

    def get_view(self, executing_file_path: str | None, view_path: str, is_main_page: bool) -> ViewEngineResult:
        """Look up a path-like view name without probing."""
        if not self.is_path_like(view_path):
            return ViewEngineResult.not_found(view_path, [])

        template_name = self._resolve_relative_path(executing_file_path, view_path)
        view = self._load(template_name)
        if view is None:
            return ViewEngineResult.not_found(view_path, [template_name])

        log_with_context(
            logger,
            "debug",
            "View resolved by path",
            view_name=view_path,
            template=template_name,
            is_main_page=is_main_page,
            event_type="view_resolved",
        )
        return ViewEngineResult.found(view_path, view)

    def find_view(self, context: ViewContext, view_name: str, is_main_page: bool) -> ViewEngineResult:
        """Probe the configured location formats for a plain view name."""
        if self.is_path_like(view_name):
            return ViewEngineResult.not_found(view_name, [])

        searched: list[str] = []
        values = {**context.route_values, "name": view_name, "ext": self.extension}
        for location_format in self.settings.view_location_formats:
            try:
                location = location_format.format_map(values)
            except KeyError as e:
                # Format needs a route value this request does not carry
                log_with_context(
                    logger,
                    "debug",
                    "Skipping view location format",
                    location_format=location_format,
                    missing=str(e),
                    event_type="view_location_skipped",
                )
                continue

            searched.append(location)
            view = self._load(location)
            if view is not None:
                log_with_context(
                    logger,
                    "debug",
                    "View resolved by probing",
                    view_name=view_name,
                    template=location,
                    is_main_page=is_main_page,
                    event_type="view_resolved",
                )
                return ViewEngineResult.found(view_name, view)

        return ViewEngineResult.not_found(view_name, searched)

    def _resolve_relative_path(self, executing_file_path: str | None, view_path: str) -> str:
        if view_path.startswith("~/"):
            return posixpath.normpath(view_path[2:])
        if view_path.startswith("/"):
            return posixpath.normpath(view_path.lstrip("/"))
        if executing_file_path:
            base_dir = posixpath.dirname(executing_file_path.lstrip("/"))
            return posixpath.normpath(posixpath.join(base_dir, view_path))
        return posixpath.normpath(view_path)

    def _load(self, template_name: str) -> JinjaView | None:
        try:
            template = self.environment.get_template(template_name)
        except TemplateNotFound:
            return None
        return JinjaView(template_name, template)
