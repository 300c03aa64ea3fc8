"""Jinja2 helpers that let templates render partial views."""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from jinja2 import Environment, pass_context
from jinja2.runtime import Context
from markupsafe import Markup

from partial_views.views.partial_renderer import PartialViewRenderer


def install_partial_helper(
    environment: Environment,
    renderer: PartialViewRenderer,
    name: str = "partial",
) -> Callable[..., Awaitable[Markup]]:
    """Register a global that renders partials against the calling template's context.

    Usage inside a template::

        {{ partial("_card", model=item) }}
        {{ partial("_banner", optional=True) }}

    Args:
        environment: Async Jinja2 environment
        renderer: Renderer used to resolve and render partials
        name: Global name exposed to templates

    Returns:
        The registered helper
    """

    @pass_context
    async def partial(
        context: Context,
        partial_name: str,
        model: Any = None,
        view_data: Mapping[str, Any] | None = None,
        fallback_name: str | None = None,
        optional: bool = False,
    ) -> Markup:
        view_context = context.get("view_context")
        if view_context is None:
            raise RuntimeError(f"{name}() can only be called from a template rendered as a view")

        return await renderer.render_partial(
            partial_name,
            view_context,
            model=model,
            view_data=view_data,
            fallback_name=fallback_name,
            optional=optional,
        )

    environment.globals[name] = partial
    return partial
