"""Factory for wiring a renderer to the Jinja2 view engine."""

from partial_views.config import Settings, get_settings
from partial_views.engines.jinja_view_engine import JinjaViewEngine
from partial_views.logging_config import get_logger, log_with_context, setup_logging
from partial_views.views.partial_renderer import PartialViewRenderer
from partial_views.views.template_helpers import install_partial_helper

logger = get_logger(__name__)


def create_renderer(settings: Settings | None = None, configure_logging: bool = False) -> PartialViewRenderer:
    """Create a renderer backed by templates under ``settings.views_dir``.

    The ``partial`` template global is installed so pages can render partials.

    Args:
        settings: Settings instance; defaults to the cached singleton
        configure_logging: Also set up console logging at ``settings.log_level``

    Returns:
        Configured PartialViewRenderer
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings.log_level)

    engine = JinjaViewEngine(settings)
    renderer = PartialViewRenderer(engine)
    install_partial_helper(engine.environment, renderer)

    log_with_context(
        logger,
        "info",
        "Partial view renderer created",
        views_dir=str(settings.views_dir),
        location_formats=settings.view_location_formats,
        event_type="renderer_created",
    )
    return renderer
