"""End-to-end tests rendering Jinja2 pages that invoke partials."""

from types import SimpleNamespace

import pytest
from jinja2 import DictLoader, Environment

from partial_views.config import Settings
from partial_views.engines import JinjaViewEngine
from partial_views.exceptions import ViewNotFoundException
from partial_views.factory import create_renderer
from partial_views.models import ViewContext
from partial_views.views.partial_renderer import PartialViewRenderer
from partial_views.views.template_helpers import install_partial_helper


@pytest.fixture
def renderer(test_settings):
    """Renderer wired to the temporary views directory."""
    return create_renderer(test_settings)


@pytest.mark.asyncio
async def test_page_renders_partials(renderer):
    """Test a page template embeds probed partials without escaping them."""
    model = SimpleNamespace(card={"title": "Card <1>"})

    content = await renderer.render_page(
        "index", model=model, view_data={"user": "Ada"}, route_values={"controller": "home"}
    )

    assert content == "<main>Hello Ada|<div>Card &lt;1&gt;</div></main>"


@pytest.mark.asyncio
async def test_relative_partial_path(renderer):
    """Test a path-like partial resolves next to the executing page."""
    content = await renderer.render_page("home/relative.html")

    assert content == "Hello guest"


@pytest.mark.asyncio
async def test_render_partial_from_ambient_context(renderer):
    """Test render_partial probes using the ambient route values."""
    context = ViewContext(route_values={"controller": "home"})
    context.view_data["user"] = "Grace"

    content = await renderer.render_partial("_greeting", context)

    assert content == "Hello Grace"


@pytest.mark.asyncio
async def test_missing_partial_lists_all_locations(renderer):
    """Test the not-found error lists exact and probed locations."""
    context = ViewContext(executing_file_path="home/index.html", route_values={"controller": "home"})

    with pytest.raises(ViewNotFoundException) as exc_info:
        await renderer.render_partial("_missing", context)

    assert exc_info.value.searched_locations == ["home/_missing.html", "shared/_missing.html"]


@pytest.mark.asyncio
async def test_fallback_and_optional_from_template():
    """Test fallback and optional partials invoked from a template."""
    environment = Environment(
        loader=DictLoader(
            {
                "page.html": "[{{ partial('_nope', fallback_name='_empty') }}][{{ partial('_nope', optional=True) }}]",
                "shared/_empty.html": "empty",
            }
        ),
        enable_async=True,
        autoescape=True,
    )
    engine = JinjaViewEngine(Settings(), environment=environment)
    renderer = PartialViewRenderer(engine)
    install_partial_helper(environment, renderer)

    content = await renderer.render_page("page.html")

    assert content == "[empty][]"


@pytest.mark.asyncio
async def test_partial_helper_requires_view_context():
    """Test the helper refuses to run outside a view render."""
    environment = Environment(loader=DictLoader({"t.html": "{{ partial('_x') }}"}), enable_async=True)
    install_partial_helper(environment, PartialViewRenderer(None))

    with pytest.raises(RuntimeError):
        await environment.get_template("t.html").render_async()
