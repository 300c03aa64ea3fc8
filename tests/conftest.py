"""Pytest configuration and shared fixtures."""

import logging
from collections.abc import Callable
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from partial_views.config import Settings
from partial_views.models import ViewContext, ViewDataDictionary, ViewEngineResult
from partial_views.protocols import ViewEngineProtocol, ViewProtocol


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Restore the package logger after tests that call setup_logging."""
    package_logger = logging.getLogger("partial_views")
    handlers, level = list(package_logger.handlers), package_logger.level
    yield
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


@pytest.fixture
def view_context():
    """Ambient context of an enclosing page render."""
    return ViewContext(
        view_data=ViewDataDictionary(model="page-model"),
        executing_file_path="home/index.html",
        route_values={"controller": "home"},
    )


@pytest.fixture
def make_view() -> Callable[..., MagicMock]:
    """Build a mock view whose render writes ``output`` (or a callable's result) into the writer."""

    def _make_view(output: str | Callable[[ViewContext], str] = "Hello world!", path: str = "_Partial.html"):
        view = MagicMock(spec=ViewProtocol)
        view.path = path

        async def render(context: ViewContext) -> None:
            context.writer.write(output(context) if callable(output) else output)

        view.render = AsyncMock(side_effect=render)
        return view

    return _make_view


@pytest.fixture
def mock_view_engine():
    """Mock view engine; both strategies report not found unless a test overrides them."""
    engine = MagicMock(spec=ViewEngineProtocol)
    engine.get_view.side_effect = lambda path, name, is_main_page: ViewEngineResult.not_found(name, [])
    engine.find_view.side_effect = lambda context, name, is_main_page: ViewEngineResult.not_found(name, [])
    return engine


@pytest.fixture
def views_dir(tmp_path: Path) -> Path:
    """Template directory with a page, controller partials and shared partials."""
    root = tmp_path / "views"
    (root / "home").mkdir(parents=True)
    (root / "shared").mkdir()

    (root / "home" / "index.html").write_text(
        "<main>{{ partial('_greeting') }}|{{ partial('_card', model=model.card) }}</main>",
        encoding="utf-8",
    )
    (root / "home" / "_greeting.html").write_text("Hello {{ view_data.get('user', 'guest') }}", encoding="utf-8")
    (root / "shared" / "_card.html").write_text("<div>{{ model.title }}</div>", encoding="utf-8")
    (root / "shared" / "_greeting.html").write_text("shared greeting", encoding="utf-8")
    (root / "shared" / "_empty.html").write_text("nothing here", encoding="utf-8")
    (root / "home" / "relative.html").write_text("{{ partial('_greeting.html') }}", encoding="utf-8")
    return root


@pytest.fixture
def test_settings(views_dir: Path) -> Settings:
    """Settings pointing at the temporary views directory."""
    return Settings(views_dir=views_dir)
