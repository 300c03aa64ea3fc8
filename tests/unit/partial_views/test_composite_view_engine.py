"""Unit tests for CompositeViewEngine."""

from unittest.mock import MagicMock

from partial_views.engines import CompositeViewEngine
from partial_views.models import ViewContext, ViewEngineResult
from partial_views.protocols import ViewEngineProtocol


def _engine(get_result: ViewEngineResult, find_result: ViewEngineResult) -> MagicMock:
    engine = MagicMock(spec=ViewEngineProtocol)
    engine.get_view.return_value = get_result
    engine.find_view.return_value = find_result
    return engine


def test_get_view_returns_first_found():
    """Test engines after the first hit are not consulted."""
    view = object()
    first = _engine(ViewEngineResult.not_found("v", ["a"]), ViewEngineResult.not_found("v", []))
    second = _engine(ViewEngineResult.found("v", view), ViewEngineResult.not_found("v", []))
    third = _engine(ViewEngineResult.found("v", object()), ViewEngineResult.not_found("v", []))
    composite = CompositeViewEngine([first, second, third])

    result = composite.get_view("home/index.html", "v", False)

    assert result.view is view
    first.get_view.assert_called_once_with("home/index.html", "v", False)
    third.get_view.assert_not_called()


def test_find_view_concatenates_locations():
    """Test all engines' locations are reported in engine order."""
    context = ViewContext()
    first = _engine(ViewEngineResult.not_found("v", []), ViewEngineResult.not_found("v", ["a", "b"]))
    second = _engine(ViewEngineResult.not_found("v", []), ViewEngineResult.not_found("v", ["c"]))
    composite = CompositeViewEngine([first, second])

    result = composite.find_view(context, "v", True)

    assert result.success is False
    assert result.view_name == "v"
    assert result.searched_locations == ["a", "b", "c"]
    second.find_view.assert_called_once_with(context, "v", True)


def test_empty_composite_finds_nothing():
    """Test a composite without engines reports not found."""
    result = CompositeViewEngine([]).get_view(None, "v", False)

    assert result.success is False
    assert result.searched_locations == []
