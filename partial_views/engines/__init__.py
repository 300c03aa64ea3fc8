"""View engines that locate views by exact path or by probing conventional locations."""

from partial_views.engines.composite_view_engine import CompositeViewEngine
from partial_views.engines.jinja_view_engine import JinjaView, JinjaViewEngine

__all__ = [
    "CompositeViewEngine",
    "JinjaView",
    "JinjaViewEngine",
]
