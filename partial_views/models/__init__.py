"""Partial view models"""

from partial_views.models.view_context import ViewContext
from partial_views.models.view_data import ViewDataDictionary
from partial_views.models.view_engine_result import ViewEngineResult

__all__ = [
    "ViewContext",
    "ViewDataDictionary",
    "ViewEngineResult",
]
