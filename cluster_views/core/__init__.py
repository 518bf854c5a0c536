"""
Core domain layer: dataset abstraction, clustering context, chart view base
class, the view registry and palette resolution
"""

from .dataset import Dataset
from .context import ClusterContext
from .base_view import BaseChartView
from .view_registry import ViewRegistry
from .palette import ColorMapper, CustomPalette, NamedScheme, resolve_palette

__all__ = [
    "Dataset",
    "ClusterContext",
    "BaseChartView",
    "ViewRegistry",
    "ColorMapper",
    "CustomPalette",
    "NamedScheme",
    "resolve_palette",
]
