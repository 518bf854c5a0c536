from .model import ClusterDefaults, DatasetConfig, GlobalConfig, ViewConfig
from .loader import load_workspace
from .validation import ValidationError, ValidationIssue, validate_context

__all__ = [
    "ClusterDefaults",
    "DatasetConfig",
    "GlobalConfig",
    "ViewConfig",
    "load_workspace",
    "ValidationError",
    "ValidationIssue",
    "validate_context",
]
