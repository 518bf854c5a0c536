"""
Clustering building blocks: field selection, standardization, the k-means
engine, label writing and record formatting
"""

from .selection import select_matrix, validate_fields
from .standardize import standardize
from .engine import ClusterOptions, ClusterResult, KMeansEngine
from .labels import CLUSTER_FIELD, write_labels
from .formatting import format_records

__all__ = [
    "select_matrix",
    "validate_fields",
    "standardize",
    "ClusterOptions",
    "ClusterResult",
    "KMeansEngine",
    "CLUSTER_FIELD",
    "write_labels",
    "format_records",
]
