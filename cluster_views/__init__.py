"""
Top-level package for cluster_views.

Partitions a tabular dataset with k-means and pushes the cluster labels into
a set of linked Plotly chart views. Most code should import from submodules
such as:
    cluster_views.core
    cluster_views.analysis
    cluster_views.services
    cluster_views.views
    cluster_views.ui
"""

__all__: list[str] = []
