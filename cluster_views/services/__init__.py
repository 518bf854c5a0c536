from .cluster_service import cluster
from .view_sync import SyncState, ViewSynchronizer

__all__ = ["cluster", "SyncState", "ViewSynchronizer"]
