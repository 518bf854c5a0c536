from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from cluster_views.config.model import GlobalConfig
from cluster_views.core.context import ClusterContext


@dataclass
class AppConfig:
    """
    Holds shared state for the Dash app: the parsed config and the clustering
    context. Passed into layout + callback registration functions instead of
    module-level globals.
    """
    config_path: Path
    global_config: GlobalConfig
    context: Optional[ClusterContext] = None

    def validate(self) -> None:
        """Ensure the clustering context is attached before the app starts."""
        if self.context is None:
            raise RuntimeError("AppConfig.context must be initialized.")
