from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Tuple

import pandas as pd

from cluster_views.core.context import ClusterContext
from cluster_views.core.dataset import Dataset
from cluster_views.core.exceptions import ConfigError
from cluster_views.core.view_registry import ViewRegistry
from cluster_views.views import VIEW_KINDS

from .model import ClusterDefaults, DatasetConfig, GlobalConfig, ViewConfig

logger = logging.getLogger(__name__)


def parse_config(raw: Dict, source_path: Path) -> GlobalConfig:
    """
    Parse the raw JSON workspace dict into a GlobalConfig.
    """
    global_part = raw.get("global", {})
    dataset_part = raw.get("dataset")
    if not dataset_part or "file" not in dataset_part:
        raise ConfigError(f"{source_path}: 'dataset.file' is required")

    return GlobalConfig(
        ui_title=global_part.get("ui_title", "Cluster Views"),
        dataset=DatasetConfig(raw=dataset_part, source_path=source_path),
        views=[ViewConfig(raw=entry, index=i) for i, entry in enumerate(raw.get("views", []))],
        clustering=ClusterDefaults.from_dict(raw.get("clustering", {})),
    )


def load_dataset(cfg: DatasetConfig) -> Dataset:
    """Read the dataset CSV into row-records."""
    if not cfg.path.exists():
        raise ConfigError(f"Dataset file not found: {cfg.path}")
    df = pd.read_csv(cfg.path)
    logger.info("dataset_loaded", extra={"path": str(cfg.path), "n_rows": len(df)})
    return Dataset.from_frame(df, name=cfg.name)


def build_views(view_configs: List[ViewConfig]) -> ViewRegistry:
    registry = ViewRegistry()
    for vc in view_configs:
        try:
            view_cls = VIEW_KINDS[vc.kind]
        except KeyError:
            raise ConfigError(
                f"Unknown view kind '{vc.kind}' for view '{vc.id}'. "
                f"Available kinds: {sorted(VIEW_KINDS)}"
            )
        try:
            registry.register(view_cls(vc.id, label=vc.label, **vc.options))
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid view '{vc.id}': {exc}") from exc
    return registry


def load_workspace(config_path: str | Path) -> Tuple[GlobalConfig, ClusterContext]:
    """
    Load the workspace JSON and build the clustering context
    (dataset, default variables, partition map and view registry).
    """
    config_path = Path(config_path)
    try:
        raw = json.loads(config_path.read_text())
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {config_path}")
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{config_path} is not valid JSON: {exc}") from exc

    global_config = parse_config(raw, config_path)
    dataset = load_dataset(global_config.dataset)

    variables = global_config.dataset.variables
    if not variables:
        # default to every numeric column
        variables = list(dataset.to_frame().select_dtypes("number").columns)

    partition = {
        view_id: list(fields) for view_id, fields in raw.get("partition", {}).items()
    }
    ctx = ClusterContext(
        dataset=dataset,
        variables=variables,
        partition=partition,
        views=build_views(global_config.views),
    )
    return global_config, ctx
