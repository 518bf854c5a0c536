from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from cluster_views.analysis.engine import ClusterOptions


@dataclass
class ViewConfig:
    """
    Parsed config entry for a single chart view.
    """
    raw: Dict[str, Any]
    index: int

    @property
    def id(self) -> str:
        return self.raw.get("id", f"view-{self.index}")

    @property
    def kind(self) -> str:
        return self.raw.get("kind", "parcoords")

    @property
    def label(self) -> Optional[str]:
        return self.raw.get("label")

    @property
    def options(self) -> Dict[str, Any]:
        """Extra keyword arguments for the view constructor (e.g. scatter x/y)."""
        return {k: v for k, v in self.raw.items() if k not in ("id", "kind", "label")}


@dataclass
class DatasetConfig:
    raw: Dict[str, Any]
    source_path: Path

    @property
    def name(self) -> str:
        return self.raw.get("name", self.path.stem)

    @property
    def path(self) -> Path:
        path = Path(self.raw["file"])
        return path if path.is_absolute() else self.source_path.parent / path

    @property
    def variables(self) -> List[str]:
        return list(self.raw.get("variables", []))


@dataclass
class ClusterDefaults:
    """
    Defaults for the clustering controls, taken from the "clustering" block.
    """
    k: int = 3
    options: ClusterOptions = field(default_factory=ClusterOptions)
    palette: Optional[str] = None
    standardize: bool = True
    hide_cluster_axis: bool = True
    color_targets: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ClusterDefaults:
        return cls(
            k=int(data.get("k", 3)),
            options=ClusterOptions.from_dict(data),
            palette=data.get("palette"),
            standardize=bool(data.get("standardize", True)),
            hide_cluster_axis=bool(data.get("hide_cluster_axis", True)),
            color_targets=list(data.get("color_targets", [])),
        )


@dataclass
class GlobalConfig:
    ui_title: str
    dataset: DatasetConfig
    views: List[ViewConfig]
    clustering: ClusterDefaults
