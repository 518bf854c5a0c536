from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Optional

import pandas as pd

Record = Dict[str, Any]


class Dataset:
    """
    Ordered sequence of row-records shared by the pipeline and every chart view.

    Rows are plain dicts and are mutated in place by the label writer, so
    views holding on to the same records see the new ``cluster`` field
    without a copy.
    """

    def __init__(self, records: Iterable[Record], name: str = "dataset") -> None:
        self.name = name
        self.records: List[Record] = list(records)

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __getitem__(self, index: int) -> Record:
        return self.records[index]

    # -------------------------------------------------------------------------
    # Schema helpers
    # -------------------------------------------------------------------------
    @property
    def fields(self) -> List[str]:
        """
        Field names in first-seen order across all records.
        This is the stable column order used everywhere a matrix is built.
        """
        seen: Dict[str, None] = {}
        for row in self.records:
            for key in row:
                seen.setdefault(key, None)
        return list(seen)

    def has_field(self, field: str) -> bool:
        return any(field in row for row in self.records)

    # -------------------------------------------------------------------------
    # pandas interop
    # -------------------------------------------------------------------------
    def to_frame(self) -> pd.DataFrame:
        """Copy of the records as a DataFrame (columns in ``fields`` order)."""
        return pd.DataFrame.from_records(self.records, columns=self.fields)

    @classmethod
    def from_frame(cls, df: pd.DataFrame, name: Optional[str] = None) -> Dataset:
        return cls(df.to_dict(orient="records"), name=name or "dataset")

    def copy(self) -> Dataset:
        return Dataset((dict(row) for row in self.records), name=self.name)

    def __repr__(self) -> str:
        return f"Dataset(name={self.name!r}, rows={len(self)}, fields={self.fields!r})"
