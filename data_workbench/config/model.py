from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class DatasetConfig:
    """
    Parsed config entry for a single dataset.

    Raw keys:
    - name: unique dataset name (defaults to "Dataset <index>")
    - title: display title (defaults to name)
    - file: CSV data file
    - stats_file: CSV with the precomputed column profile
    - split_column: optional column holding the training/validation/testing assignment
    """
    raw: Dict[str, Any]
    source_path: Path
    index: int
    root: Optional[Path] = None

    @property
    def name(self) -> str:
        return self.raw.get("name", f"Dataset {self.index}")

    @property
    def title(self) -> str:
        return self.raw.get("title") or self.name

    @property
    def path(self) -> Path:
        return self._resolve(self.raw["file"])

    @property
    def stats_path(self) -> Path:
        return self._resolve(self.raw["stats_file"])

    @property
    def split_column(self) -> Optional[str]:
        return self.raw.get("split_column")

    def _resolve(self, value: str) -> Path:
        path = Path(value)
        if path.is_absolute() or self.root is None:
            return path
        return (self.root / path).resolve()

    @classmethod
    def from_raw(
        cls,
        raw: Dict[str, Any],
        source_path: Path,
        index: int,
        root: Optional[Path] = None,
    ) -> DatasetConfig:
        return cls(raw=raw, source_path=source_path, index=index, root=root)


@dataclass
class GlobalConfig:
    ui_title: str
    subtitle: str
    default_dataset: Optional[str]
    datasets: List[DatasetConfig]
