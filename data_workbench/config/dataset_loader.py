from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List

from data_workbench.config.model import DatasetConfig, GlobalConfig
from data_workbench.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory using the multi-file layout:

        root/
          global.json
          datasets/*.json
    """
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        raw_global = json.load(f)

    datasets_dir = root / "datasets"
    datasets: List[DatasetConfig] = []

    if datasets_dir.is_dir():
        logger.info(f"Scanning for dataset configurations in: {datasets_dir}")

        files = sorted(datasets_dir.glob("*.json"))
        if not files:
            logger.warning(f"No .json files found in {datasets_dir}")

        for idx, config_file in enumerate(files):
            logger.info(f"Loading dataset config: {config_file.name}")
            try:
                with config_file.open() as f:
                    raw = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.error(f"Failed to load {config_file.name}: {e}")
                continue
            datasets.append(
                DatasetConfig.from_raw(raw, source_path=config_file, index=idx, root=root)
            )
    else:
        logger.warning(f"Datasets directory not found at: {datasets_dir}")

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", "Data Workbench"),
        subtitle=raw_global.get("subtitle", "Interactive Tabular Data Explorer"),
        default_dataset=raw_global.get("default_dataset"),
        datasets=datasets,
    )


def load_dataset_registry(path: Path) -> tuple[GlobalConfig, Dict[str, DatasetConfig]]:
    """
    Load global config + dataset config objects only (NO data loading).
    Returns mapping of dataset name -> DatasetConfig.

    Raises:
        ConfigError: if two dataset configs share a name
    """
    global_config = load_global_config(path)

    cfg_by_name: Dict[str, DatasetConfig] = {}
    duplicates: List[str] = []

    for ds_cfg in global_config.datasets:
        if ds_cfg.name in cfg_by_name:
            duplicates.append(ds_cfg.name)
            continue
        cfg_by_name[ds_cfg.name] = ds_cfg

    if duplicates:
        raise ConfigError(f"Duplicate dataset names in config: {sorted(set(duplicates))}")

    if not cfg_by_name:
        logger.warning(f"No datasets configured under: {path}")

    logger.info(
        "Dataset registry loaded (lazy mode; datasets not materialised)",
        extra={
            "config_root": str(path),
            "n_dataset_configs": len(cfg_by_name),
            "dataset_names": sorted(cfg_by_name.keys()),
        },
    )

    return global_config, cfg_by_name
