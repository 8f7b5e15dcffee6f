from .dataset_loader import load_dataset_registry, load_global_config
from .model import DatasetConfig, GlobalConfig

__all__ = ["DatasetConfig", "GlobalConfig", "load_dataset_registry", "load_global_config"]
