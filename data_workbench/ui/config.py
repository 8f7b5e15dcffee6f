from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Optional

from data_workbench.config.model import DatasetConfig, GlobalConfig
from data_workbench.core.actions import WorkbenchHandlers
from data_workbench.core.context import ExplorationContext, ExplorationProvider
from data_workbench.core.source import DatasetSource
from data_workbench.core.view_registry import ViewRegistry
from data_workbench.services.action_log import ActionLog
from data_workbench.sources.frame_source import load_frame_source

logger = logging.getLogger(__name__)


@dataclass
class AppConfig:
    """
    Holds shared state for the Dash app: config root, dataset configs, the
    exploration provider and the view registry. This is passed into layout +
    callback registration functions instead of using module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    dataset_configs: Dict[str, DatasetConfig] = field(default_factory=dict)
    default_dataset: Optional[str] = None

    provider: ExplorationProvider = field(default_factory=ExplorationProvider)
    registry: Optional[ViewRegistry] = None
    action_log: Optional[ActionLog] = None
    source_loader: Callable[[DatasetConfig], DatasetSource] = load_frame_source

    active_dataset: Optional[str] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
        if self.action_log is None:
            raise RuntimeError("AppConfig.action_log must be initialized.")

    @property
    def workbench(self) -> ExplorationContext:
        """The mounted context; raises MissingContextError if no dataset is open."""
        return self.provider.use()

    def handlers(self) -> WorkbenchHandlers:
        return WorkbenchHandlers(on_action=self.action_log, on_back=self._on_back)

    def _on_back(self) -> None:
        logger.info("Leaving workbench", extra={"dataset": self.active_dataset})

    def open_dataset(self, name: str) -> ExplorationContext:
        """Mount a fresh context for dataset ``name``."""
        cfg = self.dataset_configs.get(name)
        if cfg is None:
            raise KeyError(f"Dataset '{name}' not found")

        source = self.source_loader(cfg)
        self.active_dataset = name
        return self.provider.mount(source, handlers=self.handlers())

    def reload_dataset(self) -> ExplorationContext:
        """Re-read the active dataset, keeping the current selection and chart state."""
        if self.active_dataset is None:
            raise RuntimeError("No active dataset to reload")

        workbench = self.workbench
        workbench.swap_source(self.source_loader(self.dataset_configs[self.active_dataset]))
        return workbench
