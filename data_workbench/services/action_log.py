from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Deque, List

from data_workbench.core.actions import Action

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionRecord:
    action: Action
    received_at: datetime

    def describe(self) -> str:
        payload = self.action.payload
        if isinstance(payload, dict):
            details = ", ".join(
                f"{k}={v}" for k, v in payload.items() if k != "targetColumns"
            )
            targets = payload.get("targetColumns") or []
            target_text = ", ".join(targets) if targets else "no columns"
            return f"{self.action.type}({details}) on {target_text}" if details else f"{self.action.type} on {target_text}"
        return self.action.type


class ActionLog:
    """
    Default ``on_action`` handler for the app: records the most recent
    actions for display and logs each one. Actions are not executed.
    """

    def __init__(self, max_entries: int = 20):
        self._entries: Deque[ActionRecord] = deque(maxlen=max_entries)

    def __call__(self, action: Action) -> None:
        self.record(action)

    def record(self, action: Action) -> ActionRecord:
        entry = ActionRecord(action=action, received_at=datetime.now(timezone.utc))
        self._entries.append(entry)
        logger.info(
            "Workbench action requested",
            extra={"action_type": action.type, "payload": action.payload},
        )
        return entry

    def entries(self) -> List[ActionRecord]:
        """Most recent first."""
        return list(reversed(self._entries))

    def clear(self) -> None:
        self._entries.clear()
