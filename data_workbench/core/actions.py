from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass(frozen=True)
class Action:
    """
    A user-initiated intent reported by a consumer, e.g.
    ``Action("normalize", {"method": "zscore", "targetColumns": [...]})``.

    The workbench never interprets ``payload``.
    """
    type: str
    payload: Any = None


@dataclass
class WorkbenchHandlers:
    """
    Optional outbound callbacks.

    :param on_action: receives every Action forwarded by the workbench
    :param on_back: called when the user asks to leave the workbench
    """
    on_action: Optional[Callable[[Action], None]] = None
    on_back: Optional[Callable[[], None]] = None
