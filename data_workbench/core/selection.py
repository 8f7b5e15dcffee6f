from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple

logger = logging.getLogger(__name__)

SELECT_KEYS = frozenset({" ", "Space", "Enter"})


@dataclass
class KeyEvent:
    """
    Minimal keyboard event as delivered by a column header.

    ``key`` follows the DOM KeyboardEvent.key naming (" " for the space bar,
    "Enter"); "Space" is accepted as an alias.
    """
    key: str
    ctrl_key: bool = False
    meta_key: bool = False
    default_prevented: bool = False

    @property
    def multi_select(self) -> bool:
        return self.ctrl_key or self.meta_key

    def prevent_default(self) -> None:
        self.default_prevented = True


class ColumnSelection:
    """
    Set of selected column names, kept in insertion order for display.

    Membership is not checked against the dataset's columns, every
    operation accepts any string.
    """

    def __init__(self, initial: Iterable[str] = ()):
        self._selected: List[str] = list(dict.fromkeys(initial))

    @property
    def selected(self) -> Tuple[str, ...]:
        return tuple(self._selected)

    def __len__(self) -> int:
        return len(self._selected)

    def __contains__(self, col: object) -> bool:
        return col in self._selected

    def is_selected(self, col: str) -> bool:
        return col in self._selected

    def toggle(self, col: str) -> None:
        """Add ``col`` if absent, remove it if present. Other members are kept."""
        if col in self._selected:
            self._selected.remove(col)
        else:
            self._selected.append(col)

    def replace(self, cols: Iterable[str]) -> None:
        """Set the selection to exactly ``cols`` (duplicates collapse)."""
        self._selected = list(dict.fromkeys(cols))

    def clear(self) -> None:
        self._selected = []

    def on_header_key_down(self, event: KeyEvent, col: str) -> bool:
        """
        Keyboard selection on a column header.

        Only Space and Enter are handled; for those the event's default is
        prevented. With Ctrl/Meta held the key toggles ``col`` into or out of
        the set. Without a modifier it is a single-select toggle: a selection
        of exactly ``{col}`` is cleared, anything else becomes ``{col}``.

        :return: True if the event was handled
        """
        if event.key not in SELECT_KEYS:
            logger.debug("Ignoring header key %r on %r", event.key, col)
            return False

        event.prevent_default()

        if event.multi_select:
            self.toggle(col)
        elif self._selected == [col]:
            self.clear()
        else:
            self.replace([col])
        return True
