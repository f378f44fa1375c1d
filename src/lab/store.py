"""Selection store: the current value of every tweakable."""

import random
from typing import Any, Callable, Optional

import structlog

from .catalogue import Catalogue

logger = structlog.get_logger()

Listener = Callable[[str, Any, Any], None]


class SelectionStore:
    """Validated in-memory mapping of decision id -> selected value.

    Writes outside a decision's domain, writes to unknown ids or facts, and
    writes of the value already held are silently ignored.
    """

    def __init__(self, catalogue: Catalogue):
        self.catalogue = catalogue
        self._selections: dict[str, Any] = {}
        self._listeners: list[Listener] = []
        self.reset()

    def subscribe(self, listener: Listener) -> None:
        """Register a callback invoked as ``listener(id, old, new)`` on each change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def read(self, decision_id: str) -> Optional[Any]:
        return self._selections.get(decision_id)

    def write(self, decision_id: str, value: Any) -> bool:
        """Apply a selection. Returns True only when the stored value changed."""
        decision = self.catalogue.get(decision_id)
        if decision is None or not decision.accepts(value):
            return False

        old = self._selections.get(decision_id)
        if decision_id in self._selections and type(old) is type(value) and old == value:
            return False

        self._selections[decision_id] = value
        logger.debug("selection_changed", decision=decision_id, old=old, new=value)
        for listener in list(self._listeners):
            listener(decision_id, old, value)
        return True

    def reset(self) -> None:
        """Apply every tweakable's default through the validated write."""
        for decision in self.catalogue.tweakables:
            self.write(decision.id, decision.default)

    def snapshot(self) -> dict[str, Any]:
        return dict(self._selections)

    def shuffle(self, rng: Optional[random.Random] = None) -> int:
        """Write a uniformly random domain member for every tweakable.

        Availability is not consulted. Returns how many values changed.
        """
        rng = rng or random.Random()
        changed = 0
        for decision in self.catalogue.tweakables:
            if self.write(decision.id, rng.choice(decision.domain)):
                changed += 1
        return changed
