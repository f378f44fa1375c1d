"""Accessors: the only way a predicate may read another decision's value.

Predicates receive the accessor as an argument, so the same concern function
runs against the live selections or against a discovery preset.
"""

from typing import Any, Optional

from .models import Decision


class LiveAccessor:
    """Reads values straight from a selection store."""

    def __init__(self, store):
        self.store = store

    def get(self, decision: Decision) -> Any:
        if decision.is_fact:
            return decision.value
        return self.store.read(decision.id)


class SearchAccessor:
    """Reads values from a partial preset assignment during discovery.

    Unresolved decisions answer the first member of their domain, and the
    first one read is remembered in ``discovered`` so the search can branch
    on it next.
    """

    def __init__(self, presets: dict):
        self.presets = presets
        self.discovered: Optional[Decision] = None

    def get(self, decision: Decision) -> Any:
        if decision.is_fact:
            return decision.value
        if decision in self.presets:
            return self.presets[decision]
        if self.discovered is None:
            self.discovered = decision
        return decision.domain[0]


class ProbeAccessor(SearchAccessor):
    """Search accessor that never records: used to check availability mid-search."""

    def get(self, decision: Decision) -> Any:
        if decision.is_fact:
            return decision.value
        return self.presets.get(decision, decision.domain[0])
