"""Data models for the decision laboratory."""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

Value = Union[str, bool]

# is_available(accessor) -> None/False when available, reason string otherwise
AvailabilityFn = Callable[[Any], Union[str, bool, None]]
# concern(own_value, accessor) -> Concern or None
ConcernFn = Callable[[Value, Any], Optional["Concern"]]


class CatalogueError(ValueError):
    """Raised when a decision or catalogue is malformed."""


def in_domain(value: Any, domain: tuple) -> bool:
    """Type-strict membership: True is not 1 and "1" is not 1."""
    return any(type(v) is type(value) and v == value for v in domain)


@dataclass(frozen=True)
class Concern:
    """A design tension explained to the reader."""

    key: str
    title: str
    body: str
    links: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        return f"⚠ {self.title}"


@dataclass(frozen=True, eq=False)
class Decision:
    """A single row of the catalogue.

    Tweakables carry a ``domain`` and a ``default``; givens (facts) carry only
    a fixed ``value``. Decisions compare by identity so they can key preset
    mappings during discovery.
    """

    id: str
    domain: Optional[tuple] = None
    default: Any = None
    value: Any = None
    is_available: Optional[AvailabilityFn] = field(default=None, repr=False)
    concern: Optional[ConcernFn] = field(default=None, repr=False)

    def __post_init__(self):
        if not self.id:
            raise CatalogueError("decision id is required")
        if self.domain is None:
            return
        if not isinstance(self.domain, tuple):
            object.__setattr__(self, "domain", tuple(self.domain))
        if not self.domain:
            raise CatalogueError(f"'{self.id}' has an empty domain")
        if not in_domain(self.default, self.domain):
            raise CatalogueError(
                f"default {self.default!r} of '{self.id}' is not in {list(self.domain)}"
            )

    @classmethod
    def given(cls, id: str, value: Value) -> "Decision":
        """Build a fact: a fixed, non-editable row shown for context."""
        return cls(id=id, value=value)

    @property
    def is_fact(self) -> bool:
        return self.domain is None

    def accepts(self, value: Any) -> bool:
        return not self.is_fact and in_domain(value, self.domain)
