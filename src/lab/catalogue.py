"""The decision catalogue: givens plus tweakables for Records & Tuples semantics."""

from typing import Iterator, Optional

from . import concerns
from .models import CatalogueError, Decision


class Catalogue:
    """Ordered, immutable collection of decisions with id lookup."""

    def __init__(self, decisions):
        self._decisions: tuple[Decision, ...] = tuple(decisions)
        self._by_id: dict[str, Decision] = {}
        for decision in self._decisions:
            if decision.id in self._by_id:
                raise CatalogueError(f"duplicate decision id: '{decision.id}'")
            self._by_id[decision.id] = decision

    def __iter__(self) -> Iterator[Decision]:
        return iter(self._decisions)

    def __len__(self) -> int:
        return len(self._decisions)

    def __contains__(self, decision_id: str) -> bool:
        return decision_id in self._by_id

    def get(self, decision_id: str) -> Optional[Decision]:
        return self._by_id.get(decision_id)

    @property
    def givens(self) -> list[Decision]:
        return [d for d in self._decisions if d.is_fact]

    @property
    def tweakables(self) -> list[Decision]:
        return [d for d in self._decisions if not d.is_fact]


# =============================================================================
# GIVENS
# =============================================================================

GIVENS = [
    Decision.given("typeof []", "object"),
    Decision.given("typeof NaN", "number"),
    Decision.given("+0 === -0", True),
    Decision.given("Object.is(+0, -0)", False),
    Decision.given("[-0].includes(+0)", True),
    Decision.given("NaN === NaN", False),
    Decision.given("Object.is(NaN, NaN)", True),
    Decision.given("[NaN].includes(NaN)", True),
    Decision.given("[0] === [0]", False),
    Decision.given("#[0] === #[0]", True),
]


# =============================================================================
# TWEAKABLES
# =============================================================================

def no_box(acc):
    """Availability predicate shared by every Box-related tweakable."""
    return "typeof Box === 'undefined'" if acc.get(TYPEOF_BOX) == "undefined" else False


def _typeof_box(value, acc):
    if no_box(acc):
        return concerns.WITHOUT_BOX
    if value != "object":
        return concerns.TYPEOF_POWERFUL_OBJECT_IS_NOT_OBJECT
    return None


def _typeof_tuple(value, acc):
    if not no_box(acc) and value != acc.get(TYPEOF_TUPLE_WITH_BOX):
        return concerns.SLOT_SENSITIVE_TYPEOF
    return None


def _typeof_tuple_with_box(value, acc):
    if acc.get(TYPEOF_TUPLE) == "object" and value == "tuple":
        return concerns.CONFUSING_TYPEOF
    if value != "object":
        return concerns.TYPEOF_POWERFUL_OBJECT_IS_NOT_OBJECT
    return None


def _store_negative_zero(value, acc):
    if not value:
        return concerns.NO_NEGATIVE_ZERO
    return None


def _tuple_nan_triple_equal(value, acc):
    if not value:
        return concerns.UNEQUAL_TUPLE_NAN
    return None


def _zeros_triple_equal(value, acc):
    if value:
        if acc.get(STORE_NEGATIVE_ZERO):
            return concerns.CAN_NOT_ALWAYS_INTERN
        return None
    if not acc.get(STORE_NEGATIVE_ZERO):
        return concerns.IMPOSSIBLE_EQUALITY_OF_ZEROS
    return concerns.ZEROS_NOT_TRIPLE_EQUAL


def _zeros_object_is(value, acc):
    if value:
        if acc.get(STORE_NEGATIVE_ZERO):
            return concerns.OBSERVABLE_DIFFERENT_BUT_IS_EQUAL
        return None
    if not acc.get(STORE_NEGATIVE_ZERO):
        return concerns.IMPOSSIBLE_EQUALITY_OF_ZEROS
    if acc.get(TYPEOF_TUPLE) == "object" and acc.get(ZEROS_TRIPLE_EQUAL):
        return concerns.DIFFERENT_EQUALITY_FOR_TYPEOF_OBJECT
    return None


def _nan_object_is(value, acc):
    if not value and acc.get(TUPLE_NAN_TRIPLE_EQUAL):
        return concerns.NAN_NOT_IS_NAN
    return None


def _box_primitive_throws(value, acc):
    return concerns.NO_PRIMITIVES_IN_BOX if value else concerns.STORING_PRIMITIVE_IN_BOX


def _object_wrapper(value, acc):
    if not value:
        return concerns.OBJECT_WRAPPERS
    if acc.get(TYPEOF_TUPLE) != "object":
        return concerns.OBJECT_WRAPPER_INCONSISTENCY
    return None


def _weakset_tuple_throws(value, acc):
    if not value:
        return concerns.WEAK_SET_LEAK
    if acc.get(TYPEOF_BOX) == "object":
        return concerns.VALID_WEAK_VALUE
    return None


def _weakset_boxed_tuple_throws(value, acc):
    if value:
        return concerns.NO_BOXES_IN_WEAK_SETS
    return None


def _proxy_tuple_throws(value, acc):
    if not value:
        return concerns.RECORD_PROXIES
    if acc.get(TYPEOF_TUPLE) == "object":
        return concerns.PROXY_THROW_TYPEOF_OBJECT
    return None


def _proxy_boxed_tuple_throws(value, acc):
    if not value:
        return concerns.RECORD_PROXIES
    if acc.get(TYPEOF_TUPLE_WITH_BOX) == "object":
        return concerns.PROXY_THROW_TYPEOF_OBJECT
    return None


TYPEOF_BOX = Decision(
    id="typeof Box",
    domain=("box", "object", "undefined"),
    default="undefined",
    concern=_typeof_box,
)

TYPEOF_TUPLE = Decision(
    id="typeof #[]",
    domain=("tuple", "object"),
    default="tuple",
    concern=_typeof_tuple,
)

TYPEOF_TUPLE_WITH_BOX = Decision(
    id="typeof #[Box({})]",
    domain=("tuple", "object"),
    default="tuple",
    is_available=no_box,
    concern=_typeof_tuple_with_box,
)

STORE_NEGATIVE_ZERO = Decision(
    id="Object.is(#[-0].at(0), -0)",
    domain=(True, False),
    default=True,
    concern=_store_negative_zero,
)

TUPLE_NAN_TRIPLE_EQUAL = Decision(
    id="#[NaN] === #[NaN]",
    domain=(True, False),
    default=True,
    concern=_tuple_nan_triple_equal,
)

ZEROS_TRIPLE_EQUAL = Decision(
    id="#[+0] === #[-0]",
    domain=(True, False),
    default=True,
    concern=_zeros_triple_equal,
)

ZEROS_OBJECT_IS = Decision(
    id="Object.is(#[+0], #[-0])",
    domain=(False, True),
    default=False,
    concern=_zeros_object_is,
)

NAN_OBJECT_IS = Decision(
    id="Object.is(#[NaN], #[NaN])",
    domain=(True, False),
    default=True,
    concern=_nan_object_is,
)

BOX_PRIMITIVE_THROWS = Decision(
    id="Box(42) // throws?",
    domain=(True, False),
    default=True,
    is_available=no_box,
    concern=_box_primitive_throws,
)

OBJECT_WRAPPER = Decision(
    id="Object(#[]) === #[]",
    domain=(True, False),
    default=True,
    concern=_object_wrapper,
)

WEAKSET_TUPLE_THROWS = Decision(
    id="new WeakSet().add(#[]) // throws?",
    domain=(True, False),
    default=True,
    concern=_weakset_tuple_throws,
)

WEAKSET_BOXED_TUPLE_THROWS = Decision(
    id="new WeakSet().add(#[Box({})]) // throws?",
    domain=(True, False),
    default=True,
    is_available=no_box,
    concern=_weakset_boxed_tuple_throws,
)

PROXY_TUPLE_THROWS = Decision(
    id="new Proxy(#[]) // throws?",
    domain=(True, False),
    default=True,
    concern=_proxy_tuple_throws,
)

PROXY_BOXED_TUPLE_THROWS = Decision(
    id="new Proxy(#[Box({})]) // throws?",
    domain=(True, False),
    default=True,
    is_available=no_box,
    concern=_proxy_boxed_tuple_throws,
)

TWEAKABLES = [
    STORE_NEGATIVE_ZERO,
    ZEROS_TRIPLE_EQUAL,
    TUPLE_NAN_TRIPLE_EQUAL,
    ZEROS_OBJECT_IS,
    NAN_OBJECT_IS,
    TYPEOF_BOX,
    TYPEOF_TUPLE,
    TYPEOF_TUPLE_WITH_BOX,
    BOX_PRIMITIVE_THROWS,
    OBJECT_WRAPPER,
    WEAKSET_TUPLE_THROWS,
    WEAKSET_BOXED_TUPLE_THROWS,
    PROXY_TUPLE_THROWS,
    PROXY_BOXED_TUPLE_THROWS,
]


def default_catalogue() -> Catalogue:
    """Givens first, then tweakables, in display order."""
    return Catalogue([*GIVENS, *TWEAKABLES])
