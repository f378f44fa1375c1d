"""Laboratory session: the catalogue, its selections and the shared link state."""

import random
from typing import Callable, Optional

import structlog

from .accessor import LiveAccessor
from .catalogue import Catalogue, default_catalogue
from .evaluator import Row, evaluate_row, unavailable_reason
from .repaint import RepaintScheduler, TurnQueue
from .snapshot import encode_fragment, export_state, import_text, restore_from_fragment, share_url
from .store import SelectionStore

logger = structlog.get_logger()

DEFAULT_BASE_URL = "https://acutmore.github.io/record-tuple-laboratory/"


class Laboratory:
    """One interactive session over a catalogue.

    Mirrors the lifecycle of the laboratory page: defaults are applied, an
    optional link fragment is restored (collecting ``issues``), and only then
    does the session start listening. From then on any change to the
    selections clears ``fragment`` and schedules a single repaint.
    """

    def __init__(
        self,
        catalogue: Optional[Catalogue] = None,
        fragment: str = "",
        render: Optional[Callable[["Laboratory"], None]] = None,
        base_url: str = DEFAULT_BASE_URL,
        rng: Optional[random.Random] = None,
        queue: Optional[TurnQueue] = None,
    ):
        self.catalogue = catalogue or default_catalogue()
        self.store = SelectionStore(self.catalogue)
        self.base_url = base_url
        self.rng = rng or random.Random()
        self.queue = queue or TurnQueue()
        self.render = render
        self.painter = RepaintScheduler(self._paint, self.queue)

        self.fragment = fragment.lstrip("#")
        self.issues = restore_from_fragment(self.store, self.fragment)

        self.store.subscribe(self._on_change)
        self.painter.paint_now()

    def _paint(self) -> None:
        if self.render is not None:
            self.render(self)

    def _on_change(self, decision_id, old, new) -> None:
        self.fragment = ""
        self.painter.schedule()

    @property
    def accessor(self) -> LiveAccessor:
        return LiveAccessor(self.store)

    def rows(self) -> list[Row]:
        acc = self.accessor
        return [evaluate_row(d, acc) for d in self.catalogue]

    def editable(self, decision_id: str) -> bool:
        """Whether the decision may be edited right now (known, not a fact, available)."""
        decision = self.catalogue.get(decision_id)
        if decision is None or decision.is_fact:
            return False
        return unavailable_reason(decision, self.accessor) is None

    def select(self, decision_id: str, value) -> bool:
        return self.store.write(decision_id, value)

    def shuffle(self) -> None:
        self.fragment = ""
        self.store.shuffle(self.rng)
        self.painter.schedule()

    def load_text(self, text: str) -> bool:
        applied = import_text(self.store, text)
        if applied:
            self.painter.schedule()
        return applied

    def state(self) -> dict:
        return export_state(self.store)

    def save_link(self) -> str:
        """Store the current state in ``fragment`` and return the shareable URL."""
        self.fragment = encode_fragment(self.store)
        url = share_url(self.store, self.base_url)
        logger.info("link_saved", length=len(url))
        return url

    def end_turn(self) -> int:
        return self.queue.drain()
