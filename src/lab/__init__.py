"""Record & Tuple design laboratory: tweakable decisions and the concerns they raise."""

from .accessor import LiveAccessor, SearchAccessor
from .catalogue import Catalogue, default_catalogue
from .discovery import build_report, discover, explore
from .evaluator import Row, evaluate_concern, evaluate_row, unavailable_reason
from .models import CatalogueError, Concern, Decision
from .repaint import RepaintScheduler, TurnQueue
from .session import Laboratory
from .snapshot import (
    encode_fragment,
    export_state,
    export_text,
    import_text,
    restore_from_fragment,
    share_url,
)
from .store import SelectionStore

__all__ = [
    "Catalogue",
    "CatalogueError",
    "Concern",
    "Decision",
    "Laboratory",
    "LiveAccessor",
    "RepaintScheduler",
    "Row",
    "SearchAccessor",
    "SelectionStore",
    "TurnQueue",
    "build_report",
    "default_catalogue",
    "discover",
    "encode_fragment",
    "evaluate_concern",
    "evaluate_row",
    "explore",
    "export_state",
    "export_text",
    "import_text",
    "restore_from_fragment",
    "share_url",
    "unavailable_reason",
]
