"""Snapshot export/import and shareable-link encoding."""

import json
from typing import Any
from urllib.parse import quote, unquote

import structlog

from .accessor import LiveAccessor
from .evaluator import unavailable_reason
from .store import SelectionStore

logger = structlog.get_logger()

# Characters encodeURI leaves untouched besides alphanumerics
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"


def export_state(store: SelectionStore) -> dict[str, Any]:
    """Current value of every available tweakable, in catalogue order."""
    acc = LiveAccessor(store)
    return {
        d.id: store.read(d.id)
        for d in store.catalogue.tweakables
        if unavailable_reason(d, acc) is None
    }


def export_text(store: SelectionStore) -> str:
    return json.dumps(export_state(store), indent=2, ensure_ascii=False)


def encode_fragment(store: SelectionStore) -> str:
    """Percent-encoded compact export, suitable for a URL fragment."""
    compact = json.dumps(export_state(store), separators=(",", ":"), ensure_ascii=False)
    return quote(compact, safe=_URI_SAFE)


def share_url(store: SelectionStore, base_url: str) -> str:
    return f"{base_url.split('#', 1)[0]}#{encode_fragment(store)}"


def _parse_object(text: str) -> dict:
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def restore_from_fragment(store: SelectionStore, fragment: str) -> list[str]:
    """Apply a link fragment to the store and describe anything odd about it.

    Returns human-readable diagnostics; never raises on bad input.
    """
    issues: list[str] = []
    fragment = (fragment or "").lstrip("#")
    if not fragment:
        return issues

    try:
        data = _parse_object(unquote(fragment))
    except ValueError as e:
        logger.warning("link_restore_failed", error=str(e))
        return issues

    catalogue = store.catalogue
    for key, value in data.items():
        decision = catalogue.get(key)
        if decision is None or decision.is_fact:
            issues.append(f"Unknown item in url: '{key}'")
        store.write(key, value)

    acc = LiveAccessor(store)
    for decision in catalogue.tweakables:
        if decision.id in data:
            continue
        if unavailable_reason(decision, acc):
            continue
        issues.append(f"'{decision.id}' was not set by the URL")

    logger.info("link_restored", applied=len(data), issues=len(issues))
    return issues


def import_text(store: SelectionStore, text: str) -> bool:
    """Apply a pasted JSON snapshot. Returns False when nothing could be parsed."""
    if not text or not text.strip():
        return False
    try:
        data = _parse_object(text)
    except ValueError as e:
        logger.warning("import_failed", error=str(e))
        return False

    for key, value in data.items():
        store.write(key, value)
    return True
