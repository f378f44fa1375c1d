"""Exhaustive discovery of the concerns a decision can raise.

Dependencies are not declared anywhere. Instead the target's concern function
is run against a partial preset assignment; the first unresolved decision it
reads is recorded by the search accessor and becomes the next decision to
branch on. Only that first read is followed per evaluation, so a concern that
reads two unresolved decisions sees the second at its first domain value in
that branch.
"""

from typing import Optional

import structlog

from .accessor import ProbeAccessor, SearchAccessor
from .catalogue import Catalogue
from .evaluator import unavailable_reason
from .models import Concern, Decision

logger = structlog.get_logger()

Outcomes = list[Optional[Concern]]


def _merge(into: Outcomes, outcomes: Outcomes) -> None:
    for outcome in outcomes:
        if outcome not in into:
            into.append(outcome)


def _finalize(outcomes: Outcomes) -> Outcomes:
    """Drop the "no concern" placeholder when real concerns exist."""
    real = [o for o in outcomes if o is not None]
    return real if real else outcomes


def explore(target: Decision, presets: dict, changing: Decision) -> Outcomes:
    """Enumerate the concern outcomes of ``target`` while varying ``changing``.

    ``presets`` is mutated during the search and restored before returning.
    """
    outcomes: Outcomes = []
    for value in changing.domain:
        presets[changing] = value
        acc = SearchAccessor(presets)
        _merge(outcomes, [target.concern(presets[target], acc)])

        found = acc.discovered
        if found is not None and found not in presets:
            if unavailable_reason(found, ProbeAccessor(presets)) is None:
                _merge(outcomes, explore(target, presets, found))
        del presets[changing]
    return _finalize(outcomes)


def discover(target: Decision) -> Outcomes:
    """All distinct concern outcomes reachable for ``target``."""
    if target.is_fact or target.concern is None:
        return []
    return explore(target, {}, target)


def build_report(catalogue: Catalogue) -> dict[str, Outcomes]:
    """Map every tweakable id to the concerns discovery finds for it."""
    report = {}
    for decision in catalogue.tweakables:
        report[decision.id] = discover(decision)
    logger.debug(
        "discovery_complete",
        decisions=len(report),
        concerns=sum(len([o for o in v if o is not None]) for v in report.values()),
    )
    return report
