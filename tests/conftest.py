"""Shared test fixtures for the laboratory."""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lab import SelectionStore, default_catalogue  # noqa: E402
from lab.catalogue import Catalogue  # noqa: E402
from lab.models import Decision  # noqa: E402


@pytest.fixture
def catalogue():
    return default_catalogue()


@pytest.fixture
def store(catalogue):
    return SelectionStore(catalogue)


@pytest.fixture
def notifications(store):
    """Record every change notification the store emits."""
    seen = []
    store.subscribe(lambda *change: seen.append(change))
    return seen


@pytest.fixture
def tiny_catalogue():
    """Two tweakables where the second only matters when the first is on."""
    flag = Decision(id="flag", domain=(True, False), default=True)

    def mode_concern(value, acc):
        from lab.models import Concern

        if acc.get(flag) and value == "strict":
            return Concern(key="strictFlag", title="strict with flag", body="")
        return None

    mode = Decision(
        id="mode",
        domain=("loose", "strict"),
        default="loose",
        is_available=lambda acc: False if acc.get(flag) else "flag is off",
        concern=mode_concern,
    )
    return Catalogue([Decision.given("fixed", 1), flag, mode])
