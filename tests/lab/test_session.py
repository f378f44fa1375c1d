"""Tests for the laboratory session and debounced repaint."""

import random

from lab import Laboratory, RepaintScheduler, TurnQueue
from lab.models import in_domain


class TestRepaintScheduler:
    def test_starts_pending_until_first_paint(self):
        painted = []
        queue = TurnQueue()
        painter = RepaintScheduler(lambda: painted.append(1), queue)
        painter.schedule()
        assert len(queue) == 0
        painter.paint_now()
        assert painted == [1]

    def test_coalesces_within_a_turn(self):
        painted = []
        queue = TurnQueue()
        painter = RepaintScheduler(lambda: painted.append(1), queue)
        painter.paint_now()
        for _ in range(5):
            painter.schedule()
        assert len(queue) == 1
        assert queue.drain() == 1
        assert painted == [1, 1]

    def test_next_turn_schedules_again(self):
        queue = TurnQueue()
        painter = RepaintScheduler(lambda: None, queue)
        painter.paint_now()
        painter.schedule()
        queue.drain()
        painter.schedule()
        assert len(queue) == 1


class TestLaboratory:
    def test_initial_paint(self):
        painted = []
        lab = Laboratory(render=painted.append)
        assert painted == [lab]
        assert lab.issues == []

    def test_restores_fragment_with_issues(self):
        lab = Laboratory(fragment='#{"typeof Box": "object"}')
        assert lab.store.read("typeof Box") == "object"
        assert len(lab.issues) == 13
        assert lab.fragment == '{"typeof Box": "object"}'

    def test_restore_does_not_repaint(self):
        painted = []
        lab = Laboratory(fragment='{"typeof Box": "box"}', render=painted.append)
        assert lab.end_turn() == 0
        assert len(painted) == 1

    def test_edit_clears_fragment_and_repaints_once(self):
        painted = []
        lab = Laboratory(fragment='{"typeof Box": "box"}', render=painted.append)
        lab.select("typeof Box", "object")
        lab.select("typeof #[]", "object")
        assert lab.fragment == ""
        assert lab.end_turn() == 1
        assert len(painted) == 2

    def test_redundant_edit_keeps_fragment(self):
        lab = Laboratory(fragment='{"typeof Box": "box"}')
        assert lab.select("typeof Box", "box") is False
        assert lab.select("typeof Box", "nope") is False
        assert lab.fragment == '{"typeof Box": "box"}'
        assert lab.end_turn() == 0

    def test_shuffle(self):
        lab = Laboratory(fragment='{"typeof Box": "box"}', rng=random.Random(5))
        lab.shuffle()
        assert lab.fragment == ""
        for decision in lab.catalogue.tweakables:
            assert in_domain(lab.store.read(decision.id), decision.domain)
        assert lab.end_turn() == 1

    def test_save_link_sets_fragment(self):
        lab = Laboratory(base_url="https://example.test/")
        url = lab.save_link()
        assert url == f"https://example.test/#{lab.fragment}"

        restored = Laboratory(fragment=url.split("#", 1)[1])
        assert restored.state() == lab.state()

    def test_editable(self):
        lab = Laboratory()
        assert lab.editable("typeof Box")
        assert not lab.editable("typeof #[Box({})]")
        assert not lab.editable("typeof []")
        assert not lab.editable("nope")
        lab.select("typeof Box", "box")
        assert lab.editable("typeof #[Box({})]")

    def test_load_text(self):
        lab = Laboratory()
        assert lab.load_text('{"typeof #[]": "object"}') is True
        assert lab.store.read("typeof #[]") == "object"
        assert lab.load_text("not json") is False

    def test_failed_load_does_not_repaint(self):
        painted = []
        lab = Laboratory(render=painted.append)
        assert lab.load_text("{not json") is False
        assert lab.load_text("   ") is False
        assert lab.end_turn() == 0
        assert len(painted) == 1

    def test_render_can_be_attached_later(self):
        painted = []
        lab = Laboratory()
        lab.render = painted.append
        lab.select("typeof Box", "box")
        lab.end_turn()
        assert painted == [lab]

    def test_rows_cover_catalogue(self):
        lab = Laboratory()
        rows = lab.rows()
        assert [r.decision for r in rows] == list(lab.catalogue)
        boxed = next(r for r in rows if r.decision.id == "typeof #[Box({})]")
        assert boxed.unavailable
        assert boxed.concern is None
