"""
Tests for the shared highlight state machine in highlight.py.

Run: pytest tests/test_highlight.py -v
"""

from network_map.bar_chart import build_bar_color_table
from network_map.config import ALERT_COLOR, BAR_COLOR
from network_map.highlight import (
    COORDINATOR_SCRIPT,
    HighlightCoordinator,
    on_bar_hover,
    on_graph_hover,
)

ORGANIZER_A = {"id": "A", "organizer": True}
MEMBER_B = {"id": "B", "organizer": False}
ORGANIZER_C = {"id": "C", "organizer": True}


class TestGraphHover:
    def test_organizer_takes_highlight(self):
        assert on_graph_hover(None, ORGANIZER_A) == "A"

    def test_organizer_replaces_previous(self):
        assert on_graph_hover("C", ORGANIZER_A) == "A"

    def test_non_organizer_is_noop_from_none(self):
        assert on_graph_hover(None, MEMBER_B) is None

    def test_non_organizer_keeps_existing_highlight(self):
        assert on_graph_hover("A", MEMBER_B) == "A"

    def test_leave_clears(self):
        assert on_graph_hover("A", None) is None


class TestBarHover:
    def test_enter_sets_bar_id(self):
        assert on_bar_hover(None, "C") == "C"

    def test_last_writer_wins(self):
        assert on_bar_hover("A", "C") == "C"

    def test_leave_clears(self):
        assert on_bar_hover("C", None) is None


class TestHighlightCoordinator:
    """Writes from either view are seen by every subscriber immediately."""

    def test_starts_empty(self):
        assert HighlightCoordinator().current is None

    def test_subscriber_gets_current_value_on_subscribe(self):
        coordinator = HighlightCoordinator()
        coordinator.bar_hover("A")
        seen = []
        coordinator.subscribe(seen.append)
        assert seen == ["A"]

    def test_organizer_then_neighbouring_member_keeps_organizer(self):
        coordinator = HighlightCoordinator()
        coordinator.graph_hover(ORGANIZER_A)
        coordinator.graph_hover(MEMBER_B)
        assert coordinator.current == "A"

    def test_member_hover_does_not_notify(self):
        coordinator = HighlightCoordinator()
        seen = []
        coordinator.subscribe(seen.append)
        coordinator.graph_hover(MEMBER_B)
        assert seen == [None]

    def test_graph_write_visible_to_bar_subscriber(self):
        counts = [{"id": "A", "name": "Alpha", "count": 2}, {"id": "C", "name": "Charlie", "count": 2}]
        table = build_bar_color_table(counts)
        coordinator = HighlightCoordinator()
        painted = []
        coordinator.subscribe(
            lambda node_id: painted.append(table["byId"][node_id] if node_id else table["none"])
        )

        coordinator.graph_hover(ORGANIZER_C)
        assert painted[-1] == [BAR_COLOR, ALERT_COLOR]
        coordinator.graph_hover(None)
        assert painted[-1] == [BAR_COLOR, BAR_COLOR]

    def test_bar_enter_and_leave(self):
        coordinator = HighlightCoordinator()
        coordinator.bar_hover("C")
        assert coordinator.current == "C"
        coordinator.bar_hover(None)
        assert coordinator.current is None

    def test_hover_sequence(self):
        coordinator = HighlightCoordinator()
        seen = []
        coordinator.subscribe(seen.append)
        coordinator.graph_hover(MEMBER_B)
        coordinator.bar_hover("A")
        coordinator.graph_hover(ORGANIZER_C)
        coordinator.graph_hover(None)
        assert seen == [None, "A", "C", None]


class TestCoordinatorScript:
    def test_created_once_per_page(self):
        assert "if (!window.networkMapHighlight)" in COORDINATOR_SCRIPT

    def test_mirrors_python_transitions(self):
        for method in ("subscribe(", "set(", "graphHover(", "barHover("):
            assert method in COORDINATOR_SCRIPT
        assert "node.organizer" in COORDINATOR_SCRIPT

    def test_mirrors_into_highlight_store(self):
        assert 'set_props("highlight-store"' in COORDINATOR_SCRIPT
