"""Tests for PlacementStore."""

import pytest
from pydantic import ValidationError

from buildai.canvas.placement_store import PlacementStore
from buildai.models.canvas_models import CanvasRect, Footprint, Position, Region

CANVAS = CanvasRect(left=0, top=0, width=1200, height=800)
DRAG_FOOTPRINT = Footprint(width=150, height=80)


def _add(store: PlacementStore, component_type: str = "button", region: Region = Region.BODY):
    return store.append(component_type, component_type.title(), region, Position(x=10, y=10))


class TestAppendAndRemove:
    def test_append_assigns_increasing_ids(self) -> None:
        store = PlacementStore()
        first = _add(store)
        second = _add(store)
        assert second.id > first.id
        assert [c.id for c in store] == [first.id, second.id]

    def test_ids_are_not_reused_after_clear(self) -> None:
        store = PlacementStore()
        first = _add(store)
        store.clear()
        second = _add(store)
        assert second.id != first.id

    def test_remove_then_query_finds_nothing(self) -> None:
        store = PlacementStore()
        component = _add(store)
        assert store.remove(component.id) is True
        assert list(store.query(lambda c: c.id == component.id)) == []

    def test_remove_missing_id_is_noop(self) -> None:
        store = PlacementStore()
        _add(store)
        before = [c.model_dump() for c in store]
        assert store.remove(999) is False
        assert store.remove(999) is False
        assert [c.model_dump() for c in store] == before

    def test_id_and_type_are_immutable(self) -> None:
        store = PlacementStore()
        component = _add(store)
        with pytest.raises(ValidationError):
            component.id = 42
        with pytest.raises(ValidationError):
            component.type = "heading"


class TestUpdatePosition:
    def test_clamps_to_origin(self) -> None:
        store = PlacementStore()
        component = _add(store)
        store.update_position(component.id, -100, -100, CANVAS, DRAG_FOOTPRINT)
        assert (component.position.x, component.position.y) == (0, 0)

    def test_clamps_to_far_edge(self) -> None:
        store = PlacementStore()
        component = _add(store)
        store.update_position(component.id, 5000, 5000, CANVAS, DRAG_FOOTPRINT)
        assert (component.position.x, component.position.y) == (1050, 720)

    def test_inside_bounds_is_stored_as_is(self) -> None:
        store = PlacementStore()
        component = _add(store)
        store.update_position(component.id, 300, 120, CANVAS, DRAG_FOOTPRINT)
        assert (component.position.x, component.position.y) == (300, 120)

    def test_canvas_smaller_than_footprint_pins_to_origin(self) -> None:
        store = PlacementStore()
        component = _add(store)
        tiny = CanvasRect(width=100, height=40)
        store.update_position(component.id, 50, 50, tiny, DRAG_FOOTPRINT)
        assert (component.position.x, component.position.y) == (0, 0)

    def test_unknown_id_is_noop(self) -> None:
        store = PlacementStore()
        component = _add(store)
        assert store.update_position(999, 300, 300, CANVAS, DRAG_FOOTPRINT) is None
        assert (component.position.x, component.position.y) == (10, 10)


class TestClearAndQuery:
    def test_clear_empties_and_resets_region(self) -> None:
        store = PlacementStore()
        for _ in range(3):
            _add(store)
        store.active_region = Region.FOOTER
        store.clear()
        assert len(store) == 0
        assert store.active_region == Region.HEADER

    def test_query_is_restartable(self) -> None:
        store = PlacementStore()
        _add(store, "button")
        _add(store, "heading")
        _add(store, "button")
        buttons = store.query(lambda c: c.type == "button")
        assert len(list(buttons)) == 2
        assert len(list(buttons)) == 2

    def test_query_reflects_later_mutations(self) -> None:
        store = PlacementStore()
        view = store.query()
        assert view.ids() == []
        component = _add(store)
        assert view.ids() == [component.id]
        assert view.first() is component

    def test_counts_by_region(self) -> None:
        store = PlacementStore()
        _add(store, "logo", Region.HEADER)
        _add(store, "button", Region.BODY)
        _add(store, "card", Region.BODY)
        assert store.counts_by_region() == {"header": 1, "body": 2, "footer": 0}
        assert store.count_in_region(Region.BODY) == 2
