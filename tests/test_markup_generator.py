"""Tests for MarkupGenerator."""

from buildai.canvas.catalog import all_types
from buildai.canvas.placement_store import PlacementStore
from buildai.models.canvas_models import Position, Region
from buildai.services.markup_generator import (
    EMPTY_REGION_MARKERS, TEMPLATES, MarkupGenerator, generate_markup, missing_templates
)


def _store(*items):
    store = PlacementStore()
    for component_type, region in items:
        store.append(component_type, component_type.title(), region, Position(x=0, y=0))
    return store


def _section(document: str, tag: str) -> str:
    start = document.index(f"<{tag}>") + len(tag) + 2
    end = document.index(f"</{tag}>")
    return document[start:end]


class TestTemplates:
    def test_every_catalog_type_has_template(self) -> None:
        assert missing_templates() == []
        assert set(all_types()) <= set(TEMPLATES)

    def test_unknown_type_falls_back_to_escaped_label(self) -> None:
        store = PlacementStore()
        component = store.append("custom", "<Promo>", Region.BODY, Position(x=0, y=0))
        assert MarkupGenerator().render_component(component) == "<div>&lt;Promo&gt;</div>"


class TestGenerate:
    def test_is_deterministic(self) -> None:
        store = _store(("logo", Region.HEADER), ("button", Region.BODY), ("copyright", Region.FOOTER))
        assert generate_markup(store) == generate_markup(store)

    def test_groups_by_region_in_insertion_order(self) -> None:
        store = _store(
            ("button", Region.BODY),
            ("logo", Region.HEADER),
            ("heading", Region.BODY),
            ("newsletter", Region.FOOTER),
        )
        document = generate_markup(store)
        main = _section(document, "main")
        assert main.index("<button>Click Me</button>") < main.index("<h2>Section Heading</h2>")
        assert TEMPLATES["logo"] in _section(document, "header")
        assert TEMPLATES["newsletter"] in _section(document, "footer")

    def test_partition_is_exhaustive_and_disjoint(self) -> None:
        store = _store(
            ("site-title", Region.HEADER),
            ("navigation", Region.HEADER),
            ("card", Region.BODY),
            ("contact-info", Region.FOOTER),
        )
        groups = MarkupGenerator().partition(store)
        ids = [c.id for group in groups.values() for c in group]
        assert sorted(ids) == sorted(c.id for c in store)
        assert len(ids) == len(set(ids))

    def test_items_joined_with_indented_newlines(self) -> None:
        store = _store(("site-title", Region.HEADER), ("search-bar", Region.HEADER))
        document = generate_markup(store)
        expected = "  <header>\n    " + TEMPLATES["site-title"] + "\n    " + TEMPLATES["search-bar"] + "\n  </header>"
        assert expected in document

    def test_empty_regions_get_markers(self) -> None:
        document = generate_markup(_store(("button", Region.BODY)))
        assert EMPTY_REGION_MARKERS[Region.HEADER] in _section(document, "header")
        assert EMPTY_REGION_MARKERS[Region.FOOTER] in _section(document, "footer")
        assert "Body components will appear here" not in document

    def test_document_skeleton(self) -> None:
        document = generate_markup(_store(("button", Region.BODY)))
        assert document.startswith("<!DOCTYPE html>\n<html lang=\"en\">")
        assert "<title>Generated Website</title>" in document
        assert "body { font-family: Arial, sans-serif; margin: 0; padding: 0; }" in document
        assert document.endswith("</body>\n</html>")
        for tag in ("header", "main", "footer"):
            assert document.count(f"<{tag}>") == 1
