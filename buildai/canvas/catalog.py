"""
Component Catalog
=================

Static per-region list of placeable component archetypes.
"""

from typing import Dict, List, Optional, Tuple

from ..models.canvas_models import CatalogEntry, Region


# (type, label) pairs per region, in sidebar order
_CATALOG_ENTRIES: Dict[Region, List[Tuple[str, str]]] = {
    Region.HEADER: [
        ("site-title", "Site Title"),
        ("navigation", "Navigation Menu"),
        ("logo", "Logo"),
        ("search-bar", "Search Bar"),
    ],
    Region.BODY: [
        ("heading", "Heading"),
        ("paragraph", "Paragraph"),
        ("button", "Button"),
        ("image", "Image"),
        ("card", "Card"),
        ("list", "List"),
    ],
    Region.FOOTER: [
        ("copyright", "Copyright"),
        ("social-links", "Social Links"),
        ("contact-info", "Contact Info"),
        ("newsletter", "Newsletter"),
    ],
}

CATALOG: Dict[Region, Tuple[CatalogEntry, ...]] = {
    region: tuple(CatalogEntry(type=t, label=label, region=region) for t, label in entries)
    for region, entries in _CATALOG_ENTRIES.items()
}


def entries_for(region: Region) -> Tuple[CatalogEntry, ...]:
    """Catalog subset valid for selection in a region."""
    return CATALOG[Region(region)]


def find_entry(region: Region, component_type: str) -> Optional[CatalogEntry]:
    """Look up an entry by type tag within a region."""
    for entry in entries_for(region):
        if entry.type == component_type:
            return entry
    return None


def all_types() -> List[str]:
    """Every type tag in the catalog, across regions."""
    return [entry.type for entries in CATALOG.values() for entry in entries]
