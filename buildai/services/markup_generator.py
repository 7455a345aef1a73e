"""
Markup Generator
================

Serializes placed components into a static HTML document grouped by region.
Every catalog type maps to a fixed template; the mapping is checked at import.
"""

import html
import logging
from typing import Dict, Iterable, List

from ..canvas.catalog import all_types
from ..models.canvas_models import PlacedComponent, Region

logger = logging.getLogger(__name__)


class EmptyCanvasError(Exception):
    """Raised when markup is requested for a canvas with no components."""

    notice = "Please add some components first!"

    def __init__(self, message: str = notice):
        super().__init__(message)


# Fixed template per catalog type
TEMPLATES: Dict[str, str] = {
    # Header
    "site-title": "<h1>Your Website Title</h1>",
    "navigation": '<nav><a href="#home">Home</a> | <a href="#about">About</a> | <a href="#contact">Contact</a></nav>',
    "logo": '<img src="logo.png" alt="Logo" style="height: 50px;">',
    "search-bar": '<input type="search" placeholder="Search...">',
    # Body
    "heading": "<h2>Section Heading</h2>",
    "paragraph": "<p>Your content text goes here...</p>",
    "button": "<button>Click Me</button>",
    "image": '<img src="placeholder.jpg" alt="Image" style="max-width: 300px;">',
    "card": '<div style="border: 1px solid #ddd; padding: 15px; border-radius: 5px;"><h3>Card Title</h3><p>Card content...</p></div>',
    "list": "<ul><li>List item 1</li><li>List item 2</li><li>List item 3</li></ul>",
    # Footer
    "copyright": "<p>&copy; 2025 Your Website. All rights reserved.</p>",
    "social-links": '<div><a href="#">Facebook</a> | <a href="#">Twitter</a> | <a href="#">Instagram</a></div>',
    "contact-info": "<p>Email: info@example.com | Phone: (123) 456-7890</p>",
    "newsletter": '<div><input type="email" placeholder="Enter your email"> <button>Subscribe</button></div>',
}

EMPTY_REGION_MARKERS: Dict[Region, str] = {
    Region.HEADER: "    <!-- Header components will appear here -->",
    Region.BODY: "    <!-- Body components will appear here -->",
    Region.FOOTER: "    <!-- Footer components will appear here -->",
}

ITEM_SEPARATOR = "\n    "

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Generated Website</title>
  <style>
    body {{ font-family: Arial, sans-serif; margin: 0; padding: 0; }}
    header {{ background-color: #f8f9fa; padding: 20px; border-bottom: 1px solid #dee2e6; }}
    main {{ padding: 40px 20px; min-height: 400px; }}
    footer {{ background-color: #343a40; color: white; padding: 20px; text-align: center; }}
  </style>
</head>
<body>
  <header>
    {header}
  </header>

  <main>
    {body}
  </main>

  <footer>
    {footer}
  </footer>
</body>
</html>"""


def missing_templates() -> List[str]:
    """Catalog types that have no template."""
    return [t for t in all_types() if t not in TEMPLATES]


def _check_templates() -> None:
    missing = missing_templates()
    if missing:
        raise RuntimeError(f"No markup template for catalog types: {', '.join(missing)}")


_check_templates()


class MarkupGenerator:
    """Renders placed components into a full HTML document."""

    def __init__(self):
        self.templates = TEMPLATES

    def render_component(self, component: PlacedComponent) -> str:
        """Render one component from its type template."""
        template = self.templates.get(component.type)
        if template is None:
            logger.warning(
                f"[MARKUP] No template for type={component.type!r}, using generic wrapper"
            )
            return f"<div>{html.escape(component.label)}</div>"
        return template

    def partition(self, components: Iterable[PlacedComponent]) -> Dict[Region, List[PlacedComponent]]:
        """Group components by region, keeping insertion order within each group."""
        groups: Dict[Region, List[PlacedComponent]] = {region: [] for region in Region}
        for component in components:
            groups[component.region].append(component)
        return groups

    def render_region(self, components: List[PlacedComponent], region: Region) -> str:
        if not components:
            return EMPTY_REGION_MARKERS[region]
        return ITEM_SEPARATOR.join(self.render_component(c) for c in components)

    def generate(self, components: Iterable[PlacedComponent]) -> str:
        """
        Generate the complete document.

        Args:
            components: Placed components in insertion order

        Returns:
            HTML document string
        """
        groups = self.partition(components)
        document = DOCUMENT_TEMPLATE.format(
            header=self.render_region(groups[Region.HEADER], Region.HEADER),
            body=self.render_region(groups[Region.BODY], Region.BODY),
            footer=self.render_region(groups[Region.FOOTER], Region.FOOTER),
        )
        logger.info(
            "[MARKUP] Generated document: "
            + ", ".join(f"{r.value}={len(groups[r])}" for r in Region)
            + f", chars={len(document)}"
        )
        return document


# Singleton instance
_generator = None


def get_markup_generator() -> MarkupGenerator:
    """Get singleton MarkupGenerator instance."""
    global _generator
    if _generator is None:
        _generator = MarkupGenerator()
    return _generator


def generate_markup(components: Iterable[PlacedComponent]) -> str:
    """Convenience function to generate the document for a set of components."""
    return get_markup_generator().generate(components)
