"""
Tool catalog data model.
Descriptors are immutable records; filter state and menu groups are values computed over them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

# Fixed category enumeration, in menu display order
DATA = 'Data'
SECURITY = 'Security'
DEVELOPMENT = 'Development'
CONVERSION = 'Conversion'
GENERATORS = 'Generators'
DESIGN = 'Design'
API_TOOLS = 'API Tools'

CATEGORIES: Tuple[str, ...] = (DATA, SECURITY, DEVELOPMENT, CONVERSION, GENERATORS, DESIGN, API_TOOLS)

# Sentinel selecting every category
ALL_CATEGORIES = 'all'

DEFAULT_TAG_PREVIEW = 3


class CatalogError(Exception):
    """Exception raised when the static catalog violates its invariants."""
    pass


@dataclass(frozen=True)
class ToolDescriptor:
    """Static metadata record for one developer tool page."""

    name: str
    route: str
    description: str
    category: str
    tags: Tuple[str, ...]
    icon: str = ''
    menu_label: Optional[str] = None

    @property
    def slug(self) -> str:
        """Last path segment of the route, e.g. 'json-formatter'."""
        return self.route.rstrip('/').rsplit('/', 1)[-1]

    @property
    def label(self) -> str:
        return self.menu_label or self.name

    def tag_preview(self, limit: int = DEFAULT_TAG_PREVIEW) -> Tuple[Tuple[str, ...], int]:
        """
        Split tags for card display.

        Returns:
            The first `limit` tags and the number of tags hidden behind the "+N" badge
        """
        limit = max(limit, 0)
        visible = self.tags[:limit]
        return visible, len(self.tags) - len(visible)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            'name': self.name,
            'route': self.route,
            'slug': self.slug,
            'description': self.description,
            'category': self.category,
            'tags': list(self.tags),
            'icon': self.icon,
            'menu_label': self.label
        }


@dataclass(frozen=True)
class FilterState:
    """Search query and category selection of one listing page view."""

    query: str = ''
    category: str = ALL_CATEGORIES

    @property
    def is_active(self) -> bool:
        return self.query != '' or self.category != ALL_CATEGORIES

    def cleared(self) -> 'FilterState':
        return FilterState()

    @classmethod
    def from_args(cls, args: Mapping[str, str]) -> 'FilterState':
        """Build a filter state from request arguments ('q' and 'category')."""
        # The query is kept verbatim, whitespace included
        query = args.get('q') or ''
        category = args.get('category') or ALL_CATEGORIES
        return cls(query=query, category=category)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'query': self.query,
            'category': self.category,
            'active': self.is_active
        }


@dataclass(frozen=True)
class MenuGroup:
    """One category section of the navigation mega-menu."""

    category: str
    tools: Tuple[ToolDescriptor, ...]
    total: int

    @property
    def overflow(self) -> int:
        """Number of tools behind the "+N more" link; 0 means no link."""
        return max(self.total - len(self.tools), 0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'category': self.category,
            'tools': [tool.to_dict() for tool in self.tools],
            'total': self.total,
            'overflow': self.overflow
        }


@dataclass(frozen=True)
class ListingResult:
    """Visible subset of the catalog for one filter state."""

    tools: Tuple[ToolDescriptor, ...]
    total: int
    state: FilterState = field(default_factory=FilterState)

    @property
    def shown(self) -> int:
        return len(self.tools)

    @property
    def is_empty(self) -> bool:
        return not self.tools

    def to_dict(self) -> Dict[str, Any]:
        return {
            'tools': [tool.to_dict() for tool in self.tools],
            'shown': self.shown,
            'total': self.total,
            'filters': self.state.to_dict()
        }
