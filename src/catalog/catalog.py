"""
Tool Catalog
Holds the ordered, read-only list of tool descriptors and the views derived from it
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .models import CATEGORIES, CatalogError, MenuGroup, ToolDescriptor
from .menu import group_for_menu

logger = logging.getLogger(__name__)


class ToolCatalog:
    def __init__(self, tools: Iterable[ToolDescriptor]):
        self._tools: Tuple[ToolDescriptor, ...] = tuple(tools)
        self._validate()
        self._by_route: Dict[str, ToolDescriptor] = {tool.route: tool for tool in self._tools}
        self._by_slug: Dict[str, ToolDescriptor] = {tool.slug: tool for tool in self._tools}
        self._largest_category = max((len(self.by_category(category)) for category in CATEGORIES), default=0)
        self._menus: Dict[int, Tuple[MenuGroup, ...]] = {}

    def _validate(self) -> None:
        """Check catalog invariants. Raises CatalogError on the first violation."""
        routes = set()
        names = set()
        for tool in self._tools:
            if tool.route in routes:
                raise CatalogError(f"Duplicate route: {tool.route}")
            if tool.name in names:
                raise CatalogError(f"Duplicate tool name: {tool.name}")
            if tool.category not in CATEGORIES:
                raise CatalogError(f"Unknown category '{tool.category}' for tool {tool.name}")
            if not tool.tags:
                raise CatalogError(f"Tool {tool.name} has no tags")
            for tag in tool.tags:
                if not tag or tag != tag.lower():
                    raise CatalogError(f"Tag '{tag}' of tool {tool.name} must be a non-empty lowercase keyword")
            routes.add(tool.route)
            names.add(tool.name)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]], enabled=None) -> 'ToolCatalog':
        """
        Build a catalog from static tool records.

        Args:
            records: Dictionaries with name, route, description, category and tags
            enabled: Optional predicate taking a slug; tools it rejects are left out

        Returns:
            A frozen ToolCatalog
        """
        tools: List[ToolDescriptor] = []
        for record in records:
            try:
                tool = ToolDescriptor(
                    name=record['name'],
                    route=record['route'],
                    description=record['description'],
                    category=record['category'],
                    tags=tuple(record['tags']),
                    icon=record.get('icon', ''),
                    menu_label=record.get('menu_label')
                )
            except KeyError as e:
                raise CatalogError(f"Tool record is missing field {e}") from e

            if enabled is not None and not enabled(tool.slug):
                logger.info("Tool %s disabled by configuration", tool.slug)
                continue
            tools.append(tool)

        catalog = cls(tools)
        logger.debug("Loaded tool catalog with %d tools", catalog.count())
        return catalog

    def all(self) -> Tuple[ToolDescriptor, ...]:
        return self._tools

    def by_category(self, category: str) -> Tuple[ToolDescriptor, ...]:
        """Tools of one category in catalog order; empty for unknown categories."""
        return tuple(tool for tool in self._tools if tool.category == category)

    def count(self) -> int:
        return len(self._tools)

    def get(self, route: str) -> Optional[ToolDescriptor]:
        return self._by_route.get(route)

    def get_by_slug(self, slug: str) -> Optional[ToolDescriptor]:
        return self._by_slug.get(slug)

    def featured(self, routes: Iterable[str]) -> Tuple[ToolDescriptor, ...]:
        """Tools for the given routes in the given order, skipping unknown routes."""
        return tuple(self._by_route[route] for route in routes if route in self._by_route)

    def menu(self, preview_limit: int = 3) -> Tuple[MenuGroup, ...]:
        """
        Grouped navigation menu, computed once per distinct preview.

        Limits beyond the largest category all yield the same grouping, so they share
        one cache entry and the cache never holds more than largest category + 1 menus.
        """
        key = min(max(preview_limit, 0), self._largest_category)
        if key not in self._menus:
            self._menus[key] = group_for_menu(self, key)
        return self._menus[key]

    def cached_menu_count(self) -> int:
        return len(self._menus)

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self):
        return iter(self._tools)
