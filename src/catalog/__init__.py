"""
Tool catalog for DevToolkit.
Provides the static tool registry plus the search and menu views computed over it.
"""

from .models import (
    ALL_CATEGORIES,
    CATEGORIES,
    CatalogError,
    FilterState,
    ListingResult,
    MenuGroup,
    ToolDescriptor
)
from .catalog import ToolCatalog
from .search import search, apply_filter, matches_query, matches_category
from .menu import group_for_menu, DEFAULT_PREVIEW_LIMIT

__all__ = [
    'ALL_CATEGORIES',
    'CATEGORIES',
    'CatalogError',
    'FilterState',
    'ListingResult',
    'MenuGroup',
    'ToolDescriptor',
    'ToolCatalog',
    'search',
    'apply_filter',
    'matches_query',
    'matches_category',
    'group_for_menu',
    'DEFAULT_PREVIEW_LIMIT'
]
