"""
Search and category filtering for the tools listing page.
"""

from typing import Tuple

from .models import ALL_CATEGORIES, FilterState, ListingResult, ToolDescriptor


def matches_category(tool: ToolDescriptor, category: str) -> bool:
    return category == ALL_CATEGORIES or tool.category == category


def matches_query(tool: ToolDescriptor, query: str) -> bool:
    """Case-insensitive substring match against name, description and tags"""
    if query == '':
        return True

    # Literal substring semantics: the query is neither trimmed nor tokenized
    needle = query.lower()
    return (needle in tool.name.lower() or
            needle in tool.description.lower() or
            any(needle in tag.lower() for tag in tool.tags))


def search(catalog, query: str, category: str = ALL_CATEGORIES) -> Tuple[ToolDescriptor, ...]:
    """
    Return the tools matching both the query and the category, in catalog order.

    An empty tuple means nothing matched; it is never an error.
    """
    return tuple(tool for tool in catalog.all()
                 if matches_category(tool, category) and matches_query(tool, query))


def apply_filter(catalog, state: FilterState) -> ListingResult:
    """Compute the listing page view for a filter state."""
    tools = search(catalog, state.query, state.category)
    return ListingResult(tools=tools, total=catalog.count(), state=state)
