"""
Category grouping for the navigation mega-menu.
"""

from typing import Tuple

from .models import CATEGORIES, MenuGroup

DEFAULT_PREVIEW_LIMIT = 3


def group_for_menu(catalog, preview_limit: int = DEFAULT_PREVIEW_LIMIT) -> Tuple[MenuGroup, ...]:
    """
    Group catalog tools by category for the mega-menu.

    Every category appears, in declaration order, even when it has no tools.

    Args:
        catalog: ToolCatalog to group
        preview_limit: Maximum number of tools listed inline per category

    Returns:
        One MenuGroup per category
    """
    preview_limit = max(preview_limit, 0)
    groups = []
    for category in CATEGORIES:
        tools = catalog.by_category(category)
        groups.append(MenuGroup(category=category, tools=tools[:preview_limit], total=len(tools)))
    return tuple(groups)
