"""Priority paths used to rebuild document order."""

from typing import Sequence, Tuple

# Sorts after every sibling index
_OWN_RULES = float('inf')

def child_priority(priority: Sequence[int], index: int) -> Tuple[int, ...]:
    """Derive the priority path of an imported sheet.

    Args:
        priority: Priority path of the importing sheet
        index: Position of the import among the parent's fetched imports

    Returns:
        Parent path with ``index`` appended
    """
    if index < 0:
        raise ValueError("Priority index cannot be negative")
    return tuple(priority) + (index,)

def priority_sort_key(priority: Sequence[int]) -> Tuple[float, ...]:
    """Sort key placing fragments in cascade order.

    Siblings sort by index. ``@import`` rules precede every other rule of a
    sheet, so a path sorts after all paths it is a prefix of:
    ``(0, 1) < (0,) < (1,) < ()``.

    Args:
        priority: Priority path of a descriptor

    Returns:
        Comparable key
    """
    return tuple(priority) + (_OWN_RULES,)

# Exported functions
__all__ = ['child_priority', 'priority_sort_key']
