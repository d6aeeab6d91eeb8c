from typing import Any, List, Optional, Sequence, Tuple

MOVE_DIRECTIONS = {"up": -1, "down": 1}


def index_of(items: Sequence[Any], item_id) -> int:
    for index, item in enumerate(items):
        if item.id == item_id:
            return index
    raise ValueError(f"Item {item_id} is not part of the ordered list")


def swap_partner(items: Sequence[Any], index: int, direction: str) -> Optional[Tuple[Any, Any]]:
    """
    Return ``(item, neighbour)`` for a one-step move in the displayed list,
    or ``None`` when the item is already at that edge.
    """
    if direction not in MOVE_DIRECTIONS:
        raise ValueError(f"Invalid move direction: {direction}")

    target = index + MOVE_DIRECTIONS[direction]
    if target < 0 or target >= len(items):
        return None

    return items[index], items[target]


def next_display_order(items: List[Any]) -> int:
    """Display order that appends after the current last item."""
    orders = [item.display_order or 0 for item in items]
    return (max(orders) + 1) if orders else 0
