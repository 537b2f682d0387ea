"""
Cyclic navigation over the station list, skipping dividers.
"""

from typing import Sequence

from .models import Station, is_selectable


def select_next(current: int, forward: bool, stations: Sequence[Station]) -> int:
    """
    Find the next selectable station index in the given direction.

    Wraps past either end of the list. The search is bounded to one full
    lap, so a list made only of dividers yields -1.

    Args:
        current: Current index, or -1 when nothing is selected
        forward: Step direction
        stations: Station list

    Returns:
        Index of the next selectable station, or -1 if there is none
    """
    count = len(stations)
    step = 1 if forward else -1
    index = current

    for _ in range(count):
        index += step

        if index >= count:
            index = 0
        elif index < 0:
            index = count - 1

        if is_selectable(stations[index]):
            return index

    return -1
