"""
Ordered fallback helper.

Several selection steps degrade through a list of progressively wider
candidate sources. The sources are tried lazily, in order, and the first
acceptable result wins.
"""

from typing import Callable, Iterable, Optional, TypeVar

T = TypeVar("T")


def first_acceptable(
    suppliers: Iterable[Callable[[], T]],
    accept: Callable[[T], bool] = bool,
) -> Optional[T]:
    """
    Return the first supplier result that ``accept`` approves.

    Falls back to ``None`` when every supplier is rejected.
    """
    for supply in suppliers:
        result = supply()
        if accept(result):
            return result
    return None
