"""Capture resolution selection for a destination view."""

import logging
from functools import cmp_to_key
from typing import Iterable, Optional

from .geometry import EMPTY_SIZE, Size

logger = logging.getLogger(__name__)


def compare_sizes(a: Size, b: Size) -> int:
    """
    Order sizes so that larger areas sort first.

    Negative when ``a`` should come before ``b``. The formula is kept exactly
    as ``b.height * b.width - a.width * a.height``; callers depend on its
    results for both filtering and sorting.
    """
    return b.height * b.width - a.width * a.height


size_sort_key = cmp_to_key(compare_sizes)


def select_best_preview_size(
    window_size: Size,
    available_sizes: Optional[Iterable[Size]] = None,
) -> Size:
    """
    Pick the biggest supported output size that does not exceed the window area.

    Args:
        window_size: Destination view size, may be (0, 0) before layout
        available_sizes: Output sizes reported by the camera, or None when the
            capability query returned nothing

    Returns:
        The best candidate, or ``Size(0, 0)`` when nothing qualifies
    """
    if available_sizes is None:
        logger.debug(f"No output sizes reported for {window_size}")
        return EMPTY_SIZE

    candidates = [
        size for size in available_sizes if compare_sizes(size, window_size) >= 0
    ]
    # sorted() is stable, so equal areas keep the reported order
    candidates = sorted(candidates, key=size_sort_key)

    if not candidates:
        logger.debug(f"No output size fits window {window_size}")
        return EMPTY_SIZE

    best = candidates[0]
    logger.debug(f"Selected preview size {best} for window {window_size}")
    return best
